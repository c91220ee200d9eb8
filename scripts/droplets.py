"""
Operator CLI for the tagged droplet inventory.

Uses the same settings (.env / environment) as the API:

  python -m scripts.droplets readiness
  python -m scripts.droplets list
  python -m scripts.droplets get 12345
  python -m scripts.droplets delete 12345
  python -m scripts.droplets delete-all --yes
"""
import argparse
import json
import sys

from app.clients.digitalocean import DigitalOceanClient
from app.core.config import Settings
from app.core.errors import LifecycleError
from app.core.lifecycle import LifecycleController
from app.core.logging import configure_logging
from app.core.readiness import aggregate


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Inspect and tear down tagged droplets")
    p.add_argument("--tag", default=None, help="Override LIFECYCLE_TAG")
    sub = p.add_subparsers(dest="command", required=True)

    sub.add_parser("readiness", help="Show which credentials are configured")
    sub.add_parser("list", help="List tagged droplets")

    get_p = sub.add_parser("get", help="Show one droplet")
    get_p.add_argument("droplet_id")

    del_p = sub.add_parser("delete", help="Delete one droplet")
    del_p.add_argument("droplet_id")

    all_p = sub.add_parser("delete-all", help="Delete every droplet carrying the tag")
    all_p.add_argument("--yes", action="store_true", help="Required; there is no undo")
    return p


def _print(payload) -> None:
    print(json.dumps(payload, indent=2, default=str))


def run(args: argparse.Namespace, settings: Settings, client=None) -> int:
    if args.command == "readiness":
        report = aggregate(settings)
        _print(report.model_dump())
        return 0 if report.ready else 1

    if args.command == "delete-all" and not args.yes:
        print("Refusing to delete every tagged droplet without --yes", file=sys.stderr)
        return 2

    tag = args.tag if args.tag is not None else settings.LIFECYCLE_TAG
    if not tag:
        print("Lifecycle tag must be non-empty", file=sys.stderr)
        return 2

    own_client = client is None
    if own_client:
        client = DigitalOceanClient.from_settings(settings)
    controller = LifecycleController(client, tag)

    try:
        if args.command == "list":
            _print([d.model_dump() for d in controller.list_instances()])
        elif args.command == "get":
            _print(controller.get_instance(args.droplet_id).model_dump())
        elif args.command == "delete":
            deleted = controller.delete_instance(args.droplet_id)
            print(f"Droplet {deleted} deleted")
        elif args.command == "delete-all":
            _print(controller.delete_all_instances().model_dump())
    except LifecycleError as e:
        print(f"{e.kind}: {e.message}", file=sys.stderr)
        return 1
    finally:
        if own_client:
            client.close()
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings()
    configure_logging(settings.LOG_LEVEL)
    return run(args, settings)


if __name__ == "__main__":
    sys.exit(main())
