from fastapi.testclient import TestClient

from app.main import app
from tests.helpers import make_droplet


def test_list_droplets_empty(inventory):
    client = TestClient(app)
    r = client.get("/droplets")
    assert r.status_code == 200
    assert r.json() == []


def test_list_droplets_returns_tagged_droplets_with_provider_fields(inventory):
    inventory.droplets[101] = make_droplet(101, region={"slug": "fra1"})
    inventory.droplets[102] = make_droplet(102)
    inventory.droplets[200] = make_droplet(200, tags=("web",))

    client = TestClient(app)
    r = client.get("/droplets")
    assert r.status_code == 200
    items = r.json()
    assert [d["id"] for d in items] == [101, 102]
    assert items[0]["region"] == {"slug": "fra1"}
    assert inventory.calls == [("list_by_tag", "minecraft")]


def test_list_droplets_remote_unavailable_is_500(inventory):
    inventory.unavailable = "DigitalOcean GET /droplets timed out"

    client = TestClient(app)
    r = client.get("/droplets")
    assert r.status_code == 500
    assert r.json()["detail"]["error"] == "RemoteUnavailable"
    assert "timed out" in r.json()["detail"]["message"]


def test_get_droplet(inventory):
    inventory.droplets[42] = make_droplet(42, name="mc-survival")

    client = TestClient(app)
    r = client.get("/droplets/42")
    assert r.status_code == 200
    assert r.json()["name"] == "mc-survival"
    assert r.json()["tags"] == ["minecraft"]


def test_get_droplet_non_numeric_id_is_400_without_remote_call(inventory):
    client = TestClient(app)
    r = client.get("/droplets/abc")
    assert r.status_code == 400
    assert r.json()["detail"]["error"] == "InvalidArgument"
    assert inventory.calls == []


def test_get_droplet_unknown_is_404(inventory):
    client = TestClient(app)
    r = client.get("/droplets/42")
    assert r.status_code == 404
    assert r.json()["detail"]["error"] == "NotFound"
    assert r.json()["detail"]["droplet_id"] == 42


def test_delete_droplet_then_again_is_404(inventory):
    inventory.droplets[42] = make_droplet(42)

    client = TestClient(app)
    r = client.delete("/droplets/42")
    assert r.status_code == 200
    assert r.json() == {"message": "Droplet 42 deleted", "droplet_id": 42}

    r = client.delete("/droplets/42")
    assert r.status_code == 404

    # the service is still answering after the failed call
    assert client.get("/health").status_code == 200


def test_delete_droplet_non_numeric_id_is_400(inventory):
    inventory.droplets[42] = make_droplet(42)

    client = TestClient(app)
    r = client.delete("/droplets/abc")
    assert r.status_code == 400
    assert inventory.calls == []
    assert 42 in inventory.droplets


def test_delete_all_droplets_accepted(inventory):
    inventory.droplets[1] = make_droplet(1)
    inventory.droplets[2] = make_droplet(2)

    client = TestClient(app)
    r = client.delete("/droplets")
    assert r.status_code == 200
    body = r.json()
    assert body["succeeded"] is True
    assert body["requested_tag"] == "minecraft"
    assert body["provider_status_code"] == 204
    assert inventory.calls == [("delete_by_tag", "minecraft")]


def test_delete_all_droplets_not_fully_accepted_is_500(inventory):
    inventory.bulk_status_code = 202
    inventory.bulk_message = {"message": "deletion scheduled"}

    client = TestClient(app)
    r = client.delete("/droplets")
    assert r.status_code == 500
    detail = r.json()["detail"]
    assert detail["error"] == "PartialAcceptance"
    assert detail["provider_status_code"] == 202
    assert detail["provider_message"] == {"message": "deletion scheduled"}


def test_lifecycle_tag_comes_from_settings(settings, inventory):
    settings.LIFECYCLE_TAG = "valheim"
    inventory.droplets[7] = make_droplet(7, tags=("valheim",))

    client = TestClient(app)
    r = client.get("/droplets")
    assert [d["id"] for d in r.json()] == [7]
    assert inventory.calls == [("list_by_tag", "valheim")]
