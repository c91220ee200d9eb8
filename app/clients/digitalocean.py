from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from app.core.config import Settings
from app.core.errors import NotFound, RemoteUnavailable
from app.schemas.droplet import BulkDeleteResult, Droplet

logger = logging.getLogger(__name__)

# Bulk delete by tag answers 204 when the provider took the whole request.
FULLY_ACCEPTED_STATUS_CODES = frozenset({204})

_AUTH_FAILURE_STATUS_CODES = frozenset({401, 403})

# Upper bound on list pagination.
MAX_LIST_PAGES = 1000


def _is_provider_outage(status_code: int) -> bool:
    return status_code in _AUTH_FAILURE_STATUS_CODES or status_code == 429 or status_code >= 500


class DigitalOceanClient:
    """
    Thin synchronous wrapper around the DigitalOcean droplet API.

    One instance per request: it owns an httpx.Client and must be closed.
    """

    def __init__(
        self,
        token: str | None,
        *,
        base_url: str = "https://api.digitalocean.com/v2",
        timeout: float = 10.0,
        page_size: int = 200,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._has_token = bool(token and token.strip())
        self.page_size = page_size
        headers = {"Accept": "application/json"}
        if self._has_token:
            headers["Authorization"] = f"Bearer {token.strip()}"
        self._http = httpx.Client(
            base_url=base_url.rstrip("/"),
            headers=headers,
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings, transport: httpx.BaseTransport | None = None) -> DigitalOceanClient:
        return cls(
            settings.DIGITALOCEAN_TOKEN,
            base_url=settings.DIGITALOCEAN_API_URL,
            timeout=settings.DIGITALOCEAN_TIMEOUT_SECONDS,
            page_size=settings.DIGITALOCEAN_PAGE_SIZE,
            transport=transport,
        )

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> DigitalOceanClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # -- inventory operations -------------------------------------------------

    def list_by_tag(self, tag: str) -> list[Droplet]:
        droplets: list[Droplet] = []
        page = 1
        while True:
            resp = self._request(
                "GET",
                "/droplets",
                params={"tag_name": tag, "per_page": self.page_size, "page": page},
            )
            self._raise_for_status(resp)
            data = self._json(resp)
            page_droplets = data.get("droplets") or []
            droplets.extend(self._parse_droplet(d) for d in page_droplets)

            next_page = ((data.get("links") or {}).get("pages") or {}).get("next")
            if not next_page or not page_droplets:
                return droplets
            if page >= MAX_LIST_PAGES:
                raise RemoteUnavailable(
                    f"DigitalOcean kept paginating droplets for tag {tag!r} past {MAX_LIST_PAGES} pages"
                )
            page += 1

    def get_by_id(self, droplet_id: int) -> Droplet:
        resp = self._request("GET", f"/droplets/{droplet_id}")
        self._raise_for_status(resp, droplet_id=droplet_id)
        data = self._json(resp)
        if "droplet" not in data:
            raise RemoteUnavailable("DigitalOcean response is missing 'droplet'")
        return self._parse_droplet(data["droplet"])

    def delete_by_id(self, droplet_id: int) -> None:
        resp = self._request("DELETE", f"/droplets/{droplet_id}")
        self._raise_for_status(resp, droplet_id=droplet_id)

    def delete_by_tag(self, tag: str) -> BulkDeleteResult:
        resp = self._request("DELETE", "/droplets", params={"tag_name": tag})
        # auth failures and outages are errors; any other answer is reported as data
        if _is_provider_outage(resp.status_code):
            self._raise_for_status(resp)
        return BulkDeleteResult(
            requested_tag=tag,
            provider_status_code=resp.status_code,
            succeeded=resp.status_code in FULLY_ACCEPTED_STATUS_CODES,
            raw_message=self._body(resp),
        )

    # -- helpers --------------------------------------------------------------

    def _request(self, method: str, path: str, params: dict[str, Any] | None = None) -> httpx.Response:
        if not self._has_token:
            raise RemoteUnavailable("DigitalOcean token is not configured")

        logger.debug("DigitalOcean %s %s params=%s", method, path, params)
        try:
            return self._http.request(method, path, params=params)
        except httpx.TimeoutException as e:
            raise RemoteUnavailable(f"DigitalOcean {method} {path} timed out") from e
        except httpx.HTTPError as e:
            raise RemoteUnavailable(f"DigitalOcean {method} {path} failed: {e}") from e

    def _raise_for_status(self, resp: httpx.Response, *, droplet_id: int | None = None) -> None:
        if resp.status_code < 400:
            return

        provider_id, message = self._error_fields(resp)
        if resp.status_code == 404 and droplet_id is not None:
            raise NotFound(f"Droplet {droplet_id} not found", droplet_id=droplet_id)
        if resp.status_code in _AUTH_FAILURE_STATUS_CODES:
            raise RemoteUnavailable(
                f"DigitalOcean rejected the credentials: {message}",
                provider_status_code=resp.status_code,
                provider_error=provider_id,
            )
        raise RemoteUnavailable(
            f"DigitalOcean returned {resp.status_code}: {message}",
            provider_status_code=resp.status_code,
            provider_error=provider_id,
        )

    @staticmethod
    def _body(resp: httpx.Response) -> Any:
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError:
            return resp.text

    def _error_fields(self, resp: httpx.Response) -> tuple[str | None, str]:
        body = self._body(resp)
        if isinstance(body, dict):
            return body.get("id"), str(body.get("message") or resp.reason_phrase)
        if isinstance(body, str) and body:
            return None, body
        return None, resp.reason_phrase

    def _json(self, resp: httpx.Response) -> dict[str, Any]:
        body = self._body(resp)
        if not isinstance(body, dict):
            raise RemoteUnavailable(
                f"DigitalOcean returned a non-JSON body for {resp.request.method} {resp.request.url.path}"
            )
        return body

    @staticmethod
    def _parse_droplet(raw: Any) -> Droplet:
        try:
            return Droplet.model_validate(raw)
        except ValidationError as e:
            raise RemoteUnavailable(f"DigitalOcean returned a malformed droplet: {e}") from e
