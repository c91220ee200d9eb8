from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class LifecycleError(Exception):
    """Base for every per-request failure raised by the lifecycle core."""

    kind = "LifecycleError"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, **details: Any) -> None:
        self.message = message
        self.details = details
        super().__init__(message)

    def to_detail(self) -> dict[str, Any]:
        return {"error": self.kind, "message": self.message, **self.details}


class InvalidArgument(LifecycleError):
    kind = "InvalidArgument"
    status_code = status.HTTP_400_BAD_REQUEST


class NotFound(LifecycleError):
    kind = "NotFound"
    status_code = status.HTTP_404_NOT_FOUND


class RemoteUnavailable(LifecycleError):
    """Transport, auth or timeout failure while talking to the provider."""

    kind = "RemoteUnavailable"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class PartialAcceptance(LifecycleError):
    """The provider answered a bulk request, but not with full acceptance."""

    kind = "PartialAcceptance"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, *, provider_status_code: int, provider_message: Any) -> None:
        super().__init__(
            message,
            provider_status_code=provider_status_code,
            provider_message=provider_message,
        )
        self.provider_status_code = provider_status_code
        self.provider_message = provider_message


async def lifecycle_error_handler(request: Request, exc: LifecycleError) -> JSONResponse:
    level = logging.WARNING if exc.status_code < 500 else logging.ERROR
    logger.log(
        level,
        "%s %s failed: %s: %s",
        request.method,
        request.url.path,
        exc.kind,
        exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.to_detail()})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(LifecycleError, lifecycle_error_handler)
