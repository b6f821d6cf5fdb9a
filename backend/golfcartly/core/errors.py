"""Error kinds shared by the storage and route layers.

Storage functions raise :class:`StorageError`; route handlers wrap their storage
calls in :func:`handle_errors`, which turns any failure into an :class:`ApiError`
carrying the route's static failure message. :func:`register_exception_handlers`
renders both as the ``{"error": ..., "kind": ...}`` envelope.
"""
import enum
import logging
from contextlib import contextmanager
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ErrorKind(str, enum.Enum):
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    VALIDATION = "validation"
    INTERNAL = "internal"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.VALIDATION: 400,
    ErrorKind.INTERNAL: 500,
}


class StorageError(Exception):
    """Raised by the storage layer for failures with a known kind."""

    def __init__(self, kind: ErrorKind, detail: str):
        super().__init__(detail)
        self.kind = kind
        self.detail = detail


class ApiError(Exception):
    """A failure ready to be sent to the client."""

    def __init__(self, kind: ErrorKind, message: str, detail: Optional[Any] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.detail = detail


def error_response(kind: ErrorKind, message: str, detail: Optional[Any] = None) -> JSONResponse:
    content = {"error": message, "kind": kind.value}
    if detail is not None:
        content["detail"] = jsonable_encoder(detail)
    return JSONResponse(status_code=kind.status_code, content=content)


@contextmanager
def handle_errors(action: str):
    """Translate anything raised inside the block into an ApiError.

    ``action`` completes the message ``"Failed to <action>"``.
    """
    message = f"Failed to {action}"
    try:
        yield
    except ApiError:
        raise
    except StorageError as e:
        logger.warning(f"{message}: {e.kind.value}: {e.detail}")
        raise ApiError(e.kind, message, detail=e.detail) from e
    except Exception as e:
        logger.exception(message)
        raise ApiError(ErrorKind.INTERNAL, message) from e


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        return error_response(exc.kind, exc.message, exc.detail)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        # A malformed path segment names a resource that cannot exist
        if any(err.get("loc", ("",))[0] == "path" for err in errors):
            return error_response(ErrorKind.NOT_FOUND, "Not found")
        return error_response(ErrorKind.VALIDATION, "Invalid request", detail=errors)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        kind = ErrorKind.NOT_FOUND if exc.status_code == 404 else ErrorKind.VALIDATION
        if exc.status_code >= 500:
            kind = ErrorKind.INTERNAL
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail, "kind": kind.value},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception on {request.method} {request.url.path}")
        return error_response(ErrorKind.INTERNAL, "Internal server error")
