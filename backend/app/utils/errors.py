"""
Application error types and their JSON rendering.

Every failure raised by validation, configuration or the upstream LLM call is
an AppError tagged with a kind and an HTTP status. The exception handlers in
app.main are the only place these get turned into responses.
"""

from __future__ import annotations

import traceback
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Classification of application errors."""

    VALIDATION = "validation"
    PAYLOAD_TOO_LARGE = "payload_too_large"
    CONFIGURATION = "configuration"
    UPSTREAM = "upstream"
    CORS = "cors"
    INTERNAL = "internal"


class AppError(Exception):
    """Base error carrying a kind, a status code and a client-safe message."""

    kind: ErrorKind = ErrorKind.INTERNAL
    default_status: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code or self.default_status

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, status_code={self.status_code}, message={self.message!r})"


class ValidationError(AppError):
    """Client sent a missing, empty or malformed field."""

    kind = ErrorKind.VALIDATION
    default_status = 400


class PayloadTooLargeError(AppError):
    kind = ErrorKind.PAYLOAD_TOO_LARGE
    default_status = 413


class ConfigurationError(AppError):
    """Server is misconfigured (missing API key, client cannot be built)."""

    kind = ErrorKind.CONFIGURATION
    default_status = 500


class UpstreamError(AppError):
    """The LLM provider call failed."""

    kind = ErrorKind.UPSTREAM
    default_status = 502


class CorsRejectedError(AppError):
    kind = ErrorKind.CORS
    default_status = 403


# ── Rendering ────────────────────────────────────────────────────────────────


def status_for(exc: BaseException) -> int:
    """Pick the HTTP status for an exception, 500 when it carries none."""
    status = getattr(exc, "status_code", None)
    if isinstance(status, int) and 400 <= status <= 599:
        return status
    return 500


def error_payload(exc: BaseException, *, include_debug: bool = False) -> dict[str, Any]:
    """
    Build the JSON error body for an exception.

    The body always has a "message". Debug mode adds the error kind and, for
    unexpected errors, the formatted traceback.
    """
    if isinstance(exc, AppError):
        payload: dict[str, Any] = {"message": exc.message}
        if include_debug:
            payload["kind"] = exc.kind.value
        return payload

    if not include_debug:
        return {"message": "Internal Server Error"}

    return {
        "message": str(exc) or "Internal Server Error",
        "kind": ErrorKind.INTERNAL.value,
        "stack": "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
    }
