"""
ASGI middleware enforcing the request body size limit.

Requests announcing a Content-Length above the limit are rejected before any
body is read. Otherwise the body is read chunk by chunk and rejected as soon
as the running total passes the limit; accepted bodies are replayed to the
app unchanged.
"""

from __future__ import annotations

import logging
from typing import Callable

from fastapi.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from app.utils.errors import PayloadTooLargeError, error_payload

logger = logging.getLogger(__name__)


class BodySizeLimitMiddleware:
    def __init__(
        self,
        app: ASGIApp,
        max_body_bytes: Callable[[], int],
        include_debug: Callable[[], bool] = lambda: False,
    ) -> None:
        self.app = app
        self.max_body_bytes = max_body_bytes
        self.include_debug = include_debug

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        limit = self.max_body_bytes()

        declared = _content_length(scope)
        if declared is not None and declared > limit:
            await self._reject(scope, receive, send, limit)
            return

        messages: list[Message] = []
        total = 0
        while True:
            message = await receive()
            messages.append(message)
            if message["type"] != "http.request":
                break
            total += len(message.get("body", b""))
            if total > limit:
                await self._reject(scope, receive, send, limit)
                return
            if not message.get("more_body", False):
                break

        async def replay() -> Message:
            if messages:
                return messages.pop(0)
            return await receive()

        await self.app(scope, replay, send)

    async def _reject(self, scope: Scope, receive: Receive, send: Send, limit: int) -> None:
        logger.info(f"Rejected request body over {limit} bytes: {scope.get('path')}")
        exc = PayloadTooLargeError(f"Request body exceeds {limit} bytes")
        response = JSONResponse(
            status_code=exc.status_code,
            content=error_payload(exc, include_debug=self.include_debug()),
            headers={"Connection": "close"},
        )
        await response(scope, receive, send)


def _content_length(scope: Scope) -> int | None:
    for name, value in scope.get("headers", []):
        if name == b"content-length":
            try:
                return int(value)
            except ValueError:
                return None
    return None
