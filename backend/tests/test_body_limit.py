from __future__ import annotations

import asyncio
import json

from app.utils.body_limit import BodySizeLimitMiddleware


class _RecordingApp:
    def __init__(self) -> None:
        self.called = False
        self.body = b""

    async def __call__(self, scope, receive, send):
        self.called = True
        while True:
            message = await receive()
            self.body += message.get("body", b"")
            if not message.get("more_body", False):
                break
        await send({"type": "http.response.start", "status": 200, "headers": []})
        await send({"type": "http.response.body", "body": b"ok"})


def _scope(headers=()):
    return {
        "type": "http",
        "method": "POST",
        "path": "/api/coverletter",
        "headers": [(name.encode(), value.encode()) for name, value in headers],
    }


def _call(middleware, scope, chunks):
    reads = {"count": 0}
    sent: list[dict] = []

    async def receive():
        index = reads["count"]
        reads["count"] += 1
        if index < len(chunks):
            return {
                "type": "http.request",
                "body": chunks[index],
                "more_body": index < len(chunks) - 1,
            }
        return {"type": "http.disconnect"}

    async def send(message):
        sent.append(message)

    asyncio.run(middleware(scope, receive, send))
    return reads["count"], sent


def _status(sent):
    return next(m["status"] for m in sent if m["type"] == "http.response.start")


def _body(sent):
    return b"".join(m.get("body", b"") for m in sent if m["type"] == "http.response.body")


def test_declared_content_length_over_limit_is_rejected_before_reading():
    inner = _RecordingApp()
    middleware = BodySizeLimitMiddleware(inner, max_body_bytes=lambda: 16)

    reads, sent = _call(middleware, _scope([("content-length", "5000000")]), [b"{}"])

    assert reads == 0
    assert inner.called is False
    assert _status(sent) == 413
    assert json.loads(_body(sent)) == {"message": "Request body exceeds 16 bytes"}


def test_stream_is_abandoned_once_total_passes_limit():
    inner = _RecordingApp()
    middleware = BodySizeLimitMiddleware(inner, max_body_bytes=lambda: 16)
    chunks = [b"x" * 10] * 200

    reads, sent = _call(middleware, _scope(), chunks)

    assert reads == 2
    assert inner.called is False
    assert _status(sent) == 413


def test_body_within_limit_is_replayed_unchanged():
    inner = _RecordingApp()
    middleware = BodySizeLimitMiddleware(inner, max_body_bytes=lambda: 64)
    chunks = [b'{"jobRole": ', b'"Dev"}']

    _, sent = _call(middleware, _scope([("content-length", "18")]), chunks)

    assert inner.called is True
    assert inner.body == b'{"jobRole": "Dev"}'
    assert _status(sent) == 200


def test_debug_mode_adds_kind():
    middleware = BodySizeLimitMiddleware(
        _RecordingApp(),
        max_body_bytes=lambda: 1,
        include_debug=lambda: True,
    )

    _, sent = _call(middleware, _scope([("content-length", "2")]), [b"{}"])

    assert json.loads(_body(sent))["kind"] == "payload_too_large"


def test_non_http_scopes_pass_through():
    seen = []

    async def inner(scope, receive, send):
        seen.append(scope["type"])

    middleware = BodySizeLimitMiddleware(inner, max_body_bytes=lambda: 0)
    asyncio.run(middleware({"type": "lifespan"}, None, None))

    assert seen == ["lifespan"]
