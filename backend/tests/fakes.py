"""Stand-ins for LiteLLM responses and errors."""

from __future__ import annotations

from types import SimpleNamespace


class FakeProviderError(Exception):
    """Mimics a LiteLLM exception: carries status_code and message."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


def make_completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


class FakeCompletion:
    """Replaces litellm.acompletion and records every call."""

    def __init__(self, content="Generated text", error: Exception | None = None) -> None:
        self.content = content
        self.error = error
        self.calls: list[dict] = []

    async def __call__(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return make_completion(self.content)
