"""Shared fixtures."""

from __future__ import annotations

from typing import Any

import pytest


class AccessLogRecorder:
    """Collects ``log(message, **kwargs)`` calls for assertions."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def __call__(self, message: str, **kwargs: Any) -> None:
        self.calls.append((message, kwargs))

    @property
    def messages(self) -> list[str]:
        return [message for message, _ in self.calls]


@pytest.fixture
def access_log() -> AccessLogRecorder:
    return AccessLogRecorder()


@pytest.fixture
def person() -> dict[str, Any]:
    return {"name": "Ali", "age": 35}
