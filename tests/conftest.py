"""Shared fixtures: an in-memory transport that records every call."""

from __future__ import annotations

from typing import Any

import pytest

from wirebridge.remote.bridge import Bridge
from wirebridge.remote.capabilities import Capabilities


class RecordingTransport:
    """Answers from a queue of canned envelopes and records each request."""

    def __init__(self, session_id: str = "abc123", browser_name: str = "firefox", javascript: bool = True) -> None:
        self.calls: list[tuple[str, str, tuple[Any, ...]]] = []
        self.replies: list[Any] = []
        self.session_reply = {
            "sessionId": session_id,
            "value": {
                "browserName": browser_name,
                "version": "3.0",
                "platform": "ANY",
                "javascriptEnabled": javascript,
            },
        }

    def reply(self, value: Any) -> None:
        self.replies.append({"value": value})

    def reply_envelope(self, envelope: Any) -> None:
        self.replies.append(envelope)

    def call(self, verb: str, path: str, *args: Any) -> Any:
        self.calls.append((verb, path, args))
        if path == "session":
            return self.session_reply
        if self.replies:
            return self.replies.pop(0)
        return {"value": None}

    @property
    def last(self) -> tuple[str, str, tuple[Any, ...]]:
        return self.calls[-1]


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def bridge(transport: RecordingTransport) -> Bridge:
    return Bridge(http_client=transport, desired_capabilities=Capabilities.firefox(), debug=False)


@pytest.fixture
def transport_factory() -> type[RecordingTransport]:
    return RecordingTransport
