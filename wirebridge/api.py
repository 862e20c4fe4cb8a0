"""Stable public API for the remote bridge.

This module is intended as the long-term import target for callers.
It re-exports the split internal modules and avoids exposing private
helper symbols.
"""

from __future__ import annotations

from typing import Any

from wirebridge import config
from wirebridge.bridge.registry import COMMANDS, CommandSpec, lookup_command
from wirebridge.errors import (
    InvalidParameterError,
    NoSessionError,
    ServerError,
    UnknownCommandError,
    UnsupportedOperationError,
    WireBridgeError,
)
from wirebridge.remote.bridge import Bridge
from wirebridge.remote.capabilities import Capabilities, capabilities_for
from wirebridge.remote.element import Element
from wirebridge.remote.http_client import DefaultHttpClient
from wirebridge.remote.types import Cookie, Dimension, Point


def connect(
    server_url: str | None = None,
    *,
    browser: str | None = None,
    **options: Any,
) -> Bridge:
    """Open a bridge with a fresh session for ``browser`` (default: ``WIREBRIDGE_BROWSER``)."""
    caps = capabilities_for(browser or config.DEFAULT_BROWSER)
    return Bridge(server_url, desired_capabilities=caps, **options)


def list_commands() -> list[CommandSpec]:
    return sorted(COMMANDS.values(), key=lambda spec: spec.name)


__all__ = [
    "Bridge",
    "Capabilities",
    "CommandSpec",
    "Cookie",
    "DefaultHttpClient",
    "Dimension",
    "Element",
    "InvalidParameterError",
    "NoSessionError",
    "Point",
    "ServerError",
    "UnknownCommandError",
    "UnsupportedOperationError",
    "WireBridgeError",
    "capabilities_for",
    "connect",
    "list_commands",
    "lookup_command",
]
