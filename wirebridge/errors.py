"""Error taxonomy for the remote bridge.

Every error carries a stable ``code`` so callers (and the CLI) can report
failures uniformly via ``as_report``. Errors raised by the transport layer
itself (``requests`` exceptions) are never wrapped.
"""

from __future__ import annotations

from typing import Any, Mapping


class WireBridgeError(Exception):
    """Base class for every error detected by the bridge."""

    code = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def as_report(self) -> str:
        return f"ERR[{self.code}]: {self.message}"


class UnknownCommandError(WireBridgeError):
    code = "unknown_command"

    def __init__(self, command: str) -> None:
        super().__init__(f"unknown command {command!r}")
        self.command = command


class InvalidParameterError(WireBridgeError, ValueError):
    """A named parameter does not fit the command's path template."""

    code = "invalid_parameter"

    def __init__(
        self,
        command: str,
        params: Mapping[str, Any],
        *,
        unexpected: tuple[str, ...] = (),
        missing: tuple[str, ...] = (),
    ) -> None:
        details = []
        if unexpected:
            details.append(f"unexpected: {', '.join(unexpected)}")
        if missing:
            details.append(f"missing: {', '.join(missing)}")
        suffix = f" ({'; '.join(details)})" if details else ""
        super().__init__(f"{dict(params)!r} invalid for {command!r}{suffix}")
        self.command = command
        self.params = dict(params)
        self.unexpected = tuple(unexpected)
        self.missing = tuple(missing)


class NoSessionError(WireBridgeError):
    code = "no_session"

    def __init__(self, message: str = "no current session exists") -> None:
        super().__init__(message)


class UnsupportedOperationError(WireBridgeError):
    code = "unsupported_operation"


class ServerError(WireBridgeError):
    """The server answered, but not with a usable envelope."""

    code = "server_error"

    def __init__(self, message: str, *, status: int | None = None, payload: Any = None) -> None:
        super().__init__(message)
        self.status = status
        self.payload = payload

    def as_report(self) -> str:
        status = f" status={self.status}" if self.status is not None else ""
        return f"ERR[{self.code}]{status}: {self.message}"


__all__ = [
    "WireBridgeError",
    "UnknownCommandError",
    "InvalidParameterError",
    "NoSessionError",
    "UnsupportedOperationError",
    "ServerError",
]
