"""Per-bridge session state.

Not thread-safe: a bridge (and its session) must not be mutated from
more than one thread at a time.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from wirebridge.config import DEFAULT_CONTEXT
from wirebridge.errors import NoSessionError

from .capabilities import Capabilities, normalize_browser_name


@dataclass
class SessionState:
    context: str = DEFAULT_CONTEXT
    capabilities: Capabilities | None = None
    _session_id: str | None = field(default=None, repr=False)
    _browser: str | None = field(default=None, repr=False)

    @property
    def active(self) -> bool:
        return self._session_id is not None

    @property
    def session_id(self) -> str:
        if self._session_id is None:
            raise NoSessionError()
        return self._session_id

    def activate(self, session_id: str, capabilities: Capabilities) -> None:
        self._session_id = str(session_id)
        self.capabilities = capabilities
        self._browser = None

    @property
    def browser(self) -> str:
        if self._browser is None:
            if self.capabilities is None:
                raise NoSessionError()
            self._browser = normalize_browser_name(self.capabilities.browser_name)
        return self._browser


__all__ = ["SessionState"]
