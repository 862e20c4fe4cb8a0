"""Browser capabilities exchanged when a session is created."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True)
class Capabilities:
    browser_name: str = ""
    version: str = ""
    platform: str = "ANY"
    javascript_enabled: bool = False

    @property
    def javascript(self) -> bool:
        return bool(self.javascript_enabled)

    @classmethod
    def firefox(cls, **overrides: Any) -> "Capabilities":
        return cls(**{"browser_name": "firefox", "javascript_enabled": True, **overrides})

    @classmethod
    def internet_explorer(cls, **overrides: Any) -> "Capabilities":
        return cls(
            **{
                "browser_name": "internet explorer",
                "platform": "WINDOWS",
                "javascript_enabled": True,
                **overrides,
            }
        )

    @classmethod
    def chrome(cls, **overrides: Any) -> "Capabilities":
        return cls(**{"browser_name": "chrome", "javascript_enabled": True, **overrides})

    @classmethod
    def htmlunit(cls, **overrides: Any) -> "Capabilities":
        return cls(**{"browser_name": "htmlunit", "javascript_enabled": False, **overrides})

    @classmethod
    def json_create(cls, data: Any) -> "Capabilities":
        """Decode the capabilities value returned by the server."""
        if not isinstance(data, dict):
            data = {}
        return cls(
            browser_name=str(data.get("browserName") or ""),
            version=str(data.get("version") or ""),
            platform=str(data.get("platform") or "ANY"),
            javascript_enabled=bool(data.get("javascriptEnabled")),
        )

    def as_json(self) -> dict[str, Any]:
        return {
            "browserName": self.browser_name,
            "version": self.version,
            "platform": self.platform,
            "javascriptEnabled": self.javascript_enabled,
        }


def normalize_browser_name(name: str) -> str:
    """'Internet Explorer' -> 'internet_explorer'."""
    return "_".join(str(name or "").strip().lower().split())


_FACTORIES: dict[str, Callable[..., Capabilities]] = {
    "firefox": Capabilities.firefox,
    "internet_explorer": Capabilities.internet_explorer,
    "ie": Capabilities.internet_explorer,
    "chrome": Capabilities.chrome,
    "htmlunit": Capabilities.htmlunit,
}


def capabilities_for(browser: str) -> Capabilities:
    factory = _FACTORIES.get(normalize_browser_name(browser))
    if factory is None:
        known = ", ".join(sorted(_FACTORIES))
        raise ValueError(f"unknown browser {browser!r} (known: {known})")
    return factory()


__all__ = [
    "Capabilities",
    "capabilities_for",
    "normalize_browser_name",
]
