"""Command registry: symbolic command name -> (HTTP verb, path template)."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from wirebridge.config import HTTP_VERBS
from wirebridge.errors import UnknownCommandError

from .templating import PathTemplate, parse_template


@dataclass(frozen=True)
class CommandSpec:
    name: str
    verb: str
    template: PathTemplate


_SESSION = "session/:session_id"
_CONTEXT = "session/:session_id/:context"
_ELEMENT = "session/:session_id/:context/element/:id"

_COMMAND_TABLE: tuple[tuple[str, str, str], ...] = (
    ("newSession", "POST", "session"),
    ("getCapabilities", "GET", _SESSION),
    ("quit", "DELETE", _SESSION),
    ("getCurrentWindowHandle", "GET", f"{_CONTEXT}/window_handle"),
    ("getWindowHandles", "GET", f"{_CONTEXT}/window_handles"),
    ("getCurrentUrl", "GET", f"{_CONTEXT}/url"),
    ("get", "POST", f"{_CONTEXT}/url"),
    ("goForward", "POST", f"{_CONTEXT}/forward"),
    ("goBack", "POST", f"{_CONTEXT}/back"),
    ("refresh", "POST", f"{_CONTEXT}/refresh"),
    ("executeScript", "POST", f"{_CONTEXT}/execute"),
    ("getSpeed", "GET", f"{_CONTEXT}/speed"),
    ("setSpeed", "POST", f"{_CONTEXT}/speed"),
    ("getVisible", "GET", f"{_CONTEXT}/visible"),
    ("setVisible", "POST", f"{_CONTEXT}/visible"),
    ("getPageSource", "GET", f"{_CONTEXT}/source"),
    ("getTitle", "GET", f"{_CONTEXT}/title"),
    ("findElement", "POST", f"{_CONTEXT}/element"),
    ("findElements", "POST", f"{_CONTEXT}/elements"),
    ("getActiveElement", "POST", f"{_CONTEXT}/element/active"),
    ("findChildElement", "POST", f"{_ELEMENT}/:using"),
    ("findChildElements", "POST", f"{_ELEMENT}/elements/:using"),
    ("clickElement", "POST", f"{_ELEMENT}/click"),
    ("clearElement", "POST", f"{_ELEMENT}/clear"),
    ("submitElement", "POST", f"{_ELEMENT}/submit"),
    ("getElementText", "GET", f"{_ELEMENT}/text"),
    ("sendKeysToElement", "POST", f"{_ELEMENT}/value"),
    ("getElementValue", "GET", f"{_ELEMENT}/value"),
    ("getElementTagName", "GET", f"{_ELEMENT}/name"),
    ("isElementSelected", "GET", f"{_ELEMENT}/selected"),
    ("setElementSelected", "POST", f"{_ELEMENT}/selected"),
    ("toggleElement", "POST", f"{_ELEMENT}/toggle"),
    ("isElementEnabled", "GET", f"{_ELEMENT}/enabled"),
    ("isElementDisplayed", "GET", f"{_ELEMENT}/displayed"),
    ("getElementLocation", "GET", f"{_ELEMENT}/location"),
    ("getElementSize", "GET", f"{_ELEMENT}/size"),
    ("getElementAttribute", "GET", f"{_ELEMENT}/attribute/:name"),
    ("getElementValueOfCssProperty", "GET", f"{_ELEMENT}/css/:property_name"),
    ("hoverOverElement", "POST", f"{_ELEMENT}/hover"),
    ("dragElement", "POST", f"{_ELEMENT}/drag"),
    ("switchToFrame", "POST", f"{_CONTEXT}/frame/:id"),
    ("switchToWindow", "POST", f"{_CONTEXT}/window/:name"),
    ("close", "DELETE", f"{_CONTEXT}/window"),
    ("getAllCookies", "GET", f"{_CONTEXT}/cookie"),
    ("addCookie", "POST", f"{_CONTEXT}/cookie"),
    ("deleteAllCookies", "DELETE", f"{_CONTEXT}/cookie"),
    ("deleteCookie", "DELETE", f"{_CONTEXT}/cookie/:name"),
)


def register(registry: dict[str, CommandSpec], name: str, verb: str, template: str) -> CommandSpec:
    """Add (or replace) a command definition; the last registration wins."""
    resolved_verb = str(verb or "").strip().upper()
    if resolved_verb not in HTTP_VERBS:
        raise ValueError(f"unsupported HTTP verb {verb!r} for command {name!r}")
    spec = CommandSpec(name=name, verb=resolved_verb, template=parse_template(template))
    registry[name] = spec
    return spec


def build_command_registry() -> dict[str, CommandSpec]:
    registry: dict[str, CommandSpec] = {}
    for name, verb, template in _COMMAND_TABLE:
        register(registry, name, verb, template)
    return registry


# Built once at import; shared read-only by every bridge instance.
COMMANDS: Mapping[str, CommandSpec] = MappingProxyType(build_command_registry())


def lookup_command(name: str, registry: Mapping[str, CommandSpec] | None = None) -> CommandSpec:
    table = COMMANDS if registry is None else registry
    spec = table.get(name)
    if spec is None:
        raise UnknownCommandError(name)
    return spec


__all__ = [
    "COMMANDS",
    "CommandSpec",
    "build_command_registry",
    "lookup_command",
    "register",
]
