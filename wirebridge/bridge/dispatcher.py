"""Command execution pipeline: lookup -> path resolution -> transport call."""

from __future__ import annotations

from typing import Any, Callable, Mapping

from wirebridge.config import RESERVED_PATH_PARAMS
from wirebridge.errors import InvalidParameterError
from wirebridge.utils.logging_utils import log_event

from .registry import CommandSpec, lookup_command
from .templating import PathTemplateError


def resolve_command_path(
    spec: CommandSpec,
    params: Mapping[str, Any] | None,
    *,
    session_id: Callable[[], str],
    context: str,
) -> str:
    """Render the command's path, injecting session and context if used.

    ``session_id`` is only called when the template needs it, so commands
    without a session (``newSession``) never touch the session state.
    """
    supplied = dict(params or {})
    reserved = tuple(key for key in RESERVED_PATH_PARAMS if key in supplied)
    if reserved:
        raise InvalidParameterError(spec.name, supplied, unexpected=reserved)

    values: dict[str, Any] = {}
    if spec.template.uses("session_id"):
        values["session_id"] = session_id()
    if spec.template.uses("context"):
        values["context"] = context
    values.update(supplied)

    try:
        return spec.template.render(values)
    except PathTemplateError as exc:
        raise InvalidParameterError(
            spec.name,
            supplied,
            unexpected=exc.unexpected,
            missing=exc.missing,
        ) from exc


def dispatch_command(
    command: str,
    params: Mapping[str, Any] | None,
    args: tuple[Any, ...],
    *,
    transport: Any,
    session_id: Callable[[], str],
    context: str,
    registry: Mapping[str, CommandSpec] | None = None,
    debug: bool = False,
) -> Any:
    """Issue one command and return the full response envelope.

    Transport errors propagate unchanged; nothing is retried.
    """
    spec = lookup_command(command, registry)
    path = resolve_command_path(spec, params, session_id=session_id, context=context)

    if debug:
        print(f"-> {spec.verb} {path}")
    log_event("bridge_command", command=command, verb=spec.verb, path=path, args=list(args))

    return transport.call(spec.verb, path, *args)


def envelope_value(envelope: Any) -> Any:
    if isinstance(envelope, Mapping):
        return envelope.get("value")
    return None


__all__ = [
    "dispatch_command",
    "envelope_value",
    "resolve_command_path",
]
