from __future__ import annotations

import pytest

from wirebridge.bridge.dispatcher import dispatch_command, envelope_value, resolve_command_path
from wirebridge.bridge.registry import build_command_registry, lookup_command, register
from wirebridge.errors import InvalidParameterError, NoSessionError, UnknownCommandError


def _no_session() -> str:
    raise NoSessionError()


def test_session_and_context_are_injected() -> None:
    path = resolve_command_path(
        lookup_command("getElementText"),
        {"id": "7"},
        session_id=lambda: "abc123",
        context="ctx",
    )

    assert path == "session/abc123/ctx/element/7/text"


def test_session_is_not_read_when_template_does_not_need_it() -> None:
    path = resolve_command_path(lookup_command("newSession"), {}, session_id=_no_session, context="ctx")

    assert path == "session"


def test_session_scoped_command_without_session() -> None:
    with pytest.raises(NoSessionError):
        resolve_command_path(lookup_command("getTitle"), None, session_id=_no_session, context="ctx")


def test_unexpected_parameter_names_command_and_params() -> None:
    with pytest.raises(InvalidParameterError) as info:
        resolve_command_path(
            lookup_command("getTitle"),
            {"id": "7"},
            session_id=lambda: "s",
            context="c",
        )

    err = info.value
    assert isinstance(err, ValueError)
    assert err.command == "getTitle"
    assert err.params == {"id": "7"}
    assert err.unexpected == ("id",)
    assert "getTitle" in str(err)
    assert "unexpected: id" in str(err)


def test_unfilled_placeholder_is_invalid_parameter() -> None:
    with pytest.raises(InvalidParameterError) as info:
        resolve_command_path(lookup_command("clickElement"), {}, session_id=lambda: "s", context="c")

    assert info.value.missing == ("id",)
    assert "missing: id" in str(info.value)


def test_reserved_names_cannot_be_supplied() -> None:
    with pytest.raises(InvalidParameterError) as info:
        resolve_command_path(
            lookup_command("getTitle"),
            {"session_id": "other"},
            session_id=lambda: "s",
            context="c",
        )

    assert info.value.unexpected == ("session_id",)


def test_template_without_context_ignores_it() -> None:
    registry = build_command_registry()
    register(registry, "ping", "GET", "status")

    path = resolve_command_path(registry["ping"], {}, session_id=_no_session, context="c")

    assert path == "status"


def test_dispatch_passes_verb_path_and_body(transport) -> None:
    transport.reply("hello")

    envelope = dispatch_command(
        "get",
        {},
        ("http://example.com",),
        transport=transport,
        session_id=lambda: "abc123",
        context="ctx",
    )

    assert transport.last == ("POST", "session/abc123/ctx/url", ("http://example.com",))
    assert envelope == {"value": "hello"}


def test_dispatch_unknown_command_never_reaches_transport(transport) -> None:
    with pytest.raises(UnknownCommandError):
        dispatch_command("nope", {}, (), transport=transport, session_id=lambda: "s", context="c")

    assert transport.calls == []


def test_debug_trace_is_printed(transport, capsys) -> None:
    dispatch_command(
        "getTitle",
        None,
        (),
        transport=transport,
        session_id=lambda: "abc123",
        context="ctx",
        debug=True,
    )

    assert capsys.readouterr().out.strip() == "-> GET session/abc123/ctx/title"


def test_transport_errors_propagate_unchanged() -> None:
    class Boom(Exception):
        pass

    class FailingTransport:
        def __init__(self) -> None:
            self.attempts = 0

        def call(self, verb, path, *args):
            self.attempts += 1
            raise Boom("connection refused")

    failing = FailingTransport()
    with pytest.raises(Boom):
        dispatch_command("getTitle", None, (), transport=failing, session_id=lambda: "s", context="c")
    assert failing.attempts == 1


def test_envelope_value() -> None:
    assert envelope_value({"value": [1, 2], "sessionId": "s"}) == [1, 2]
    assert envelope_value({"sessionId": "s"}) is None
    assert envelope_value(None) is None
