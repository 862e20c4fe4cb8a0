from __future__ import annotations

import json

import requests

from cli import main as cli_main
from wirebridge.errors import ServerError
from wirebridge.remote.bridge import Bridge


def _factory(transport):
    def build(server_url, **kwargs):
        return Bridge(server_url, http_client=transport, **kwargs)

    return build


def test_commands_lists_registry(capsys) -> None:
    assert cli_main.main(["commands"]) == 0

    out = capsys.readouterr().out
    assert "getTitle" in out
    assert "session/:session_id/:context/title" in out


def test_title_navigates_prints_and_quits(transport, capsys) -> None:
    transport.reply(None)
    transport.reply("Example Domain")

    code = cli_main.main(["title", "http://example.com/"], bridge_factory=_factory(transport))

    assert code == 0
    assert capsys.readouterr().out.strip() == "Example Domain"
    assert [call[:2] for call in transport.calls] == [
        ("POST", "session"),
        ("POST", "session/abc123/context/url"),
        ("GET", "session/abc123/context/title"),
        ("DELETE", "session/abc123"),
    ]


def test_no_quit_keeps_session(transport) -> None:
    cli_main.main(["--no-quit", "title", "http://example.com/"], bridge_factory=_factory(transport))

    assert transport.last[:2] == ("GET", "session/abc123/context/title")


def test_script_parses_json_arguments(transport, capsys) -> None:
    transport.reply(None)
    transport.reply({"ELEMENT": "4"})

    code = cli_main.main(
        ["--no-quit", "script", "http://example.com/", "return arguments[0];", '{"n": 1}', "plain"],
        bridge_factory=_factory(transport),
    )

    assert code == 0
    assert transport.last[2] == ("return arguments[0];", [{"n": 1}, "plain"])
    assert json.loads(capsys.readouterr().out) == {"ELEMENT": "4"}


def test_find_prints_element_text(transport, capsys) -> None:
    transport.reply(None)
    transport.reply({"ELEMENT": "9"})
    transport.reply("Log in")

    code = cli_main.main(
        ["--no-quit", "find", "http://example.com/", "link text", "Log in"],
        bridge_factory=_factory(transport),
    )

    assert code == 0
    assert transport.calls[2][2] == ({"using": "link text", "value": "Log in"},)
    assert transport.last[1] == "session/abc123/context/element/9/text"
    assert capsys.readouterr().out.strip() == "Log in"


def test_unsupported_script_is_reported(transport_factory, capsys) -> None:
    transport = transport_factory(browser_name="htmlunit", javascript=False)

    code = cli_main.main(
        ["--browser", "htmlunit", "script", "http://example.com/", "return 1;"],
        bridge_factory=_factory(transport),
    )

    assert code == 1
    assert "ERR[unsupported_operation]" in capsys.readouterr().err
    # The session is still ended.
    assert transport.last[:2] == ("DELETE", "session/abc123")


def test_failed_quit_does_not_hide_command_error(transport_factory, capsys) -> None:
    transport = transport_factory(browser_name="htmlunit", javascript=False)

    def build(server_url, **kwargs):
        bridge = Bridge(server_url, http_client=transport, **kwargs)

        def broken_quit():
            raise ServerError("session already gone")

        bridge.quit = broken_quit
        return bridge

    code = cli_main.main(["--browser", "htmlunit", "script", "http://example.com/", "return 1;"], bridge_factory=build)

    err = capsys.readouterr().err
    assert code == 1
    assert "ERR: ERR[unsupported_operation]" in err
    assert "quit failed" in err


def test_unknown_browser(capsys) -> None:
    code = cli_main.main(["--browser", "netscape", "title", "http://example.com/"])

    assert code == 1
    assert "unknown browser" in capsys.readouterr().err


def test_connection_failure(capsys) -> None:
    def refuse(server_url, **kwargs):
        raise requests.ConnectionError("connection refused")

    code = cli_main.main(["title", "http://example.com/"], bridge_factory=refuse)

    assert code == 1
    assert "ConnectionError" in capsys.readouterr().err
