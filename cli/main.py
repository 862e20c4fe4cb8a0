"""wirebridge CLI: drive a remote browser session from the command line."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Callable

import requests

from wirebridge.api import Bridge, capabilities_for, list_commands
from wirebridge.bridge.marshal import wrap_script_argument
from wirebridge.config import DEBUG, DEFAULT_BROWSER, SERVER_URL
from wirebridge.errors import WireBridgeError
from wirebridge.utils.logging_utils import get_exec_log_path

BridgeFactory = Callable[..., Bridge]


def _parse_script_arg(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def _print_json(value: Any) -> None:
    print(json.dumps(wrap_script_argument(value), ensure_ascii=False, indent=2))


def _quit_after_failure(bridge: Bridge) -> None:
    # The command error is the one reported; a failing quit only adds a note.
    try:
        bridge.quit()
    except (WireBridgeError, requests.RequestException) as exc:
        print(f"[warn] quit failed: {type(exc).__name__}: {exc}", file=sys.stderr)


def _cmd_commands(_args: argparse.Namespace) -> int:
    specs = list_commands()
    width = max(len(spec.name) for spec in specs)
    for spec in specs:
        print(f"{spec.name.ljust(width)}  {spec.verb:<6}  {spec.template}")
    return 0


def _cmd_title(bridge: Bridge, args: argparse.Namespace) -> None:
    bridge.get(args.url)
    print(bridge.get_title())


def _cmd_script(bridge: Bridge, args: argparse.Namespace) -> None:
    bridge.get(args.url)
    script_args = [_parse_script_arg(raw) for raw in args.script_args]
    _print_json(bridge.execute_script(args.script, *script_args))


def _cmd_find(bridge: Bridge, args: argparse.Namespace) -> None:
    bridge.get(args.url)
    element = bridge.find_element_by(args.strategy, args.value)
    print(bridge.get_element_text(element))


_SESSION_COMMANDS: dict[str, Callable[[Bridge, argparse.Namespace], None]] = {
    "title": _cmd_title,
    "script": _cmd_script,
    "find": _cmd_find,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="wirebridge remote browser CLI")
    parser.add_argument("--server-url", default=SERVER_URL, help="Remote server base URL.")
    parser.add_argument("--browser", default=DEFAULT_BROWSER, help="Desired browser (firefox, chrome, ie, htmlunit).")
    parser.add_argument(
        "--debug",
        action=argparse.BooleanOptionalAction,
        default=DEBUG,
        help="Print each command as 'VERB path' before it is sent.",
    )
    parser.add_argument(
        "--quit",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="End the remote session when the command finishes.",
    )

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("commands", help="List the registered wire commands.")

    title = sub.add_parser("title", help="Open URL and print the page title.")
    title.add_argument("url")

    script = sub.add_parser("script", help="Open URL, run a script and print its JSON result.")
    script.add_argument("url")
    script.add_argument("script")
    script.add_argument("script_args", nargs="*", help="Script arguments (JSON, or plain strings).")

    find = sub.add_parser("find", help="Open URL, find one element and print its text.")
    find.add_argument("url")
    find.add_argument("strategy", help="id, name, class name, tag name, link text, partial link text, xpath")
    find.add_argument("value")
    return parser


def main(argv: list[str] | None = None, *, bridge_factory: BridgeFactory | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "commands":
        return _cmd_commands(args)

    factory = bridge_factory or Bridge
    try:
        bridge = factory(
            args.server_url,
            desired_capabilities=capabilities_for(args.browser),
            debug=bool(args.debug),
        )
        try:
            _SESSION_COMMANDS[args.command](bridge, args)
        except Exception:
            if args.quit:
                _quit_after_failure(bridge)
            raise
        if args.quit:
            bridge.quit()
    except (WireBridgeError, requests.RequestException, ValueError) as exc:
        report = exc.as_report() if isinstance(exc, WireBridgeError) else f"{type(exc).__name__}: {exc}"
        print(f"ERR: {report}", file=sys.stderr)
        return 1

    log_path = get_exec_log_path()
    if args.debug and log_path:
        print(f"[debug] execution log: {log_path}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
