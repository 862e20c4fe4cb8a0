"""Signature-level contract tests for the dispatch entry points."""

from __future__ import annotations

import importlib
import inspect


def _signature_params(func) -> list[inspect.Parameter]:
    return list(inspect.signature(func).parameters.values())


def _assert_param_names(func, expected_names: list[str]) -> None:
    params = _signature_params(func)
    assert [p.name for p in params] == expected_names


def test_dispatcher_signatures() -> None:
    mod = importlib.import_module("wirebridge.bridge.dispatcher")

    params = _signature_params(mod.dispatch_command)
    assert [p.name for p in params] == [
        "command",
        "params",
        "args",
        "transport",
        "session_id",
        "context",
        "registry",
        "debug",
    ]
    assert all(p.kind == inspect.Parameter.KEYWORD_ONLY for p in params[3:])

    params = _signature_params(mod.resolve_command_path)
    assert [p.name for p in params] == ["spec", "params", "session_id", "context"]
    assert all(p.kind == inspect.Parameter.KEYWORD_ONLY for p in params[2:])


def test_bridge_execute_signatures() -> None:
    mod = importlib.import_module("wirebridge.remote.bridge")

    for method in (mod.Bridge.execute, mod.Bridge.raw_execute):
        params = _signature_params(method)
        assert [p.name for p in params] == ["self", "command", "params", "args"]
        assert params[3].kind == inspect.Parameter.VAR_POSITIONAL


def test_transport_signature() -> None:
    mod = importlib.import_module("wirebridge.remote.http_client")

    params = _signature_params(mod.DefaultHttpClient.call)
    assert [p.name for p in params] == ["self", "verb", "path", "args"]
    assert params[3].kind == inspect.Parameter.VAR_POSITIONAL


def test_registry_signatures() -> None:
    mod = importlib.import_module("wirebridge.bridge.registry")

    _assert_param_names(mod.register, ["registry", "name", "verb", "template"])
    _assert_param_names(mod.lookup_command, ["name", "registry"])
