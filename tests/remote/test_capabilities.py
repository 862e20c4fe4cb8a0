from __future__ import annotations

import pytest

from wirebridge.remote.capabilities import Capabilities, capabilities_for, normalize_browser_name
from wirebridge.remote.types import Cookie, Dimension, Point


def test_json_create_decodes_server_value() -> None:
    caps = Capabilities.json_create(
        {"browserName": "firefox", "version": "3.5", "platform": "LINUX", "javascriptEnabled": True}
    )

    assert caps == Capabilities("firefox", "3.5", "LINUX", True)
    assert caps.javascript is True


def test_json_create_tolerates_missing_fields() -> None:
    caps = Capabilities.json_create(None)

    assert caps.browser_name == ""
    assert caps.platform == "ANY"
    assert caps.javascript is False


def test_as_json_round_trip() -> None:
    caps = Capabilities.internet_explorer(version="8")

    assert Capabilities.json_create(caps.as_json()) == caps
    assert caps.as_json()["browserName"] == "internet explorer"


def test_factories() -> None:
    assert Capabilities.firefox().javascript
    assert Capabilities.chrome().browser_name == "chrome"
    assert not Capabilities.htmlunit().javascript
    assert Capabilities.internet_explorer().platform == "WINDOWS"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("firefox", "firefox"),
        ("Internet Explorer", "internet_explorer"),
        ("  HtmlUnit ", "htmlunit"),
    ],
)
def test_normalize_browser_name(raw: str, expected: str) -> None:
    assert normalize_browser_name(raw) == expected


def test_capabilities_for() -> None:
    assert capabilities_for("IE").browser_name == "internet explorer"
    assert capabilities_for("Internet Explorer").browser_name == "internet explorer"
    with pytest.raises(ValueError, match="unknown browser"):
        capabilities_for("netscape")


def test_value_records() -> None:
    assert Point.from_json({"x": 1, "y": 2}).as_json() == {"x": 1, "y": 2}
    assert Dimension.from_json({"width": 3, "height": 4}) == Dimension(3, 4)

    cookie = Cookie.from_json({"name": "a", "value": "b", "domain": "example.com", "expiry": 10})
    assert cookie.path == "/"
    assert cookie.as_json() == {
        "name": "a",
        "value": "b",
        "path": "/",
        "secure": False,
        "domain": "example.com",
        "expiry": 10,
    }


def test_value_records_require_their_fields() -> None:
    with pytest.raises(KeyError):
        Point.from_json({"x": 1})
