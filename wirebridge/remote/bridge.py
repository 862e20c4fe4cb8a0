"""Low level bridge to the remote server, through which the rest of the API works.

Every public method is a thin wrapper that names a command from the
registry and forwards its arguments to :meth:`Bridge.execute`. Path
parameters go in the ``params`` mapping; positional arguments become the
JSON request body, in order.
"""

from __future__ import annotations

from typing import Any, Mapping

from wirebridge import config
from wirebridge.bridge.dispatcher import dispatch_command, envelope_value
from wirebridge.bridge.marshal import (
    element_id_from,
    element_ref,
    unwrap_script_argument,
    wrap_script_argument,
)
from wirebridge.bridge.registry import CommandSpec
from wirebridge.config import DEBUG, DEFAULT_CONTEXT, FIND_STRATEGIES, SERVER_URL
from wirebridge.errors import NoSessionError, ServerError, UnsupportedOperationError
from wirebridge.utils.logging_utils import log_event

from .capabilities import Capabilities, capabilities_for
from .element import Element
from .http_client import DefaultHttpClient
from .session import SessionState
from .types import Cookie, Dimension, Point


class Bridge:
    def __init__(
        self,
        server_url: str | None = None,
        *,
        http_client: Any = None,
        desired_capabilities: Capabilities | Mapping[str, Any] | None = None,
        context: str | None = None,
        registry: Mapping[str, CommandSpec] | None = None,
        debug: bool | None = None,
        start_session: bool = True,
    ) -> None:
        """Connect to ``server_url`` (or use ``http_client``) and create a session.

        ``http_client`` is any object exposing ``call(verb, path, *args)``.
        With ``start_session=False`` the bridge stays uninitialized until
        :meth:`create_session` is called.
        """
        self.debug = DEBUG if debug is None else bool(debug)
        if http_client is None:
            http_client = DefaultHttpClient(server_url or SERVER_URL, debug=self.debug)
        self.http = http_client
        self.registry = registry
        self.session = SessionState(context=context or DEFAULT_CONTEXT)
        if start_session:
            self.create_session(desired_capabilities)

    # ------------------------------------------------------------------
    # Session state
    # ------------------------------------------------------------------

    @property
    def context(self) -> str:
        return self.session.context

    @context.setter
    def context(self, value: str) -> None:
        self.session.context = str(value)

    @property
    def session_id(self) -> str:
        """Return the current session ID, or raise NoSessionError."""
        return self.session.session_id

    @property
    def capabilities(self) -> Capabilities | None:
        return self.session.capabilities

    @property
    def browser(self) -> str:
        return self.session.browser

    def create_session(self, desired_capabilities: Capabilities | Mapping[str, Any] | None = None) -> Capabilities:
        desired = desired_capabilities
        if desired is None:
            desired = capabilities_for(config.DEFAULT_BROWSER)
        payload = desired.as_json() if isinstance(desired, Capabilities) else dict(desired)

        resp = self.raw_execute("newSession", {}, payload)
        session_id = resp.get("sessionId") if isinstance(resp, Mapping) else None
        if not session_id:
            raise ServerError("no sessionId in returned payload", payload=resp)

        capabilities = Capabilities.json_create(envelope_value(resp))
        self.session.activate(session_id, capabilities)
        log_event(
            "session_created",
            session_id=str(session_id),
            browser=capabilities.browser_name,
            javascript=capabilities.javascript,
        )
        return capabilities

    # ------------------------------------------------------------------
    # Execution pipeline
    # ------------------------------------------------------------------

    def raw_execute(self, command: str, params: Mapping[str, Any] | None = None, *args: Any) -> Any:
        """Execute a command on the remote server; returns the full envelope."""
        return dispatch_command(
            command,
            params,
            args,
            transport=self.http,
            session_id=lambda: self.session.session_id,
            context=self.session.context,
            registry=self.registry,
            debug=self.debug,
        )

    def execute(self, command: str, params: Mapping[str, Any] | None = None, *args: Any) -> Any:
        """Execute a command on the remote server; returns the envelope's ``value``."""
        return envelope_value(self.raw_execute(command, params, *args))

    # ------------------------------------------------------------------
    # Navigation and windows
    # ------------------------------------------------------------------

    def get(self, url: str) -> Any:
        return self.execute("get", {}, url)

    def go_back(self) -> Any:
        return self.execute("goBack")

    def go_forward(self) -> Any:
        return self.execute("goForward")

    def refresh(self) -> Any:
        return self.execute("refresh")

    def get_current_url(self) -> Any:
        return self.execute("getCurrentUrl")

    def get_title(self) -> Any:
        return self.execute("getTitle")

    def get_page_source(self) -> Any:
        return self.execute("getPageSource")

    def get_visible(self) -> Any:
        return self.execute("getVisible")

    def set_visible(self, visible: bool) -> Any:
        return self.execute("setVisible", {}, bool(visible))

    def get_speed(self) -> Any:
        return self.execute("getSpeed")

    def set_speed(self, value: Any) -> Any:
        return self.execute("setSpeed", {}, value)

    def switch_to_window(self, name: str) -> Any:
        return self.execute("switchToWindow", {"name": name})

    def switch_to_frame(self, frame_id: Any) -> Any:
        return self.execute("switchToFrame", {"id": frame_id})

    def get_window_handles(self) -> Any:
        return self.execute("getWindowHandles")

    def get_current_window_handle(self) -> Any:
        return self.execute("getCurrentWindowHandle")

    def get_capabilities(self) -> Capabilities:
        return Capabilities.json_create(self.execute("getCapabilities"))

    def close(self) -> Any:
        return self.execute("close")

    def quit(self) -> Any:
        # The server ends the session; no client-side state changes.
        return self.execute("quit")

    # ------------------------------------------------------------------
    # Scripts
    # ------------------------------------------------------------------

    def execute_script(self, script: str, *args: Any) -> Any:
        if not self.session.active:
            raise NoSessionError()
        if not self.session.capabilities.javascript:
            raise UnsupportedOperationError("underlying browser does not support javascript")

        typed_args = [wrap_script_argument(arg) for arg in args]
        response = self.raw_execute("executeScript", {}, script, typed_args)
        log_event("script_executed", script=script, args=typed_args)
        return unwrap_script_argument(envelope_value(response), self)

    # ------------------------------------------------------------------
    # Cookies
    # ------------------------------------------------------------------

    def add_cookie(self, cookie: Cookie | Mapping[str, Any]) -> Any:
        payload = cookie.as_json() if isinstance(cookie, Cookie) else dict(cookie)
        return self.execute("addCookie", {}, payload)

    def delete_cookie(self, name: str) -> Any:
        return self.execute("deleteCookie", {"name": name})

    def get_all_cookies(self) -> list[Cookie]:
        return [Cookie.from_json(item) for item in self.execute("getAllCookies") or []]

    def delete_all_cookies(self) -> Any:
        return self.execute("deleteAllCookies")

    # ------------------------------------------------------------------
    # Finders
    # ------------------------------------------------------------------

    def find_element_by_class_name(self, parent: Any, class_name: str) -> Element:
        return self.find_element_by("class name", class_name, parent)

    def find_elements_by_class_name(self, parent: Any, class_name: str) -> list[Element]:
        return self.find_elements_by("class name", class_name, parent)

    def find_element_by_id(self, parent: Any, element_id: str) -> Element:
        return self.find_element_by("id", element_id, parent)

    def find_elements_by_id(self, parent: Any, element_id: str) -> list[Element]:
        return self.find_elements_by("id", element_id, parent)

    def find_element_by_link_text(self, parent: Any, link_text: str) -> Element:
        return self.find_element_by("link text", link_text, parent)

    def find_elements_by_link_text(self, parent: Any, link_text: str) -> list[Element]:
        return self.find_elements_by("link text", link_text, parent)

    def find_element_by_partial_link_text(self, parent: Any, link_text: str) -> Element:
        return self.find_element_by("partial link text", link_text, parent)

    def find_elements_by_partial_link_text(self, parent: Any, link_text: str) -> list[Element]:
        return self.find_elements_by("partial link text", link_text, parent)

    def find_element_by_name(self, parent: Any, name: str) -> Element:
        return self.find_element_by("name", name, parent)

    def find_elements_by_name(self, parent: Any, name: str) -> list[Element]:
        return self.find_elements_by("name", name, parent)

    def find_element_by_tag_name(self, parent: Any, tag_name: str) -> Element:
        return self.find_element_by("tag name", tag_name, parent)

    def find_elements_by_tag_name(self, parent: Any, tag_name: str) -> list[Element]:
        return self.find_elements_by("tag name", tag_name, parent)

    def find_element_by_xpath(self, parent: Any, xpath: str) -> Element:
        return self.find_element_by("xpath", xpath, parent)

    def find_elements_by_xpath(self, parent: Any, xpath: str) -> list[Element]:
        return self.find_elements_by("xpath", xpath, parent)

    def find_element_by(self, how: str, what: str, parent: Any = None) -> Element:
        payload = self._find("findElement", "findChildElement", how, what, parent)
        return Element(self, element_id_from(payload))

    def find_elements_by(self, how: str, what: str, parent: Any = None) -> list[Element]:
        payload = self._find("findElements", "findChildElements", how, what, parent)
        return [Element(self, element_id_from(item)) for item in payload or []]

    def _find(self, command: str, child_command: str, how: str, what: str, parent: Any) -> Any:
        if how not in FIND_STRATEGIES:
            raise ValueError(f"unknown find strategy {how!r}")
        body = {"using": how, "value": what}
        if parent is None:
            return self.execute(command, {}, body)
        # The wire protocol wants the strategy in the path and in the body.
        return self.execute(child_command, {"id": element_ref(parent), "using": how}, body)

    # ------------------------------------------------------------------
    # Elements
    # ------------------------------------------------------------------

    def click_element(self, element: Any) -> Any:
        return self.execute("clickElement", {"id": element_ref(element)})

    def clear_element(self, element: Any) -> Any:
        return self.execute("clearElement", {"id": element_ref(element)})

    def submit_element(self, element: Any) -> Any:
        return self.execute("submitElement", {"id": element_ref(element)})

    def toggle_element(self, element: Any) -> Any:
        return self.execute("toggleElement", {"id": element_ref(element)})

    def set_element_selected(self, element: Any) -> Any:
        return self.execute("setElementSelected", {"id": element_ref(element)})

    def hover_over_element(self, element: Any) -> Any:
        return self.execute("hoverOverElement", {"id": element_ref(element)})

    def get_element_tag_name(self, element: Any) -> Any:
        return self.execute("getElementTagName", {"id": element_ref(element)})

    def get_element_attribute(self, element: Any, name: str) -> Any:
        return self.execute("getElementAttribute", {"id": element_ref(element), "name": name})

    def get_element_value(self, element: Any) -> Any:
        return self.execute("getElementValue", {"id": element_ref(element)})

    def get_element_text(self, element: Any) -> Any:
        return self.execute("getElementText", {"id": element_ref(element)})

    def get_element_location(self, element: Any) -> Point:
        return Point.from_json(self.execute("getElementLocation", {"id": element_ref(element)}))

    def get_element_size(self, element: Any) -> Dimension:
        return Dimension.from_json(self.execute("getElementSize", {"id": element_ref(element)}))

    def get_element_value_of_css_property(self, element: Any, prop: str) -> Any:
        return self.execute(
            "getElementValueOfCssProperty",
            {"id": element_ref(element), "property_name": prop},
        )

    def send_keys_to_element(self, element: Any, keys: str) -> Any:
        return self.execute("sendKeysToElement", {"id": element_ref(element)}, {"value": list(keys)})

    def is_element_enabled(self, element: Any) -> Any:
        return self.execute("isElementEnabled", {"id": element_ref(element)})

    def is_element_selected(self, element: Any) -> Any:
        return self.execute("isElementSelected", {"id": element_ref(element)})

    def is_element_displayed(self, element: Any) -> Any:
        return self.execute("isElementDisplayed", {"id": element_ref(element)})

    def drag_element(self, element: Any, right_by: int, down_by: int) -> Any:
        ref = element_ref(element)
        # The element goes in the path and again as the first body argument.
        return self.execute("dragElement", {"id": ref}, ref, right_by, down_by)

    def get_active_element(self) -> Element:
        return Element(self, element_id_from(self.execute("getActiveElement")))

    switch_to_active_element = get_active_element


__all__ = ["Bridge"]
