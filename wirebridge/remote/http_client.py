"""Default HTTP transport for the remote bridge, built on ``requests``.

Any object with ``call(verb, path, *args) -> dict`` can stand in for it.
One request per call: no pooling, no retry.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import urljoin

import requests

from wirebridge.config import DEBUG, HTTP_TIMEOUT, JSON_CONTENT_TYPE
from wirebridge.errors import ServerError

DEFAULT_HEADERS = {"Accept": JSON_CONTENT_TYPE}


class DefaultHttpClient:
    def __init__(self, server_url: str, *, timeout: float = HTTP_TIMEOUT, debug: bool = DEBUG) -> None:
        text = str(server_url or "").strip()
        if not text:
            raise ValueError("server_url is required")
        self.server_url = text if text.endswith("/") else text + "/"
        self.timeout = timeout
        self.debug = debug

    def url_for(self, path: str) -> str:
        return urljoin(self.server_url, path.lstrip("/"))

    def call(self, verb: str, path: str, *args: Any) -> dict[str, Any]:
        headers = dict(DEFAULT_HEADERS)
        payload: list[Any] | None = None
        if args:
            headers["Content-Type"] = f"{JSON_CONTENT_TYPE}; charset=utf-8"
            payload = list(args)
            if self.debug:
                print(f"   >>> {payload!r}")

        resp = requests.request(
            verb,
            self.url_for(path),
            json=payload,
            headers=headers,
            timeout=self.timeout,
        )
        return self.create_response(resp)

    def create_response(self, resp: requests.Response) -> dict[str, Any]:
        if resp.status_code == 204:
            return {"value": None}

        content_type = str(resp.headers.get("Content-Type") or "")
        body_preview = str(resp.text or "")[:1000]
        if not content_type.startswith(JSON_CONTENT_TYPE):
            raise ServerError(
                f"unexpected response ({content_type or 'no content type'}): {body_preview}",
                status=resp.status_code,
            )

        try:
            data = resp.json() if str(resp.text or "").strip() else {}
        except ValueError as exc:
            raise ServerError(f"malformed JSON response: {body_preview}", status=resp.status_code) from exc
        if not isinstance(data, dict):
            raise ServerError(f"response is not an object: {body_preview}", status=resp.status_code, payload=data)
        if self.debug:
            print(f"   <<< {body_preview}")

        if data.get("error"):
            raise ServerError(_error_message(data), status=resp.status_code, payload=data)
        if resp.status_code >= 400:
            raise ServerError(f"HTTP {resp.status_code}: {_error_message(data)}", status=resp.status_code, payload=data)
        return data


def _error_message(data: dict[str, Any]) -> str:
    value = data.get("value")
    if isinstance(value, dict) and value.get("message"):
        return str(value["message"])
    if isinstance(value, str) and value:
        return value
    return "server reported an error"


__all__ = ["DEFAULT_HEADERS", "DefaultHttpClient"]
