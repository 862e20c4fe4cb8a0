"""Configuration and constants for the remote bridge.

This module centralises every environment-variable lookup and the small
helpers used to derive them so that the rest of the codebase can simply
``from wirebridge.config import …``.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# ---------------------------------------------------------------------------
# Bootstrap
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
ENV_FILE = (PROJECT_ROOT / ".env").resolve()
load_dotenv(dotenv_path=ENV_FILE)


# ---------------------------------------------------------------------------
# Helpers for parsing env vars
# ---------------------------------------------------------------------------
def _env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip() or default


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in {"0", "false", "no", "off"}


def _env_int(name: str, default: int = 0) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except Exception:
        return default


def _env_float(name: str, default: float = 0.0) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw.strip())
    except Exception:
        return default


# ---------------------------------------------------------------------------
# Remote server
# ---------------------------------------------------------------------------
# NOTE: the trailing '/' matters, command paths are joined onto it.
SERVER_URL = _env_str("WIREBRIDGE_SERVER_URL", "http://localhost:7055/")
DEFAULT_CONTEXT = _env_str("WIREBRIDGE_CONTEXT", "context")
DEFAULT_BROWSER = _env_str("WIREBRIDGE_BROWSER", "firefox").lower()
HTTP_TIMEOUT = max(1.0, _env_float("WIREBRIDGE_HTTP_TIMEOUT", 60.0))

DEBUG = _env_flag("WIREBRIDGE_DEBUG", False)

# ---------------------------------------------------------------------------
# Wire protocol
# ---------------------------------------------------------------------------
HTTP_VERBS = frozenset({"GET", "POST", "DELETE"})

JSON_CONTENT_TYPE = "application/json"

# Keys injected by the execution pipeline, never supplied by callers.
RESERVED_PATH_PARAMS = ("session_id", "context")

ELEMENT_KEY = "ELEMENT"

FIND_STRATEGIES = {
    "class name",
    "id",
    "link text",
    "partial link text",
    "name",
    "tag name",
    "xpath",
}

# ---------------------------------------------------------------------------
# Execution logging
# ---------------------------------------------------------------------------
EXEC_LOG_ENABLED = _env_flag("EXEC_LOG_ENABLED", False)
EXEC_LOG_DIR = Path(os.getenv("EXEC_LOG_DIR", "logs"))
EXEC_LOG_MAX_CHARS = max(0, _env_int("EXEC_LOG_MAX_CHARS", 0))
