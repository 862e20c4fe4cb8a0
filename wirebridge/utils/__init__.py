"""Shared utility helpers used across wirebridge runtime modules."""

from wirebridge.utils.logging_utils import (
    log_event,
    get_exec_log_path,
)

__all__ = [
    "log_event",
    "get_exec_log_path",
]
