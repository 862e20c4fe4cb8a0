"""Command dispatch machinery: registry, path templates, pipeline, marshaling."""

from .dispatcher import dispatch_command, envelope_value, resolve_command_path
from .marshal import element_id_from, element_ref, unwrap_script_argument, wrap_script_argument
from .registry import COMMANDS, CommandSpec, build_command_registry, lookup_command, register
from .templating import PathTemplate, PathTemplateError, parse_template

__all__ = [
    "COMMANDS",
    "CommandSpec",
    "PathTemplate",
    "PathTemplateError",
    "build_command_registry",
    "dispatch_command",
    "element_id_from",
    "element_ref",
    "envelope_value",
    "lookup_command",
    "parse_template",
    "register",
    "resolve_command_path",
    "unwrap_script_argument",
    "wrap_script_argument",
]
