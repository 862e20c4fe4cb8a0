"""Script-argument marshaling between Element objects and their wire shape.

Values are classified into four kinds (element, mapping, sequence,
primitive) and each kind has exactly one wrap rule and one unwrap rule.
"""

from __future__ import annotations

from typing import Any, Mapping

from wirebridge.config import ELEMENT_KEY
from wirebridge.errors import ServerError
from wirebridge.remote.element import Element

KIND_ELEMENT = "element"
KIND_MAPPING = "mapping"
KIND_SEQUENCE = "sequence"
KIND_PRIMITIVE = "primitive"


def classify(value: Any) -> str:
    if isinstance(value, Element):
        return KIND_ELEMENT
    if isinstance(value, Mapping):
        return KIND_MAPPING
    if isinstance(value, (list, tuple)):
        return KIND_SEQUENCE
    return KIND_PRIMITIVE


def is_element_payload(value: Any) -> bool:
    """True for the wire element shape: a mapping whose only key is ELEMENT."""
    return isinstance(value, Mapping) and len(value) == 1 and ELEMENT_KEY in value


def element_id_from(payload: Any) -> str:
    """Extract the element ref from a server element payload.

    This is the single extraction rule used by find, active-element and
    script results.
    """
    if is_element_payload(payload):
        return str(payload[ELEMENT_KEY])
    if isinstance(payload, str) and payload:
        return payload
    raise ServerError(f"unexpected element payload: {payload!r}", payload=payload)


def element_ref(element: Any) -> str:
    """Accept an Element or a bare ref string and return the ref."""
    if isinstance(element, Element):
        return element.ref
    if isinstance(element, str) and element:
        return element
    raise TypeError(f"expected Element or element ref, got {type(element).__name__}")


def wrap_script_argument(value: Any) -> Any:
    kind = classify(value)
    if kind == KIND_ELEMENT:
        return value.as_json()
    if kind == KIND_MAPPING:
        return {key: wrap_script_argument(item) for key, item in value.items()}
    if kind == KIND_SEQUENCE:
        return [wrap_script_argument(item) for item in value]
    return value


def unwrap_script_argument(value: Any, bridge: Any) -> Any:
    kind = classify(value)
    if kind == KIND_MAPPING:
        if is_element_payload(value):
            return Element(bridge, element_id_from(value))
        return {key: unwrap_script_argument(item, bridge) for key, item in value.items()}
    if kind == KIND_SEQUENCE:
        return [unwrap_script_argument(item, bridge) for item in value]
    # Elements are already unwrapped; primitives pass through.
    return value


__all__ = [
    "classify",
    "element_id_from",
    "element_ref",
    "is_element_payload",
    "unwrap_script_argument",
    "wrap_script_argument",
]
