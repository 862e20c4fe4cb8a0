"""Element references handed out by the bridge."""

from __future__ import annotations

from typing import Any

from wirebridge.config import ELEMENT_KEY


class Element:
    """Opaque server-assigned element ref bound to the bridge that found it.

    Two references are equal when their refs are equal, whatever bridge
    instance produced them. Nothing is cached or deduplicated.
    """

    __slots__ = ("bridge", "ref")

    def __init__(self, bridge: Any, ref: str) -> None:
        self.bridge = bridge
        self.ref = str(ref)

    def as_json(self) -> dict[str, str]:
        return {ELEMENT_KEY: self.ref}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return self.ref == other.ref

    def __hash__(self) -> int:
        return hash((Element, self.ref))

    def __repr__(self) -> str:
        return f"<Element ref={self.ref!r}>"


__all__ = ["Element"]
