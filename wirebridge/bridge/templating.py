"""URL path templates with ``:name`` placeholders.

Templates are parsed once into literal runs and named slots, so rendering
can report both unfilled slots and supplied names that have no slot.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping

_PLACEHOLDER_RE = re.compile(r":([A-Za-z_][A-Za-z0-9_]*)")


class PathTemplateError(ValueError):
    def __init__(self, template: str, *, unexpected: tuple[str, ...] = (), missing: tuple[str, ...] = ()) -> None:
        parts: list[str] = []
        if unexpected:
            parts.append(f"no placeholder for {', '.join(unexpected)}")
        if missing:
            parts.append(f"no value for {', '.join(missing)}")
        super().__init__(f"{template!r}: {'; '.join(parts)}")
        self.template = template
        self.unexpected = unexpected
        self.missing = missing


@dataclass(frozen=True)
class TemplatePiece:
    text: str
    is_placeholder: bool = False


@dataclass(frozen=True)
class PathTemplate:
    source: str
    pieces: tuple[TemplatePiece, ...]

    @property
    def placeholders(self) -> tuple[str, ...]:
        """Placeholder names in order of first appearance."""
        seen: list[str] = []
        for piece in self.pieces:
            if piece.is_placeholder and piece.text not in seen:
                seen.append(piece.text)
        return tuple(seen)

    def uses(self, name: str) -> bool:
        return name in self.placeholders

    def render(self, values: Mapping[str, Any]) -> str:
        wanted = self.placeholders
        unexpected = tuple(str(k) for k in values if k not in wanted)
        missing = tuple(name for name in wanted if name not in values)
        if unexpected or missing:
            raise PathTemplateError(self.source, unexpected=unexpected, missing=missing)

        out: list[str] = []
        for piece in self.pieces:
            out.append(_stringify(values[piece.text]) if piece.is_placeholder else piece.text)
        return "".join(out)

    def __str__(self) -> str:
        return self.source


def _stringify(value: Any) -> str:
    # Element references render as their server-assigned ref.
    ref = getattr(value, "ref", None)
    if isinstance(ref, str):
        return ref
    return str(value)


def parse_template(text: str) -> PathTemplate:
    pieces: list[TemplatePiece] = []
    pos = 0
    for match in _PLACEHOLDER_RE.finditer(text):
        if match.start() > pos:
            pieces.append(TemplatePiece(text[pos : match.start()]))
        pieces.append(TemplatePiece(match.group(1), is_placeholder=True))
        pos = match.end()
    if pos < len(text):
        pieces.append(TemplatePiece(text[pos:]))
    return PathTemplate(source=text, pieces=tuple(pieces))


__all__ = [
    "PathTemplate",
    "PathTemplateError",
    "TemplatePiece",
    "parse_template",
]
