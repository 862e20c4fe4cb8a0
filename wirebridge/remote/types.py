"""Plain value records decoded from response fields."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Point":
        return cls(x=data["x"], y=data["y"])

    def as_json(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class Dimension:
    width: int
    height: int

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Dimension":
        return cls(width=data["width"], height=data["height"])

    def as_json(self) -> dict[str, Any]:
        return {"width": self.width, "height": self.height}


@dataclass(frozen=True)
class Cookie:
    name: str
    value: str
    path: str = "/"
    domain: str | None = None
    secure: bool = False
    expiry: int | None = None

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Cookie":
        return cls(
            name=data["name"],
            value=data["value"],
            path=data.get("path") or "/",
            domain=data.get("domain"),
            secure=bool(data.get("secure", False)),
            expiry=data.get("expiry"),
        )

    def as_json(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "name": self.name,
            "value": self.value,
            "path": self.path,
            "secure": self.secure,
        }
        if self.domain is not None:
            out["domain"] = self.domain
        if self.expiry is not None:
            out["expiry"] = self.expiry
        return out


__all__ = ["Cookie", "Dimension", "Point"]
