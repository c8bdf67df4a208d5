from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Any, Mapping


class ElementType(StrEnum):
    BUTTON = "button"
    INPUT = "input"
    CARD = "card"
    NAVBAR = "navbar"
    FOOTER = "footer"
    HEADER = "header"
    SIDEBAR = "sidebar"


@dataclass(frozen=True)
class ElementRecord:
    id: str
    type: ElementType
    properties: Mapping[str, str] = field(default_factory=dict, hash=False, compare=False)
    css: str = ""

    def __post_init__(self) -> None:
        # Read-only view over a private copy of the bag.
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": str(self.type),
            "properties": dict(self.properties),
            "css": self.css,
        }
