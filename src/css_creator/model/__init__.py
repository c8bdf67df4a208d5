from __future__ import annotations

from css_creator.model.element import ElementRecord, ElementType

__all__ = [
    "ElementType",
    "ElementRecord",
]
