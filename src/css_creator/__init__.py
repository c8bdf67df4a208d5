"""CSS Creator: template-driven CSS generation for common UI elements."""
from __future__ import annotations

from css_creator.config import CssCreatorConfig
from css_creator.errors import CssCreatorError, ValidationError
from css_creator.generator import CssCreator
from css_creator.model.element import ElementRecord, ElementType
from css_creator.templates.registry import TEMPLATES, render_element

__all__ = [
    "CssCreator",
    "CssCreatorConfig",
    "CssCreatorError",
    "ValidationError",
    "ElementType",
    "ElementRecord",
    "TEMPLATES",
    "render_element",
]
