"""Validation of element types and property values before rendering."""
from __future__ import annotations

import re
from typing import Mapping

from css_creator.errors import ValidationError
from css_creator.model.element import ElementType
from css_creator.templates.registry import RECOGNIZED_PROPERTIES

__all__ = ["is_css_color", "validate_element_type", "validate_properties"]

_COLOR_RE = re.compile(
    r"""
    (?:
        \#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})   # hex forms
      | [a-zA-Z]+                                              # keyword
      | (?:rgba?|hsla?)\(\s*[0-9.,%\s]+\)                      # functional
    )
    """,
    re.VERBOSE,
)


def is_css_color(value: object) -> bool:
    """Return True when *value* is a string safe to substitute as a color."""
    return isinstance(value, str) and _COLOR_RE.fullmatch(value) is not None


def validate_element_type(element_type: str) -> ElementType:
    """Resolve *element_type* against the closed set of supported types.

    Raises :class:`ValidationError` for anything outside the set.
    """
    try:
        return ElementType(element_type)
    except ValueError as exc:
        raise ValidationError(
            f"Element type not allowed: {element_type!r}",
            element_type=str(element_type),
            cause=exc,
        ) from exc


def validate_properties(element_type: ElementType, properties: Mapping[str, str]) -> None:
    """Check every recognized property value of *properties* is a CSS color.

    Unrecognized keys are never inspected since no template reads them.
    """
    for name in RECOGNIZED_PROPERTIES[element_type]:
        if name not in properties:
            continue
        value = properties[name]
        if not is_css_color(value):
            raise ValidationError(
                f"Invalid value for {element_type}.{name}: {value!r}",
                element_type=str(element_type),
                property_name=name,
                value=str(value),
            )
