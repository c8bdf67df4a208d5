"""Error hierarchy for the CSS generator."""
from __future__ import annotations


class CssCreatorError(Exception):
    """Base error for all css_creator errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ValidationError(CssCreatorError):
    """An element type or property value was rejected before rendering."""

    def __init__(
        self,
        message: str,
        *,
        element_type: str = "",
        property_name: str | None = None,
        value: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.element_type = element_type
        self.property_name = property_name
        self.value = value
