"""CSS templates for the supported element types.

The ``page/`` subdirectory holds the Jinja2 page templates and the CSS and
script files they include, rendered by :mod:`css_creator.page`.
"""
from css_creator.templates.registry import (
    RECOGNIZED_PROPERTIES,
    TEMPLATES,
    RenderFunc,
    render_element,
)

__all__ = ["RECOGNIZED_PROPERTIES", "TEMPLATES", "RenderFunc", "render_element"]
