"""Registry mapping each element type to its CSS render function."""
from __future__ import annotations

from typing import Callable, Mapping

from css_creator.model.element import ElementType
from css_creator.templates.css import (
    render_button,
    render_card,
    render_footer,
    render_header,
    render_input,
    render_navbar,
    render_sidebar,
)

__all__ = ["RenderFunc", "TEMPLATES", "RECOGNIZED_PROPERTIES", "render_element"]

RenderFunc = Callable[[str, Mapping[str, str]], str]

TEMPLATES: dict[ElementType, RenderFunc] = {
    ElementType.BUTTON: render_button,
    ElementType.INPUT: render_input,
    ElementType.CARD: render_card,
    ElementType.NAVBAR: render_navbar,
    ElementType.FOOTER: render_footer,
    ElementType.HEADER: render_header,
    ElementType.SIDEBAR: render_sidebar,
}

# Property keys each template substitutes; anything else in a bag is ignored.
RECOGNIZED_PROPERTIES: dict[ElementType, tuple[str, ...]] = {
    ElementType.BUTTON: ("bg_color", "text_color"),
    ElementType.INPUT: ("border_color",),
    ElementType.CARD: (),
    ElementType.NAVBAR: (),
    ElementType.FOOTER: (),
    ElementType.HEADER: (),
    ElementType.SIDEBAR: (),
}


def render_element(
    element_type: str, element_id: str, properties: Mapping[str, str] | None = None
) -> str:
    """Render the CSS block for one element instance.

    Returns a comment block instead of raising when no template exists for
    *element_type*; callers validate the type before getting here.
    """
    render = TEMPLATES.get(element_type)
    if render is None:
        return f"/* Unsupported element type: {element_type} */"
    return render(element_id, properties or {})
