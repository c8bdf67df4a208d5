"""HTML page assembly for the interactive CSS Creator interface."""
from __future__ import annotations

import traceback
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from jinja2 import Environment, FileSystemLoader, select_autoescape

from css_creator.model.element import ElementType

if TYPE_CHECKING:
    from css_creator.generator import CssCreator

__all__ = ["render_interface", "render_error_page"]

TEMPLATES_DIR = Path(__file__).parent / "templates"

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"]),
)


def render_interface(generator: CssCreator) -> str:
    """Render the full interface page for *generator*.

    The raw stylesheet goes into the ``<style>`` element with every ``</``
    turned into ``<\\/`` so no property value can close the element. The
    code panel gets the escaped copy from :meth:`CssCreator.get_css_code`,
    which Jinja leaves alone because it is already markup.
    """
    template = _env.get_template("page/interface.html")
    return template.render(
        stylesheet=generator.stylesheet.replace("</", "<\\/"),
        css_code=generator.get_css_code(),
        element_types=list(ElementType),
        elements=generator.elements,
        generated_on=datetime.now().strftime("%d/%m/%Y"),
    )


def render_error_page(exc: BaseException, show_trace: bool = True) -> str:
    """Render the error page shown when building the interface fails.

    The stack trace is left out when *show_trace* is false.
    """
    template = _env.get_template("page/error.html")
    return template.render(
        message=str(exc),
        trace="".join(traceback.format_exception(exc)) if show_trace else "",
    )
