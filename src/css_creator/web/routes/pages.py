from __future__ import annotations

from flask import Blueprint, Response, current_app

from css_creator.generator import CssCreator

pages_bp = Blueprint("pages", __name__)

# Elements the demo page starts with.
DEMO_ELEMENTS: tuple[tuple[str, dict[str, str]], ...] = (
    ("button", {"bg_color": "#3a86ff", "text_color": "#ffffff"}),
    ("input", {"border_color": "#ddd"}),
    ("card", {}),
)


def build_demo_generator() -> CssCreator:
    """Build a fresh generator holding the demo elements."""
    generator = CssCreator(config=current_app.extensions["css_creator_config"])
    for element_type, properties in DEMO_ELEMENTS:
        generator.add_element(element_type, properties)
    return generator


@pages_bp.route("/")
def index():
    """Interactive page with the demo stylesheet."""
    return build_demo_generator().generate_html_interface()


@pages_bp.route("/styles.css")
def stylesheet():
    """Download the demo stylesheet."""
    generator = build_demo_generator()
    return Response(
        generator.stylesheet,
        mimetype="text/css",
        headers={
            "Content-Disposition": f'attachment; filename="{generator.config.css_filename}"'
        },
    )
