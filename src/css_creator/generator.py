"""Stylesheet accumulator: owns the growing CSS text and its element records."""
from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Mapping

from markupsafe import Markup, escape

from css_creator.config import CssCreatorConfig
from css_creator.errors import ValidationError
from css_creator.ids import generate_element_id
from css_creator.model.element import ElementRecord
from css_creator.templates.registry import render_element
from css_creator.validation import validate_element_type, validate_properties

logger = logging.getLogger(__name__)

_HEADER = """\
/* CSS generated by CSS Creator - {generated_at} */
:root {{
    --primary-color: #3a86ff;
    --secondary-color: #fb5607;
    --accent-color: #8338ec;
    --text-color: #333333;
    --bg-color: #f8f9fa;
    --card-bg: #ffffff;
    --border-radius: 8px;
    --box-shadow: 0 4px 6px rgba(0, 0, 0, 0.1);
    --transition: all 0.3s ease;
}}

/* Base reset */
* {{
    margin: 0;
    padding: 0;
    box-sizing: border-box;
}}

body {{
    font-family: 'Segoe UI', system-ui, -apple-system, sans-serif;
    line-height: 1.6;
    color: var(--text-color);
    background-color: var(--bg-color);
}}

"""


class CssCreator:
    """Generates CSS for UI elements and accumulates it into one stylesheet.

    Instances are not safe to share between concurrent callers; build one per
    request.
    """

    def __init__(
        self,
        output_dir: str | None = None,
        *,
        config: CssCreatorConfig | None = None,
    ) -> None:
        self.config = config or CssCreatorConfig()
        self.output_dir = Path(output_dir if output_dir is not None else self.config.output_dir)
        self._elements: list[ElementRecord] = []
        self._header = ""
        self._css = ""
        self.initialize()

    def initialize(self) -> None:
        """Reset the stylesheet to the base header and drop all records."""
        generated_at = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        self._header = _HEADER.format(generated_at=generated_at)
        self._css = self._header
        self._elements = []

    # --- accessors ------------------------------------------------------------

    @property
    def header(self) -> str:
        return self._header

    @property
    def stylesheet(self) -> str:
        """The raw, unescaped stylesheet text."""
        return self._css

    @property
    def elements(self) -> tuple[ElementRecord, ...]:
        return tuple(self._elements)

    @property
    def css_path(self) -> Path:
        return self.output_dir / self.config.css_filename

    # --- mutation -------------------------------------------------------------

    def add_element(
        self, element_type: str, properties: Mapping[str, str] | None = None
    ) -> ElementRecord:
        """Render CSS for a new element and append it to the stylesheet.

        Raises :class:`~css_creator.errors.ValidationError` when the type is
        not supported or a recognized property value is rejected. Nothing is
        recorded in that case.
        """
        props = dict(properties or {})
        try:
            resolved = validate_element_type(element_type)
            if self.config.validate_properties:
                validate_properties(resolved, props)
        except ValidationError as exc:
            logger.warning("Rejected element %r: %s", element_type, exc)
            raise

        element_id = generate_element_id(resolved, self.config.project_name)
        css = render_element(resolved, element_id, props)
        record = ElementRecord(id=element_id, type=resolved, properties=props, css=css)

        self._elements.append(record)
        self._css += "\n" + css
        logger.debug("Added %s element %s", resolved, element_id)
        return record

    # --- output ---------------------------------------------------------------

    def get_css_code(self) -> Markup:
        """Return the stylesheet HTML-escaped once, safe to embed in markup."""
        return escape(self._css)

    def save_to_file(self, output_dir: str | Path | None = None) -> Path:
        """Write the raw stylesheet into *output_dir* (default: the configured one).

        Creates the directory when missing. Returns the written path; any
        ``OSError`` is logged and re-raised.
        """
        directory = Path(output_dir) if output_dir is not None else self.output_dir
        path = directory / self.config.css_filename
        try:
            directory.mkdir(mode=0o755, parents=True, exist_ok=True)
            path.write_text(self._css, encoding="utf-8")
        except OSError as exc:
            logger.error("Failed to write stylesheet to %s: %s", path, exc)
            raise
        logger.info("Saved stylesheet with %d element(s) to %s", len(self._elements), path)
        return path

    def generate_html_interface(self) -> str:
        """Render the interactive HTML page embedding the current stylesheet."""
        from css_creator.page import render_interface

        return render_interface(self)

    def to_dict(self) -> dict[str, Any]:
        return {
            "stylesheet": self._css,
            "elements": [record.to_dict() for record in self._elements],
        }
