from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CssCreatorConfig:
    output_dir: str = "downloads"
    css_filename: str = "generated_styles.css"
    project_name: str = "css_creator"  # element id prefix
    validate_properties: bool = False  # enable for untrusted property bags
    host: str = "127.0.0.1"
    port: int = 5000
