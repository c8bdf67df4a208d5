"""CSS Creator CLI entry point."""
from __future__ import annotations

import logging

import click

# Used when `generate` gets no --element option.
DEMO_ELEMENTS: tuple[str, ...] = (
    "button:bg_color=#3a86ff,text_color=#ffffff",
    "input:border_color=#ddd",
    "card",
)


def parse_element_spec(spec: str) -> tuple[str, dict[str, str]]:
    """Split ``type:key=value,key=value`` into a type and a property bag."""
    element_type, _, raw_props = spec.partition(":")
    properties: dict[str, str] = {}
    for pair in filter(None, (p.strip() for p in raw_props.split(","))):
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"expected key=value, got {pair!r}", param_hint="--element")
        properties[key.strip()] = value.strip()
    return element_type.strip(), properties


@click.group()
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level",
)
def cli(log_level: str) -> None:
    """CSS Creator: generate CSS for common UI elements."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to")
@click.option("--port", default=5000, type=int, help="Port to bind to")
@click.option("--output-dir", default="downloads", help="Directory for saved stylesheets")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
def serve(host: str, port: int, output_dir: str, debug: bool) -> None:
    """Start the CSS Creator web server."""
    from css_creator.config import CssCreatorConfig
    from css_creator.web.app import create_app

    config = CssCreatorConfig(
        output_dir=output_dir, validate_properties=True, host=host, port=port
    )
    app = create_app(config=config)
    click.echo(f"Starting CSS Creator on {host}:{port}")
    app.run(host=config.host, port=config.port, debug=debug)


@cli.command()
@click.option(
    "--element",
    "elements",
    multiple=True,
    metavar="TYPE[:key=value,...]",
    help="Element to add, repeatable",
)
@click.option("--output-dir", default="downloads", help="Directory for the saved stylesheet")
@click.option("--html/--css", "as_html", default=True, help="Print the HTML page or the raw CSS")
@click.option("--save/--no-save", default=False, help="Write the stylesheet to the output directory")
@click.option("--strict/--no-strict", default=True, help="Reject property values that are not CSS colors")
def generate(
    elements: tuple[str, ...], output_dir: str, as_html: bool, save: bool, strict: bool
) -> None:
    """Generate a stylesheet and print it."""
    from css_creator.config import CssCreatorConfig
    from css_creator.errors import ValidationError
    from css_creator.generator import CssCreator

    config = CssCreatorConfig(output_dir=output_dir, validate_properties=strict)
    generator = CssCreator(config=config)

    for spec in elements or DEMO_ELEMENTS:
        element_type, properties = parse_element_spec(spec)
        try:
            generator.add_element(element_type, properties)
        except ValidationError as exc:
            raise click.UsageError(str(exc)) from exc

    if save:
        try:
            path = generator.save_to_file()
        except OSError as exc:
            raise click.ClickException(f"Could not save stylesheet: {exc}") from exc
        click.echo(f"Saved stylesheet: {path}", err=True)

    click.echo(generator.generate_html_interface() if as_html else generator.stylesheet)


@cli.command("types")
def list_types() -> None:
    """List the supported element types."""
    from css_creator.model.element import ElementType

    for element_type in ElementType:
        click.echo(element_type)
