"""CLI command: legacy-logical convert -- rewrite a stylesheet file."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from legacy_logical.config import OUTPUT_FORMATS, LegacyLogicalConfig
from legacy_logical.stylesheet import (
    ParseError,
    Stylesheet,
    load_stylesheet_json,
    parse_stylesheet,
    serialize_stylesheet,
    stylesheet_to_dict,
)
from legacy_logical.transforms import transform_stylesheet

logger = logging.getLogger(__name__)


def _load(path: Path) -> Stylesheet:
    source = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        try:
            data = json.loads(source)
        except json.JSONDecodeError as exc:
            raise ParseError(f"Invalid JSON: {exc.msg}", line=exc.lineno, column=exc.colno) from exc
        return load_stylesheet_json(data)
    return parse_stylesheet(source)


@click.command()
@click.argument("stylesheet", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default="css",
    show_default=True,
    help="Output as CSS text or as JSON style objects.",
)
@click.option("--indent", default=2, type=int, show_default=True, help="Spaces per indent level.")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log each expansion.")
def convert(stylesheet: str, output_format: str, indent: int, verbose: bool) -> None:
    """Convert logical properties in STYLESHEET (.css or .json) to physical ones.

    The converted stylesheet is written to stdout.  Exits with code 1 if the
    file cannot be parsed.
    """
    config = LegacyLogicalConfig(
        output_format=output_format,
        indent=" " * indent,
        log_level="DEBUG" if verbose else "WARNING",
    )
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")

    path = Path(stylesheet)
    try:
        sheet = _load(path)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    logger.info("Loaded %d rule(s) from %s", len(sheet.rules), path.name)
    converted = transform_stylesheet(sheet)

    if config.output_format == "json":
        click.echo(json.dumps(stylesheet_to_dict(converted), indent=len(config.indent)))
    else:
        click.echo(serialize_stylesheet(converted, indent=config.indent))
