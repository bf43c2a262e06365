"""legacy-logical CLI entry point: Click group with subcommands."""

import click

from legacy_logical import __version__


@click.group()
@click.version_option(version=__version__, prog_name="legacy-logical")
def cli() -> None:
    """legacy-logical - rewrite CSS logical properties as physical ones."""


# Import and register subcommands
from legacy_logical.cli.convert import convert  # noqa: E402
from legacy_logical.cli.properties import properties  # noqa: E402

cli.add_command(convert)
cli.add_command(properties)
