"""CLI command: legacy-logical properties -- list supported logical properties."""

from __future__ import annotations

import json

import click

from legacy_logical.table import LOGICAL_PROPERTIES, supported_properties


@click.command()
@click.option("--json", "as_json", is_flag=True, default=False, help="Print as JSON.")
def properties(as_json: bool) -> None:
    """List the logical properties that are converted, with their targets."""
    names = supported_properties()
    if as_json:
        table = {
            name: {
                "kind": type(LOGICAL_PROPERTIES[name]).__name__.lower(),
                "targets": list(LOGICAL_PROPERTIES[name].targets),
            }
            for name in names
        }
        click.echo(json.dumps(table, indent=2))
        return

    width = max(len(name) for name in names)
    for name in names:
        rule = LOGICAL_PROPERTIES[name]
        kind = type(rule).__name__.lower()
        click.echo(f"{name.ljust(width)}  {kind:<11}  {' '.join(rule.targets)}")
