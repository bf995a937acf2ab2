"""CLI command: varify index -- list custom property values."""

from __future__ import annotations

import sys

import click

from varify.errors import VarifyError
from varify.pipeline import read_source
from varify.stylesheet import parse_stylesheet
from varify.transforms import build_value_index


@click.command()
@click.argument("input_file", metavar="INPUT", type=click.Path(dir_okay=False))
def index(input_file: str) -> None:
    """Show the values that would be replaced, and by which property.

    Prints one ``value -> --property`` line per distinct custom property
    value. When several properties share a value only the last one is shown.
    """
    try:
        stylesheet = parse_stylesheet(read_source(input_file))
    except VarifyError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    value_index = build_value_index(stylesheet)
    for value, name in value_index.items():
        click.echo(f"{value} -> {name}")
    click.echo(f"{len(value_index)} unique custom property values")
