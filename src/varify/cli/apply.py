"""CLI command: varify apply -- rewrite a stylesheet file."""

from __future__ import annotations

import sys

import click

from varify.config import VarifyConfig
from varify.errors import VarifyError
from varify.events.bus import EventBus
from varify.events.types import ValueReplaced
from varify.model.value import ELIGIBLE_KINDS
from varify.pipeline import process_file

KIND_NAMES = sorted(kind.value for kind in ELIGIBLE_KINDS)


def _build_config(only: tuple[str, ...], skip: tuple[str, ...]) -> VarifyConfig:
    if only and skip:
        raise click.UsageError("--only and --skip cannot be combined")
    if only:
        return VarifyConfig.with_kinds(only)
    if skip:
        return VarifyConfig.without_kinds(skip)
    return VarifyConfig()


@click.command()
@click.argument("input_file", metavar="INPUT", type=click.Path(dir_okay=False))
@click.argument("output_file", metavar="OUTPUT", type=click.Path(dir_okay=False))
@click.option(
    "--only",
    multiple=True,
    type=click.Choice(KIND_NAMES, case_sensitive=False),
    help="Only replace values of this kind (repeatable)",
)
@click.option(
    "--skip",
    multiple=True,
    type=click.Choice(KIND_NAMES, case_sensitive=False),
    help="Never replace values of this kind (repeatable)",
)
@click.pass_obj
def apply(
    obj: dict,
    input_file: str,
    output_file: str,
    only: tuple[str, ...],
    skip: tuple[str, ...],
) -> None:
    """Replace literal values in INPUT with var() references and write OUTPUT.

    A literal is replaced when a custom property declared anywhere in the
    stylesheet holds exactly the same value.
    """
    config = _build_config(only, skip)

    event_bus = EventBus()
    # With -vv the DEBUG log lists replacements instead.
    if obj.get("verbose") == 1:
        event_bus.subscribe(ValueReplaced, lambda e: click.echo(f"  {e.replacement}"))

    try:
        result = process_file(input_file, output_file, config=config, event_bus=event_bus)
    except VarifyError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if result.index_size == 0:
        click.echo("No custom properties found. Wrote original content.")
    else:
        click.echo(f"Made {result.replacement_count} replacements.")
    click.echo(f"Output: {output_file}")
