"""Varify CLI entry point: Click group with subcommands."""

import logging

import click

from varify import __version__


def _log_level(verbose: int, quiet: bool) -> int:
    if quiet:
        return logging.ERROR
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING


@click.group()
@click.version_option(version=__version__, prog_name="varify")
@click.option("-v", "--verbose", count=True, help="Log progress (-vv logs every replacement)")
@click.option("-q", "--quiet", is_flag=True, help="Only log errors")
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: bool) -> None:
    """Varify - replace hardcoded CSS values with var() references."""
    logging.basicConfig(
        level=_log_level(verbose, quiet),
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = 0 if quiet else verbose


# Import and register subcommands
from varify.cli.apply import apply  # noqa: E402
from varify.cli.index import index  # noqa: E402

cli.add_command(apply)
cli.add_command(index)
