"""qsnorma CLI entrypoint.

A small Typer application over `qsnorma.bundle`. Each command lives in
`qsnorma.cli.commands.<name>` and registers itself on `app`.
"""

from __future__ import annotations

import logging

import typer

app = typer.Typer(
    name="qsnorma",
    add_completion=False,
    no_args_is_help=True,
    help="Inspect, validate and write scraped-document bundles.",
)


@app.callback()
def _callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log filesystem operations at DEBUG level."),
) -> None:
    """qsnorma CLI."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command("version")
def version() -> None:
    """Print the installed qsnorma version."""
    from qsnorma import __version__

    typer.echo(__version__)


def _register_commands() -> None:
    """Register CLI subcommands.

    Importing these modules must remain lightweight so `qsnorma --help` is fast.
    """
    from qsnorma.cli.commands import classify as classify_cmd
    from qsnorma.cli.commands import create as create_cmd
    from qsnorma.cli.commands import metadata as metadata_cmd
    from qsnorma.cli.commands import resolve as resolve_cmd
    from qsnorma.cli.commands import validate as validate_cmd
    from qsnorma.cli.commands import write_results as write_results_cmd

    create_cmd.register(app)
    validate_cmd.register(app)
    classify_cmd.register(app)
    metadata_cmd.register(app)
    write_results_cmd.register(app)
    resolve_cmd.register(app)


_register_commands()
