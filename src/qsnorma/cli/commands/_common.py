"""Shared helpers for CLI subcommands."""

from __future__ import annotations

import typer

from qsnorma.core.errors import BundleError


def fail(err: BundleError) -> typer.Exit:
    """Report a bundle error on stderr and return the exit to raise."""
    typer.echo(f"error ({err.kind}): {err}", err=True)
    return typer.Exit(code=1)
