"""`qsnorma create` command (v0.1).

Creates a bundle directory (and missing ancestors), optionally wiping it first.
"""

from __future__ import annotations

import typer

from qsnorma.bundle.manager import BundleManager
from qsnorma.cli.commands._common import fail
from qsnorma.core.errors import BundleError


def register(app: typer.Typer) -> None:
    @app.command("create")
    def create(
        path: str = typer.Argument(..., help="Bundle directory to create."),
        wipe: bool = typer.Option(False, "--wipe", help="Recursively delete the directory first (must exist)."),
    ) -> None:
        """Create a bundle directory."""
        try:
            bundle = BundleManager.create(path, wipe=wipe)
        except BundleError as e:
            raise fail(e) from e

        typer.echo(str(bundle.directory))
