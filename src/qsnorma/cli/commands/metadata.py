"""`qsnorma metadata` command (v0.1)."""

from __future__ import annotations

import typer

from qsnorma.bundle.manager import BundleManager
from qsnorma.cli.commands._common import fail
from qsnorma.core.errors import BundleError


def register(app: typer.Typer) -> None:
    @app.command("metadata")
    def metadata(
        path: str = typer.Argument(..., help="Bundle directory."),
    ) -> None:
        """Print the `<qsNorma>` metadata wrapper for a bundle."""
        try:
            bundle = BundleManager.read(path)
            text = bundle.metadata_xml()
        except BundleError as e:
            raise fail(e) from e

        typer.echo(text)
