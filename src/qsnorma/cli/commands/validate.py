"""`qsnorma validate` command (v0.1).

Checks that a bundle directory exists and holds a non-empty `results.json`.
"""

from __future__ import annotations

import typer

from qsnorma.bundle.manager import BundleManager
from qsnorma.cli.commands._common import fail
from qsnorma.core.errors import BundleError


def register(app: typer.Typer) -> None:
    @app.command("validate")
    def validate(
        path: str = typer.Argument(..., help="Bundle directory."),
    ) -> None:
        """Validate a bundle directory."""
        try:
            BundleManager.read(path)
        except BundleError as e:
            raise fail(e) from e

        typer.echo("OK")
