"""`qsnorma classify` command (v0.1).

Prints the four classification groups of a bundle's immediate children:
- reserved files / other files
- reserved dirs / other dirs

With `--csv`, also writes the tabular inventory (see `qsnorma.bundle.inventory`).
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from qsnorma.bundle.inventory import bundle_inventory, write_inventory_csv
from qsnorma.bundle.manager import BundleManager
from qsnorma.cli.commands._common import fail
from qsnorma.core.errors import BundleError


def register(app: typer.Typer) -> None:
    @app.command("classify")
    def classify(
        path: str = typer.Argument(..., help="Bundle directory."),
        csv_out: Optional[str] = typer.Option(None, "--csv", help="Write the inventory table to this CSV path."),
        no_validate: bool = typer.Option(False, "--no-validate", help="Skip the results.json check."),
    ) -> None:
        """Classify a bundle's files and subdirectories."""
        try:
            bundle = BundleManager(path) if no_validate else BundleManager.read(path)
            bundle.require_directory_exists()
            c = bundle.classify()
        except BundleError as e:
            raise fail(e) from e

        groups = [
            ("reserved files", c.reserved_files),
            ("other files", c.non_reserved_files),
            ("reserved dirs", c.reserved_dirs),
            ("other dirs", c.non_reserved_dirs),
        ]
        for label, entries in groups:
            typer.echo(f"{label}:")
            for p in entries:
                typer.echo(f"  {p.name}")

        if csv_out:
            try:
                write_inventory_csv(Path(csv_out), bundle_inventory(bundle))
            except BundleError as e:
                raise fail(e) from e
