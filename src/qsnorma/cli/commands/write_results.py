"""`qsnorma write-results` command (v0.1).

Copies an XML document into `<bundle>/<subdir>/results.xml`, replacing any
previous results document in that subdirectory.
"""

from __future__ import annotations

from pathlib import Path

import typer

from qsnorma.bundle.manager import BundleManager
from qsnorma.cli.commands._common import fail
from qsnorma.core.errors import BundleError
from qsnorma.core.reserved import RESULTS_DIR


def register(app: typer.Typer) -> None:
    @app.command("write-results")
    def write_results(
        path: str = typer.Argument(..., help="Bundle directory."),
        xml_file: str = typer.Option(..., "--xml-file", help="XML document to store as results.xml."),
        subdir: str = typer.Option(RESULTS_DIR, "--subdir", help="Subdirectory of the bundle to write into."),
    ) -> None:
        """Write a results document into a bundle subdirectory."""
        src = Path(xml_file)
        if not src.is_file():
            raise typer.BadParameter(f"not a file: {src}", param_hint="--xml-file")
        try:
            xml_content = src.read_text(encoding="utf-8")
        except (UnicodeDecodeError, OSError) as e:
            raise typer.BadParameter(f"cannot read {src}: {e}", param_hint="--xml-file") from e

        try:
            bundle = BundleManager.read(path)
            out = bundle.write_results_document(subdir, xml_content)
        except BundleError as e:
            raise fail(e) from e

        typer.echo(str(out))
