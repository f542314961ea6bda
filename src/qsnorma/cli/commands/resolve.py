"""`qsnorma resolve` command (v0.1).

Prints the canonical full-text name for a filename's extension, e.g.
`paper.pdf -> fulltext.pdf`. Exits 1 when the extension has no canonical name.
"""

from __future__ import annotations

import typer

from qsnorma.core.reserved import resolve_reserved_name_for_extension


def register(app: typer.Typer) -> None:
    @app.command("resolve")
    def resolve(
        filename: str = typer.Argument(..., help="Filename whose extension to resolve."),
    ) -> None:
        """Resolve a filename extension to its canonical reserved name."""
        name = resolve_reserved_name_for_extension(filename)
        if name is None:
            typer.echo(f"no canonical name for: {filename}", err=True)
            raise typer.Exit(code=1)
        typer.echo(name)
