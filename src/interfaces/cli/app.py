"""
Typer ベースの CLI エントリポイント。
"""

from __future__ import annotations

import typer

from .commands import diagnostics, files


def create_cli() -> typer.Typer:
    app = typer.Typer(help="storage-zone-client CLI")
    app.add_typer(files.app, name="files")
    app.add_typer(diagnostics.app, name="diagnostics")
    return app


def main() -> None:
    create_cli()()
