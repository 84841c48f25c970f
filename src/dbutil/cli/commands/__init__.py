"""Command registration utilities for the dbutil CLI."""

from __future__ import annotations

import typer
from rich.console import Console

from dbutil.cli.commands import datasource


def register_commands(app: typer.Typer, console: Console) -> None:
    """Attach command groups to the provided Typer application."""

    datasource.register(app, console)


__all__ = ["register_commands"]
