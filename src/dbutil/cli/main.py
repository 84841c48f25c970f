"""Typer application for dbutil: logging setup and error-to-exit-code mapping."""

from __future__ import annotations

import functools
from typing import Any, Callable, Optional

import typer
from rich.console import Console
from rich.markup import escape

from dbutil.cli.commands import register_commands
from dbutil.cli.commands.datasource import DataSourceExitCode
from dbutil.config.settings import get_settings
from dbutil.db.errors import DbRuntimeError
from dbutil.utils.log import configure_logging


class CLIApplication:
    """The `dbutil` command line.

    Every registered command is wrapped so a :class:`DbRuntimeError` that
    escapes it is printed and turned into ``CONFIG_ERROR``.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()
        self._app = typer.Typer(add_completion=False, rich_markup_mode="rich", no_args_is_help=True)
        self._app.callback()(self._configure)
        register_commands(self._app, self.console)
        for command in self._app.registered_commands:
            command.callback = self._guard(command.callback)

    @property
    def app(self) -> typer.Typer:
        return self._app

    def _configure(
        self,
        log_level: Optional[str] = typer.Option(None, "--log-level", help="Override LOG_LEVEL for this run"),
    ) -> None:
        """Inspect and check the configured data sources."""

        configure_logging(log_level or get_settings().log_level)

    def _guard(self, callback: Optional[Callable[..., Any]]) -> Optional[Callable[..., Any]]:
        if callback is None:
            return None

        @functools.wraps(callback)
        def guarded(*args: Any, **kwargs: Any) -> Any:
            try:
                return callback(*args, **kwargs)
            except DbRuntimeError as exc:
                self.console.print(f"[red]Configuration error:[/red] {escape(str(exc))}")
                raise typer.Exit(code=DataSourceExitCode.CONFIG_ERROR) from exc

        return guarded


def create_app(console: Optional[Console] = None) -> typer.Typer:
    """Return a configured Typer application."""

    return CLIApplication(console=console).app


def main() -> None:
    """Console script entry point for the installed `dbutil` command."""

    create_app()(prog_name="dbutil")


__all__ = ["CLIApplication", "create_app", "main"]
