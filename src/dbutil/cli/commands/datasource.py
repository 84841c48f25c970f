"""CLI commands for inspecting and checking configured data sources."""

from __future__ import annotations

import re
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dbutil.config.global_config import global_db_config
from dbutil.db.ds_factory import DataSourceRegistry
from dbutil.db.facade import close, get_data_source, set_config_path

SECRET_KEYS = frozenset({"pass", "password"})
_URL_PASSWORD = re.compile(r"(://[^:/@]+:)[^@]+(@)")


class DataSourceExitCode:
    """Mapping of meaningful CLI exit codes."""

    SUCCESS = 0
    CONNECTION_ERROR = 1
    CONFIG_ERROR = 2


def mask_secret(key: str, value: Optional[str]) -> str:
    """Hide passwords in setting values, including the one embedded in a URL."""

    if value is None:
        return ""
    if key in SECRET_KEYS:
        return "****"
    return _URL_PASSWORD.sub(r"\1****\2", value)


def _load_registry(setting_path: Optional[str]) -> DataSourceRegistry:
    if setting_path:
        set_config_path(setting_path)
    return DataSourceRegistry()


def register(app: typer.Typer, console: Console) -> None:
    """Register data-source commands."""

    @app.command("show-config")
    def show_config(
        setting_path: Optional[str] = typer.Option(None, "--setting", "-s", help="Path of the db setting file"),
    ) -> None:
        """Print the configured groups and the global switches."""

        registry = _load_registry(setting_path)

        table = Table(title="Data Source Groups")
        table.add_column("Group", style="cyan")
        table.add_column("Key")
        table.add_column("Value", overflow="fold")
        for group in registry.groups():
            for key, value in sorted(registry.setting(group).items()):
                table.add_row(group or "(default)", key, mask_secret(key, value))
        console.print(table)

        current = global_db_config.current
        switches = Table(title="Global Switches")
        switches.add_column("Switch", style="cyan")
        switches.add_column("Value", style="green")
        switches.add_row("show-sql", str(current.sql_log.show_sql))
        switches.add_row("format-sql", str(current.sql_log.format_sql))
        switches.add_row("show-params", str(current.sql_log.show_params))
        switches.add_row("sql-level", current.sql_log.level.value)
        switches.add_row("case-insensitive", str(current.case_insensitive))
        switches.add_row("return-generated-key", str(current.return_generated_key))
        console.print(switches)

    @app.command("ping")
    def ping(
        group: str = typer.Argument("", help="Data source group, the default group when omitted"),
        setting_path: Optional[str] = typer.Option(None, "--setting", "-s", help="Path of the db setting file"),
    ) -> None:
        """Open a connection from GROUP and run `SELECT 1`."""

        registry = _load_registry(setting_path)
        label = group or "(default)"
        try:
            data_source = get_data_source(group, registry=registry)
            with data_source.connection() as conn:
                cursor = conn.cursor()
                try:
                    cursor.execute("SELECT 1")
                    result = cursor.fetchone()
                finally:
                    close(cursor)
        except Exception as exc:
            console.print(f"[red]Connection to group {label} failed:[/red] {escape(str(exc))}")
            raise typer.Exit(code=DataSourceExitCode.CONNECTION_ERROR) from exc
        finally:
            registry.destroy()

        console.print(f"[bold green]Connection to group {label} successful[/bold green], SELECT 1 returned: {result}")


__all__ = ["DataSourceExitCode", "mask_secret", "register"]
