"""Command-line interface package for dbutil."""

from dbutil.cli.main import CLIApplication, create_app

__all__ = ["CLIApplication", "create_app"]
