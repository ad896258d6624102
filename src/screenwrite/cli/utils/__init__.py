"""CLI utilities."""

from screenwrite.cli.utils.cli_handler import CLIHandler

__all__ = ["CLIHandler"]
