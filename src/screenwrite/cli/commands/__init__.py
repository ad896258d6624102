"""Screenwrite CLI commands."""

from __future__ import annotations

from screenwrite.cli.commands.classify import classify_command, normalize_command
from screenwrite.cli.commands.config import config_app
from screenwrite.cli.commands.paginate import paginate_command
from screenwrite.cli.commands.reflow import reflow_command
from screenwrite.cli.commands.stats import stats_command

__all__ = [
    "classify_command",
    "config_app",
    "normalize_command",
    "paginate_command",
    "reflow_command",
    "stats_command",
]
