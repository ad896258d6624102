"""CLI output formatters."""

from screenwrite.cli.formatters.base import OutputFormat, OutputFormatter
from screenwrite.cli.formatters.json_formatter import JsonFormatter
from screenwrite.cli.formatters.page_formatter import PageFormatter

__all__ = ["JsonFormatter", "OutputFormat", "OutputFormatter", "PageFormatter"]
