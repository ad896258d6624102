"""Page layout formatter for CLI output."""

from __future__ import annotations

import io
import json
from typing import Any

from rich.console import Console
from rich.table import Table
from rich.text import Text

from screenwrite.cli.formatters.base import OutputFormat, OutputFormatter
from screenwrite.models import Element
from screenwrite.screenplay.layout import estimate_lines

Pages = list[list[Element]]


class PageFormatter(OutputFormatter[Pages]):
    """Formatter for paginated screenplays."""

    def __init__(
        self, console: Console | None = None, show_beats: bool = False
    ) -> None:
        """Initialize formatter.

        Args:
            console: Rich console for output
            show_beats: Add a column with each element's beat reference
        """
        super().__init__(console)
        self.show_beats = show_beats

    def format(
        self, data: Pages, format_type: OutputFormat = OutputFormat.TABLE
    ) -> str:
        """Format pages as JSON or as one Rich table per page."""
        if format_type == OutputFormat.JSON:
            return json.dumps({"pages": self.to_dicts(data)}, indent=2)
        return self._format_tables(data)

    def to_dicts(self, pages: Pages) -> list[dict[str, Any]]:
        """Describe pages as plain data."""
        result = []
        for number, page in enumerate(pages, start=1):
            result.append(
                {
                    "number": number,
                    "lines": sum(estimate_lines(e.text, e.type) for e in page),
                    "elements": [
                        e.model_dump(mode="json", by_alias=True, exclude_none=True)
                        for e in page
                    ],
                }
            )
        return result

    def build_tables(self, pages: Pages) -> list[Table]:
        """Build one Rich table per page."""
        tables = []
        for number, page in enumerate(pages, start=1):
            lines = sum(estimate_lines(e.text, e.type) for e in page)
            table = Table(
                title=f"Page {number} ({lines} lines)",
                show_header=True,
                header_style="bold magenta",
            )
            table.add_column("Type", style="cyan", no_wrap=True)
            table.add_column("Text")
            table.add_column("Lines", justify="right")
            if self.show_beats:
                table.add_column("Beat", style="green")

            for element in page:
                # Text cells bypass markup so brackets in the script survive
                row: list[str | Text] = [
                    element.type.value,
                    Text(element.text),
                    str(estimate_lines(element.text, element.type)),
                ]
                if self.show_beats:
                    row.append(element.beat or "")
                table.add_row(*row)

            tables.append(table)
        return tables

    def _format_tables(self, pages: Pages) -> str:
        string_io = io.StringIO()
        temp_console = Console(file=string_io, force_terminal=True, width=120)
        for table in self.build_tables(pages):
            temp_console.print(table)
        return string_io.getvalue()
