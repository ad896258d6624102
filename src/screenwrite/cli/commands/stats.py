"""Stats command: summarize a screenplay document."""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.table import Table

from screenwrite.cli.formatters.json_formatter import JsonFormatter
from screenwrite.cli.utils.cli_handler import CLIHandler
from screenwrite.config import get_settings_for_cli
from screenwrite.exceptions import ScreenwriteError
from screenwrite.models import ElementType, ScriptContent
from screenwrite.screenplay import estimate_lines, page_count
from screenwrite.storage import load_script_content
from screenwrite.structure import all_tags, character_names, location_names

console = Console()


def collect_stats(content: ScriptContent, lines_per_page: int) -> dict[str, Any]:
    """Gather element, page and name statistics for a document."""
    elements = content.elements
    counts = Counter(e.type for e in elements)
    return {
        "elements": len(elements),
        "scenes": counts[ElementType.SCENE_HEADING],
        "lines": sum(estimate_lines(e.text, e.type) for e in elements),
        "pages": page_count(elements, lines_per_page),
        "lines_per_page": lines_per_page,
        "types": {t.value: counts[t] for t in ElementType if counts[t]},
        "characters": character_names(elements),
        "locations": location_names(elements),
        "tags": all_tags(elements),
    }


def stats_command(
    file: Annotated[Path, typer.Argument(help="Screenplay JSON document")],
    lines_per_page: Annotated[
        int | None,
        typer.Option(
            "--lines-per-page",
            "-l",
            min=1,
            help="Estimated lines per page (default from settings, 54)",
        ),
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show element counts, estimated length, characters and locations."""
    handler = CLIHandler(console)
    try:
        settings = get_settings_for_cli(
            cli_overrides={"lines_per_page": lines_per_page}
        )
        content = load_script_content(file)
    except ScreenwriteError as e:
        handler.handle_error(e, json_output)

    stats = collect_stats(content, settings.lines_per_page)

    if json_output:
        print(JsonFormatter().format(stats))
        return

    table = Table(title=f"{file.name}", show_header=True, header_style="bold magenta")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Elements", str(stats["elements"]))
    table.add_row("Scenes", str(stats["scenes"]))
    table.add_row("Estimated lines", str(stats["lines"]))
    table.add_row("Estimated pages", f"{stats['pages']} @ {stats['lines_per_page']}")
    for type_name, count in stats["types"].items():
        table.add_row(f"  {type_name}", str(count))
    table.add_row("Characters", ", ".join(stats["characters"]) or "-")
    table.add_row("Locations", ", ".join(stats["locations"]) or "-")
    table.add_row("Tags", ", ".join(stats["tags"]) or "-")
    console.print(table)
