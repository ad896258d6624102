"""Paginate command: lay a screenplay document out on pages."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from screenwrite.cli.formatters.base import OutputFormat
from screenwrite.cli.formatters.page_formatter import PageFormatter
from screenwrite.cli.utils.cli_handler import CLIHandler
from screenwrite.config import get_logger, get_settings_for_cli
from screenwrite.exceptions import ScreenwriteError
from screenwrite.screenplay import paginate
from screenwrite.storage import load_script_content

logger = get_logger(__name__)
console = Console()


def paginate_command(
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
    beats: Annotated[
        bool | None,
        typer.Option(
            "--beats/--no-beats",
            help="Show the beat column (default from the beat_mode setting)",
        ),
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Split a screenplay into pages.

    Dialogue is kept on the same page as its character cue; a page only
    overflows when a single speech is longer than a page.
    """
    handler = CLIHandler(console)
    try:
        settings = get_settings_for_cli(
            cli_overrides={"lines_per_page": lines_per_page}
        )
        content = load_script_content(file)
    except ScreenwriteError as e:
        handler.handle_error(e, json_output)

    show_beats = settings.show_beats if beats is None else beats
    pages = paginate(content.elements, settings.lines_per_page)
    logger.info("Paginated document", file=str(file), pages=len(pages))

    formatter = PageFormatter(console, show_beats=show_beats)
    if json_output:
        print(formatter.format(pages, OutputFormat.JSON))
    else:
        for table in formatter.build_tables(pages):
            console.print(table)
        console.print(f"[bold]{len(pages)} page(s)[/bold]")
