"""Reflow command: normalize a document and recompute continuations."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from screenwrite.cli.utils.cli_handler import CLIHandler
from screenwrite.document import reflow
from screenwrite.exceptions import ScreenwriteError
from screenwrite.storage import (
    content_to_json,
    load_script_content,
    save_script_content,
)

console = Console()


def reflow_command(
    file: Annotated[Path, typer.Argument(help="Screenplay JSON document")],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the result here instead of printing it",
        ),
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Re-apply formatting rules and (CONT'D) suffixes to every element.

    Without --output the reflowed document is printed to stdout.
    """
    handler = CLIHandler(console)
    try:
        content = load_script_content(file)
        reflowed = reflow(content)
        if output is not None:
            save_script_content(reflowed, output)
    except ScreenwriteError as e:
        handler.handle_error(e, json_output)

    changed = sum(
        1
        for before, after in zip(content.elements, reflowed.elements, strict=True)
        if before.text != after.text
    )

    if output is None:
        print(content_to_json(reflowed, indent=2))
        return

    handler.handle_success(
        f"Reflowed {len(reflowed.elements)} element(s), {changed} changed: {output}",
        data={
            "output": str(output),
            "elements": len(reflowed.elements),
            "changed": changed,
        },
        json_output=json_output,
    )
