"""Classify and normalize commands for single lines of screenplay text."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from screenwrite.cli.formatters.json_formatter import JsonFormatter
from screenwrite.cli.utils.cli_handler import CLIHandler
from screenwrite.models import ElementType
from screenwrite.screenplay import classify, normalize

console = Console()

_TYPE_NAMES = ", ".join(t.value for t in ElementType)


def _parse_type(value: str) -> ElementType:
    """Accept only known element type names on the command line."""
    key = value.strip().lower().replace("_", "-").replace(" ", "-")
    try:
        return ElementType(key)
    except ValueError as e:
        raise typer.BadParameter(
            f"Unknown element type '{value}'. Choose from: {_TYPE_NAMES}"
        ) from e


def classify_command(
    text: Annotated[str, typer.Argument(help="Text to classify")],
    previous: Annotated[
        str | None,
        typer.Option(
            "--previous",
            "-p",
            help=f"Type of the preceding element ({_TYPE_NAMES})",
        ),
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Infer the element type of a line of text.

    Examples:
        screenwrite classify "INT. KITCHEN - DAY"
        screenwrite classify "Hello there." --previous character
    """
    handler = CLIHandler(console)
    try:
        previous_type = _parse_type(previous) if previous else None
        element_type = classify(text, previous_type)
    except typer.BadParameter as e:
        handler.handle_error(e, json_output)

    if json_output:
        print(
            JsonFormatter().format(
                {
                    "text": text,
                    "previous": previous_type.value if previous_type else None,
                    "type": element_type.value,
                    "normalized": normalize(element_type, text),
                }
            )
        )
    else:
        console.print(f"[cyan]{element_type.value}[/cyan]")


def normalize_command(
    element_type: Annotated[
        str, typer.Argument(metavar="TYPE", help=f"Element type ({_TYPE_NAMES})")
    ],
    text: Annotated[str, typer.Argument(help="Text to normalize")],
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Apply the formatting rules of an element type to a line of text.

    Examples:
        screenwrite normalize character "bob (cont'd)"
        screenwrite normalize parenthetical "beat"
    """
    handler = CLIHandler(console)
    try:
        kind = _parse_type(element_type)
    except typer.BadParameter as e:
        handler.handle_error(e, json_output)

    normalized = normalize(kind, text)
    if json_output:
        print(
            JsonFormatter().format(
                {"type": kind.value, "text": text, "normalized": normalized}
            )
        )
    else:
        # Printed without markup so brackets in the text survive
        console.print(normalized, markup=False, highlight=False)
