"""Configuration display commands."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.tree import Tree

from screenwrite.cli.formatters.json_formatter import JsonFormatter
from screenwrite.cli.utils.cli_handler import CLIHandler
from screenwrite.config import ScreenwriteSettings, get_settings

console = Console()

config_app = typer.Typer(
    name="config",
    help="Inspect Screenwrite configuration",
    no_args_is_help=True,
)


@config_app.command(name="show")
def config_show(
    sources: Annotated[
        bool,
        typer.Option(
            "--sources",
            "-s",
            help="Show configuration files and environment variables in use",
        ),
    ] = False,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Display the effective configuration after merging all sources.

    Examples:
        screenwrite config show             # Show all settings
        screenwrite config show --sources   # Show where settings come from
    """
    handler = CLIHandler(console)
    try:
        settings = get_settings()
    except Exception as e:
        handler.handle_error(e, json_output)

    if sources:
        found = _config_sources()
        if json_output:
            print(JsonFormatter().format(found))
        else:
            _show_config_sources(found)
        return

    if json_output:
        print(JsonFormatter().format(settings.model_dump(mode="json")))
    else:
        _show_config_tree(settings)


def _show_config_tree(settings: ScreenwriteSettings) -> None:
    """Display configuration as a tree structure."""
    tree = Tree("[bold cyan]Screenwrite Configuration[/bold cyan]")

    groups: dict[str, list[tuple[str, Any]]] = {}
    for field_name in type(settings).model_fields:
        value = getattr(settings, field_name)
        if value is None:
            continue
        group = "logging" if field_name.startswith("log_") else "editor"
        groups.setdefault(group, []).append((field_name, value))

    for group_name, items in sorted(groups.items()):
        branch = tree.add(f"[bold]{group_name}[/bold]")
        for field_name, value in sorted(items):
            branch.add(f"{field_name}: [green]{value}[/green]")

    console.print(tree)


def _config_sources() -> dict[str, list[str]]:
    config_locations = [
        Path.home() / ".config" / "screenwrite" / "config.yaml",
        Path.home() / ".config" / "screenwrite" / "config.json",
        Path.home() / ".config" / "screenwrite" / "config.toml",
        Path.cwd() / "screenwrite.yaml",
        Path.cwd() / "screenwrite.json",
        Path.cwd() / "screenwrite.toml",
        Path.cwd() / ".env",
    ]
    return {
        "files": [str(path) for path in config_locations if path.is_file()],
        "environment": [
            f"{key}={os.environ[key]}"
            for key in sorted(os.environ)
            if key.startswith("SCREENWRITE_")
        ],
    }


def _show_config_sources(found: dict[str, list[str]]) -> None:
    """Display configuration sources and files."""
    tree = Tree("[bold cyan]Configuration Sources[/bold cyan]")

    files = tree.add("[bold]Configuration Files[/bold]")
    for path in found["files"]:
        files.add(f"[green]found[/green] {path}")

    env_vars = tree.add("[bold]Environment Variables[/bold]")
    for entry in found["environment"]:
        env_vars.add(entry)

    console.print(tree)
