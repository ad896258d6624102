"""Main CLI entry point."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console

from screenwrite import __version__
from screenwrite.cli.commands import (
    classify_command,
    config_app,
    normalize_command,
    paginate_command,
    reflow_command,
    stats_command,
)
from screenwrite.cli.formatters.json_formatter import JsonFormatter
from screenwrite.cli.utils.cli_handler import CLIHandler
from screenwrite.config import (
    configure_logging,
    get_logger,
    get_settings_for_cli,
    set_settings,
)

logger = get_logger(__name__)
console = Console()

app = typer.Typer(
    name="screenwrite",
    help="Screenplay formatting, continuation and page estimation",
    pretty_exceptions_enable=False,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command(name="classify")(classify_command)
app.command(name="normalize")(normalize_command)
app.command(name="paginate")(paginate_command)
app.command(name="reflow")(reflow_command)
app.command(name="stats")(stats_command)

app.add_typer(config_app, name="config")


@app.command()
def version(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show Screenwrite version."""
    if json_output:
        print(JsonFormatter().format({"name": "screenwrite", "version": __version__}))
    else:
        console.print(f"Screenwrite v{__version__}")


@app.callback()
def main_callback(
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file (YAML, TOML, or JSON)",
            envvar="SCREENWRITE_CONFIG",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging (INFO level)"),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging"),
    ] = False,
) -> None:
    """Configure global options."""
    overrides: dict[str, Any] = {}
    if debug:
        overrides.update(debug=True, log_level="DEBUG")
    elif verbose:
        overrides["log_level"] = "INFO"

    if config is None and not overrides:
        return

    try:
        settings = get_settings_for_cli(config_file=config, cli_overrides=overrides)
    except Exception as e:
        CLIHandler(console).handle_error(e)

    # Commands read the global settings, so the merged result replaces them
    set_settings(settings)
    configure_logging(settings)
    logger.debug("Settings loaded", config=str(config) if config else None)


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
