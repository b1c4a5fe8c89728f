"""
prupdater CLI - Main application entry point.

This module sets up the Typer CLI application with all subcommands.
"""

import logging
import sys

import typer
from rich.console import Console

from prupdater import __version__
from prupdater.cli import update
from prupdater.core.config.env import load_layered_env

app = typer.Typer(
    name="prupdater",
    help="Keep pull request branches up to date with their base branch",
    no_args_is_help=True,
    add_completion=False,
    context_settings={"help_option_names": ["--help", "-h"]},
)

console = Console()


def setup_logging(debug: bool = False) -> None:
    """
    Configure logging for all commands.

    Args:
        debug: If True, enable DEBUG level logging
    """
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
        force=True,
    )
    # Request lines from httpx duplicate our own debug output
    logging.getLogger("httpx").setLevel(logging.WARNING)


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output with detailed logging",
    ),
) -> None:
    """
    prupdater - keep pull request branches up to date.

    Lists the open pull requests that target a base branch and merges the
    latest base commits into each eligible one. Inside a GitHub Actions job
    every option falls back to the step inputs (INPUT_*), so the command can
    run without arguments.
    """
    # Precedence: OS env > project .env > user .env
    load_layered_env()
    setup_logging(debug)

    ctx.obj = {"debug": debug}


app.command(name="update")(update.update)


@app.command()
def version() -> None:
    """Show prupdater version and exit."""
    console.print(f"prupdater version {__version__}")
    raise typer.Exit(0)


def cli_main() -> None:
    """Main CLI entry point."""
    app()


__all__ = ["app", "cli_main", "setup_logging"]
