"""
Standardized error handling and exit codes for the prupdater CLI.
"""

import traceback
from enum import IntEnum

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

console = Console(stderr=True)


class ExitCode(IntEnum):
    """Standard exit codes for prupdater."""

    SUCCESS = 0
    """Run completed (individual PR failures included)."""

    GENERAL_ERROR = 1
    """Listing failed or another unexpected error aborted the run."""

    USER_ERROR = 2
    """Missing or invalid configuration."""


def print_error(
    problem: str,
    *,
    reason: str | None = None,
    solution: str | None = None,
) -> None:
    """
    Print a standardized error message with actionable guidance.

    Args:
        problem: Brief description of what went wrong
        reason: Optional explanation of why it happened
        solution: Optional command or action to fix it
    """
    console.print(f"[red]Error:[/red] {problem}")

    if reason:
        console.print(f"[dim]{reason}[/dim]")

    if solution:
        console.print(f"[cyan]→ Try:[/cyan] {solution}")


def print_configuration_error(message: str) -> None:
    """Print error for a missing or invalid input."""
    print_error(
        message,
        reason="prupdater needs a token, a base branch and a repository",
        solution="prupdater update --token $GITHUB_TOKEN --base-branch main --repository owner/repo",
    )


def print_run_error(error: Exception, *, debug: bool = False) -> None:
    """
    Print an error that aborted the run inside a panel.

    Args:
        error: The exception that was raised
        debug: Also print the full traceback
    """
    error_text = Text()
    error_text.append("Run aborted: ", style="bold red")
    error_text.append(str(error) or type(error).__name__)

    context = getattr(error, "context", None)
    if context:
        error_text.append("\n\nContext:\n", style="dim")
        for key, value in context.items():
            if value is None:
                continue
            error_text.append(f"  {key}: ", style="cyan")
            error_text.append(f"{value}\n", style="white")

    console.print()
    console.print(
        Panel(
            error_text,
            title="[bold red]Error[/bold red]",
            border_style="red",
            expand=False,
        )
    )

    if debug:
        console.print("\n[dim]Full traceback:[/dim]")
        console.print(traceback.format_exc())
    else:
        console.print("[dim]Run with --debug for full traceback[/dim]")
