"""
Reporting of run results: console tables, job summary and step outputs.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from rich.console import Console
from rich.table import Table

from prupdater.core.actions import append_summary, set_output
from prupdater.core.github.models import PullRequest
from prupdater.core.updater.result import PRResult

logger = logging.getLogger(__name__)

# (heading, text when empty, attribute on PRResult, output name)
SECTIONS: tuple[tuple[str, str, str, str], ...] = (
    (
        "Pull Request Updates Summary",
        "No pull requests were updated.",
        "updated",
        "pull-requests-updated",
    ),
    (
        "Failed Pull Request Updates",
        "No pull request updates failed.",
        "failed",
        "pull-requests-failed",
    ),
    (
        "Skipped Pull Requests",
        "No pull requests were skipped.",
        "skipped",
        "pull-requests-skipped",
    ),
)


def format_pr_link(pr: PullRequest) -> str:
    """Markdown link ``[#N title](url)``."""
    return f"[#{pr.number} {pr.title}]({pr.html_url})"


def render_summary_markdown(result: PRResult) -> str:
    """Render the job summary for a run."""
    lines: list[str] = []
    for heading, empty_text, attr, _ in SECTIONS:
        prs: Sequence[PullRequest] = getattr(result, attr)
        lines.append(f"## {heading} ({len(prs)})")
        lines.append("")
        if not prs:
            lines.append(empty_text)
        else:
            lines.extend(f"- {format_pr_link(pr)}" for pr in prs)
        lines.append("")
    return "\n".join(lines)


def write_step_summary(result: PRResult, environ: Mapping[str, str] | None = None) -> bool:
    """Append the run summary to ``GITHUB_STEP_SUMMARY`` if available."""
    written = append_summary(render_summary_markdown(result), environ=environ)
    if not written:
        logger.debug("GITHUB_STEP_SUMMARY not set, skipping job summary")
    return written


def set_step_outputs(result: PRResult, environ: Mapping[str, str] | None = None) -> bool:
    """Expose PR numbers per partition as step outputs for later steps."""
    written = False
    for _, _, attr, output_name in SECTIONS:
        numbers = [pr.number for pr in getattr(result, attr)]
        written = set_output(output_name, numbers, environ=environ) or written
    if not written:
        logger.debug("GITHUB_OUTPUT not set, skipping step outputs")
    return written


def _partition_table(title: str, prs: Sequence[PullRequest], style: str) -> Table:
    table = Table(title=f"{title} ({len(prs)})", title_style=style, show_lines=False)
    table.add_column("PR", style="bold", no_wrap=True)
    table.add_column("Title")
    table.add_column("URL", style="dim")
    for pr in prs:
        table.add_row(f"#{pr.number}", pr.title, pr.html_url)
    return table


def print_report(result: PRResult, console: Console) -> None:
    """Print counts and one table per non-empty partition."""
    console.print(f"Pull requests updated: [green]{len(result.updated)}[/green]")
    console.print(f"Pull requests failed: [red]{len(result.failed)}[/red]")
    console.print(f"Pull requests skipped: [yellow]{len(result.skipped)}[/yellow]")

    for (heading, _, attr, _), style in zip(SECTIONS, ("green", "red", "yellow")):
        prs = getattr(result, attr)
        if prs:
            console.print()
            console.print(_partition_table(heading, prs, style))
