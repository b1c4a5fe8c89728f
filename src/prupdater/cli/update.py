"""
prupdater CLI - update command.

Update the branches of open pull requests from their base branch.
"""

from __future__ import annotations

import json
import logging
from typing import Annotated

import typer
from rich.console import Console

from prupdater.cli.errors import ExitCode, print_configuration_error, print_run_error
from prupdater.cli.report import print_report, set_step_outputs, write_step_summary
from prupdater.core.actions import error_annotation
from prupdater.core.config import load_config, redact_config
from prupdater.core.errors import ConfigurationError
from prupdater.core.updater import update_pull_request

logger = logging.getLogger(__name__)

console = Console()


def update(
    ctx: typer.Context,
    token: Annotated[
        str | None,
        typer.Option(
            "--token",
            help="GitHub token (default: INPUT_GITHUB-TOKEN)",
            show_default=False,
        ),
    ] = None,
    base_branch: Annotated[
        str | None,
        typer.Option(
            "--base-branch",
            "-b",
            help="Only PRs targeting this branch are updated (default: INPUT_BASE-BRANCH)",
        ),
    ] = None,
    repository: Annotated[
        str | None,
        typer.Option(
            "--repository",
            "-r",
            help="Repository as owner/repo (default: GITHUB_REPOSITORY)",
        ),
    ] = None,
    required_labels: Annotated[
        str | None,
        typer.Option(
            "--required-labels",
            help="Comma-separated labels a PR must have (default: INPUT_REQUIRED-LABELS)",
        ),
    ] = None,
    avoided_labels: Annotated[
        str | None,
        typer.Option(
            "--avoided-labels",
            help="Comma-separated labels that exclude a PR (default: INPUT_AVOIDED-LABELS)",
        ),
    ] = None,
    required_automerge: Annotated[
        bool | None,
        typer.Option(
            "--required-automerge/--no-required-automerge",
            help="Only update PRs with auto-merge enabled (default: INPUT_REQUIRED-AUTOMERGE)",
            show_default=False,
        ),
    ] = None,
    api_url: Annotated[
        str | None,
        typer.Option(
            "--api-url",
            help="GitHub REST API URL (default: GITHUB_API_URL or https://api.github.com)",
        ),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output result as JSON",
        ),
    ] = False,
) -> None:
    """
    Update open pull request branches with the latest base branch commits.

    PRs are skipped when they miss a required label, carry an avoided label,
    or (with --required-automerge) do not have auto-merge enabled. A PR whose
    update fails does not stop the run.

    Examples:
        prupdater update -b main -r octo/hello --required-labels ready
        prupdater update --avoided-labels wip,blocked --required-automerge
    """
    debug = bool(ctx.obj and ctx.obj.get("debug"))

    try:
        config = load_config(
            token=token,
            base_branch=base_branch,
            repository=repository,
            required_labels=required_labels,
            avoided_labels=avoided_labels,
            required_automerge=required_automerge,
            api_url=api_url,
        )
        logger.debug("Using config %s...", json.dumps(redact_config(config)))

        result = update_pull_request(config)

        logger.debug("Action result: %s...", json.dumps(result.to_dict()))

        write_step_summary(result)
        set_step_outputs(result)
    except ConfigurationError as e:
        logger.error("An error occurred while running the action: %s", e)
        error_annotation(str(e))
        print_configuration_error(str(e))
        raise typer.Exit(ExitCode.USER_ERROR)
    except Exception as e:
        logger.error("An error occurred while running the action: %s", e)
        error_annotation(str(e) or f"An unknown error occurred: {e!r}")
        print_run_error(e, debug=debug)
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    if json_output:
        console.print(json.dumps(result.to_dict(), indent=2))
        return

    print_report(result, console)
