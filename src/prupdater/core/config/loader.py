"""
Configuration loading.

Builds an :class:`UpdaterConfig` from, in order of precedence:
    explicit overrides (CLI options) > action inputs / environment > defaults
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import ValidationError

from prupdater.core.actions import get_boolean_input, get_input
from prupdater.core.errors import ConfigurationError

from .models import DEFAULT_API_URL, UpdaterConfig, parse_labels


def parse_repository(slug: str) -> tuple[str, str]:
    """
    Split an ``owner/repo`` slug.

    Raises:
        ConfigurationError: If the slug is not of the form owner/repo
    """
    owner, sep, repo = slug.strip().partition("/")
    if not sep or not owner or not repo or "/" in repo:
        raise ConfigurationError(
            f"Invalid repository '{slug}', expected 'owner/repo'",
            input_name="repository",
        )
    return owner, repo


def load_config(
    *,
    token: str | None = None,
    base_branch: str | None = None,
    repository: str | None = None,
    required_labels: str | None = None,
    avoided_labels: str | None = None,
    required_automerge: bool | None = None,
    api_url: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> UpdaterConfig:
    """
    Read and validate the run configuration.

    Any argument left as None falls back to the matching action input
    (``INPUT_GITHUB-TOKEN``, ``INPUT_BASE-BRANCH``, ``INPUT_REQUIRED-LABELS``,
    ``INPUT_REQUIRED-AUTOMERGE``, ``INPUT_AVOIDED-LABELS``), and for the
    repository and API URL to ``GITHUB_REPOSITORY`` and ``GITHUB_API_URL``.

    Args:
        token: GitHub token
        base_branch: Base branch pull requests must target
        repository: ``owner/repo`` slug
        required_labels: Comma-separated labels a PR must carry
        avoided_labels: Comma-separated labels that exclude a PR
        required_automerge: Only update PRs with auto-merge enabled
        api_url: GitHub REST API base URL
        environ: Environment to read from (defaults to os.environ)

    Returns:
        Validated, frozen UpdaterConfig

    Raises:
        ConfigurationError: If a mandatory value is absent or a value is invalid
    """
    env = os.environ if environ is None else environ

    if token is None:
        token = get_input("github-token", required=True, environ=env)
    if base_branch is None:
        base_branch = get_input("base-branch", required=True, environ=env)
    if required_labels is None:
        required_labels = get_input("required-labels", environ=env)
    if required_automerge is None:
        required_automerge = get_boolean_input("required-automerge", environ=env)
    if avoided_labels is None:
        avoided_labels = get_input("avoided-labels", environ=env)

    if repository is None:
        repository = env.get("GITHUB_REPOSITORY", "")
    if not repository:
        raise ConfigurationError(
            "Repository not specified: pass --repository or set GITHUB_REPOSITORY",
            input_name="repository",
        )
    owner, repo = parse_repository(repository)

    if api_url is None:
        api_url = env.get("GITHUB_API_URL") or DEFAULT_API_URL

    try:
        return UpdaterConfig(
            owner=owner,
            repo=repo,
            github_token=token,
            base_branch=base_branch,
            required_labels=parse_labels(required_labels),
            required_automerge=required_automerge,
            avoided_labels=parse_labels(avoided_labels),
            api_url=api_url,
        )
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        # Messages only, raw input values stay out of the error
        details = [err["msg"] for err in e.errors()]
        raise ConfigurationError(f"Invalid configuration: {fields}", errors=details) from e
