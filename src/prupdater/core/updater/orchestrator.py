"""
Update orchestrator: list open pull requests, filter them and update branches.

Usage:
    >>> from prupdater.core.config import load_config
    >>> from prupdater.core.updater import update_pull_request
    >>> result = update_pull_request(load_config())
    >>> result.updated_numbers
    [12, 15]

Flow per pull request, in listing order:
    policy skip -> skipped
    update ok   -> updated
    update fail -> failed (the run goes on)

A failure of the listing itself is not absorbed: it propagates and no result
is produced.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx

from prupdater.core.config.models import UpdaterConfig
from prupdater.core.github.client import GitHubClient
from prupdater.core.github.models import PullRequest
from prupdater.core.updater.branch import BranchUpdater, UpdateOutcome
from prupdater.core.updater.cursor import PullRequestCursor, PullRequestLister, default_query
from prupdater.core.updater.policy import evaluate_eligibility
from prupdater.core.updater.result import PRResult, PRResultBuilder

logger = logging.getLogger(__name__)


class UpdaterClient(PullRequestLister, Protocol):
    """Client surface the orchestrator needs: listing plus update-branch."""

    def update_branch(self, owner: str, repo: str, pull_number: int) -> httpx.Response: ...


class PullRequestUpdater:
    """
    Keeps open pull requests up to date with their base branch.

    Each call to :meth:`invoke_update_pull_requests` owns its own cursor and
    result; instances hold no per-run state.
    """

    def __init__(self, config: UpdaterConfig, client: UpdaterClient) -> None:
        self.config = config
        self.client = client
        self.branch_updater = BranchUpdater(client, config.owner, config.repo)

    def list_all_pull_requests(self, **overrides: Any) -> PullRequestCursor:
        """
        Iterate over every open pull request targeting the base branch.

        Args:
            **overrides: Replace any default query field (``per_page``,
                ``state``, ``base``, ``owner``, ``repo``, ...). ``page`` is
                managed by the cursor and cannot be overridden.

        Returns:
            Lazy cursor; pages are requested only as it is consumed
        """
        query = default_query(self.config.owner, self.config.repo, self.config.base_branch)
        query.update(overrides)
        return PullRequestCursor(self.client, query)

    def update_pull_request_branch(self, pr_number: int) -> httpx.Response:
        """Update one branch; see :meth:`BranchUpdater.update_branch`."""
        return self.branch_updater.update_branch(pr_number)

    def _attempt_update(self, pr: PullRequest) -> UpdateOutcome:
        logger.info("Updating PR #%s branch...", pr.number)
        try:
            self.update_pull_request_branch(pr.number)
        except Exception as e:
            return UpdateOutcome.failure(pr, e)
        return UpdateOutcome.success(pr)

    def invoke_update_pull_requests(self) -> PRResult:
        """
        Process every open pull request.

        Returns:
            PRResult partitioning the processed pull requests

        Raises:
            httpx.HTTPError: If listing pull requests fails
        """
        result = PRResultBuilder()

        for pr in self.list_all_pull_requests():
            verdict = evaluate_eligibility(pr, self.config)
            if verdict.skip:
                logger.info(verdict.describe())
                result.add_skipped(pr)
                continue

            outcome = self._attempt_update(pr)
            if outcome.succeeded:
                result.add_updated(pr)
            else:
                logger.error("PR #%s failed: %s", pr.number, outcome.error)
                result.add_failed(pr)

        return result.build()


def update_pull_request(
    config: UpdaterConfig,
    client: UpdaterClient | None = None,
) -> PRResult:
    """
    Run one update pass for the configured repository.

    Args:
        config: Validated run configuration
        client: Optional client; by default a GitHubClient is created from the
            config and closed afterwards

    Returns:
        PRResult of the run
    """
    if client is not None:
        return PullRequestUpdater(config, client).invoke_update_pull_requests()

    with GitHubClient(config.github_token, config.api_url) as github:
        return PullRequestUpdater(config, github).invoke_update_pull_requests()
