"""
Branch updater: one update-branch call per pull request.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol

import httpx

from prupdater.core.errors import UpdateFailure
from prupdater.core.github.models import PullRequest

logger = logging.getLogger(__name__)


class BranchUpdateApi(Protocol):
    """Anything that can issue the update-branch call."""

    def update_branch(self, owner: str, repo: str, pull_number: int) -> httpx.Response: ...


def is_success_status(status: Any) -> bool:
    """Only an integer status in the 2xx range counts as success."""
    return isinstance(status, int) and not isinstance(status, bool) and 200 <= status < 300


class BranchUpdater:
    """
    Issues update-branch calls for one repository.

    There is no retry: every call to :meth:`update_branch` makes exactly one
    request.
    """

    def __init__(self, api: BranchUpdateApi, owner: str, repo: str) -> None:
        self.api = api
        self.owner = owner
        self.repo = repo

    def update_branch(self, pr_number: int) -> httpx.Response:
        """
        Update a pull request branch from its base.

        Args:
            pr_number: Pull request number

        Returns:
            The 2xx response

        Raises:
            UpdateFailure: If the response status is not 2xx (or is missing)
            httpx.RequestError: Transport errors propagate unchanged
        """
        resp = self.api.update_branch(self.owner, self.repo, pr_number)
        status = getattr(resp, "status_code", None)

        if not is_success_status(status):
            body = getattr(resp, "text", "")
            logger.debug("Update-branch response for PR #%s: %s - %s", pr_number, status, body)
            raise UpdateFailure(
                pr_number,
                status if isinstance(status, int) else None,
                body=body,
            )
        return resp


@dataclass(frozen=True)
class UpdateOutcome:
    """Success/failure of updating one pull request."""

    pull_request: PullRequest
    error: BaseException | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, pr: PullRequest) -> UpdateOutcome:
        return cls(pr)

    @classmethod
    def failure(cls, pr: PullRequest, error: BaseException) -> UpdateOutcome:
        return cls(pr, error)
