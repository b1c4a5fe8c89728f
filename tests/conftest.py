"""
Pytest configuration and shared fixtures.

Provides API-shaped pull request data, a ready-made configuration and a fake
GitHub client that records list and update-branch calls.
"""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from prupdater.core.config.models import UpdaterConfig
from prupdater.core.github.models import PullRequest, PullRequestPage

# ==============================================================================
# Sample Data
# ==============================================================================


def pull_request_data(
    number: int = 1,
    labels: list[str] | None = None,
    auto_merge: bool = False,
) -> dict[str, Any]:
    """A pull request as returned by ``GET /repos/{owner}/{repo}/pulls``."""
    return {
        "id": number,
        "number": number,
        "title": "Test PR",
        "body": "This is a test pull request",
        "html_url": f"https://github.com/owner/repo/pull/{number}",
        "state": "open",
        "draft": False,
        "author_association": "CONTRIBUTOR",
        "head": {"ref": "feature-branch", "sha": "abc123", "repo": {}},
        "base": {"ref": "main", "sha": "def456", "repo": {}},
        "user": {"login": "test-user", "id": 123, "type": "User"},
        "labels": [
            {
                "id": idx + 1,
                "name": label,
                "description": "",
                "node_id": "",
                "color": "f29513",
                "default": False,
                "url": "",
            }
            for idx, label in enumerate(labels or [])
        ],
        "auto_merge": (
            {
                "enabled_by": {"login": "test-user", "id": 123, "type": "User"},
                "merge_method": "squash",
                "commit_title": "Auto-merged PR",
                "commit_message": "This PR was auto-merged",
            }
            if auto_merge
            else None
        ),
    }


@pytest.fixture
def make_pr() -> Callable[..., PullRequest]:
    """Factory for PullRequest models built from API-shaped data."""

    def _make(
        number: int = 1, labels: list[str] | None = None, auto_merge: bool = False
    ) -> PullRequest:
        return PullRequest.from_api(pull_request_data(number, labels, auto_merge))

    return _make


@pytest.fixture
def make_page(make_pr: Callable[..., PullRequest]) -> Callable[..., PullRequestPage]:
    """Factory for a page holding PRs with the given numbers."""

    def _make(*numbers: int, has_next: bool = False) -> PullRequestPage:
        return PullRequestPage(
            pull_requests=[make_pr(n) for n in numbers],
            has_next=has_next,
        )

    return _make


# ==============================================================================
# Configuration
# ==============================================================================


@pytest.fixture
def config() -> UpdaterConfig:
    """Configuration without label or auto-merge constraints."""
    return UpdaterConfig(
        owner="owner",
        repo="repo",
        github_token="token",
        base_branch="main",
    )


# ==============================================================================
# Fake GitHub client
# ==============================================================================


class FakeGitHub:
    """
    In-memory stand-in for GitHubClient.

    ``pages`` are returned (or raised, for exceptions) in order; an exhausted
    queue yields an empty final page. ``update_results`` maps a PR number to a
    status code or an exception; other PRs get ``default_status``.
    """

    def __init__(self) -> None:
        self.pages: list[PullRequestPage | Exception] = []
        self.list_calls: list[dict[str, Any]] = []
        self.update_calls: list[int] = []
        self.update_results: dict[int, int | Exception] = {}
        self.default_status = 202

    def list_pulls(self, owner: str, repo: str, **params: Any) -> PullRequestPage:
        self.list_calls.append({"owner": owner, "repo": repo, **params})
        if not self.pages:
            return PullRequestPage()
        page = self.pages.pop(0)
        if isinstance(page, Exception):
            raise page
        return page

    def update_branch(self, owner: str, repo: str, pull_number: int) -> httpx.Response:
        self.update_calls.append(pull_number)
        outcome = self.update_results.get(pull_number, self.default_status)
        if isinstance(outcome, Exception):
            raise outcome
        return httpx.Response(
            outcome,
            json={"message": "Updating pull request branch."},
            request=httpx.Request(
                "PUT",
                f"https://api.github.com/repos/{owner}/{repo}/pulls/{pull_number}/update-branch",
            ),
        )


@pytest.fixture
def fake_github() -> FakeGitHub:
    """A fake client with no pages and 202 responses for updates."""
    return FakeGitHub()


@pytest.fixture
def pr_data() -> Callable[..., dict[str, Any]]:
    """Factory for API-shaped pull request dicts."""
    return pull_request_data
