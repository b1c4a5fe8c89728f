"""
GitHub integration for prupdater.

Provides the REST client and the models for pull requests and their pages.
"""

from prupdater.core.github.client import GitHubClient, GitHubClientError
from prupdater.core.github.models import (
    AutoMerge,
    BranchRef,
    Label,
    PullRequest,
    PullRequestPage,
)

__all__ = [
    "AutoMerge",
    "BranchRef",
    "GitHubClient",
    "GitHubClientError",
    "Label",
    "PullRequest",
    "PullRequestPage",
]
