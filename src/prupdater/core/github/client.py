"""
GitHub REST client for prupdater.

Thin synchronous wrapper around ``httpx.Client`` exposing the two endpoints the
updater needs: the paged pull request listing and the update-branch call.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from prupdater.core.config.models import DEFAULT_API_URL
from prupdater.core.github.models import PullRequest, PullRequestPage

logger = logging.getLogger(__name__)

API_VERSION = "2022-11-28"
DEFAULT_TIMEOUT = 30.0


class GitHubClientError(Exception):
    """Error from GitHub client operations."""

    pass


class GitHubClient:
    """
    Client for the GitHub REST API.

    One request is in flight at a time; nothing is retried. The client owns an
    ``httpx.Client`` and should be closed (or used as a context manager).

    Example:
        >>> with GitHubClient("ghp_xxx") as client:
        ...     page = client.list_pulls("octo", "hello", base="main", page=1)
        ...     print([pr.number for pr in page.pull_requests], page.has_next)
    """

    def __init__(
        self,
        token: str,
        api_url: str = DEFAULT_API_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize GitHubClient.

        Args:
            token: Token sent as a bearer credential
            api_url: REST API base URL
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.api_url = api_url.rstrip("/")
        self._http = httpx.Client(
            base_url=self.api_url,
            headers={
                "Accept": "application/vnd.github+json",
                "Authorization": f"Bearer {token}",
                "X-GitHub-Api-Version": API_VERSION,
            },
            timeout=timeout,
            transport=transport,
            follow_redirects=True,
        )

    def __enter__(self) -> GitHubClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self._http.close()

    def list_pulls(self, owner: str, repo: str, **params: Any) -> PullRequestPage:
        """
        Fetch one page of pull requests.

        Args:
            owner: Repository owner
            repo: Repository name
            **params: Query parameters (base, state, per_page, page, ...)

        Returns:
            PullRequestPage with the parsed pull requests and whether the
            ``Link`` header advertises a next page

        Raises:
            httpx.HTTPStatusError: On a non-2xx response
            httpx.RequestError: On network errors
            GitHubClientError: If the payload is not a list of pull requests
        """
        path = f"/repos/{owner}/{repo}/pulls"
        query = {k: v for k, v in params.items() if v is not None}
        logger.debug("GET %s %s", path, query)

        response = self._http.get(path, params=query)
        response.raise_for_status()

        try:
            data = response.json()
        except ValueError as e:
            raise GitHubClientError(f"Failed to parse GitHub API response: {e}") from e
        if not isinstance(data, list):
            raise GitHubClientError(
                f"Unexpected pull request listing payload: {type(data).__name__}"
            )

        return PullRequestPage(
            pull_requests=[PullRequest.from_api(item) for item in data],
            has_next="next" in response.links,
            status_code=response.status_code,
        )

    def update_branch(self, owner: str, repo: str, pull_number: int) -> httpx.Response:
        """
        Merge the latest base branch commits into a pull request's branch.

        The response is returned as-is, whatever its status; classifying it is
        the caller's job.

        Raises:
            httpx.RequestError: On network errors
        """
        path = f"/repos/{owner}/{repo}/pulls/{pull_number}/update-branch"
        logger.debug("PUT %s", path)
        return self._http.put(path, json={})
