"""
Pagination cursor over the open pull request listing.

The cursor is a plain iterator: it buffers the pull requests of the current
page and only asks for the next page once the buffer is drained and the last
response advertised a ``next`` link. A consumer that stops iterating early
therefore never triggers another request.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator, Mapping
from typing import Any, Protocol

from prupdater.core.github.models import PullRequest, PullRequestPage

logger = logging.getLogger(__name__)

PR_PER_PAGE = 30
FIRST_PAGE = 1


class PullRequestLister(Protocol):
    """Anything that can fetch one page of pull requests."""

    def list_pulls(self, owner: str, repo: str, **params: Any) -> PullRequestPage: ...


def log_pull_request(pr: PullRequest) -> None:
    """Log the fields the eligibility policy looks at."""
    logger.info("Found PR #%s: %s", pr.number, pr.title)
    logger.info(" - Labels: %s", ", ".join(pr.label_names))
    logger.info(" - Auto-merge: %s", "enabled" if pr.automerge_enabled else "not enabled")
    logger.info(" - Base branch: %s", pr.base.ref)


class PullRequestCursor(Iterator[PullRequest]):
    """
    Lazily walks every page of a pull request listing.

    Args:
        lister: Client used to fetch pages
        query: Query for every page (must include ``owner`` and ``repo``);
            any ``page`` entry is ignored, the cursor owns the page counter

    Example:
        >>> cursor = PullRequestCursor(client, {"owner": "o", "repo": "r", "state": "open"})
        >>> for pr in cursor:
        ...     print(pr.number)
    """

    def __init__(self, lister: PullRequestLister, query: Mapping[str, Any]) -> None:
        self._lister = lister
        self._query = {k: v for k, v in query.items() if k != "page"}
        self._buffer: deque[PullRequest] = deque()
        self._next_page = FIRST_PAGE
        self._exhausted = False

    @property
    def pages_fetched(self) -> int:
        """Number of pages fetched successfully so far."""
        return self._next_page - FIRST_PAGE

    @property
    def exhausted(self) -> bool:
        """True once the last page has been fetched and fully consumed."""
        return self._exhausted and not self._buffer

    def __iter__(self) -> PullRequestCursor:
        return self

    def __next__(self) -> PullRequest:
        while not self._buffer:
            if self._exhausted:
                raise StopIteration
            self._fetch_page()

        pr = self._buffer.popleft()
        log_pull_request(pr)
        return pr

    def _fetch_page(self) -> None:
        query = dict(self._query)
        owner = query.pop("owner")
        repo = query.pop("repo")
        page_number = self._next_page

        # A failed request leaves the counter alone so the same page is retried
        page = self._lister.list_pulls(owner, repo, **query, page=page_number)
        self._next_page += 1
        logger.debug(
            "Fetched page %d: %d pull request(s), next=%s",
            page_number,
            len(page.pull_requests),
            page.has_next,
        )
        self._buffer.extend(page.pull_requests)
        if not page.has_next:
            self._exhausted = True


def default_query(owner: str, repo: str, base_branch: str) -> dict[str, Any]:
    """Default listing query for open PRs against a base branch."""
    return {
        "per_page": PR_PER_PAGE,
        "owner": owner,
        "repo": repo,
        "base": base_branch,
        "state": "open",
    }
