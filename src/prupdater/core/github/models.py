"""
GitHub data models for prupdater.

Defines Pydantic models for pull requests as returned by
``GET /repos/{owner}/{repo}/pulls``, plus the page envelope the listing
protocol hands to the cursor.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Label(BaseModel):
    """A label attached to a pull request."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str
    color: str = ""
    description: str | None = None


class BranchRef(BaseModel):
    """The ``base`` or ``head`` side of a pull request."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    ref: str
    sha: str = ""


class AutoMerge(BaseModel):
    """Auto-merge settings; present only when auto-merge is enabled."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    merge_method: str | None = None
    commit_title: str | None = None
    commit_message: str | None = None
    enabled_by: dict[str, Any] | None = None


class PullRequest(BaseModel):
    """
    A snapshot of an open pull request.

    Unknown fields from the API are ignored.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    number: int = Field(..., gt=0, description="Pull request number")
    title: str = Field(default="", description="Pull request title")
    html_url: str = Field(default="", description="Browsable URL of the pull request")
    state: str = Field(default="open", description="open or closed")
    draft: bool = False
    base: BranchRef
    head: BranchRef | None = None
    labels: list[Label] = Field(default_factory=list)
    auto_merge: AutoMerge | None = None

    @property
    def label_names(self) -> list[str]:
        """Label names in API order."""
        return [label.name for label in self.labels]

    @property
    def automerge_enabled(self) -> bool:
        return self.auto_merge is not None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> PullRequest:
        """Create a PullRequest from one element of the list response."""
        return cls.model_validate(data)


@dataclass(frozen=True)
class PullRequestPage:
    """One page of the pull request listing."""

    pull_requests: list[PullRequest] = field(default_factory=list)
    has_next: bool = False
    status_code: int = 200
