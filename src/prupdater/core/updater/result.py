"""
Result of an update run: the updated/failed/skipped partition.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from prupdater.core.github.models import PullRequest


@dataclass(frozen=True)
class PRResult:
    """
    Immutable partition of the pull requests processed by one run.

    Each partition keeps listing order. A PR number appears in at most one
    partition.
    """

    updated: tuple[PullRequest, ...] = ()
    failed: tuple[PullRequest, ...] = ()
    skipped: tuple[PullRequest, ...] = ()

    @property
    def updated_numbers(self) -> list[int]:
        return [pr.number for pr in self.updated]

    @property
    def failed_numbers(self) -> list[int]:
        return [pr.number for pr in self.failed]

    @property
    def skipped_numbers(self) -> list[int]:
        return [pr.number for pr in self.skipped]

    @property
    def total(self) -> int:
        """Number of pull requests processed."""
        return len(self.updated) + len(self.failed) + len(self.skipped)

    def to_dict(self) -> dict[str, Any]:
        """PR numbers per partition, for logs and machine-readable output."""
        return {
            "updated": self.updated_numbers,
            "failed": self.failed_numbers,
            "skipped": self.skipped_numbers,
        }


@dataclass
class PRResultBuilder:
    """Append-only accumulator owned by a single run."""

    updated: list[PullRequest] = field(default_factory=list)
    failed: list[PullRequest] = field(default_factory=list)
    skipped: list[PullRequest] = field(default_factory=list)

    def add_updated(self, pr: PullRequest) -> None:
        self.updated.append(pr)

    def add_failed(self, pr: PullRequest) -> None:
        self.failed.append(pr)

    def add_skipped(self, pr: PullRequest) -> None:
        self.skipped.append(pr)

    def build(self) -> PRResult:
        return PRResult(
            updated=tuple(self.updated),
            failed=tuple(self.failed),
            skipped=tuple(self.skipped),
        )
