"""
Eligibility policy: decides whether a pull request gets its branch updated.

Gates are evaluated in a fixed order and the first failing gate decides:

1. required labels: every configured label must be on the PR
2. avoided labels: none of the configured labels may be on the PR
3. required auto-merge: auto-merge must be enabled on the PR

Label comparison is exact and case-sensitive. The functions here are pure.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from prupdater.core.config.models import UpdaterConfig
from prupdater.core.github.models import PullRequest


class SkipReason(str, Enum):
    """Why a pull request was not updated."""

    MISSING_REQUIRED_LABELS = "missing_required_labels"
    HAS_AVOIDED_LABELS = "has_avoided_labels"
    AUTOMERGE_NOT_ENABLED = "automerge_not_enabled"


@dataclass(frozen=True)
class EligibilityVerdict:
    """Outcome of the policy for one pull request."""

    pr_number: int
    reason: SkipReason | None = None
    labels: tuple[str, ...] = ()

    @property
    def proceed(self) -> bool:
        return self.reason is None

    @property
    def skip(self) -> bool:
        return self.reason is not None

    def describe(self) -> str:
        """Human-readable explanation, suitable for logging."""
        if self.reason is SkipReason.MISSING_REQUIRED_LABELS:
            return (
                f"Skipping PR #{self.pr_number} because it has not some required labels: "
                f"{', '.join(self.labels)}"
            )
        if self.reason is SkipReason.HAS_AVOIDED_LABELS:
            return (
                f"Skipping PR #{self.pr_number} because it has avoided labels: "
                f"{', '.join(self.labels)}"
            )
        if self.reason is SkipReason.AUTOMERGE_NOT_ENABLED:
            return f"Skipping PR #{self.pr_number} because auto-merge is not enabled"
        return f"PR #{self.pr_number} is eligible for update"


def missing_required_labels(pr: PullRequest, required: tuple[str, ...]) -> tuple[str, ...]:
    """Required labels absent from the PR, in configured order."""
    present = set(pr.label_names)
    return tuple(name for name in required if name not in present)


def matching_avoided_labels(pr: PullRequest, avoided: tuple[str, ...]) -> tuple[str, ...]:
    """PR labels that are in the avoided list, in PR label order."""
    avoided_set = set(avoided)
    return tuple(name for name in pr.label_names if name in avoided_set)


def evaluate_eligibility(pr: PullRequest, config: UpdaterConfig) -> EligibilityVerdict:
    """
    Apply the eligibility gates to a pull request.

    Args:
        pr: Pull request snapshot
        config: Run configuration

    Returns:
        EligibilityVerdict; ``verdict.proceed`` is True when the PR should be updated
    """
    if config.required_labels:
        missing = missing_required_labels(pr, config.required_labels)
        if missing:
            return EligibilityVerdict(pr.number, SkipReason.MISSING_REQUIRED_LABELS, missing)

    if config.avoided_labels:
        avoided = matching_avoided_labels(pr, config.avoided_labels)
        if avoided:
            return EligibilityVerdict(pr.number, SkipReason.HAS_AVOIDED_LABELS, avoided)

    if config.required_automerge and pr.auto_merge is None:
        return EligibilityVerdict(pr.number, SkipReason.AUTOMERGE_NOT_ENABLED)

    return EligibilityVerdict(pr.number)


def is_eligible(pr: PullRequest, config: UpdaterConfig) -> bool:
    """Shortcut for ``evaluate_eligibility(pr, config).proceed``."""
    return evaluate_eligibility(pr, config).proceed
