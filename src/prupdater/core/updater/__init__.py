"""
Pull request branch updater.

Discovers open pull requests page by page, applies the eligibility policy and
updates eligible branches from their base, collecting the outcome of each.
"""

from prupdater.core.updater.branch import BranchUpdater, UpdateOutcome
from prupdater.core.updater.cursor import PR_PER_PAGE, PullRequestCursor
from prupdater.core.updater.orchestrator import PullRequestUpdater, update_pull_request
from prupdater.core.updater.policy import (
    EligibilityVerdict,
    SkipReason,
    evaluate_eligibility,
    is_eligible,
)
from prupdater.core.updater.result import PRResult, PRResultBuilder

__all__ = [
    "BranchUpdater",
    "EligibilityVerdict",
    "PRResult",
    "PRResultBuilder",
    "PR_PER_PAGE",
    "PullRequestCursor",
    "PullRequestUpdater",
    "SkipReason",
    "UpdateOutcome",
    "evaluate_eligibility",
    "is_eligible",
    "update_pull_request",
]
