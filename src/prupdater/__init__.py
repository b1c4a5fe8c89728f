"""
prupdater - keep pull request branches up to date with their base branch.

Lists the open pull requests of a repository, filters them by labels and
auto-merge state, and merges the latest base branch into each eligible one.
"""

__version__ = "0.3.0"

# Re-export core types for convenience
from prupdater.core.config.models import UpdaterConfig
from prupdater.core.updater import PRResult, update_pull_request

__all__ = ["PRResult", "UpdaterConfig", "update_pull_request", "__version__"]
