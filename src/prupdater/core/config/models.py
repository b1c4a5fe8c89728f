"""
Configuration data model for prupdater.

The configuration is built once per run from action inputs, environment
variables and CLI options, validated by Pydantic and never mutated afterwards.
"""

from collections.abc import Iterable
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_API_URL = "https://api.github.com"

REDACTED = "***"


def parse_labels(value: Union[str, Iterable[str], None]) -> tuple[str, ...]:
    """
    Normalize a label list.

    Accepts a comma-separated string or an iterable of names. Entries are
    trimmed and blank entries dropped; order is preserved.

    Example:
        >>> parse_labels(" , , rare-label , ")
        ('rare-label',)
    """
    if value is None:
        return ()
    if isinstance(value, str):
        value = value.split(",")
    return tuple(label.strip() for label in value if label and label.strip())


class UpdaterConfig(BaseModel):
    """
    Configuration for a single update run.

    Example:
        >>> config = UpdaterConfig(
        ...     owner="octo",
        ...     repo="hello",
        ...     github_token="ghp_x",
        ...     base_branch="main",
        ...     required_labels="ready, approved",
        ... )
        >>> config.required_labels
        ('ready', 'approved')
    """

    owner: str = Field(..., min_length=1, description="Repository owner (user or organization)")
    repo: str = Field(..., min_length=1, description="Repository name")
    github_token: str = Field(..., min_length=1, description="Token used for API calls", repr=False)
    base_branch: str = Field(..., min_length=1, description="Base branch pull requests must target")
    required_labels: tuple[str, ...] = Field(
        default=(),
        description="Labels a PR must carry to be updated (empty = no constraint)",
    )
    required_automerge: bool = Field(
        default=False,
        description="Only update PRs with auto-merge enabled",
    )
    avoided_labels: tuple[str, ...] = Field(
        default=(),
        description="Labels that exclude a PR from updates (empty = no constraint)",
    )
    api_url: str = Field(default=DEFAULT_API_URL, description="GitHub REST API base URL")

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
    )

    @field_validator("required_labels", "avoided_labels", mode="before")
    @classmethod
    def validate_labels(cls, v: Any) -> tuple[str, ...]:
        """Trim label names and drop blank entries."""
        return parse_labels(v)

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Strip trailing slashes so paths can be appended."""
        return v.rstrip("/") or DEFAULT_API_URL


def redact_config(config: UpdaterConfig) -> dict[str, Any]:
    """
    Serialize a configuration for logging with the token masked.

    Returns:
        JSON-compatible dict with ``github_token`` replaced by ``***``
    """
    data = config.model_dump(mode="json")
    data["github_token"] = REDACTED
    return data
