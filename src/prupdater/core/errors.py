"""
Custom exceptions for prupdater.

Exception Hierarchy:
    UpdaterError (base)
    ├── ConfigurationError (missing or invalid inputs, fatal to the run)
    └── UpdateFailure (a single pull request's branch update was rejected)

Listing failures are not wrapped: they surface as the ``httpx`` exception the
transport raised and abort the run.

Example:
    >>> from prupdater.core.errors import UpdateFailure
    >>> try:
    ...     raise UpdateFailure(42, 422)
    ... except UpdateFailure as e:
    ...     print(e.pr_number, e.status_code)
    42 422
"""

from __future__ import annotations


class UpdaterError(Exception):
    """
    Base exception for all prupdater errors.

    Attributes:
        message: Human-readable error message
        context: Optional dictionary of additional context
    """

    def __init__(self, message: str, **context: object) -> None:
        """
        Initialize an error with message and context.

        Args:
            message: Human-readable error message
            **context: Additional context as keyword arguments
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """Return string representation of the error."""
        return self.message


class ConfigurationError(UpdaterError):
    """
    Raised when a required input is missing or an input value is invalid.

    Always raised before any remote call is made.

    Attributes:
        input_name: Name of the offending input, when known
    """

    def __init__(self, message: str, input_name: str | None = None, **context: object) -> None:
        super().__init__(message, input_name=input_name, **context)
        self.input_name = input_name


class UpdateFailure(UpdaterError):
    """
    Raised when the update-branch call for a pull request does not succeed.

    Attributes:
        pr_number: Number of the pull request that could not be updated
        status_code: HTTP status returned by the API (None if absent or malformed)
    """

    def __init__(self, pr_number: int, status_code: int | None, **context: object) -> None:
        message = f"Failed to update PR #{pr_number} branch: {status_code}"
        super().__init__(message, pr_number=pr_number, status_code=status_code, **context)
        self.pr_number = pr_number
        self.status_code = status_code


__all__ = ["ConfigurationError", "UpdateFailure", "UpdaterError"]
