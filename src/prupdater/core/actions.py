"""
GitHub Actions runner helpers.

Reads step inputs from ``INPUT_*`` variables and writes step outputs, the job
summary and workflow-command annotations the way the runner expects. Every
function takes an optional ``environ`` mapping so it can be exercised without
touching the real process environment.
"""

from __future__ import annotations

import json
import os
import sys
import uuid
from collections.abc import Mapping
from pathlib import Path
from typing import Any, TextIO

from prupdater.core.errors import ConfigurationError

TRUE_VALUES = ("true", "True", "TRUE")
FALSE_VALUES = ("false", "False", "FALSE")


def input_env_name(name: str) -> str:
    """
    Environment variable the runner uses for an input.

    Example:
        >>> input_env_name("github-token")
        'INPUT_GITHUB-TOKEN'
    """
    return "INPUT_" + name.replace(" ", "_").upper()


def get_input(
    name: str,
    *,
    required: bool = False,
    environ: Mapping[str, str] | None = None,
) -> str:
    """
    Get a trimmed step input.

    Raises:
        ConfigurationError: If the input is required and empty
    """
    env = os.environ if environ is None else environ
    value = env.get(input_env_name(name), "")
    if required and not value:
        raise ConfigurationError(f"Input required and not supplied: {name}", input_name=name)
    return value.strip()


def get_boolean_input(
    name: str,
    *,
    required: bool = False,
    environ: Mapping[str, str] | None = None,
) -> bool:
    """
    Get a step input following the YAML 1.2 core schema booleans.

    An empty, optional input reads as False.

    Raises:
        ConfigurationError: If the value is not a recognized boolean
    """
    value = get_input(name, required=required, environ=environ)
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES or not value:
        return False
    raise ConfigurationError(
        f"Input does not meet YAML 1.2 \"Core Schema\" specification: {name}\n"
        "Support boolean input list: `true | True | TRUE | false | False | FALSE`",
        input_name=name,
        value=value,
    )


def _serialize(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value)


def set_output(name: str, value: Any, *, environ: Mapping[str, str] | None = None) -> bool:
    """
    Write a step output.

    Non-string values are JSON encoded. Uses the heredoc delimiter format of
    the ``GITHUB_OUTPUT`` file.

    Returns:
        True if the output was written, False when not running in a workflow
    """
    env = os.environ if environ is None else environ
    output_path = env.get("GITHUB_OUTPUT")
    if not output_path:
        return False

    serialized = _serialize(value)
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    with Path(output_path).open("a", encoding="utf-8") as f:
        f.write(f"{name}<<{delimiter}\n{serialized}\n{delimiter}\n")
    return True


def append_summary(markdown: str, *, environ: Mapping[str, str] | None = None) -> bool:
    """
    Append markdown to the job summary.

    Returns:
        True if the summary was written, False when not running in a workflow
    """
    env = os.environ if environ is None else environ
    summary_path = env.get("GITHUB_STEP_SUMMARY")
    if not summary_path:
        return False

    with Path(summary_path).open("a", encoding="utf-8") as f:
        f.write(markdown)
    return True


def escape_data(message: str) -> str:
    """Escape a workflow-command message."""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def error_annotation(message: str, stream: TextIO | None = None) -> None:
    """Emit an ``::error::`` workflow command."""
    print(f"::error::{escape_data(message)}", file=stream or sys.stdout)
