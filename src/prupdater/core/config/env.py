"""Environment loading helpers.

Inside a workflow run every input already lives in the process environment.
For local runs the same variables (``INPUT_GITHUB-TOKEN``, ``GITHUB_REPOSITORY``
and friends) can be kept in .env files:

  os.environ (pre-existing) > project .env > user .env
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from dotenv import dotenv_values

logger = logging.getLogger(__name__)


def default_user_env_paths() -> list[Path]:
    """User-level env files (``$XDG_CONFIG_HOME/prupdater/.env``)."""
    xdg_home = Path(os.environ.get("XDG_CONFIG_HOME", str(Path.home() / ".config")))
    return [xdg_home / "prupdater" / ".env"]


def default_project_env_paths(project_dir: Path) -> list[Path]:
    """Project-level env files, later files win."""
    return [project_dir / ".env", project_dir / ".env.local"]


def read_env_file(path: Path) -> dict[str, str]:
    """Parse a .env file, ignoring keys without a value."""
    if not path.is_file():
        return {}
    return {str(k): str(v) for k, v in dotenv_values(path).items() if k and v is not None}


def load_layered_env(
    *,
    project_dir: Path | None = None,
    user_env_paths: Iterable[Path] | None = None,
    project_env_paths: Iterable[Path] | None = None,
) -> dict[str, Path]:
    """Load environment variables from user + project .env files.

    Args:
        project_dir: base directory for project env paths (defaults to cwd)
        user_env_paths: explicit user env file paths
        project_env_paths: explicit project env file paths

    Returns:
        Mapping of each key that was set to the file it came from
    """
    project_dir = project_dir or Path.cwd()
    user_paths = list(user_env_paths) if user_env_paths is not None else default_user_env_paths()
    project_paths = (
        list(project_env_paths)
        if project_env_paths is not None
        else default_project_env_paths(project_dir)
    )

    loaded: dict[str, Path] = {}
    for layer, paths in (("user", user_paths), ("project", project_paths)):
        for path in map(Path, paths):
            for key, value in read_env_file(path).items():
                # A pre-existing OS variable is never touched
                if key in os.environ and key not in loaded:
                    continue
                os.environ[key] = value
                loaded[key] = path
            if path.is_file():
                logger.debug("Loaded %s env file %s", layer, path)
    return loaded
