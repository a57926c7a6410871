"""chefpublish utility functions."""

from __future__ import annotations

import os
import shlex
from pathlib import Path

from .constants import (
    BERKS_CONFIG_NAME,
    BERKSHELF_DIR_NAME,
    CHEF_DIR_NAME,
    KEYFILE_NAME,
    KNIFE_CONFIG_NAME,
)


def format_elapsed_time(seconds: float) -> str:
    """Format elapsed time in human-readable format.

    Args:
        seconds: Elapsed time in seconds

    Returns:
        Formatted string like "1m25s", "45s", or "1h05m30s"
    """
    total_seconds = int(seconds)
    hours, remainder = divmod(total_seconds, 3600)
    minutes, secs = divmod(remainder, 60)

    if hours:
        return f"{hours}h{minutes:02d}m{secs:02d}s"
    if minutes:
        return f"{minutes}m{secs:02d}s"
    return f"{secs}s"


def format_command(argv: list[str]) -> str:
    """Render an argument list as a shell-quoted string for logs."""
    return " ".join(shlex.quote(a) for a in argv)


def ensure_parent_dir(p: Path) -> None:
    """Create parent directory of path if it doesn't exist."""
    p.parent.mkdir(parents=True, exist_ok=True)


def home_dir() -> Path:
    return Path(os.path.expanduser("~"))


def default_keyfile_path() -> Path:
    """Return default path for the Chef client key."""
    return home_dir() / CHEF_DIR_NAME / KEYFILE_NAME


def default_knife_config_path() -> Path:
    """Return default path for the generated knife.rb."""
    return home_dir() / CHEF_DIR_NAME / KNIFE_CONFIG_NAME


def default_berks_config_path() -> Path:
    """Return default path for the generated Berkshelf config."""
    return home_dir() / BERKSHELF_DIR_NAME / BERKS_CONFIG_NAME
