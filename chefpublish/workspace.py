"""Read-only inspection of a cookbook workspace."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from .constants import (
    BERKSFILE_LOCK_NAME,
    BERKSFILE_NAME,
    CHEF_DATA_DIR_NAMES,
    METADATA_FILE_NAME,
)
from .exceptions import ErrorKind, PublishError

# name 'foo' / version "1.2.3" at the start of a metadata.rb line
_METADATA_FIELD_RE = re.compile(
    r"""^\s*(name|version)\s*\(?\s*(['"])(?P<value>[^'"]+)\2""", re.MULTILINE
)


@dataclass(frozen=True)
class CookbookMetadata:
    """Fields read from a cookbook's metadata.rb."""

    name: str
    version: str | None = None


def _exists(path: Path) -> bool:
    try:
        return path.exists()
    except OSError:
        return False


def has_cookbook(workspace: Path) -> bool:
    """Return True if the workspace root holds a metadata.rb."""
    return _exists(workspace / METADATA_FILE_NAME)


def has_berksfile(workspace: Path) -> bool:
    """Return True if the workspace root holds a Berksfile or Berksfile.lock."""
    return _exists(workspace / BERKSFILE_NAME) or _exists(workspace / BERKSFILE_LOCK_NAME)


def has_chef_data(workspace: Path) -> bool:
    """Return True if any roles, environments or data_bags entry exists."""
    return any(_exists(workspace / name) for name in CHEF_DATA_DIR_NAMES)


def parse_cookbook_metadata(text: str) -> CookbookMetadata | None:
    """Extract name and version declarations from metadata.rb source.

    Only literal string arguments are understood. The first declaration of
    each field wins. Returns None when no name is declared.
    """
    fields: dict[str, str] = {}
    for match in _METADATA_FIELD_RE.finditer(text):
        fields.setdefault(match.group(1), match.group("value"))
    if "name" not in fields:
        return None
    return CookbookMetadata(name=fields["name"], version=fields.get("version"))


def read_cookbook_metadata(workspace: Path) -> CookbookMetadata:
    """Read and parse the workspace's metadata.rb."""
    path = workspace / METADATA_FILE_NAME
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise PublishError(
            ErrorKind.PACKAGE_UPLOAD_FAILED,
            f"Unable to read cookbook metadata from {path}: {e}",
        ) from e

    metadata = parse_cookbook_metadata(text)
    if metadata is None:
        raise PublishError(
            ErrorKind.PACKAGE_UPLOAD_FAILED,
            f"Cookbook metadata {path} does not declare a name",
        )
    return metadata
