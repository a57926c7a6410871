"""Publish run configuration."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from .constants import DEFAULT_SERVER, DEFAULT_USER, KEYFILE_MODE, SSL_VERIFY_NONE, SSL_VERIFY_PEER
from .utils import (
    default_berks_config_path,
    default_keyfile_path,
    default_knife_config_path,
    ensure_parent_dir,
)

logger = logging.getLogger("chefpublish")


@dataclass(frozen=True)
class PublishConfig:
    """Settings for a single publish run.

    Built once by the CLI and never mutated afterwards. Path fields accept
    strings and are normalised to ``Path``.
    """

    org: str | None
    server: str = DEFAULT_SERVER
    user: str = DEFAULT_USER
    keyfile_path: Path = field(default_factory=default_keyfile_path)
    ssl_verify: bool = True
    workspace: Path = Path(".")
    recursive: bool = True
    freeze: bool = True
    knife_config_path: Path = field(default_factory=default_knife_config_path)
    berks_config_path: Path = field(default_factory=default_berks_config_path)
    private_key: str | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        for name in ("keyfile_path", "workspace", "knife_config_path", "berks_config_path"):
            object.__setattr__(self, name, Path(getattr(self, name)).expanduser().absolute())

    @property
    def ssl_mode(self) -> str:
        """Value for knife.rb's ssl_verify_mode."""
        return SSL_VERIFY_PEER if self.ssl_verify else SSL_VERIFY_NONE

    @property
    def server_url(self) -> str:
        """Organization-scoped Chef Server URL."""
        return f"{self.server.rstrip('/')}/organizations/{self.org}"


def configure(config: PublishConfig) -> None:
    """Prepare the filesystem for config generation.

    Creates parent directories of the generated files and, when a private
    key was supplied, writes it to the keyfile path readable by owner only.
    """
    ensure_parent_dir(config.knife_config_path)
    ensure_parent_dir(config.berks_config_path)

    if not config.private_key:
        logger.debug("No private key supplied; using existing %s", config.keyfile_path)
        return

    ensure_parent_dir(config.keyfile_path)
    key = config.private_key
    if not key.endswith("\n"):
        key += "\n"
    fd = os.open(config.keyfile_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, KEYFILE_MODE)
    with os.fdopen(fd, "w") as f:
        f.write(key)
    # O_CREAT mode is ignored for an existing file
    os.chmod(config.keyfile_path, KEYFILE_MODE)
    logger.debug("Wrote private key to %s", config.keyfile_path)
