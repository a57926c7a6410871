"""Generation of knife and Berkshelf configuration files."""

from __future__ import annotations

import logging

from .config import PublishConfig
from .constants import BERKS_NO_VERIFY_CONFIG

logger = logging.getLogger("chefpublish")


def knife_rb_body(config: PublishConfig) -> str:
    """Return knife.rb contents for the given config."""
    lines = [
        f"node_name '{config.user}'",
        f"client_key '{config.keyfile_path}'",
        f"chef_server_url '{config.server_url}'",
        f"chef_repo_path '{config.workspace}'",
        f"ssl_verify_mode {config.ssl_mode}",
    ]
    return "\n".join(lines) + "\n"


def write_knife_rb(config: PublishConfig) -> None:
    """Write knife.rb, replacing any previous contents."""
    with config.knife_config_path.open("w", encoding="utf-8") as f:
        f.write(knife_rb_body(config))
    logger.debug("Wrote knife config to %s", config.knife_config_path)


def write_berks_config(config: PublishConfig) -> bool:
    """Write the Berkshelf config disabling TLS verification.

    Nothing is written when verification is enabled; Berkshelf then falls
    back to verifying certificates. Returns True if the file was written.
    """
    if config.ssl_verify:
        return False
    with config.berks_config_path.open("w", encoding="utf-8") as f:
        f.write(BERKS_NO_VERIFY_CONFIG + "\n")
    logger.debug("Wrote Berkshelf config to %s", config.berks_config_path)
    return True
