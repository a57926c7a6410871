"""chefpublish constants."""

from __future__ import annotations

# Workspace layout
METADATA_FILE_NAME = "metadata.rb"
BERKSFILE_NAME = "Berksfile"
BERKSFILE_LOCK_NAME = "Berksfile.lock"
CHEF_DATA_DIR_NAMES = ("roles", "environments", "data_bags")

# External tools
BERKS_BIN = "berks"
KNIFE_BIN = "knife"
COMMAND_NOT_FOUND_EXIT_CODE = 127

# knife.rb ssl_verify_mode values (Ruby symbols)
SSL_VERIFY_PEER = ":verify_peer"
SSL_VERIFY_NONE = ":verify_none"

# Berkshelf config written when TLS verification is disabled
BERKS_NO_VERIFY_CONFIG = '{"ssl":{"verify":false}}'

# Defaults
DEFAULT_SERVER = "https://api.chef.io"
DEFAULT_USER = "drone"
CHEF_DIR_NAME = ".chef"
KEYFILE_NAME = "client.pem"
KNIFE_CONFIG_NAME = "knife.rb"
BERKSHELF_DIR_NAME = ".berkshelf"
BERKS_CONFIG_NAME = "config.json"
KEYFILE_MODE = 0o600
