"""Tests for chefpublish/chef_config.py - knife.rb and Berkshelf config generation."""

from __future__ import annotations

from pathlib import Path

import pytest
from chefpublish.chef_config import knife_rb_body, write_berks_config, write_knife_rb


class TestKnifeRb:
    """Tests for knife.rb generation."""

    def test_body_lines(self, make_config, workspace: Path, home: Path):
        """knife.rb contains the five directives in order."""
        config = make_config()
        assert knife_rb_body(config).splitlines() == [
            "node_name 'deployer'",
            f"client_key '{home / '.chef' / 'client.pem'}'",
            "chef_server_url 'https://chef.example.com/organizations/acme'",
            f"chef_repo_path '{workspace}'",
            "ssl_verify_mode :verify_peer",
        ]

    def test_verify_none_when_ssl_disabled(self, make_config):
        """ssl_verify_mode is :verify_none when verification is off."""
        config = make_config(ssl_verify=False)
        assert knife_rb_body(config).endswith("ssl_verify_mode :verify_none\n")

    def test_trailing_slash_on_server(self, make_config):
        """A trailing slash on the server does not double up."""
        config = make_config(server="https://chef.example.com/")
        assert "chef_server_url 'https://chef.example.com/organizations/acme'" in knife_rb_body(
            config
        )

    def test_write_truncates(self, make_config):
        """Existing content is replaced."""
        config = make_config()
        config.knife_config_path.parent.mkdir(parents=True)
        config.knife_config_path.write_text("stale content\n" * 50)

        write_knife_rb(config)

        assert config.knife_config_path.read_text() == knife_rb_body(config)

    def test_unwritable_path_raises(self, make_config, tmp_path: Path):
        """Filesystem errors propagate."""
        config = make_config(knife_config_path=tmp_path / "missing" / "knife.rb")
        with pytest.raises(FileNotFoundError):
            write_knife_rb(config)


class TestBerksConfig:
    """Tests for the Berkshelf TLS override."""

    def test_skipped_when_verifying(self, make_config):
        """No file is created when SSL verification is enabled."""
        config = make_config(ssl_verify=True)
        config.berks_config_path.parent.mkdir(parents=True)

        assert write_berks_config(config) is False
        assert not config.berks_config_path.exists()

    def test_existing_file_untouched_when_verifying(self, make_config):
        """A pre-existing file is left alone when verification is enabled."""
        config = make_config(ssl_verify=True)
        config.berks_config_path.parent.mkdir(parents=True)
        config.berks_config_path.write_text("{}")

        write_berks_config(config)

        assert config.berks_config_path.read_text() == "{}"

    def test_written_when_not_verifying(self, make_config):
        """Exact JSON body is written when verification is disabled."""
        config = make_config(ssl_verify=False)
        config.berks_config_path.parent.mkdir(parents=True)

        assert write_berks_config(config) is True
        assert config.berks_config_path.read_text() == '{"ssl":{"verify":false}}\n'
