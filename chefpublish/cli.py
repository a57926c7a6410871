"""chefpublish CLI using Click."""

from __future__ import annotations

import logging
import sys
from importlib.metadata import version

import click

from .config import PublishConfig
from .constants import DEFAULT_SERVER, DEFAULT_USER
from .exceptions import ChefPublishError
from .processor import Processor
from .utils import default_berks_config_path, default_keyfile_path, default_knife_config_path

# Module logger
logger = logging.getLogger("chefpublish")


def setup_logging(debug: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(level)
    if any(
        isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stderr
        for h in logger.handlers
    ):
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(handler)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=version("chefpublish"), prog_name="chefpublish")
@click.option(
    "--server",
    envvar="PLUGIN_SERVER",
    default=DEFAULT_SERVER,
    show_default=True,
    help="Chef Server base URL.",
)
@click.option(
    "--org",
    envvar="PLUGIN_ORG",
    help="Chef Server organization (required).",
)
@click.option(
    "--user",
    envvar="PLUGIN_USER",
    default=DEFAULT_USER,
    show_default=True,
    help="Chef client name used to authenticate.",
)
@click.option(
    "--private-key",
    envvar=["PLUGIN_PRIVATE_KEY", "CHEF_PRIVATE_KEY"],
    help="PEM private key; written to --keyfile before uploading.",
)
@click.option(
    "--keyfile",
    type=click.Path(dir_okay=False),
    envvar="PLUGIN_KEYFILE",
    help="Path to the client key (default: ~/.chef/client.pem).",
)
@click.option(
    "--ssl-verify/--no-ssl-verify",
    envvar="PLUGIN_SSL_VERIFY",
    default=True,
    show_default=True,
    help="Verify the Chef Server TLS certificate.",
)
@click.option(
    "--recursive/--no-recursive",
    envvar="PLUGIN_RECURSIVE",
    default=True,
    show_default=True,
    help="Upload every cookbook in the Berksfile, not only this one.",
)
@click.option(
    "--freeze/--no-freeze",
    envvar="PLUGIN_FREEZE",
    default=True,
    show_default=True,
    help="Freeze uploaded cookbook versions.",
)
@click.option(
    "--workspace",
    type=click.Path(file_okay=False),
    envvar="DRONE_WORKSPACE",
    default=".",
    show_default=True,
    help="Directory holding the cookbook or Chef repo.",
)
@click.option(
    "--knife-config",
    type=click.Path(dir_okay=False),
    envvar="PLUGIN_KNIFE_CONFIG",
    help="Where to write knife.rb (default: ~/.chef/knife.rb).",
)
@click.option(
    "--berks-config",
    type=click.Path(dir_okay=False),
    envvar="PLUGIN_BERKS_CONFIG",
    help="Where to write the Berkshelf config (default: ~/.berkshelf/config.json).",
)
@click.option(
    "--debug",
    "-d",
    envvar="PLUGIN_DEBUG",
    is_flag=True,
    help="Enable debug logging to stderr.",
)
def cli(
    server: str,
    org: str | None,
    user: str,
    private_key: str | None,
    keyfile: str | None,
    ssl_verify: bool,
    recursive: bool,
    freeze: bool,
    workspace: str,
    knife_config: str | None,
    berks_config: str | None,
    debug: bool,
):
    """Publish a Chef cookbook, roles, environments and data bags to a Chef Server.

    Every option can also be supplied through the environment variable
    shown in its help, which is how Drone passes plugin settings.
    """
    setup_logging(debug=debug)

    config = PublishConfig(
        org=org,
        server=server,
        user=user,
        keyfile_path=keyfile or default_keyfile_path(),
        ssl_verify=ssl_verify,
        workspace=workspace,
        recursive=recursive,
        freeze=freeze,
        knife_config_path=knife_config or default_knife_config_path(),
        berks_config_path=berks_config or default_berks_config_path(),
        private_key=private_key,
    )
    logger.debug("Configuration: %s", config)

    try:
        results = Processor(config).run()
    except ChefPublishError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(e.rc)
    except OSError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)

    logger.info("Publish complete (%d command(s) run)", len(results))


def main():
    """Main entry point for the CLI."""
    try:
        cli()
    except KeyboardInterrupt:
        click.echo("ERROR: Interrupted", err=True)
        sys.exit(130)
