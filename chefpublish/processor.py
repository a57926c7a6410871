"""Upload of a cookbook and its Chef data to a Chef Server."""

from __future__ import annotations

import logging

from .chef_config import write_berks_config, write_knife_rb
from .config import PublishConfig, configure
from .constants import BERKS_BIN, BERKSFILE_NAME, KNIFE_BIN
from .exceptions import ErrorKind, PublishError
from .shell import CommandResult, run_command
from .workspace import (
    CookbookMetadata,
    has_berksfile,
    has_chef_data,
    has_cookbook,
    read_cookbook_metadata,
)

logger = logging.getLogger("chefpublish")


class Processor:
    """Decides which berks/knife commands a workspace needs and runs them.

    Steps run strictly in order and the first failure raises PublishError,
    skipping everything after it:

    1. validate: an organization is required.
    2. configure: key file, knife.rb and (optionally) Berkshelf config.
    3. berks install, if a Berksfile or Berksfile.lock exists.
    4. berks upload, under the same condition.
    5. knife upload of roles/environments/data_bags, only when the
       workspace is not a cookbook (no metadata.rb).
    """

    def __init__(self, config: PublishConfig):
        self.config = config
        self._cookbook: CookbookMetadata | None = None

    @property
    def cookbook(self) -> CookbookMetadata:
        """Cookbook metadata, read from metadata.rb on first access."""
        if self._cookbook is None:
            self._cookbook = read_cookbook_metadata(self.config.workspace)
        return self._cookbook

    @property
    def berksfile_path(self) -> str:
        return f"{self.config.workspace}/{BERKSFILE_NAME}"

    def run(self) -> list[CommandResult]:
        """Validate, write config files and upload. Returns executed commands."""
        self.validate()
        self.configure()
        return self.upload()

    def validate(self) -> None:
        if not (self.config.org or "").strip():
            raise PublishError(
                ErrorKind.MISSING_CONFIGURATION, "Please provide an organization"
            )

    def configure(self) -> None:
        """Write the files berks and knife read their settings from."""
        configure(self.config)
        write_knife_rb(self.config)
        write_berks_config(self.config)

    def upload(self) -> list[CommandResult]:
        workspace = self.config.workspace
        results: list[CommandResult] = []

        if has_berksfile(workspace):
            results.append(self.berks_install())
            results.append(self.berks_upload())

        if not has_cookbook(workspace) and has_chef_data(workspace):
            results.append(self.knife_upload())

        if not results:
            logger.info("Nothing to upload in %s", workspace)
        return results

    def berks_install(self) -> CommandResult:
        """Fetch the cookbook's dependencies."""
        logger.info("Retrieving cookbooks")
        result = run_command([BERKS_BIN, "install", "-b", self.berksfile_path])
        self._check(result, ErrorKind.DEPENDENCY_FETCH_FAILED, "Failed to retrieve cookbooks")
        return result

    def berks_upload(self) -> CommandResult:
        """Upload the cookbook, or every cookbook in the Berksfile when recursive."""
        logger.info("Running berks upload")
        command = [BERKS_BIN, "upload"]
        if not self.config.recursive:
            cookbook = self.cookbook
            logger.info("Uploading %s %s", cookbook.name, cookbook.version or "(unversioned)")
            command.append(cookbook.name)
        command += ["-b", self.berksfile_path]
        if not self.config.freeze:
            command.append("--no-freeze")

        result = run_command(command)
        self._check(result, ErrorKind.PACKAGE_UPLOAD_FAILED, "Failed to upload cookbook")
        return result

    def knife_upload(self) -> CommandResult:
        """Upload roles, environments and data bags from the workspace root."""
        logger.info("Uploading roles, environments and data bags")
        command = [KNIFE_BIN, "upload", ".", "-c", str(self.config.knife_config_path)]
        result = run_command(command, cwd=self.config.workspace)
        self._check(result, ErrorKind.AUXILIARY_UPLOAD_FAILED, "knife upload failed")
        return result

    def _check(self, result: CommandResult, kind: ErrorKind, message: str) -> None:
        name = " ".join(result.argv[:2])
        if result.ok:
            if result.stdout:
                logger.debug("%s stdout: %s", name, result.stdout.rstrip())
            return
        if result.stderr:
            logger.error("%s stderr: %s", name, result.stderr.rstrip())
        if result.stdout:
            # berks and knife often report failures on stdout
            log = logger.debug if result.stderr else logger.error
            log("%s stdout: %s", name, result.stdout.rstrip())
        raise PublishError(kind, message, result=result)
