"""Execution of external tools."""

from __future__ import annotations

import logging
import subprocess
import time
from dataclasses import dataclass
from pathlib import Path

from .constants import COMMAND_NOT_FOUND_EXIT_CODE
from .utils import format_command, format_elapsed_time

logger = logging.getLogger("chefpublish")


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one external command."""

    argv: list[str]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def run_command(argv: list[str], *, cwd: Path | None = None) -> CommandResult:
    """
    Executes argv and waits for it to exit, optionally in directory cwd.

    Returns a CommandResult. Does NOT raise on non-zero rc; a missing
    executable is reported as rc 127.
    """
    logger.debug("Running: %s", format_command(argv))
    if cwd is not None:
        logger.debug("Working directory: %s", cwd)

    start_time = time.time()
    try:
        p = subprocess.run(
            argv,
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
        )
    except FileNotFoundError:
        # raised both for a missing executable and a missing cwd
        if cwd is not None and not Path(cwd).is_dir():
            detail = f"working directory {cwd} does not exist"
        else:
            detail = f"{argv[0]} binary not found on PATH"
        return CommandResult(
            argv=argv,
            returncode=COMMAND_NOT_FOUND_EXIT_CODE,
            stdout="",
            stderr=detail,
        )

    elapsed = time.time() - start_time
    logger.debug("%s completed in %s (rc=%d)", argv[0], format_elapsed_time(elapsed), p.returncode)
    return CommandResult(
        argv=argv,
        returncode=p.returncode,
        stdout=p.stdout.decode("utf-8", "replace"),
        stderr=p.stderr.decode("utf-8", "replace"),
    )
