"""chefpublish exception classes."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .shell import CommandResult


class ChefPublishError(RuntimeError):
    """Base exception for chefpublish errors."""

    def __init__(self, message: str, rc: int = 1):
        super().__init__(message)
        self.rc = rc


class ErrorKind(Enum):
    """Phase in which a publish run failed."""

    MISSING_CONFIGURATION = "missing_configuration"
    DEPENDENCY_FETCH_FAILED = "dependency_fetch_failed"
    PACKAGE_UPLOAD_FAILED = "package_upload_failed"
    AUXILIARY_UPLOAD_FAILED = "auxiliary_upload_failed"


class PublishError(ChefPublishError):
    """A publish phase failed; the run cannot continue.

    The message names the phase only. Output captured from the external
    tool is available on ``result`` for diagnosis.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        result: CommandResult | None = None,
    ):
        rc = 2 if kind is ErrorKind.MISSING_CONFIGURATION else 1
        super().__init__(message, rc=rc)
        self.kind = kind
        self.result = result
