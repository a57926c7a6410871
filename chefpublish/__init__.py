"""
chefpublish - CI step that uploads Chef cookbooks and repo data to a Chef Server.

Design goals:
- One pass per build: validate, write credentials, upload, exit.
- Delegate the actual upload to berks and knife.
- Fail on the first error with a message naming the failed phase.
"""

from __future__ import annotations

from .cli import main
from .config import PublishConfig
from .exceptions import ChefPublishError, ErrorKind, PublishError
from .processor import Processor

__all__ = [
    "ChefPublishError",
    "ErrorKind",
    "Processor",
    "PublishConfig",
    "PublishError",
    "main",
]
