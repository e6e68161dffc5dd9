"""Commitinfo - immutable metadata attached to content repository commits."""

__version__ = "0.1.0"

from .core.commit_info import EMPTY, OAK_UNKNOWN, ROOT_PATH, CommitInfo
from .core.exceptions import InvalidArgumentError

__all__ = ["CommitInfo", "EMPTY", "InvalidArgumentError", "OAK_UNKNOWN", "ROOT_PATH"]
