"""Core commit metadata types."""

from .commit_info import EMPTY, OAK_UNKNOWN, ROOT_PATH, CommitInfo
from .exceptions import InvalidArgumentError

__all__ = ["CommitInfo", "EMPTY", "InvalidArgumentError", "OAK_UNKNOWN", "ROOT_PATH"]
