"""Commit metadata attached to each write transaction."""

import logging
import time
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

# Placeholder for a user or session that is not known
OAK_UNKNOWN = "oak:unknown"

ROOT_PATH = "/"

# 9999-12-31T23:59:59.999Z, the last instant datetime can represent
MAX_TIMESTAMP = 253402300799999


def current_time_millis() -> int:
    """Return the current wall-clock time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def _describe_errors(error: ValidationError) -> str:
    """Flatten pydantic validation errors into a single line."""
    parts = []
    for err in error.errors():
        loc = ".".join(str(item) for item in err["loc"]) or "value"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


class CommitInfo(BaseModel):
    """Immutable metadata describing who committed what, where and when.

    Instances are created once per commit and then shared read-only with
    hooks, editors and observers. Construction captures the current time
    in ``timestamp``; use :meth:`create_at` where a fixed timestamp is
    needed.

    Equality and hashing cover all five fields, timestamp included, so two
    commits with the same session, user, message and path but created at
    different instants are not equal.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    session_id: str = Field(..., description="Identifier of the committing session")
    user_id: str = Field(
        default=OAK_UNKNOWN, description="Identifier of the committing user"
    )
    message: Optional[str] = Field(None, description="Message attached to the commit")
    timestamp: int = Field(
        default_factory=lambda: current_time_millis(),
        ge=0,
        le=MAX_TIMESTAMP,
        strict=True,
        description="Creation time in milliseconds since the epoch",
    )
    path: str = Field(
        default=ROOT_PATH, description="Base path of the subtree the commit touches"
    )

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as e:
            logger.debug("Rejected commit info %r: %s", data, e)
            raise InvalidArgumentError(_describe_errors(e)) from e

    @field_validator("user_id", mode="before")
    @classmethod
    def default_unknown_user(cls, v: Optional[str]) -> str:
        """Substitute the unknown-user placeholder for a missing user id."""
        if v is None:
            return OAK_UNKNOWN
        return v

    @classmethod
    def create(
        cls,
        session_id: str,
        user_id: Optional[str] = None,
        message: Optional[str] = None,
        path: str = ROOT_PATH,
    ) -> "CommitInfo":
        """
        Create commit metadata stamped with the current time.

        Args:
            session_id: Identifier of the committing session
            user_id: Committing user, or None for ``OAK_UNKNOWN``
            message: Optional commit message
            path: Base path of the commit (defaults to the root path)

        Returns:
            New CommitInfo instance

        Raises:
            InvalidArgumentError: If session_id or path is None
        """
        info = cls(session_id=session_id, user_id=user_id, message=message, path=path)
        logger.debug("Created commit info: %s", info)
        return info

    @classmethod
    def create_at(
        cls,
        timestamp: int,
        session_id: str,
        user_id: Optional[str] = None,
        message: Optional[str] = None,
        path: str = ROOT_PATH,
    ) -> "CommitInfo":
        """
        Create commit metadata with an explicit timestamp.

        Same rules as :meth:`create`, but the timestamp is taken from the
        caller instead of the clock, which makes the result reproducible.

        Raises:
            InvalidArgumentError: If session_id or path is None, or the
                timestamp is not an integer between 0 and MAX_TIMESTAMP
        """
        info = cls(
            session_id=session_id,
            user_id=user_id,
            message=message,
            timestamp=timestamp,
            path=path,
        )
        logger.debug("Created commit info: %s", info)
        return info

    @classmethod
    def model_validate(cls, obj: Any, **kwargs: Any) -> "CommitInfo":
        """Validate a mapping or object, raising InvalidArgumentError on failure."""
        try:
            return super().model_validate(obj, **kwargs)
        except ValidationError as e:
            logger.debug("Rejected commit info %r: %s", obj, e)
            raise InvalidArgumentError(_describe_errors(e)) from e

    @classmethod
    def model_validate_json(cls, json_data: Any, **kwargs: Any) -> "CommitInfo":
        """Validate JSON input, raising InvalidArgumentError on failure."""
        try:
            return super().model_validate_json(json_data, **kwargs)
        except ValidationError as e:
            logger.debug("Rejected commit info %r: %s", json_data, e)
            raise InvalidArgumentError(_describe_errors(e)) from e

    @classmethod
    def model_construct(
        cls, _fields_set: Optional[set] = None, **values: Any
    ) -> "CommitInfo":
        """Build an instance through full validation; no unchecked shortcut."""
        return cls(**values)

    def model_copy(
        self, *, update: Optional[dict] = None, deep: bool = False
    ) -> "CommitInfo":
        """
        Return a copy with some fields replaced.

        The copy is validated like a new instance and keeps this instance's
        timestamp unless ``update`` overrides it. All fields are immutable,
        so ``deep`` makes no difference.

        Raises:
            InvalidArgumentError: If the updated values are invalid
        """
        return type(self)(**{**self.model_dump(), **(update or {})})

    def _key(self) -> tuple:
        return (self.session_id, self.user_id, self.message, self.timestamp, self.path)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, CommitInfo):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr_args__(self):
        for name, value in super().__repr_args__():
            if name == "message" and value is None:
                continue
            yield name, value

    def is_empty(self) -> bool:
        """Return True if this is the shared placeholder for missing metadata."""
        return self is EMPTY or self == EMPTY

    def covers(self, path: str) -> bool:
        """
        Check whether a repository path falls within this commit's base path.

        The base path is informational only: hooks and observers may use
        it to skip subtrees, but nothing enforces it.

        Args:
            path: Absolute repository path to check

        Returns:
            True if path equals the base path or lies below it

        Examples:
            >>> info = CommitInfo.create_at(0, "s1", path="/content")
            >>> info.covers("/content/en")
            True
            >>> info.covers("/contentious")
            False
        """
        if not isinstance(path, str):
            raise InvalidArgumentError(
                f"path must be a string, got {type(path).__name__}"
            )
        base = self.path.rstrip("/")
        # An empty base path ("" or "/") is the root and covers everything
        if not base:
            return True
        return path == base or path.startswith(base + "/")


# Used in place of real metadata when none is known or needed.
# Built once at import time and never replaced.
EMPTY = CommitInfo(session_id=OAK_UNKNOWN, user_id=OAK_UNKNOWN)
