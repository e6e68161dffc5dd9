"""Pytest configuration and shared fixtures for commitinfo tests."""

import pytest

from commitinfo.core import commit_info

FIXED_TIMESTAMP = 1700000000123


class FrozenClock:
    """Stand-in for the wall clock read during CommitInfo construction."""

    def __init__(self, value: int):
        self.value = value

    def advance(self, millis: int = 1) -> None:
        """Move the clock forward."""
        self.value += millis

    def __call__(self) -> int:
        return self.value


@pytest.fixture
def fixed_timestamp():
    """Timestamp used for reproducible commit metadata (2023-11-14T22:13:20.123Z)."""
    return FIXED_TIMESTAMP


@pytest.fixture
def frozen_clock(monkeypatch):
    """
    Pin the clock used by CommitInfo construction.

    Tests may set ``frozen_clock.value`` or call ``advance()`` to move
    time between constructions.
    """
    clock = FrozenClock(FIXED_TIMESTAMP)
    monkeypatch.setattr(commit_info, "current_time_millis", clock)
    return clock


@pytest.fixture
def sample_info(fixed_timestamp):
    """Commit metadata with every field populated."""
    return commit_info.CommitInfo.create_at(
        fixed_timestamp, "s1", "alice", "fix typo", "/content/en"
    )
