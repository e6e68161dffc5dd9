"""Formatting utilities for displaying commit metadata."""

import json
from datetime import datetime, timedelta, timezone

import yaml

from commitinfo.core.commit_info import CommitInfo

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def format_timestamp(millis: int) -> str:
    """Format a millisecond epoch timestamp as ISO-8601 UTC.

    Args:
        millis: Milliseconds since the epoch

    Returns:
        Timestamp string with millisecond precision and a trailing "Z", or
        "<millis> ms" when the instant is outside the datetime range

    Examples:
        >>> format_timestamp(0)
        '1970-01-01T00:00:00.000Z'
        >>> format_timestamp(1700000000123)
        '2023-11-14T22:13:20.123Z'
        >>> format_timestamp(10**17)
        '100000000000000000 ms'
    """
    seconds, remainder = divmod(millis, 1000)
    try:
        moment = EPOCH + timedelta(seconds=seconds)
    except OverflowError:
        return f"{millis} ms"
    return f"{moment.strftime('%Y-%m-%dT%H:%M:%S')}.{remainder:03d}Z"


def to_display_dict(info: CommitInfo) -> dict:
    """
    Convert commit metadata to a plain dict for display.

    The message is left out when absent and the ISO form of the timestamp
    is added as ``created_utc``. This is a diagnostic view only and is not
    meant to be read back.

    Args:
        info: Commit metadata to convert

    Returns:
        Ordered dict of labeled values
    """
    data = info.model_dump(exclude_none=True)
    data["created_utc"] = format_timestamp(info.timestamp)
    return data


def render_text(info: CommitInfo) -> str:
    """Render commit metadata as aligned "label: value" lines."""
    data = to_display_dict(info)
    width = max(len(key) for key in data)
    return "\n".join(f"{key.ljust(width)}: {value}" for key, value in data.items())


def render_json(info: CommitInfo, indent: int = 2) -> str:
    """Render commit metadata as JSON."""
    return json.dumps(to_display_dict(info), indent=indent)


def render_yaml(info: CommitInfo) -> str:
    """Render commit metadata as YAML."""
    return yaml.dump(to_display_dict(info), default_flow_style=False, sort_keys=False)
