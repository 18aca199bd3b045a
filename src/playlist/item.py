"""
item.py

Playlist item model.

An Item is a read-only snapshot of one playlist entry, built fresh on every
fetch. Ordering and pruning only look at the two live-streaming timestamps
and the blocked flag.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import Optional

import isodate

from playlist.errors import MalformedTimestampError


class Tier(IntEnum):
    """Canonical ordering tier; lower values sort first."""

    STREAMED = 0
    SCHEDULED = 1
    UNSCHEDULED = 2


@dataclass(frozen=True)
class PlaylistEntry:
    """One row of the playlist listing."""

    entry_id: str
    video_id: str
    title: str


@dataclass(frozen=True)
class VideoDetails:
    """Live-streaming state of one video."""

    scheduled_start_time: Optional[datetime] = None
    actual_start_time: Optional[datetime] = None
    blocked: bool = False


@dataclass(frozen=True)
class Item:
    video_id: str
    entry_id: str
    title: str
    scheduled_start_time: Optional[datetime] = None
    actual_start_time: Optional[datetime] = None
    blocked: bool = False

    @classmethod
    def from_parts(cls, entry: PlaylistEntry, details: VideoDetails) -> Item:
        return cls(
            video_id=entry.video_id,
            entry_id=entry.entry_id,
            title=entry.title,
            scheduled_start_time=details.scheduled_start_time,
            actual_start_time=details.actual_start_time,
            blocked=details.blocked,
        )

    @property
    def streamed(self) -> bool:
        # Start and end are not distinguished; any actual time means streamed.
        return self.actual_start_time is not None

    @property
    def invalid(self) -> bool:
        return self.scheduled_start_time is None

    @property
    def tier(self) -> Tier:
        if self.actual_start_time is not None:
            return Tier.STREAMED
        if self.scheduled_start_time is not None:
            return Tier.SCHEDULED
        return Tier.UNSCHEDULED

    def __str__(self) -> str:
        return f"({self.video_id}: {self.title})"


# YYYY-MM-DDTHH:MM:SS[.frac](Z|+HH:MM|-HH:MM)
_RFC3339_SHAPE = re.compile(
    r"^\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2}(\.\d+)?([Zz]|[+-]\d{2}:\d{2})$"
)


def parse_timestamp(value: str) -> datetime:
    """
    Parse an RFC3339 timestamp such as ``2021-09-30T10:55:02+01:00``.

    Parsing is strict: anything outside the RFC3339 date-time shape (no
    basic format, week dates or missing seconds), anything isodate rejects,
    and any timestamp without a UTC offset raises MalformedTimestampError.
    """
    if not isinstance(value, str) or not _RFC3339_SHAPE.match(value):
        raise MalformedTimestampError(f"Invalid timestamp: {value!r}")

    try:
        parsed = isodate.parse_datetime(value)
    except (isodate.ISO8601Error, ValueError) as e:
        raise MalformedTimestampError(f"Invalid timestamp: {value!r}") from e

    if parsed.tzinfo is None or parsed.utcoffset() is None:
        raise MalformedTimestampError(f"Timestamp has no UTC offset: {value!r}")

    return parsed


def parse_optional_timestamp(value: Optional[str]) -> Optional[datetime]:
    if value is None:
        return None
    return parse_timestamp(value)
