from __future__ import annotations


class PlaylistError(Exception):
    """Base error for playlist data that cannot be trusted."""


class MalformedTimestampError(PlaylistError):
    """A live-streaming timestamp is not valid RFC3339 with a UTC offset."""


class MissingFieldError(PlaylistError):
    """A remote record lacks a field the playlist operations depend on."""
