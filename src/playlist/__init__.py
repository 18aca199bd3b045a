from __future__ import annotations

from playlist.errors import MalformedTimestampError, MissingFieldError, PlaylistError
from playlist.item import Item, PlaylistEntry, Tier, VideoDetails
from playlist.ordering import compare_items, same_order, sort_items
from playlist.pruning import Decision, RemovalReason, classify
from playlist.service import PlaylistService

__all__ = [
    "Decision",
    "Item",
    "MalformedTimestampError",
    "MissingFieldError",
    "PlaylistEntry",
    "PlaylistError",
    "PlaylistService",
    "RemovalReason",
    "Tier",
    "VideoDetails",
    "classify",
    "compare_items",
    "same_order",
    "sort_items",
]
