from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from playlist.item import PlaylistEntry, VideoDetails


class PlaylistSource(ABC):
    """
    Abstract remote playlist backend (YouTube today).

    Calls are blocking and may raise transport/auth errors; callers let
    them propagate.
    """

    name: str

    @abstractmethod
    def list_playlist_entries(self, playlist_id: str) -> List[PlaylistEntry]:
        """All entries of the playlist in current order, across every page."""
        raise NotImplementedError

    @abstractmethod
    def get_video_details(self, video_id: str) -> VideoDetails:
        """Live-streaming timestamps and block state for one video."""
        raise NotImplementedError

    @abstractmethod
    def reorder_entry(
        self, entry_id: str, playlist_id: str, video_id: str, position: int
    ) -> None:
        """Move one playlist entry to a zero-based position."""
        raise NotImplementedError

    @abstractmethod
    def delete_entry(self, entry_id: str) -> None:
        """Remove one playlist entry."""
        raise NotImplementedError
