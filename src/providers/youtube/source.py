"""
source.py

YouTube Data API implementation of PlaylistSource.

Responsibilities:
- Page through playlistItems.list into a complete entry list
- Look up live-streaming details and region restrictions per video
- Reorder (playlistItems.update) and delete (playlistItems.delete) entries

Does NOT:
- Decide ordering or what to prune
- Honor dry-run (the playlist service never calls writes under dry-run)
"""

from __future__ import annotations

import time
from typing import Any, Callable, Dict, List, Optional, TypeAlias, TypeVar

from googleapiclient.errors import HttpError

import config
from logger import get_logger
from playlist.errors import MissingFieldError
from playlist.item import PlaylistEntry, VideoDetails, parse_optional_timestamp
from providers.base import PlaylistSource
from providers.youtube.api_manager import execute_with_retry, http_status

logger = get_logger(__name__)

YouTubeClient: TypeAlias = Any
T = TypeVar("T")


def _require(record: Dict[str, Any], *path: str) -> str:
    """Walk nested dict keys; raise MissingFieldError unless a non-empty str is found."""
    value: Any = record
    for key in path:
        value = value.get(key) if isinstance(value, dict) else None
    if not isinstance(value, str) or not value:
        raise MissingFieldError(f"Playlist record missing field: {'.'.join(path)}")
    return value


def parse_playlist_entry(raw: Dict[str, Any]) -> PlaylistEntry:
    return PlaylistEntry(
        entry_id=_require(raw, "id"),
        video_id=_require(raw, "contentDetails", "videoId"),
        title=_require(raw, "snippet", "title"),
    )


def parse_video_details(resp: Dict[str, Any]) -> VideoDetails:
    """
    Build VideoDetails from a videos.list response for a single id.

    A video YouTube no longer returns (deleted/private) has no details at
    all, which makes it unscheduled.
    """
    videos = resp.get("items") or []
    if not videos:
        return VideoDetails()

    video = videos[0]
    live = video.get("liveStreamingDetails") or {}
    restriction = (video.get("contentDetails") or {}).get("regionRestriction") or {}

    return VideoDetails(
        scheduled_start_time=parse_optional_timestamp(live.get("scheduledStartTime")),
        actual_start_time=parse_optional_timestamp(live.get("actualStartTime")),
        blocked=bool(restriction.get("blocked")),
    )


class YouTubePlaylistSource(PlaylistSource):
    name = "youtube"

    def __init__(
        self,
        youtube: YouTubeClient,
        *,
        sleep_sec: float = config.DEFAULT_SLEEP_BETWEEN_CALLS_SEC,
        max_retries: int = config.DEFAULT_MAX_RETRIES,
        backoff_base_sec: float = config.DEFAULT_BACKOFF_BASE_SEC,
    ):
        self.youtube = youtube
        self.sleep_sec = sleep_sec
        self.max_retries = max_retries
        self.backoff_base_sec = backoff_base_sec

    def _call(self, op: Callable[[], T], name: str) -> T:
        if self.sleep_sec > 0:
            time.sleep(self.sleep_sec)
        return execute_with_retry(
            op,
            name,
            max_retries=self.max_retries,
            backoff_base_sec=self.backoff_base_sec,
        )

    # ----------------------------
    # Reads
    # ----------------------------

    def list_playlist_entries(self, playlist_id: str) -> List[PlaylistEntry]:
        entries: List[PlaylistEntry] = []
        page_token: Optional[str] = None

        while True:

            def _op() -> Any:
                return (
                    self.youtube.playlistItems()
                    .list(
                        part=config.PLAYLIST_ITEM_LIST_PARTS,
                        playlistId=playlist_id,
                        maxResults=config.YOUTUBE_BATCH_SIZE,
                        pageToken=page_token,
                    )
                    .execute()
                )

            resp = self._call(_op, "playlistItems.list")

            for raw in resp.get("items") or []:
                entries.append(parse_playlist_entry(raw))

            page_token = resp.get("nextPageToken")
            if not page_token:
                break

        logger.debug(f"Listed {len(entries)} entries of playlist {playlist_id}")
        return entries

    def get_video_details(self, video_id: str) -> VideoDetails:
        def _op() -> Any:
            return (
                self.youtube.videos()
                .list(part=config.VIDEO_DETAIL_PARTS, id=video_id)
                .execute()
            )

        return parse_video_details(self._call(_op, f"videos.list {video_id}"))

    # ----------------------------
    # Writes
    # ----------------------------

    def reorder_entry(
        self, entry_id: str, playlist_id: str, video_id: str, position: int
    ) -> None:
        body = {
            "id": entry_id,
            "snippet": {
                "playlistId": playlist_id,
                "resourceId": {
                    "kind": config.VIDEO_RESOURCE_KIND,
                    "videoId": video_id,
                },
                "position": position,
            },
        }

        def _op() -> Any:
            return (
                self.youtube.playlistItems()
                .update(part=config.PLAYLIST_ITEM_UPDATE_PARTS, body=body)
                .execute()
            )

        self._call(_op, f"playlistItems.update {entry_id}")

    def delete_entry(self, entry_id: str) -> None:
        """
        Delete one playlist entry.

        A retry that finds the entry gone (404) means an earlier attempt was
        applied before its response failed, so it counts as success.
        """
        attempts = 0

        def _op() -> Any:
            nonlocal attempts
            attempts += 1
            try:
                return self.youtube.playlistItems().delete(id=entry_id).execute()
            except HttpError as e:
                if attempts > 1 and http_status(e) == 404:
                    logger.info(f"{entry_id} already deleted by an earlier attempt")
                    return None
                raise

        self._call(_op, f"playlistItems.delete {entry_id}")
