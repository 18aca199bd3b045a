"""
service.py

Playlist operations: items, sort, prune, print.

Every operation fetches fresh state from the PlaylistSource. Remote calls
run strictly one after another; reorder positions and the streamed cap
both depend on the order already established.

Dry-run replaces reorder/delete calls with log lines. Reads always run so
reports reflect the real playlist.
"""

from __future__ import annotations

from typing import List

from logger import get_logger
from playlist.item import Item
from playlist.ordering import same_order, sort_items
from playlist.pruning import Decision, classify
from playlist.report import format_item_line
from providers.base import PlaylistSource

logger = get_logger(__name__)


class PlaylistService:
    def __init__(
        self,
        source: PlaylistSource,
        playlist_id: str,
        *,
        dry_run: bool = False,
        debug: bool = False,
    ):
        if not playlist_id:
            raise ValueError("playlist_id cannot be empty")

        self.source = source
        self.playlist_id = playlist_id
        self.dry_run = dry_run
        self.debug = debug

    # ----------------------------
    # Reads
    # ----------------------------

    def items(self) -> List[Item]:
        """Fetch the playlist in its current remote order."""
        entries = self.source.list_playlist_entries(self.playlist_id)

        items: List[Item] = []
        for entry in entries:
            details = self.source.get_video_details(entry.video_id)
            items.append(Item.from_parts(entry, details))

        if self.debug:
            logger.info(f"Playlist items: {items!r}")
        else:
            logger.debug(f"Fetched {len(items)} playlist items")
        return items

    # ----------------------------
    # Operations
    # ----------------------------

    def sort(self) -> bool:
        """
        Put the playlist into canonical order.

        Returns True when the playlist was out of order (and, unless dry-run,
        has now been reordered).
        """
        current = self.items()
        ordered = sort_items(current)

        if same_order(ordered, current):
            logger.info("Playlist is already in the correct order")
            return False

        if self.dry_run:
            logger.info("Playlist would be sorted into this order:")
            self._report(ordered)
            return True

        for position, item in enumerate(ordered):
            logger.info(f"Moving {item} to position {position}")
            self.source.reorder_entry(
                item.entry_id, self.playlist_id, item.video_id, position
            )
        return True

    def prune(self, max_streamed: int) -> List[Decision]:
        """
        Remove blocked, surplus streamed and unscheduled videos.

        Returns the removal decisions (performed, or only reported under
        dry-run).
        """
        if max_streamed < 0:
            raise ValueError(f"max_streamed must be >= 0, got {max_streamed}")

        self.sort()

        # Remote order changed (or, under dry-run, never did): classify the
        # fresh items in canonical order either way.
        ordered = sort_items(self.items())

        removals: List[Decision] = []
        for decision in classify(ordered, max_streamed):
            item = decision.item
            if not decision.remove:
                logger.info(f"Keeping {item}")
                continue

            removals.append(decision)
            label = decision.reason.label
            if self.dry_run:
                logger.info(f"Non-dry run would remove {label} {item}")
                continue

            logger.info(f"Removing {label} {item}")
            self.source.delete_entry(item.entry_id)

        logger.info(
            f"Prune {'planned' if self.dry_run else 'complete'}: "
            f"{len(removals)} of {len(ordered)} items marked for removal"
        )
        return removals

    def print(self) -> List[Item]:
        """Report every item with its timestamps and invalid/blocked flags."""
        items = self.items()
        self._report(items)
        return items

    def _report(self, items: List[Item]) -> None:
        for item in items:
            logger.info(format_item_line(item))
