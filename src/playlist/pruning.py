"""
pruning.py

Prune decisions over a canonically ordered playlist.

Removal reasons, checked in this order, at most one per item:
- blocked: region-restricted somewhere
- surplus streamed: streamed, but older than the newest `max_streamed`
- unscheduled: no live-streaming time information at all
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from playlist.item import Item


class RemovalReason(str, Enum):
    BLOCKED = "blocked"
    SURPLUS_STREAMED = "surplus_streamed"
    UNSCHEDULED = "unscheduled"

    @property
    def label(self) -> str:
        return {
            RemovalReason.BLOCKED: "blocked video",
            RemovalReason.SURPLUS_STREAMED: "surplus streamed video",
            RemovalReason.UNSCHEDULED: "unscheduled video",
        }[self]


@dataclass(frozen=True)
class Decision:
    item: Item
    reason: Optional[RemovalReason] = None

    @property
    def remove(self) -> bool:
        return self.reason is not None


def classify(items: Sequence[Item], max_streamed: int) -> List[Decision]:
    """
    Decide keep/remove for every item, in order.

    `items` must already be in canonical order (see ordering.sort_items):
    the streamed cap keeps the first `max_streamed` streamed items it meets,
    which are then the most recent ones.
    """
    if max_streamed < 0:
        raise ValueError(f"max_streamed must be >= 0, got {max_streamed}")

    decisions: List[Decision] = []
    streamed_kept = 0

    for item in items:
        reason: Optional[RemovalReason] = None

        if item.blocked:
            reason = RemovalReason.BLOCKED
        elif item.actual_start_time is not None:
            streamed_kept += 1
            if streamed_kept > max_streamed:
                reason = RemovalReason.SURPLUS_STREAMED
        elif item.scheduled_start_time is None:
            reason = RemovalReason.UNSCHEDULED

        decisions.append(Decision(item=item, reason=reason))

    return decisions
