"""
ordering.py

Canonical playlist order:

1. streamed videos, newest actual start first
2. unstreamed, scheduled videos, newest scheduled start first
3. videos with no time information, in their existing order
"""

from __future__ import annotations

from datetime import datetime
from functools import cmp_to_key
from typing import List, Optional, Sequence

from playlist.item import Item, Tier


def _tier_key(item: Item) -> Optional[datetime]:
    tier = item.tier
    if tier is Tier.STREAMED:
        return item.actual_start_time
    if tier is Tier.SCHEDULED:
        return item.scheduled_start_time
    return None


def compare_items(v: Item, w: Item) -> int:
    """
    Three-way comparator implementing the canonical order.

    Returns a negative number when v sorts before w, positive when after
    and 0 when they rank equal (the stable sort then keeps input order).
    """
    if v.tier != w.tier:
        return -1 if v.tier < w.tier else 1

    kv, kw = _tier_key(v), _tier_key(w)
    if kv is None or kw is None:
        return 0

    # Descending: newer timestamps first
    if kv > kw:
        return -1
    if kv < kw:
        return 1
    return 0


def sort_items(items: Sequence[Item]) -> List[Item]:
    """Return a new list in canonical order. The input is left untouched."""
    return sorted(items, key=cmp_to_key(compare_items))


def same_order(a: Sequence[Item], b: Sequence[Item]) -> bool:
    """True when both sequences list the same videos in the same order."""
    return [i.video_id for i in a] == [i.video_id for i in b]
