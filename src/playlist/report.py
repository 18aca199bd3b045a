from __future__ import annotations

from datetime import datetime
from typing import Optional

from playlist.item import Item


def _fmt_ts(ts: Optional[datetime]) -> str:
    return ts.isoformat() if ts is not None else "-"


def format_item_line(item: Item) -> str:
    """
    One report line: ids, title, both timestamps, then the derived flags.

    e.g. ``v1 [pii1]: video 1 - - ** invalid``
    """
    parts = [
        f"{item.video_id} [{item.entry_id}]: {item.title}",
        _fmt_ts(item.scheduled_start_time),
        _fmt_ts(item.actual_start_time),
    ]
    if item.invalid:
        parts.append("** invalid")
    if item.blocked:
        parts.append("** blocked")
    return " ".join(parts)
