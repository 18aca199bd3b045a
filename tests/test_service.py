import logging

import pytest

from playlist.errors import MalformedTimestampError
from playlist.pruning import RemovalReason
from playlist.service import PlaylistService

from fakes import FakeSource, make_item, scheduled_item, streamed_item, video_ids


PLAYLIST = "PL123"


def _service(source, **kw) -> PlaylistService:
    return PlaylistService(source, PLAYLIST, **kw)


def _messages(caplog):
    return [r.getMessage() for r in caplog.records]


def test_requires_playlist_id():
    with pytest.raises(ValueError):
        PlaylistService(FakeSource([]), "")


def test_items_combines_listing_and_details():
    source = FakeSource([make_item(1), streamed_item(2, blocked=True)])

    items = _service(source).items()

    assert items == [make_item(1), streamed_item(2, blocked=True)]
    assert source.calls == [
        ("list", PLAYLIST),
        ("details", "v1"),
        ("details", "v2"),
    ]


def test_items_debug_dumps_list(caplog):
    caplog.set_level(logging.INFO)
    _service(FakeSource([make_item(1)]), debug=True).items()

    assert any(m.startswith("Playlist items: [Item(video_id='v1'") for m in _messages(caplog))


def test_sort_already_sorted_makes_no_writes(caplog):
    caplog.set_level(logging.INFO)
    source = FakeSource([streamed_item(2), scheduled_item(1), make_item(3)])

    assert _service(source).sort() is False

    assert source.writes() == []
    assert "Playlist is already in the correct order" in _messages(caplog)


def test_sort_reorders_every_item_in_sorted_order():
    source = FakeSource([make_item(1), scheduled_item(2), streamed_item(3)])

    assert _service(source).sort() is True

    assert source.writes() == [
        ("reorder", "pii3", PLAYLIST, "v3", 0),
        ("reorder", "pii2", PLAYLIST, "v2", 1),
        ("reorder", "pii1", PLAYLIST, "v1", 2),
    ]
    assert source.order == ["v3", "v2", "v1"]


def test_sort_dry_run_reports_without_writes(caplog):
    caplog.set_level(logging.INFO)
    source = FakeSource([make_item(1), scheduled_item(2)])

    assert _service(source, dry_run=True).sort() is True

    assert source.writes() == []
    assert source.order == ["v1", "v2"]
    messages = _messages(caplog)
    start = messages.index("Playlist would be sorted into this order:")
    assert messages[start + 1].startswith("v2 [pii2]: video 2")
    assert messages[start + 2] == "v1 [pii1]: video 1 - - ** invalid"


def test_sort_failure_propagates_and_keeps_earlier_reorders():
    source = FakeSource(
        [make_item(1), scheduled_item(2), streamed_item(3)], fail_on={"reorder": 2}
    )

    with pytest.raises(RuntimeError, match="reorder failed"):
        _service(source).sort()

    assert [c[0] for c in source.writes()] == ["reorder", "reorder"]
    assert source.order[0] == "v3"


def test_fetch_failure_aborts_before_writes():
    source = FakeSource([make_item(1), scheduled_item(2)], fail_on={"details": 2})

    with pytest.raises(RuntimeError, match="details failed"):
        _service(source).sort()

    assert source.writes() == []


def test_prune_sorts_then_deletes_in_sorted_order(caplog):
    caplog.set_level(logging.INFO)
    source = FakeSource(
        [
            make_item(1),
            streamed_item(2),
            streamed_item(3),
            scheduled_item(4, blocked=True),
            scheduled_item(5),
            streamed_item(6),
        ]
    )

    removals = _service(source).prune(max_streamed=2)

    assert [(d.item.video_id, d.reason) for d in removals] == [
        ("v2", RemovalReason.SURPLUS_STREAMED),
        ("v4", RemovalReason.BLOCKED),
        ("v1", RemovalReason.UNSCHEDULED),
    ]
    deletes = [c for c in source.writes() if c[0] == "delete"]
    assert deletes == [("delete", "pii2"), ("delete", "pii4"), ("delete", "pii1")]
    assert source.order == ["v6", "v3", "v5"]

    messages = _messages(caplog)
    assert "Removing surplus streamed video (v2: video 2)" in messages
    assert "Removing blocked video (v4: video 4)" in messages
    assert "Removing unscheduled video (v1: video 1)" in messages
    assert "Keeping (v6: video 6)" in messages


def test_prune_refetches_after_sort():
    source = FakeSource([make_item(1), scheduled_item(2)])

    _service(source).prune(max_streamed=1)

    assert [c for c in source.calls if c[0] == "list"] == [
        ("list", PLAYLIST),
        ("list", PLAYLIST),
    ]


def test_prune_dry_run_uses_canonical_order_without_writes(caplog):
    caplog.set_level(logging.INFO)
    # Remote order is oldest stream first; dry run never fixes it remotely
    source = FakeSource([streamed_item(1), streamed_item(2), streamed_item(3)])

    removals = _service(source, dry_run=True).prune(max_streamed=1)

    assert source.writes() == []
    assert source.order == ["v1", "v2", "v3"]
    assert [d.item.video_id for d in removals] == ["v2", "v1"]
    assert all(d.reason is RemovalReason.SURPLUS_STREAMED for d in removals)
    assert (
        "Non-dry run would remove surplus streamed video (v2: video 2)"
        in _messages(caplog)
    )


def test_prune_blocked_newest_is_blocked_not_surplus():
    source = FakeSource([streamed_item(2, blocked=True), streamed_item(1)])

    removals = _service(source).prune(max_streamed=1)

    assert [(d.item.video_id, d.reason) for d in removals] == [
        ("v2", RemovalReason.BLOCKED)
    ]
    assert source.order == ["v1"]


def test_prune_rejects_negative_cap():
    source = FakeSource([streamed_item(1)])

    with pytest.raises(ValueError):
        _service(source).prune(-1)

    assert source.calls == []


def test_prune_delete_failure_propagates():
    source = FakeSource([make_item(1), make_item(2)], fail_on={"delete": 1})

    with pytest.raises(RuntimeError, match="delete failed"):
        _service(source).prune(max_streamed=1)

    assert source.order == ["v1", "v2"]


def test_print_reports_flags(caplog):
    caplog.set_level(logging.INFO)
    source = FakeSource([make_item(1, blocked=True), scheduled_item(2)])

    items = _service(source).print()

    assert video_ids(items) == ["v1", "v2"]
    assert source.writes() == []
    messages = _messages(caplog)
    assert "v1 [pii1]: video 1 - - ** invalid ** blocked" in messages
    assert "v2 [pii2]: video 2 2021-09-30T10:55:02+01:00 -" in messages


class _BadTimestampSource(FakeSource):
    def get_video_details(self, video_id):
        from playlist.item import parse_timestamp

        parse_timestamp("not-a-time")


def test_malformed_timestamp_is_fatal():
    with pytest.raises(MalformedTimestampError):
        _service(_BadTimestampSource([make_item(1)])).print()
