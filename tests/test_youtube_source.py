import json

import httplib2
import pytest
from googleapiclient.errors import HttpError

from playlist.errors import MalformedTimestampError, MissingFieldError
from playlist.item import PlaylistEntry, VideoDetails, parse_timestamp
from providers.youtube import api_manager
from providers.youtube.source import (
    YouTubePlaylistSource,
    parse_playlist_entry,
    parse_video_details,
)

from fakes import FakeYouTube


def _raw_entry(n: int) -> dict:
    return {
        "id": f"pii{n}",
        "snippet": {"title": f"video {n}"},
        "contentDetails": {"videoId": f"v{n}"},
    }


def _source(youtube) -> YouTubePlaylistSource:
    return YouTubePlaylistSource(youtube, sleep_sec=0, max_retries=1)


def test_list_entries_follows_pages():
    youtube = FakeYouTube(
        pages={
            None: {"items": [_raw_entry(1), _raw_entry(2)], "nextPageToken": "p2"},
            "p2": {"items": [_raw_entry(3)]},
        }
    )

    entries = _source(youtube).list_playlist_entries("PL1")

    assert entries == [
        PlaylistEntry(entry_id="pii1", video_id="v1", title="video 1"),
        PlaylistEntry(entry_id="pii2", video_id="v2", title="video 2"),
        PlaylistEntry(entry_id="pii3", video_id="v3", title="video 3"),
    ]
    calls = youtube.playlistItems().list_calls
    assert [c["pageToken"] for c in calls] == [None, "p2"]
    assert all(c["playlistId"] == "PL1" for c in calls)
    assert calls[0]["part"] == "snippet,id,contentDetails"
    assert calls[0]["maxResults"] == 50


def test_list_entries_empty_playlist():
    assert _source(FakeYouTube(pages={None: {}})).list_playlist_entries("PL1") == []


@pytest.mark.parametrize(
    "broken",
    [
        {"snippet": {"title": "t"}, "contentDetails": {"videoId": "v"}},
        {"id": "pii", "snippet": {"title": "t"}, "contentDetails": {}},
        {"id": "pii", "contentDetails": {"videoId": "v"}},
    ],
)
def test_entry_missing_field_is_fatal(broken):
    with pytest.raises(MissingFieldError):
        parse_playlist_entry(broken)


def test_video_details_live_and_blocked():
    resp = {
        "items": [
            {
                "liveStreamingDetails": {
                    "scheduledStartTime": "2021-09-30T10:55:02+01:00",
                    "actualStartTime": "2021-09-30T10:56:02+01:00",
                },
                "contentDetails": {"regionRestriction": {"blocked": ["DE"]}},
            }
        ]
    }

    details = parse_video_details(resp)

    assert details == VideoDetails(
        scheduled_start_time=parse_timestamp("2021-09-30T10:55:02+01:00"),
        actual_start_time=parse_timestamp("2021-09-30T10:56:02+01:00"),
        blocked=True,
    )


@pytest.mark.parametrize(
    "content_details",
    [
        {},
        {"regionRestriction": {}},
        {"regionRestriction": {"blocked": []}},
        {"regionRestriction": {"allowed": ["US"]}},
    ],
)
def test_video_details_not_blocked(content_details):
    details = parse_video_details({"items": [{"contentDetails": content_details}]})
    assert details == VideoDetails()


def test_missing_video_has_no_details():
    assert parse_video_details({"items": []}) == VideoDetails()


def test_malformed_timestamp_is_fatal():
    resp = {"items": [{"liveStreamingDetails": {"scheduledStartTime": "soon"}}]}
    with pytest.raises(MalformedTimestampError):
        parse_video_details(resp)


def test_get_video_details_queries_one_video():
    youtube = FakeYouTube(
        videos={
            "v1": {
                "liveStreamingDetails": {
                    "scheduledStartTime": "2021-09-30T10:55:01+01:00"
                }
            }
        }
    )

    details = _source(youtube).get_video_details("v1")

    assert details.scheduled_start_time == parse_timestamp("2021-09-30T10:55:01+01:00")
    assert youtube.videos().list_calls == [
        {"part": "liveStreamingDetails,contentDetails", "id": "v1"}
    ]


def test_reorder_entry_request_body():
    youtube = FakeYouTube()

    _source(youtube).reorder_entry("pii1", "PL1", "v1", 3)

    assert youtube.playlistItems().update_calls == [
        {
            "part": "snippet",
            "body": {
                "id": "pii1",
                "snippet": {
                    "playlistId": "PL1",
                    "resourceId": {"kind": "youtube#video", "videoId": "v1"},
                    "position": 3,
                },
            },
        }
    ]


def test_delete_entry():
    youtube = FakeYouTube()

    _source(youtube).delete_entry("pii7")

    assert youtube.playlistItems().delete_calls == [{"id": "pii7"}]


def _http_error(status: int, reason: str) -> HttpError:
    resp = httplib2.Response({"status": status})
    content = json.dumps(
        {"error": {"code": status, "message": reason, "errors": [{"reason": reason}]}}
    ).encode("utf-8")
    return HttpError(resp, content)


def test_delete_retry_finding_entry_gone_succeeds(monkeypatch):
    monkeypatch.setattr(api_manager.time, "sleep", lambda s: None)
    youtube = FakeYouTube()
    # first attempt is applied server-side but answers 503; the retry sees 404
    youtube.playlistItems().delete_errors = [
        _http_error(503, "backendError"),
        _http_error(404, "playlistItemNotFound"),
    ]

    YouTubePlaylistSource(youtube, sleep_sec=0, max_retries=2).delete_entry("pii1")

    assert youtube.playlistItems().delete_calls == [{"id": "pii1"}, {"id": "pii1"}]


def test_delete_first_attempt_404_is_an_error():
    youtube = FakeYouTube()
    youtube.playlistItems().delete_errors = [_http_error(404, "playlistItemNotFound")]

    with pytest.raises(HttpError):
        _source(youtube).delete_entry("pii1")
