from __future__ import annotations

import argparse

from env import Environment

# ----------------------------
# Exit codes
# ----------------------------

EXIT_OK = 0
EXIT_CONFIG = 2
EXIT_QUOTA = 10
EXIT_FAILED = 20


# ----------------------------
# Help dispatch (subparser-local)
# ----------------------------


def dispatch_subparser_help(
    parser: argparse.ArgumentParser, path: list[str] | None
) -> int:
    """
    Implements consistent `X help [subcmd ...]` behavior for a subtree parser.
    """
    if not path:
        parser.print_help()
        return EXIT_OK

    try:
        parser.parse_args(path + ["--help"])
    except SystemExit:
        pass
    return EXIT_OK


# ----------------------------
# Shared flags
# ----------------------------


def add_output_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--verbose", action="store_true", help="Verbose console output")
    parser.add_argument("--quiet", action="store_true", help="Suppress console output")


# ----------------------------
# Wiring
# ----------------------------


def build_playlist_service(env: Environment):
    """PlaylistService over the authorized YouTube source, configured from env."""
    # Imported here so `--help` never touches OAuth or googleapiclient.
    from playlist.service import PlaylistService
    from providers.youtube.client import build_youtube_client
    from providers.youtube.source import YouTubePlaylistSource

    playlist_id = env.require_playlist_id()

    source = YouTubePlaylistSource(
        build_youtube_client(),
        sleep_sec=env.sleep_sec,
        max_retries=env.max_retries,
        backoff_base_sec=env.backoff_base_sec,
    )
    return PlaylistService(
        source,
        playlist_id,
        dry_run=env.dry_run,
        debug=env.debug,
    )
