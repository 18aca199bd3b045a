from __future__ import annotations

import argparse

from googleapiclient.errors import HttpError

from branding import LIVELISTARR_BANNER, LIVELISTARR_HEADER
from cli.common import (
    EXIT_CONFIG,
    EXIT_FAILED,
    EXIT_OK,
    EXIT_QUOTA,
    add_output_flags,
    build_playlist_service,
)
from env import ConfigError, get_env
from logger import get_logger

PLAYLIST_COMMANDS = ("sort", "prune", "print")


# ------------------------------------------------------------
# Parser
# ------------------------------------------------------------


def _add_common(p: argparse.ArgumentParser, *, writes: bool) -> None:
    p.add_argument(
        "playlist_id",
        nargs="?",
        default=None,
        help="YouTube playlist id (default: $LIVELISTARR_PLAYLIST_ID)",
    )
    if writes:
        p.add_argument(
            "--dry-run",
            action="store_true",
            help="Report what would change; do not update the playlist",
        )
    p.add_argument(
        "--debug", action="store_true", help="Dump the fetched playlist items"
    )
    add_output_flags(p)


def build_playlist_parsers(subparsers: argparse._SubParsersAction) -> None:
    sort = subparsers.add_parser(
        "sort",
        help="Order the playlist: streamed, then scheduled (newest first), then the rest",
    )
    _add_common(sort, writes=True)

    prune = subparsers.add_parser(
        "prune",
        help="Sort, then remove blocked, unscheduled and surplus streamed videos",
    )
    _add_common(prune, writes=True)
    prune.add_argument(
        "--max-streamed",
        type=int,
        default=None,
        help="Streamed videos to keep (default: $LIVELISTARR_MAX_STREAMED or 5)",
    )

    show = subparsers.add_parser(
        "print", help="List playlist items with their live-streaming times"
    )
    _add_common(show, writes=False)


# ------------------------------------------------------------
# Handler
# ------------------------------------------------------------


def handle_playlist(args: argparse.Namespace) -> int:
    from providers.youtube.api_manager import QuotaExhaustedError
    from providers.youtube.client import YouTubeClientError
    from playlist.errors import PlaylistError

    log = get_logger("livelistarr")
    env = get_env()

    log.info(LIVELISTARR_BANNER)
    log.info(LIVELISTARR_HEADER(f"{args.command} {env.playlist_id}".strip()))
    if env.dry_run:
        log.info("Dry run: the playlist will not be modified")

    try:
        service = build_playlist_service(env)

        if args.command == "sort":
            service.sort()
        elif args.command == "prune":
            if env.max_streamed < 0:
                raise ConfigError(
                    f"max streamed must be >= 0, got {env.max_streamed}"
                )
            service.prune(env.max_streamed)
        elif args.command == "print":
            service.print()
        else:
            raise RuntimeError(f"Unknown playlist command: {args.command}")

    except ConfigError as e:
        log.error(str(e))
        return EXIT_CONFIG
    except YouTubeClientError as e:
        log.error(f"Cannot reach YouTube: {e}")
        return EXIT_CONFIG
    except QuotaExhaustedError:
        log.warning("Done: YouTube API quota exhausted (playlist may be partly updated)")
        return EXIT_QUOTA
    except PlaylistError as e:
        log.error(f"Done: failed, bad playlist data: {e}")
        return EXIT_FAILED
    except HttpError as e:
        log.error(f"Done: failed, YouTube API error: {e}")
        return EXIT_FAILED

    log.info("Done: OK")
    return EXIT_OK
