#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys

from bootstrap import bootstrap_base_env, bootstrap_run_context


def _dispatch_help(argv: list[str]) -> int:
    # Support:
    #   livelistarr help
    #   livelistarr help prune
    #   livelistarr prune help
    argv = [a for a in argv if a != "help"]
    try:
        build_parser().parse_args(argv + ["--help"])
    except SystemExit:
        pass
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="livelistarr",
        description="Keep a YouTube live-stream playlist sorted and pruned.",
    )

    sub = p.add_subparsers(dest="command", required=True)

    help_cmd = sub.add_parser("help", help="Show help")
    help_cmd.add_argument("path", nargs="*", help="Command path to show help for")
    help_cmd.set_defaults(_help=True)

    # Keep imports inside builder to avoid early side effects.
    from cli.cli_auth import build_auth_parser
    from cli.cli_env import build_env_parser
    from cli.cli_playlist import build_playlist_parsers

    build_playlist_parsers(sub)
    build_auth_parser(sub)
    build_env_parser(sub)

    return p


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # Load config/.env and base environment early
    bootstrap_base_env(env_file=".env", required=False)

    parser = build_parser()
    args = parser.parse_args(argv)

    if getattr(args, "_help", False) or getattr(args, "playlist_id", None) == "help":
        return _dispatch_help(argv)

    # Stamp run context (CLI flags override .env) before logging starts
    bootstrap_run_context(
        command=args.command,
        playlist_id=getattr(args, "playlist_id", None),
        dry_run=True if getattr(args, "dry_run", False) else None,
        debug=True if getattr(args, "debug", False) else None,
        max_streamed=getattr(args, "max_streamed", None),
        verbose=True if getattr(args, "verbose", False) else None,
        quiet=True if getattr(args, "quiet", False) else None,
    )

    from logger import init_logging, get_logger

    init_logging(module=args.command)
    log = get_logger(__name__)
    log.debug(f"Command: {args.command}")

    # Dispatch
    from cli.cli_playlist import PLAYLIST_COMMANDS

    if args.command in PLAYLIST_COMMANDS:
        from cli.cli_playlist import handle_playlist

        return handle_playlist(args)

    if args.command == "auth":
        from cli.cli_auth import handle_auth

        return handle_auth(args)

    if args.command == "env":
        from cli.cli_env import handle_env

        return handle_env(args)

    raise RuntimeError(f"Unknown command: {args.command}")


if __name__ == "__main__":
    raise SystemExit(main())
