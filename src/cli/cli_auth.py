from __future__ import annotations

import argparse

from rich.console import Console
from rich.text import Text

from cli.common import EXIT_CONFIG, EXIT_OK, add_output_flags
from env import get_logging_env
from logger import get_logger


# ------------------------------------------------------------
# Parser
# ------------------------------------------------------------


def build_auth_parser(subparsers: argparse._SubParsersAction) -> None:
    auth = subparsers.add_parser(
        "auth",
        help="Check OAuth health and reauthenticate if required",
    )
    add_output_flags(auth)
    auth.add_argument(
        "--provider",
        default="youtube",
        help="Auth provider to check (default: youtube)",
    )


# ------------------------------------------------------------
# Handler
# ------------------------------------------------------------

_STYLES = {
    "ok": "green",
    "ok_api_quota": "yellow",
    "auth_invalid": "red",
    "failed": "red",
}


def handle_auth(args: argparse.Namespace) -> int:
    from auth import check

    logger = get_logger("auth")
    le = get_logging_env()

    result = check(args.provider)
    logger.info(f"auth.{result.provider}.{result.status.value}")

    if not le.quiet:
        msg = Text(result.message, style=_STYLES.get(result.status.value, ""))
        if le.verbose and result.usable:
            msg.append(" (token valid and usable)", style="dim")
        Console().print(msg)

    return EXIT_OK if result.usable else EXIT_CONFIG
