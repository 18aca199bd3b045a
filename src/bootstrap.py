from __future__ import annotations

"""bootstrap.py

Process bootstrap for Livelistarr.

This module is intentionally tiny and side-effectful.

Rules:
1) Only bootstrap is allowed to *mutate* os.environ for shared run context.
2) Call bootstrap_base_env() once at the true entrypoint.
3) Call bootstrap_run_context() after argparse parsing, before init_logging().

Everything else should treat environment variables as the source of truth.
"""

import os
from datetime import datetime

from env import CONFIG_DIR, _load_dotenv, reset_env_caches


_BOOTSTRAPPED = False


def bootstrap_base_env(*, env_file: str = ".env", required: bool = False) -> None:
    global _BOOTSTRAPPED
    if _BOOTSTRAPPED:
        return

    dotenv_path = CONFIG_DIR / env_file

    if not _load_dotenv(dotenv_path) and required:
        raise RuntimeError(
            f"Missing required env file: {dotenv_path}\n"
            "Expected config/.env relative to project root."
        )

    os.environ.setdefault(
        "LIVELISTARR_RUN_ID",
        datetime.now().strftime("%Y-%m-%d_%H-%M-%S"),
    )

    reset_env_caches()
    _BOOTSTRAPPED = True


def bootstrap_run_context(
    *,
    command: str,
    playlist_id: str | None = None,
    dry_run: bool | None = None,
    debug: bool | None = None,
    max_streamed: int | None = None,
    verbose: bool | None = None,
    quiet: bool | None = None,
) -> None:
    """Establish run-scoped context used by logging + playlist operations."""

    os.environ["LIVELISTARR_COMMAND"] = command

    # CLI argument wins; otherwise keep whatever .env / shell provided
    if playlist_id:
        os.environ["LIVELISTARR_PLAYLIST_ID"] = playlist_id

    if dry_run is not None:
        os.environ["LIVELISTARR_DRY_RUN"] = "1" if dry_run else "0"
    if debug is not None:
        os.environ["LIVELISTARR_DEBUG"] = "1" if debug else "0"
    if max_streamed is not None:
        os.environ["LIVELISTARR_MAX_STREAMED"] = str(max_streamed)

    if verbose is not None:
        os.environ["LIVELISTARR_VERBOSE"] = "1" if verbose else "0"
    if quiet is not None:
        os.environ["LIVELISTARR_QUIET"] = "1" if quiet else "0"

    # Context changes must invalidate cached env views.
    reset_env_caches()
