from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

import config

# ------------------------------------------------------------
# dotenv (read-only helper, bootstrap owns usage)
# ------------------------------------------------------------


def _load_dotenv(path: Path) -> bool:
    """
    Load a dotenv file without overriding existing os.environ.
    Returns False when the file does not exist.
    """
    if not path.exists():
        return False
    return load_dotenv(path, override=False)


# ------------------------------------------------------------
# Errors / helpers
# ------------------------------------------------------------


class ConfigError(RuntimeError):
    pass


def _as_bool(v: str) -> bool:
    return v.strip().lower() in {"1", "true", "yes", "on"}


def _as_int(v: str, default: int) -> int:
    try:
        return int(v)
    except Exception:
        return default


def _as_float(v: str, default: float) -> float:
    try:
        return float(v)
    except Exception:
        return default


# ------------------------------------------------------------
# Logging environment (SAFE ANYWHERE)
# ------------------------------------------------------------


@dataclass(frozen=True)
class LoggingEnvironment:
    log_level: str
    log_retention: int
    verbose: bool
    quiet: bool


def get_logging_env() -> LoggingEnvironment:
    return LoggingEnvironment(
        log_level=os.environ.get("LOG_LEVEL", config.DEFAULT_LOG_LEVEL),
        log_retention=_as_int(
            os.environ.get("LOG_RETENTION", str(config.DEFAULT_LOG_RETENTION)),
            config.DEFAULT_LOG_RETENTION,
        ),
        verbose=_as_bool(os.environ.get("LIVELISTARR_VERBOSE", "0")),
        quiet=_as_bool(os.environ.get("LIVELISTARR_QUIET", "0")),
    )


# ------------------------------------------------------------
# Full runtime environment
# ------------------------------------------------------------


class Environment:
    def __init__(self):
        # Logging snapshot (immutable)
        self._logging = get_logging_env()

        # ---- API ----
        self.sleep_sec = _as_float(
            os.environ.get("YT_SLEEP_SEC", str(config.DEFAULT_SLEEP_BETWEEN_CALLS_SEC)),
            config.DEFAULT_SLEEP_BETWEEN_CALLS_SEC,
        )
        self.max_retries = _as_int(
            os.environ.get("YT_MAX_RETRIES", str(config.DEFAULT_MAX_RETRIES)),
            config.DEFAULT_MAX_RETRIES,
        )
        self.backoff_base_sec = _as_float(
            os.environ.get("YT_BACKOFF_BASE_SEC", str(config.DEFAULT_BACKOFF_BASE_SEC)),
            config.DEFAULT_BACKOFF_BASE_SEC,
        )

        # ---- RUN CONTEXT ----
        self.command = os.environ.get("LIVELISTARR_COMMAND", "bootstrap")
        self.playlist_id = os.environ.get("LIVELISTARR_PLAYLIST_ID", "").strip()

        # ---- PLAYLIST FLAGS ----
        self.dry_run = _as_bool(os.environ.get("LIVELISTARR_DRY_RUN", "0"))
        self.debug = _as_bool(os.environ.get("LIVELISTARR_DEBUG", "0"))
        self._max_streamed_raw = os.environ.get(
            "LIVELISTARR_MAX_STREAMED", str(config.DEFAULT_MAX_STREAMED)
        ).strip()

    def require_playlist_id(self) -> str:
        if not self.playlist_id:
            raise ConfigError(
                "No playlist id given (pass one or set LIVELISTARR_PLAYLIST_ID)"
            )
        return self.playlist_id

    @property
    def max_streamed(self) -> int:
        """Streamed videos kept by prune. Unparseable values are a ConfigError."""
        try:
            return int(self._max_streamed_raw)
        except ValueError:
            raise ConfigError(
                "LIVELISTARR_MAX_STREAMED must be an integer, "
                f"got {self._max_streamed_raw!r}"
            ) from None

    def as_dict(self) -> dict:
        return {
            "Logging": {
                "log_level": self.log_level,
                "log_retention": self.log_retention,
                "verbose": self.verbose,
                "quiet": self.quiet,
            },
            "Playlist": {
                "command": self.command,
                "playlist_id": self.playlist_id or "(unset)",
                "max_streamed": self._max_streamed_raw,
            },
            "Behavior": {
                "dry_run": self.dry_run,
                "debug": self.debug,
            },
            "API": {
                "sleep_sec": self.sleep_sec,
                "max_retries": self.max_retries,
                "backoff_base_sec": self.backoff_base_sec,
            },
        }

    # ---- logging passthrough ----
    @property
    def log_level(self) -> str:
        return self._logging.log_level

    @property
    def log_retention(self) -> int:
        return self._logging.log_retention

    @property
    def verbose(self) -> bool:
        return self._logging.verbose

    @property
    def quiet(self) -> bool:
        return self._logging.quiet


_ENV: Optional[Environment] = None


def reset_env_caches() -> None:
    """Invalidate cached views of environment variables."""
    global _ENV
    _ENV = None


def get_env() -> Environment:
    global _ENV
    if _ENV is None:
        _ENV = Environment()
    return _ENV
