from __future__ import annotations

import os
from pathlib import Path

# ---------------------------------------------------------------------
# Project root
# ---------------------------------------------------------------------

# This file lives in src/env/, so project root is two levels up
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"


# ---------------------------------------------------------------------
# Base directories (override-friendly)
# ---------------------------------------------------------------------


def _resolve_dir(env_var: str, default: Path) -> Path:
    """
    Resolve a directory path from an environment variable or default.
    Ensures the directory exists.
    """
    raw = os.environ.get(env_var)
    path = Path(raw).expanduser().resolve() if raw else default
    path.mkdir(parents=True, exist_ok=True)
    return path


# Logs
LOGS_DIR = _resolve_dir("LIVELISTARR_LOGS_DIR", PROJECT_ROOT / "logs")

# Auth (OAuth tokens, client secrets)
AUTH_DIR = _resolve_dir("LIVELISTARR_AUTH_DIR", PROJECT_ROOT / "auth")


def auth_token_file(filename: str = "oauth_token.json") -> Path:
    return AUTH_DIR / filename


def auth_client_secrets_file(filename: str = "client_secret.json") -> Path:
    return AUTH_DIR / filename


# ---------------------------------------------------------------------
# Log layout helpers
# ---------------------------------------------------------------------


def module_logs_dir(module: str) -> Path:
    """
    Base log directory for a CLI command (e.g. sort, prune, auth).
    """
    path = LOGS_DIR / module
    path.mkdir(parents=True, exist_ok=True)
    return path


def playlist_logs_dir(module: str, playlist_id: str) -> Path:
    """
    Log directory for a specific playlist under a command.
    """
    path = LOGS_DIR / module / playlist_id
    path.mkdir(parents=True, exist_ok=True)
    return path
