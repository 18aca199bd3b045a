from __future__ import annotations

from pathlib import Path

from env.paths import module_logs_dir, playlist_logs_dir


def run_log_dir(command: str, playlist_id: str | None) -> Path:
    """Per-playlist log directory when a playlist is known, else per-command."""
    if playlist_id:
        return playlist_logs_dir(command, playlist_id)
    return module_logs_dir(command)
