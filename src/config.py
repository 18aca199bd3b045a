"""
config.py

Central configuration for Livelistarr.

This file intentionally contains ONLY:
- Constants
- Tunables (defaults)
- API part names and scopes

It must NOT contain:
- Business logic
- API calls
- Reading environment variables

Runtime configuration (env vars, CLI flags) belongs in:
- env/env.py
- bootstrap.py
- livelistarr.py (CLI)
"""

from __future__ import annotations

from typing import List

# ============================================================
# YOUTUBE API - SCOPES / PARTS
# ============================================================

# Full access is required for playlistItems.update / playlistItems.delete
YOUTUBE_OAUTH_SCOPES: List[str] = ["https://www.googleapis.com/auth/youtube"]

PLAYLIST_ITEM_LIST_PARTS = "snippet,id,contentDetails"
VIDEO_DETAIL_PARTS = "liveStreamingDetails,contentDetails"
PLAYLIST_ITEM_UPDATE_PARTS = "snippet"

VIDEO_RESOURCE_KIND = "youtube#video"

# YouTube API max page size for playlistItems.list is 50
YOUTUBE_BATCH_SIZE = 50

# ============================================================
# REQUEST THROTTLING DEFAULTS (env.py may override)
# ============================================================

DEFAULT_SLEEP_BETWEEN_CALLS_SEC = 0.2
DEFAULT_MAX_RETRIES = 3
DEFAULT_BACKOFF_BASE_SEC = 1.0

# ============================================================
# PRUNING
# ============================================================

# Number of streamed videos kept by `prune` unless overridden
DEFAULT_MAX_STREAMED = 5

# ============================================================
# LOGGING
# ============================================================

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_RETENTION = 30
