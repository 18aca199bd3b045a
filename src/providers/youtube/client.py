from __future__ import annotations

from typing import Any

from auth.errors import AuthInvalid
from auth.registry import get_provider
from logger import get_logger


class YouTubeClientError(Exception):
    pass


class AuthenticationError(YouTubeClientError):
    pass


def build_youtube_client() -> Any:
    """
    Authorized YouTube Data API v3 client.

    OAuth and token lifecycle live in the auth provider layer; this only
    maps its failures onto client errors.
    """
    logger = get_logger(__name__)

    try:
        return get_provider("youtube").build_client()
    except AuthInvalid as e:
        logger.error(f"AuthenticationError: {e}")
        raise AuthenticationError(str(e)) from e
    except Exception as e:
        logger.error(f"YouTubeClientError: {e}")
        raise YouTubeClientError(str(e)) from e
