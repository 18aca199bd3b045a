"""
api_manager.py

YouTube Data API call wrapper.

Responsibilities:
- OAuth quota tracking (tripwire once exhausted)
- Retry logic with exponential backoff for transient failures
- HTTP -> domain error translation for quota exhaustion

Auth failures and the last failed attempt re-raise the original exception
unchanged; playlist operations never retry on their own.
"""

from __future__ import annotations

import time
from typing import Callable, Optional, TypeVar

from googleapiclient.errors import HttpError

import config
from logger import get_logger


logger = get_logger(__name__)
T = TypeVar("T")

# ============================================================
# Global exhaustion flag
# ============================================================

_OAUTH_EXHAUSTED = False


def mark_oauth_exhausted() -> None:
    global _OAUTH_EXHAUSTED
    _OAUTH_EXHAUSTED = True


def oauth_exhausted() -> bool:
    return _OAUTH_EXHAUSTED


def reset_oauth_exhausted() -> None:
    global _OAUTH_EXHAUSTED
    _OAUTH_EXHAUSTED = False


# ============================================================
# Exceptions
# ============================================================


class QuotaExhaustedError(Exception):
    """Raised when the OAuth quota is exhausted."""


# ============================================================
# Error detection helpers
# ============================================================


_QUOTA_REASONS = ("quotaExceeded", "dailyLimitExceeded")


def _is_quota_payload(data) -> bool:
    """
    YouTube quota errors are reliably signaled here:
    error.errors[].reason in ('quotaExceeded', 'dailyLimitExceeded')
    """
    if isinstance(data, list):
        return any(
            isinstance(err, dict) and err.get("reason") in _QUOTA_REASONS
            for err in data
        )
    if not isinstance(data, dict):
        return False
    errors = (data.get("error") or {}).get("errors") or []
    return any(
        isinstance(err, dict) and err.get("reason") in _QUOTA_REASONS
        for err in errors
    )


def is_transient_status(status_code: Optional[int]) -> bool:
    return status_code in (429, 500, 502, 503, 504)


def http_status(e: HttpError) -> Optional[int]:
    status = getattr(getattr(e, "resp", None), "status", None)
    try:
        return int(status) if status is not None else None
    except (TypeError, ValueError):
        return None


def classify_http_error(e: HttpError) -> str:
    """
    Returns: 'oauth_quota', 'auth', 'transient' or 'other'
    """
    if _is_quota_payload(getattr(e, "error_details", None)):
        return "oauth_quota"

    content = getattr(e, "content", b"") or b""
    if isinstance(content, bytes):
        content = content.decode("utf-8", errors="ignore")
    if any(reason in content for reason in _QUOTA_REASONS):
        return "oauth_quota"

    status = http_status(e)
    if status == 401:
        return "auth"
    if is_transient_status(status):
        return "transient"
    return "other"


# ============================================================
# Retry engine
# ============================================================


def oauth_tripwire() -> None:
    if oauth_exhausted():
        raise QuotaExhaustedError("OAuth quota exhausted")


def execute_with_retry(
    operation: Callable[[], T],
    name: str = "",
    *,
    max_retries: int = config.DEFAULT_MAX_RETRIES,
    backoff_base_sec: float = config.DEFAULT_BACKOFF_BASE_SEC,
) -> T:
    """
    Run `operation`, retrying transient HTTP and connection failures.

    Quota exhaustion raises QuotaExhaustedError at once. Auth and other
    non-transient HTTP errors are re-raised unchanged on the first attempt.
    `max_retries` counts retries after the first attempt; once they are used
    up the last error is re-raised unchanged.
    """
    retries = max(0, max_retries)
    attempt = 0

    while True:
        oauth_tripwire()
        try:
            return operation()

        except HttpError as e:
            kind = classify_http_error(e)

            if kind == "oauth_quota":
                logger.warning("OAuth quota exhausted")
                mark_oauth_exhausted()
                raise QuotaExhaustedError("OAuth quota exhausted") from e

            if kind != "transient" or attempt >= retries:
                raise

            last_exception: Exception = e

        except OSError as e:
            # socket errors and timeouts from the transport
            if attempt >= retries:
                raise

            last_exception = e

        sleep_time = backoff_base_sec * (2**attempt)
        attempt += 1
        logger.warning(
            f"{name} failed (attempt {attempt}/{retries + 1}), "
            f"retrying in {sleep_time}s: {last_exception}"
        )
        time.sleep(sleep_time)
