from __future__ import annotations

from auth.base import AuthHealthResult, AuthHealthStatus, AuthProvider
from auth.registry import check, get_provider

__all__ = [
    "AuthHealthResult",
    "AuthHealthStatus",
    "AuthProvider",
    "check",
    "get_provider",
]
