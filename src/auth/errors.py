from __future__ import annotations


class AuthError(Exception):
    """Base error for OAuth problems."""


class AuthInvalid(AuthError):
    """Token missing, revoked or unrefreshable; the user must log in again."""


class AuthFailed(AuthError):
    """Client construction or token handling failed unexpectedly."""
