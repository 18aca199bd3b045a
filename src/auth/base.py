from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol


class AuthHealthStatus(str, Enum):
    OK = "ok"
    OK_API_QUOTA = "ok_api_quota"
    AUTH_INVALID = "auth_invalid"
    FAILED = "failed"


@dataclass(frozen=True)
class AuthHealthResult:
    provider: str
    status: AuthHealthStatus
    message: str

    @property
    def usable(self) -> bool:
        """Credentials work (quota exhaustion does not make them invalid)."""
        return self.status in (AuthHealthStatus.OK, AuthHealthStatus.OK_API_QUOTA)


class AuthProvider(Protocol):
    """
    - build_client() returns an authorized API client, logging in if needed
    - health_check() validates auth with one cheap authorized call
    """

    name: str

    def build_client(self) -> Any: ...

    def health_check(self) -> AuthHealthResult: ...
