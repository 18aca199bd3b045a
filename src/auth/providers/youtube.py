from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

import config
from auth.base import AuthHealthResult, AuthHealthStatus, AuthProvider
from auth.errors import AuthFailed, AuthInvalid
from env.paths import AUTH_DIR, auth_client_secrets_file, auth_token_file
from logger import get_logger
from providers.youtube.api_manager import classify_http_error


class YouTubeOAuthProvider(AuthProvider):
    """
    Installed-app OAuth for the YouTube Data API.

    The token lives in auth/oauth_token.json; a fresh login needs the
    desktop client secrets in auth/client_secret.json. The scope grants
    full playlist write access (reorder + delete).
    """

    name = "youtube"

    def __init__(self) -> None:
        self._logger = get_logger("auth.youtube")

    def build_client(self) -> Any:
        creds = self._load_or_authenticate()
        try:
            # cache_discovery=False keeps googleapiclient from warning about file_cache
            return build("youtube", "v3", credentials=creds, cache_discovery=False)
        except Exception as e:
            self._logger.error(f"Failed to build YouTube client: {e}")
            raise AuthFailed(str(e)) from e

    def health_check(self) -> AuthHealthResult:
        """
        Validates OAuth with channels.list(mine=True).
        API quota exhaustion still counts as valid credentials.
        """
        self._logger.info("oauth.check.start")

        try:
            youtube = self.build_client()
            youtube.channels().list(part="id", mine=True, maxResults=1).execute()
        except AuthInvalid as e:
            self._logger.error("oauth.check.auth_invalid", exc_info=e)
            return self._result(
                AuthHealthStatus.AUTH_INVALID,
                "OAuth INVALID - reauthentication required",
            )
        except HttpError as e:
            kind = classify_http_error(e)
            if kind == "oauth_quota":
                self._logger.warning("oauth.check.ok_quota_exhausted")
                return self._result(
                    AuthHealthStatus.OK_API_QUOTA, "OAuth OK (API quota exhausted)"
                )
            if kind == "auth":
                self._logger.error("oauth.check.auth_invalid", exc_info=e)
                return self._result(
                    AuthHealthStatus.AUTH_INVALID,
                    "OAuth INVALID - reauthentication required",
                )
            self._logger.error("oauth.check.failed", exc_info=e)
            return self._result(AuthHealthStatus.FAILED, "OAuth check failed")
        except Exception as e:
            self._logger.error("oauth.check.failed", exc_info=e)
            return self._result(
                AuthHealthStatus.FAILED, "OAuth check failed (unexpected error)"
            )

        self._logger.info("oauth.check.ok")
        return self._result(AuthHealthStatus.OK, "OAuth OK")

    # -----------------------------------------------------------------
    # Internals
    # -----------------------------------------------------------------

    def _result(self, status: AuthHealthStatus, message: str) -> AuthHealthResult:
        return AuthHealthResult(provider=self.name, status=status, message=message)

    def _load_or_authenticate(self) -> Credentials:
        AUTH_DIR.mkdir(parents=True, exist_ok=True)

        token_path = auth_token_file()
        secrets_path = auth_client_secrets_file()

        creds: Optional[Credentials] = None

        if token_path.exists():
            try:
                creds = Credentials.from_authorized_user_file(
                    str(token_path),
                    config.YOUTUBE_OAUTH_SCOPES,
                )
                self._logger.debug("Loaded existing OAuth credentials")
            except ValueError as e:
                self._logger.warning(f"Ignoring unreadable OAuth token: {e}")
                creds = None

        if creds and creds.valid:
            return creds

        if creds and creds.expired and creds.refresh_token:
            try:
                self._logger.debug("Refreshing expired OAuth token...")
                creds.refresh(Request())
            except Exception as e:
                self._logger.error(f"Failed to refresh token: {e}")
                raise AuthInvalid(str(e)) from e
            self._persist_token(token_path, creds)
            return creds

        if not secrets_path.exists():
            raise AuthInvalid(f"Missing OAuth client secrets file: {secrets_path}")

        try:
            self._logger.info("Starting OAuth authentication flow...")
            flow = InstalledAppFlow.from_client_secrets_file(
                str(secrets_path),
                config.YOUTUBE_OAUTH_SCOPES,
            )
            creds = flow.run_local_server(port=0)
        except Exception as e:
            self._logger.error(f"OAuth authentication failed: {e}")
            raise AuthInvalid(str(e)) from e

        self._persist_token(token_path, creds)
        return creds

    def _persist_token(self, token_path: Path, creds: Credentials) -> None:
        try:
            token_path.write_text(creds.to_json(), encoding="utf-8")
            os.chmod(token_path, 0o600)
            self._logger.debug(f"Saved OAuth token to {token_path}")
        except OSError as e:
            self._logger.warning(f"Failed to save OAuth token: {e}")
