"""Admin gateway: shared-secret check for catalog mutation.

The gateway is built once from ``Settings`` and stored on the app; the
credentials never live in module globals. The key travels in cleartext
in the ``x-admin-key`` header, so this is a gate, not a security boundary.
"""

from __future__ import annotations

import secrets

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader

from lessonshop.domain.exceptions import AuthenticationError, AuthorizationError
from lessonshop.infrastructure.settings import Settings

admin_key_header = APIKeyHeader(name="x-admin-key", auto_error=False)


class AdminGateway:

    def __init__(self, username: str, password: str, key: str) -> None:
        self._username = username
        self._password = password
        self._key = key

    @classmethod
    def from_settings(cls, settings: Settings) -> AdminGateway:
        return cls(
            username=settings.admin_username,
            password=settings.admin_password.get_secret_value(),
            key=settings.admin_key.get_secret_value(),
        )

    def login(self, username: object, password: object) -> str:
        """Exchange admin credentials for the admin key."""
        if not isinstance(username, str) or not isinstance(password, str):
            raise AuthenticationError("Invalid credentials")
        user_ok = secrets.compare_digest(username.encode(), self._username.encode())
        pass_ok = secrets.compare_digest(password.encode(), self._password.encode())
        if not (user_ok and pass_ok):
            raise AuthenticationError("Invalid credentials")
        return self._key

    def require_admin(self, key: str | None) -> None:
        if key is None or not secrets.compare_digest(key.encode(), self._key.encode()):
            raise AuthorizationError("Forbidden")


def require_admin(request: Request, key: str | None = Depends(admin_key_header)) -> None:
    """Route dependency for admin-only endpoints."""
    request.app.state.admin_gateway.require_admin(key)
