"""Session token issuer (HS256 JWT via PyJWT)."""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from domain.user.core.exceptions.user_errors import MissingUserError
from infrastructure.config import SessionSettings

ALGORITHM = "HS256"


class TokenIssuer:
    """Build signed, short-lived session tokens for users.

    Claims: ``id``, ``username``, ``provider``, ``email`` plus ``iat`` and
    ``exp``. The lifetime comes from ``SessionSettings`` (15 minutes by
    default). The signing secret is used as given; PyJWT rejects a missing
    one.

    Examples:
        >>> issuer = TokenIssuer(SessionSettings(jwt_secret="s3cret"))
        >>> token = await issuer.issue(user)
    """

    def __init__(self, settings: SessionSettings) -> None:
        self._settings = settings

    async def issue(self, user: Optional[Dict[str, Any]]) -> str:
        """Sign a token for ``user``.

        Raises:
            MissingUserError: If ``user`` is empty
        """
        if not user:
            raise MissingUserError()

        issued_at = datetime.now(timezone.utc)
        payload = {
            "id": str(user.get("_id")),
            "username": user.get("username"),
            "provider": user.get("provider"),
            "email": user.get("email"),
            "iat": issued_at,
            "exp": issued_at + timedelta(seconds=self._settings.expires_in_seconds),
        }
        return jwt.encode(payload, self._settings.jwt_secret, algorithm=ALGORITHM)
