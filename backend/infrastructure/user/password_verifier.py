"""Password hashing and verification (bcrypt via passlib)."""

import asyncio
from typing import Any, Dict, Optional

from passlib.context import CryptContext

from domain.user.core.exceptions.user_errors import MissingUserError, PasswordVerificationError

_pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class PasswordVerifier:
    """Compare candidate passwords against stored bcrypt hashes.

    Hashing is CPU-bound, so both operations run in the default executor
    and never block the event loop.

    A wrong password resolves to ``False``. A comparison that cannot be
    performed (missing or malformed hash) raises
    :class:`PasswordVerificationError` instead.

    Examples:
        >>> verifier = PasswordVerifier()
        >>> user = {"password": await verifier.hash_password("correct horse")}
        >>> await verifier.compare(user, "correct horse")
        True
    """

    def __init__(self, context: Optional[CryptContext] = None) -> None:
        self._context = context or _pwd_context

    async def compare(self, user: Optional[Dict[str, Any]], candidate_password: str) -> bool:
        """Check ``candidate_password`` against ``user["password"]``.

        Raises:
            MissingUserError: If ``user`` is empty
            PasswordVerificationError: If the hash comparison fails
        """
        if not user:
            raise MissingUserError()

        hashed = user.get("password")
        if not isinstance(hashed, str):
            raise PasswordVerificationError("User has no password hash")

        loop = asyncio.get_running_loop()

        def _verify() -> bool:
            try:
                return bool(self._context.verify(candidate_password, hashed))
            except (ValueError, TypeError) as exc:
                raise PasswordVerificationError(str(exc)) from exc

        return await loop.run_in_executor(None, _verify)

    async def hash_password(self, password: str) -> str:
        """Hash a plain password for storage."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._context.hash, password)
