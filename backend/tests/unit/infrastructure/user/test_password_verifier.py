"""Unit tests for PasswordVerifier."""

import pytest

from domain.user.core.exceptions.user_errors import MissingUserError, PasswordVerificationError


class TestPasswordVerifier:
    @pytest.mark.asyncio
    async def test_correct_password_matches(self, password_verifier):
        user = {"password": await password_verifier.hash_password("correct horse")}

        assert await password_verifier.compare(user, "correct horse") is True

    @pytest.mark.asyncio
    async def test_wrong_password_does_not_match(self, password_verifier):
        user = {"password": await password_verifier.hash_password("correct horse")}

        assert await password_verifier.compare(user, "battery staple") is False

    @pytest.mark.asyncio
    async def test_hash_is_bcrypt(self, password_verifier):
        hashed = await password_verifier.hash_password("correct horse")

        assert hashed.startswith("$2b$")
        assert hashed != "correct horse"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("user", [None, {}])
    async def test_missing_user_raises(self, password_verifier, user):
        with pytest.raises(MissingUserError, match="No user provided"):
            await password_verifier.compare(user, "anything")

    @pytest.mark.asyncio
    async def test_malformed_hash_raises_instead_of_false(self, password_verifier):
        with pytest.raises(PasswordVerificationError):
            await password_verifier.compare({"password": "not-a-hash"}, "anything")

    @pytest.mark.asyncio
    async def test_missing_hash_raises(self, password_verifier):
        with pytest.raises(PasswordVerificationError):
            await password_verifier.compare({"email": "ada@example.com"}, "anything")
