"""Tests for InMemoryUserRepository."""

from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from bson import ObjectId

from domain.user.core.exceptions.user_errors import UserAlreadyExistsError, UserValidationError
from infrastructure.user.in_memory_user_repository import InMemoryUserRepository


class TestInMemoryUserRepository:
    """Test InMemoryUserRepository implementation."""

    @pytest.fixture
    def repository(self):
        """Create fresh repository for each test."""
        return InMemoryUserRepository()

    @pytest_asyncio.fixture
    async def sample_user(self, repository):
        return await repository.insert(
            {
                "name": "Ada Lovelace",
                "username": "ada",
                "email": "ada@example.com",
                "password": "$2b$04$abcdefghijklmnopqrstuv",
            }
        )

    @pytest.mark.asyncio
    async def test_insert_assigns_id_and_timestamps(self, repository):
        user = await repository.insert({"email": "ada@example.com"})

        assert isinstance(user["_id"], ObjectId)
        assert user["createdAt"] is not None
        assert user["provider"] == "local"

    @pytest.mark.asyncio
    async def test_insert_duplicate_email_raises(self, repository, sample_user):
        with pytest.raises(UserAlreadyExistsError):
            await repository.insert({"email": "ADA@example.com"})

        assert await repository.count() == 1
        original = await repository.get_by_id(sample_user["_id"])
        assert original["name"] == "Ada Lovelace"

    @pytest.mark.asyncio
    async def test_users_without_email_do_not_collide(self, repository):
        await repository.insert({"username": "one"})
        await repository.insert({"username": "two"})

        assert await repository.count() == 2

    @pytest.mark.asyncio
    async def test_get_by_id_accepts_hex_string(self, repository, sample_user):
        found = await repository.get_by_id(str(sample_user["_id"]))

        assert found is not None
        assert found["email"] == "ada@example.com"

    @pytest.mark.asyncio
    async def test_get_by_id_missing_returns_none(self, repository):
        assert await repository.get_by_id(ObjectId()) is None

    @pytest.mark.asyncio
    async def test_get_by_id_invalid_id_returns_none(self, repository):
        assert await repository.get_by_id("not-an-object-id") is None
        assert await repository.get_by_id(None) is None

    @pytest.mark.asyncio
    async def test_get_by_id_with_exclusion(self, repository, sample_user):
        found = await repository.get_by_id(sample_user["_id"], "-password")

        assert "password" not in found
        assert found["username"] == "ada"

    @pytest.mark.asyncio
    async def test_get_by_id_with_inclusion(self, repository, sample_user):
        found = await repository.get_by_id(sample_user["_id"], ["email"])

        assert found == {"_id": sample_user["_id"], "email": "ada@example.com"}

    @pytest.mark.asyncio
    async def test_returned_records_are_detached(self, repository, sample_user):
        found = await repository.get_by_id(sample_user["_id"])
        found["name"] = "Changed"
        found["plugins"].append("plugin")

        again = await repository.get_by_id(sample_user["_id"])
        assert again["name"] == "Ada Lovelace"
        assert again["plugins"] == []

    @pytest.mark.asyncio
    async def test_find_one_by_criteria(self, repository, sample_user):
        found = await repository.find_one({"email": "ada@example.com"}, "name")

        assert found == {"_id": sample_user["_id"], "name": "Ada Lovelace"}

    @pytest.mark.asyncio
    async def test_find_one_and_count_by_hex_string_id(self, repository, sample_user):
        criteria = {"_id": str(sample_user["_id"])}

        found = await repository.find_one(criteria, "email")

        assert found == {"_id": sample_user["_id"], "email": "ada@example.com"}
        assert await repository.count(criteria) == 1
        assert criteria == {"_id": str(sample_user["_id"])}

    @pytest.mark.asyncio
    async def test_find_one_by_malformed_id_matches_nothing(self, repository, sample_user):
        assert await repository.find_one({"_id": "not-an-object-id"}) is None
        assert await repository.count({"_id": "not-an-object-id"}) == 0

    @pytest.mark.asyncio
    async def test_find_one_no_match(self, repository, sample_user):
        assert await repository.find_one({"email": "bob@example.com"}) is None

    @pytest.mark.asyncio
    async def test_update_merges_fields(self, repository, sample_user):
        updated = await repository.update(sample_user["_id"], {"name": "Countess"})

        assert updated["name"] == "Countess"
        assert updated["email"] == "ada@example.com"
        found = await repository.get_by_id(sample_user["_id"])
        assert found["name"] == "Countess"

    @pytest.mark.asyncio
    async def test_update_always_clears_expiration(self, repository):
        expires = datetime.now(timezone.utc) + timedelta(days=7)
        user = await repository.insert({"email": "trial@example.com", "expiresAt": expires})

        updated = await repository.update(user["_id"], {"name": "Trial"})

        assert "expiresAt" not in updated
        assert "expiresAt" not in await repository.get_by_id(user["_id"])

    @pytest.mark.asyncio
    async def test_update_ignores_expiration_in_patch(self, repository, sample_user):
        updated = await repository.update(
            sample_user["_id"], {"expiresAt": datetime.now(timezone.utc)}
        )

        assert "expiresAt" not in updated

    @pytest.mark.asyncio
    async def test_update_unknown_id_returns_none(self, repository):
        assert await repository.update(ObjectId(), {"name": "Nobody"}) is None

    @pytest.mark.asyncio
    async def test_update_validates_before_write(self, repository, sample_user):
        with pytest.raises(UserValidationError):
            await repository.update(sample_user["_id"], {"email": "broken"})

        found = await repository.get_by_id(sample_user["_id"])
        assert found["email"] == "ada@example.com"

    @pytest.mark.asyncio
    async def test_update_to_taken_email_raises(self, repository, sample_user):
        other = await repository.insert({"email": "bob@example.com"})

        with pytest.raises(UserAlreadyExistsError):
            await repository.update(other["_id"], {"email": "ada@example.com"})

    @pytest.mark.asyncio
    async def test_count_with_and_without_filter(self, repository, sample_user):
        await repository.insert({"email": "bob@example.com", "role": "ADMIN"})

        assert await repository.count() == 2
        assert await repository.count({"role": "ADMIN"}) == 1

    @pytest.mark.asyncio
    async def test_delete_existing_user(self, repository, sample_user):
        result = await repository.delete_by_id(sample_user["_id"])

        assert result.deleted_count == 1
        assert result.message == "User was deleted successfully."
        assert await repository.get_by_id(sample_user["_id"]) is None

    @pytest.mark.asyncio
    async def test_delete_non_existent_returns_zero(self, repository):
        result = await repository.delete_by_id(ObjectId())

        assert result.deleted_count == 0
        assert result.message == "No user found with that ID."

    @pytest.mark.asyncio
    async def test_clear_removes_all_users(self, repository, sample_user):
        repository.clear()

        assert await repository.count() == 0
