"""In-memory User Repository for testing."""

import copy
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from bson import ObjectId

from domain.user.core.exceptions.user_errors import UserAlreadyExistsError
from domain.user.core.ports.user_repository import FieldSelector, IUserRepository
from domain.user.core.schemas import validate_new_user, validate_user_update
from domain.user.core.value_objects.delete_result import DeleteResult
from infrastructure.persistence.object_ids import normalize_criteria, to_object_id
from infrastructure.persistence.projection import apply_projection, build_projection


def _matches(document: Dict[str, Any], criteria: Dict[str, Any]) -> bool:
    return all(document.get(key) == value for key, value in criteria.items())


class InMemoryUserRepository(IUserRepository):
    """In-memory implementation of User repository for testing.

    Stores documents keyed by ObjectId and enforces the same unique email
    constraint as the MongoDB index. Reads return deep copies so callers
    never share state with the store.

    Examples:
        >>> repo = InMemoryUserRepository()
        >>> user = await repo.insert({"email": "ada@example.com"})
        >>> found = await repo.get_by_id(user["_id"])
    """

    def __init__(self) -> None:
        """Initialize empty in-memory storage."""
        self._users: Dict[ObjectId, Dict[str, Any]] = {}

    def _email_taken(self, email: Optional[str], exclude: Optional[ObjectId] = None) -> bool:
        if email is None:
            return False
        return any(
            user.get("email") == email for key, user in self._users.items() if key != exclude
        )

    async def insert(self, document: Dict[str, Any]) -> Dict[str, Any]:
        now = datetime.now(timezone.utc)
        record = validate_new_user(copy.deepcopy(document))
        record.setdefault("createdAt", now)
        record.setdefault("updatedAt", now)

        if self._email_taken(record.get("email")):
            raise UserAlreadyExistsError(str(record["email"]))

        object_id = record.setdefault("_id", ObjectId())
        self._users[object_id] = record
        return copy.deepcopy(record)

    async def get_by_id(
        self, user_id: Any, fields: Optional[FieldSelector] = None
    ) -> Optional[Dict[str, Any]]:
        projection = build_projection(fields)
        object_id = to_object_id(user_id)
        user = self._users.get(object_id) if object_id is not None else None
        if user is None:
            return None
        return copy.deepcopy(apply_projection(user, projection))

    async def find_one(
        self, criteria: Dict[str, Any], fields: Optional[FieldSelector] = None
    ) -> Optional[Dict[str, Any]]:
        projection = build_projection(fields)
        normalized = normalize_criteria(criteria)
        for user in self._users.values():
            if _matches(user, normalized):
                return copy.deepcopy(apply_projection(user, projection))
        return None

    async def update(self, user_id: Any, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        object_id = to_object_id(user_id)
        if object_id is None or object_id not in self._users:
            return None

        patch = validate_user_update(copy.deepcopy(data))
        patch.pop("expiresAt", None)
        patch.pop("_id", None)

        if "email" in patch and self._email_taken(patch["email"], exclude=object_id):
            raise UserAlreadyExistsError(str(patch["email"]))

        user = self._users[object_id]
        user.update(patch)
        user.pop("expiresAt", None)
        user["updatedAt"] = datetime.now(timezone.utc)
        return copy.deepcopy(user)

    async def count(self, filter_dict: Optional[Dict[str, Any]] = None) -> int:
        criteria = normalize_criteria(filter_dict)
        return sum(1 for user in self._users.values() if _matches(user, criteria))

    async def delete_by_id(self, user_id: Any) -> DeleteResult:
        object_id = to_object_id(user_id)
        if object_id is None or self._users.pop(object_id, None) is None:
            return DeleteResult.not_found()
        return DeleteResult.deleted()

    def clear(self) -> None:
        """Clear all users from memory.

        Useful for test cleanup.
        """
        self._users.clear()
