"""MongoDB User Repository implementation."""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pymongo.errors import DuplicateKeyError

from domain.user.core.exceptions.user_errors import UserAlreadyExistsError, UserDeletionError
from domain.user.core.ports.user_repository import FieldSelector, IUserRepository
from domain.user.core.schemas import validate_new_user, validate_user_update
from domain.user.core.value_objects.delete_result import DeleteResult
from infrastructure.persistence.mongodb.base import MongoBaseRepository
from infrastructure.persistence.object_ids import normalize_criteria, to_object_id
from infrastructure.persistence.projection import build_projection

logger = logging.getLogger(__name__)


class MongoUserRepository(MongoBaseRepository, IUserRepository):
    """MongoDB implementation of User repository.

    Collection ``users`` keyed by ObjectId ``_id``. ``email`` carries a
    unique sparse index (the natural key) and ``expiresAt`` a TTL index so
    trial accounts are purged by the server once they expire.

    Examples:
        >>> repo = MongoUserRepository(client)
        >>> await repo.ensure_indexes()
        >>> user = await repo.insert({"email": "ada@example.com"})
        >>> found = await repo.get_by_id(user["_id"], "-password")
    """

    @property
    def collection_name(self) -> str:
        return "users"

    async def ensure_indexes(self) -> None:
        """Create the natural key and TTL indexes."""
        await self.collection.create_index("email", unique=True, sparse=True)
        await self.collection.create_index("expiresAt", expireAfterSeconds=0)

    async def insert(self, document: Dict[str, Any]) -> Dict[str, Any]:
        now = datetime.now(timezone.utc)
        record = validate_new_user(document)
        record.setdefault("createdAt", now)
        record.setdefault("updatedAt", now)

        try:
            inserted_id = await self._insert_one(record)
        except DuplicateKeyError as e:
            raise UserAlreadyExistsError(str(record.get("email"))) from e

        record["_id"] = inserted_id
        return record

    async def get_by_id(
        self, user_id: Any, fields: Optional[FieldSelector] = None
    ) -> Optional[Dict[str, Any]]:
        object_id = to_object_id(user_id)
        if object_id is None:
            return None
        return await self._find_one({"_id": object_id}, build_projection(fields))

    async def find_one(
        self, criteria: Dict[str, Any], fields: Optional[FieldSelector] = None
    ) -> Optional[Dict[str, Any]]:
        return await self._find_one(normalize_criteria(criteria), build_projection(fields))

    async def update(self, user_id: Any, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        object_id = to_object_id(user_id)
        if object_id is None:
            return None

        patch = validate_user_update(data)
        # $set and $unset on the same path is rejected by the server
        patch.pop("expiresAt", None)
        patch.pop("_id", None)
        patch["updatedAt"] = datetime.now(timezone.utc)

        update_operation = {
            "$set": patch,
            "$unset": {"expiresAt": ""},
        }
        try:
            return await self._find_one_and_update({"_id": object_id}, update_operation)
        except DuplicateKeyError as e:
            raise UserAlreadyExistsError(str(patch.get("email"))) from e

    async def count(self, filter_dict: Optional[Dict[str, Any]] = None) -> int:
        return await self._count(normalize_criteria(filter_dict))

    async def delete_by_id(self, user_id: Any) -> DeleteResult:
        object_id = to_object_id(user_id)
        if object_id is None:
            return DeleteResult.not_found()

        try:
            deleted = await self._delete_one({"_id": object_id})
        except Exception as e:
            raise UserDeletionError(str(e)) from e

        if deleted == 0:
            return DeleteResult.not_found()
        return DeleteResult.deleted(deleted)
