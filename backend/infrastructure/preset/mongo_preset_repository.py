"""MongoDB Preset Repository implementation."""

from typing import Any, Dict, List

from domain.user.core.ports.preset_repository import IPresetRepository
from infrastructure.persistence.mongodb.base import MongoBaseRepository


class MongoPresetRepository(MongoBaseRepository, IPresetRepository):
    """MongoDB implementation of Preset repository (collection ``presets``)."""

    @property
    def collection_name(self) -> str:
        return "presets"

    async def ensure_indexes(self) -> None:
        await self.collection.create_index("presetId", unique=True)
        await self.collection.create_index("user")

    async def insert_many(self, presets: List[Dict[str, Any]]) -> int:
        if not presets:
            return 0
        return await self._insert_many(presets)

    async def find_by_user(self, user_id: Any) -> List[Dict[str, Any]]:
        return await self._find_many({"user": user_id}, sort=[("order", 1), ("title", 1)])
