"""In-memory Preset Repository for testing."""

import copy
from typing import Any, Dict, List

from bson import ObjectId

from domain.user.core.ports.preset_repository import IPresetRepository


class InMemoryPresetRepository(IPresetRepository):
    """In-memory implementation of Preset repository for testing.

    Enforces unique ``presetId`` like the MongoDB index; a batch with a
    duplicate is rejected as a whole.
    """

    def __init__(self) -> None:
        self._presets: Dict[str, Dict[str, Any]] = {}

    async def insert_many(self, presets: List[Dict[str, Any]]) -> int:
        ids = [preset["presetId"] for preset in presets]
        if len(set(ids)) != len(ids) or any(preset_id in self._presets for preset_id in ids):
            raise ValueError("Duplicate presetId")

        for preset in presets:
            record = copy.deepcopy(preset)
            record.setdefault("_id", ObjectId())
            self._presets[record["presetId"]] = record
        return len(presets)

    async def find_by_user(self, user_id: Any) -> List[Dict[str, Any]]:
        owned = [copy.deepcopy(p) for p in self._presets.values() if p.get("user") == user_id]
        # missing order sorts first, as in MongoDB ascending order
        owned.sort(
            key=lambda p: (p.get("order") is not None, p.get("order") or 0, p.get("title", ""))
        )
        return owned

    def clear(self) -> None:
        self._presets.clear()
