"""Preset repository port (interface)."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List


class IPresetRepository(ABC):
    """Repository interface for conversation presets."""

    @abstractmethod
    async def insert_many(self, presets: List[Dict[str, Any]]) -> int:
        """Insert preset documents.

        Returns:
            Number of presets inserted
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: Any) -> List[Dict[str, Any]]:
        """List presets owned by a user, ordered by ``order`` then title."""
        pass
