"""MongoDB Balance Repository implementation."""

from typing import Any, Dict, Optional

from domain.user.core.ports.balance_repository import IBalanceRepository
from infrastructure.persistence.mongodb.base import MongoBaseRepository


class MongoBalanceRepository(MongoBaseRepository, IBalanceRepository):
    """MongoDB implementation of Balance repository.

    One document per user in ``balances``: ``{user, tokenCredits}``.
    Increments use ``$inc`` with upsert so concurrent writers never lose
    an update.
    """

    @property
    def collection_name(self) -> str:
        return "balances"

    async def ensure_indexes(self) -> None:
        """One balance per user."""
        await self.collection.create_index("user", unique=True)

    async def increment_credits(self, user_id: Any, amount: int) -> Dict[str, Any]:
        doc = await self._find_one_and_update(
            {"user": user_id},
            {"$inc": {"tokenCredits": amount}},
            upsert=True,
        )
        # upsert guarantees a document
        assert doc is not None
        return doc

    async def find_by_user(self, user_id: Any) -> Optional[Dict[str, Any]]:
        return await self._find_one({"user": user_id})
