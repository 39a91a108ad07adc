"""In-memory Balance Repository for testing."""

import copy
from typing import Any, Dict, Optional

from bson import ObjectId

from domain.user.core.ports.balance_repository import IBalanceRepository


class InMemoryBalanceRepository(IBalanceRepository):
    """In-memory implementation of Balance repository for testing."""

    def __init__(self) -> None:
        self._balances: Dict[Any, Dict[str, Any]] = {}

    async def increment_credits(self, user_id: Any, amount: int) -> Dict[str, Any]:
        balance = self._balances.setdefault(
            user_id, {"_id": ObjectId(), "user": user_id, "tokenCredits": 0}
        )
        balance["tokenCredits"] += amount
        return copy.deepcopy(balance)

    async def find_by_user(self, user_id: Any) -> Optional[Dict[str, Any]]:
        balance = self._balances.get(user_id)
        return copy.deepcopy(balance) if balance is not None else None

    def clear(self) -> None:
        self._balances.clear()
