"""Balance repository port (interface)."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class IBalanceRepository(ABC):
    """Repository interface for per-user token credit balances."""

    @abstractmethod
    async def increment_credits(self, user_id: Any, amount: int) -> Dict[str, Any]:
        """Atomically add ``amount`` to the user's ``tokenCredits``.

        Creates the balance record when none exists (upsert).

        Returns:
            The balance record after the increment
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: Any) -> Optional[Dict[str, Any]]:
        """Get the balance record of a user, or None."""
        pass
