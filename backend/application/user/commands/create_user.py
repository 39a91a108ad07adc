"""Create user command (account provisioning)."""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Union

from application.user.default_presets import build_default_presets
from domain.user.core.ports.balance_repository import IBalanceRepository
from domain.user.core.ports.preset_repository import IPresetRepository
from domain.user.core.ports.user_repository import IUserRepository
from infrastructure.config import BalanceSettings

logger = logging.getLogger(__name__)

TRIAL_TTL = timedelta(milliseconds=604_800_000)


@dataclass
class CreateUserCommand:
    """Command to create an account and seed its default data.

    Steps run in order without a transaction: insert the user, add the
    starting balance, seed the default presets. A failure after the insert
    never removes the user. Balance failures propagate; preset failures
    are logged and ignored.

    Examples:
        >>> command = CreateUserCommand(users, balances, presets)
        >>> user_id = await command.execute({"email": "ada@example.com"})
    """

    users: IUserRepository
    balances: IBalanceRepository
    presets: IPresetRepository
    balance_settings: BalanceSettings = field(default_factory=BalanceSettings)

    async def execute(
        self,
        data: Dict[str, Any],
        disable_ttl: bool = True,
        return_user: bool = False,
    ) -> Union[Any, Dict[str, Any]]:
        """Execute create user command.

        Args:
            data: User fields
            disable_ttl: When False the account expires one week from now
            return_user: Return the full record instead of the id

        Returns:
            The new user's ``_id``, or the user record if ``return_user``

        Raises:
            UserAlreadyExistsError: If the email is already registered
            UserValidationError: If a user field is invalid
        """
        user_data = {key: value for key, value in data.items() if key != "expiresAt"}
        if not disable_ttl:
            user_data["expiresAt"] = datetime.now(timezone.utc) + TRIAL_TTL

        user = await self.users.insert(user_data)
        user_id = user["_id"]

        if self.balance_settings.seeds_balance:
            await self.balances.increment_credits(user_id, self.balance_settings.start_balance)

        await self._seed_presets(user_id)

        if return_user:
            return user
        return user_id

    async def _seed_presets(self, user_id: Any) -> None:
        try:
            await self.presets.insert_many(build_default_presets(user_id))
        except Exception as e:
            logger.error(
                "Error creating default presets",
                extra={"user_id": str(user_id), "error": str(e)},
                exc_info=True,
            )
