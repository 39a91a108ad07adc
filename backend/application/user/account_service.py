"""Account service: the operations request handlers call."""

from typing import Any, Dict, Optional, Union

from application.user.commands.create_user import CreateUserCommand
from domain.user.core.ports.user_repository import FieldSelector
from domain.user.core.value_objects.delete_result import DeleteResult
from infrastructure.config import BalanceSettings, SessionSettings
from infrastructure.user.password_verifier import PasswordVerifier
from infrastructure.user.repository_factory import UserRepositories, get_user_repositories
from infrastructure.user.token_issuer import TokenIssuer


class AccountService:
    """Facade over the user repositories, provisioning and credentials.

    Settings are read once when the service is built and passed down
    explicitly.

    Examples:
        >>> service = AccountService.from_env()
        >>> user_id = await service.create_user({"email": "ada@example.com"})
        >>> token = await service.generate_token(await service.get_user_by_id(user_id))
    """

    def __init__(
        self,
        repositories: UserRepositories,
        session_settings: SessionSettings,
        balance_settings: Optional[BalanceSettings] = None,
        password_verifier: Optional[PasswordVerifier] = None,
    ) -> None:
        self._repositories = repositories
        self._create_user = CreateUserCommand(
            repositories.users,
            repositories.balances,
            repositories.presets,
            balance_settings or BalanceSettings(),
        )
        self._password_verifier = password_verifier or PasswordVerifier()
        self._token_issuer = TokenIssuer(session_settings)

    @classmethod
    def from_env(cls) -> "AccountService":
        """Build the service from environment configuration.

        Raises:
            ConfigurationError: If SESSION_EXPIRY or START_BALANCE is malformed
        """
        return cls(
            get_user_repositories(),
            SessionSettings.from_env(),
            BalanceSettings.from_env(),
        )

    async def get_user_by_id(
        self, user_id: Any, fields: Optional[FieldSelector] = None
    ) -> Optional[Dict[str, Any]]:
        return await self._repositories.users.get_by_id(user_id, fields)

    async def find_user(
        self, criteria: Dict[str, Any], fields: Optional[FieldSelector] = None
    ) -> Optional[Dict[str, Any]]:
        return await self._repositories.users.find_one(criteria, fields)

    async def update_user(self, user_id: Any, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return await self._repositories.users.update(user_id, data)

    async def count_users(self, filter_dict: Optional[Dict[str, Any]] = None) -> int:
        return await self._repositories.users.count(filter_dict)

    async def delete_user_by_id(self, user_id: Any) -> DeleteResult:
        return await self._repositories.users.delete_by_id(user_id)

    async def create_user(
        self,
        data: Dict[str, Any],
        disable_ttl: bool = True,
        return_user: bool = False,
    ) -> Union[Any, Dict[str, Any]]:
        return await self._create_user.execute(data, disable_ttl, return_user)

    async def compare_password(
        self, user: Optional[Dict[str, Any]], candidate_password: str
    ) -> bool:
        return await self._password_verifier.compare(user, candidate_password)

    async def generate_token(self, user: Optional[Dict[str, Any]]) -> str:
        return await self._token_issuer.issue(user)
