"""User repository factory for environment-based selection.

This factory creates the repositories backing user accounts (users,
balances, presets) based on the USER_REPOSITORY environment variable:
- "inmemory": in-memory repositories (for testing)
- "mongodb": MongoDB repositories (for production)

Default: inmemory
"""

import os
from dataclasses import dataclass
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient

from domain.user.core.ports.balance_repository import IBalanceRepository
from domain.user.core.ports.preset_repository import IPresetRepository
from domain.user.core.ports.user_repository import IUserRepository
from infrastructure.balance.in_memory_balance_repository import InMemoryBalanceRepository
from infrastructure.balance.mongo_balance_repository import MongoBalanceRepository
from infrastructure.config import get_mongodb_uri
from infrastructure.preset.in_memory_preset_repository import InMemoryPresetRepository
from infrastructure.preset.mongo_preset_repository import MongoPresetRepository
from infrastructure.user.in_memory_user_repository import InMemoryUserRepository
from infrastructure.user.mongo_user_repository import MongoUserRepository


@dataclass(frozen=True)
class UserRepositories:
    """Repositories sharing one backend."""

    users: IUserRepository
    balances: IBalanceRepository
    presets: IPresetRepository


def create_user_repositories() -> UserRepositories:
    """Create user repositories based on environment configuration.

    Returns:
        UserRepositories: The configured repository implementations

    Environment Variables:
        USER_REPOSITORY: "inmemory" | "mongodb" (default: inmemory)
        MONGODB_URI: MongoDB connection string (required for mongodb)
        MONGODB_DATABASE: Database name (default: librechat)
    """
    repo_type = os.getenv("USER_REPOSITORY", "inmemory").lower()

    if repo_type == "mongodb":
        mongo_uri = get_mongodb_uri()
        if not mongo_uri:
            raise ValueError(
                "MONGODB_URI environment variable is required " "when USER_REPOSITORY=mongodb"
            )

        client: AsyncIOMotorClient = AsyncIOMotorClient(mongo_uri)  # type: ignore
        return UserRepositories(
            users=MongoUserRepository(client),
            balances=MongoBalanceRepository(client),
            presets=MongoPresetRepository(client),
        )

    elif repo_type == "inmemory":
        return UserRepositories(
            users=InMemoryUserRepository(),
            balances=InMemoryBalanceRepository(),
            presets=InMemoryPresetRepository(),
        )

    else:
        raise ValueError(
            f"Invalid USER_REPOSITORY value: {repo_type}. " "Expected 'inmemory' or 'mongodb'"
        )


# Singleton instance
_user_repositories: Optional[UserRepositories] = None


def get_user_repositories() -> UserRepositories:
    """Get singleton repositories instance."""
    global _user_repositories

    if _user_repositories is None:
        _user_repositories = create_user_repositories()

    return _user_repositories


def reset_user_repositories() -> None:
    """Reset the singleton (for testing purposes)."""
    global _user_repositories
    _user_repositories = None
