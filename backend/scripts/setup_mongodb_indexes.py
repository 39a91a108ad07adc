"""Setup MongoDB indexes for the account collections.

Collections:
- users: unique sparse email (natural key), TTL on expiresAt
- balances: one balance per user
- presets: unique presetId, lookup by user

Usage:
    python scripts/setup_mongodb_indexes.py

Environment Variables:
    MONGODB_URI: MongoDB connection string (required)
    MONGODB_DATABASE: Database name (default: librechat)
"""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv
from motor.motor_asyncio import AsyncIOMotorClient

from infrastructure.balance.mongo_balance_repository import MongoBalanceRepository
from infrastructure.config import get_mongodb_database, get_mongodb_uri
from infrastructure.preset.mongo_preset_repository import MongoPresetRepository
from infrastructure.user.mongo_user_repository import MongoUserRepository

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)
    logging.debug(f"Loaded environment from: {env_path}")


logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


async def list_existing_indexes(client: AsyncIOMotorClient[Dict[str, Any]]) -> None:
    """Log the indexes of every account collection."""
    db = client[get_mongodb_database()]
    for coll_name in ("users", "balances", "presets"):
        indexes = await db[coll_name].list_indexes().to_list(length=None)

        logger.info(f"{coll_name}:")
        for idx in indexes:
            name = idx.get("name", "unknown")
            keys = ", ".join(f"{k}:{v}" for k, v in idx.get("key", {}).items())
            unique = " (unique)" if idx.get("unique", False) else ""
            logger.info(f"  {name}: [{keys}]{unique}")


async def setup_all_indexes() -> None:
    """Create the indexes used by the user, balance and preset repositories."""
    uri = get_mongodb_uri()
    if not uri:
        logger.error("MONGODB_URI not configured!")
        logger.error("Set MONGODB_URI environment variable with connection string.")
        sys.exit(1)

    logger.info(f"Connecting to MongoDB: {get_mongodb_database()}")
    client: AsyncIOMotorClient[Dict[str, Any]] = AsyncIOMotorClient(uri)

    try:
        await client.admin.command("ping")
        logger.info("Connected to MongoDB successfully")

        await MongoUserRepository(client).ensure_indexes()
        await MongoBalanceRepository(client).ensure_indexes()
        await MongoPresetRepository(client).ensure_indexes()

        logger.info("All indexes created successfully")
        await list_existing_indexes(client)

    except Exception as e:
        logger.error(f"Error setting up indexes: {e}")
        sys.exit(1)

    finally:
        client.close()
        logger.info("MongoDB connection closed")


def main() -> None:
    """Main entry point."""
    try:
        asyncio.run(setup_all_indexes())
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(130)


if __name__ == "__main__":
    main()
