"""Base MongoDB repository with reusable patterns.

Provides common functionality for all MongoDB repositories:
- Connection management
- Projection and sort passthrough
- Error handling
- Logging

Documents are plain dicts: motor returns fresh dicts that carry no
persistence handle, so records handed to callers are already detached.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo import ReturnDocument

from infrastructure.config import get_mongodb_uri, get_mongodb_database


logger = logging.getLogger(__name__)


class MongoBaseRepository(ABC):
    """
    Abstract base class for MongoDB repositories.

    Provides common functionality:
    - Connection pooling (motor handles this automatically)
    - Shared collection handle per subclass
    - Error handling with proper logging

    Subclasses must implement:
    - collection_name: Name of MongoDB collection

    Example:
        class MongoBalanceRepository(MongoBaseRepository):
            @property
            def collection_name(self) -> str:
                return "balances"
    """

    def __init__(self, client: Optional[AsyncIOMotorClient[Dict[str, Any]]] = None):
        """
        Initialize repository with optional client.

        Args:
            client: Motor client (if None, creates new one from config)
        """
        if client is None:
            uri = get_mongodb_uri()
            if not uri:
                raise ValueError(
                    "MONGODB_URI not configured. "
                    "Set MONGODB_URI, MONGODB_USER, "
                    "and MONGODB_PASSWORD environment variables."
                )
            self._client: AsyncIOMotorClient[Dict[str, Any]] = AsyncIOMotorClient(uri)
        else:
            self._client = client

        database_name = get_mongodb_database()
        self._db = self._client[database_name]
        self._collection = self._db[self.collection_name]

        logger.info(
            f"Initialized {self.__class__.__name__} " f"for collection '{self.collection_name}'"
        )

    @property
    @abstractmethod
    def collection_name(self) -> str:
        """MongoDB collection name."""
        pass

    @property
    def collection(self) -> AsyncIOMotorCollection[Dict[str, Any]]:
        """Get MongoDB collection handle."""
        return self._collection

    async def _find_one(
        self,
        filter_dict: Dict[str, Any],
        projection: Optional[Dict[str, int]] = None,
    ) -> Optional[Dict[str, Any]]:
        """
        Find single document with error handling.

        Raises:
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        try:
            doc = await self._collection.find_one(filter_dict, projection)
            return doc
        except Exception as e:
            logger.error(
                f"Error in find_one: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise

    async def _find_many(
        self,
        filter_dict: Dict[str, Any],
        sort: Optional[List[Any]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Find multiple documents with error handling.

        Raises:
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        try:
            cursor = self._collection.find(filter_dict)
            if sort:
                cursor = cursor.sort(sort)
            documents: List[Dict[str, Any]] = await cursor.to_list(length=None)
            return documents
        except Exception as e:
            logger.error(
                f"Error in find_many: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise

    async def _insert_one(self, document: Dict[str, Any]) -> Any:
        """
        Insert single document with error handling.

        Returns:
            The inserted document id

        Raises:
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        try:
            result = await self._collection.insert_one(document)
            return result.inserted_id
        except Exception as e:
            logger.error(f"Error in insert_one: collection={self.collection_name}, " f"error={e}")
            raise

    async def _insert_many(self, documents: List[Dict[str, Any]]) -> int:
        """
        Insert documents with error handling.

        Returns:
            Number of inserted documents

        Raises:
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        try:
            result = await self._collection.insert_many(documents)
            return len(result.inserted_ids)
        except Exception as e:
            logger.error(f"Error in insert_many: collection={self.collection_name}, " f"error={e}")
            raise

    async def _find_one_and_update(
        self,
        filter_dict: Dict[str, Any],
        update_dict: Dict[str, Any],
        upsert: bool = False,
        projection: Optional[Dict[str, int]] = None,
    ) -> Optional[Dict[str, Any]]:
        """
        Atomically update one document and return it after the update.

        Args:
            filter_dict: MongoDB filter
            update_dict: Update operations (e.g., {"$set": {...}})
            upsert: Create document if not found
            projection: Optional projection

        Returns:
            Updated document, or None if nothing matched and not upserting

        Raises:
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        try:
            doc = await self._collection.find_one_and_update(
                filter_dict,
                update_dict,
                projection=projection,
                upsert=upsert,
                return_document=ReturnDocument.AFTER,
            )
            return doc
        except Exception as e:
            logger.error(
                f"Error in find_one_and_update: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise

    async def _delete_one(self, filter_dict: Dict[str, Any]) -> int:
        """
        Delete single document with error handling.

        Returns:
            Number of documents deleted (0 or 1)

        Raises:
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        try:
            result = await self._collection.delete_one(filter_dict)
            return int(result.deleted_count)
        except Exception as e:
            logger.error(
                f"Error in delete_one: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise

    async def _count(self, filter_dict: Dict[str, Any]) -> int:
        """
        Count documents with error handling.

        Raises:
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        try:
            count = await self._collection.count_documents(filter_dict)
            return int(count)
        except Exception as e:
            logger.error(
                f"Error in count: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise
