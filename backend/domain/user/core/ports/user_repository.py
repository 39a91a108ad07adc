"""User repository port (interface)."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Union

from domain.user.core.value_objects.delete_result import DeleteResult

FieldSelector = Union[str, List[str]]


class IUserRepository(ABC):
    """Repository interface for the users collection.

    Records are plain dicts detached from the storage layer: mutating a
    returned record never writes anything back.

    Field selectors restrict the returned attributes. They are either a
    space separated string (``"name email"`` to include,
    ``"-password"`` to exclude) or a list of field names.

    Examples:
        >>> user = await repository.get_by_id(user_id, "-password")
        >>> if user is None:
        ...     print("No such user")
    """

    @abstractmethod
    async def insert(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a new user document.

        Args:
            document: User fields to persist

        Returns:
            The stored record including its generated ``_id``

        Raises:
            UserAlreadyExistsError: If the natural key (email) is taken
            UserValidationError: If a known field is invalid
        """
        pass

    @abstractmethod
    async def get_by_id(
        self, user_id: Any, fields: Optional[FieldSelector] = None
    ) -> Optional[Dict[str, Any]]:
        """Find user by id.

        Args:
            user_id: ObjectId or its hex string
            fields: Optional field selector

        Returns:
            User record, or None if not found
        """
        pass

    @abstractmethod
    async def find_one(
        self, criteria: Dict[str, Any], fields: Optional[FieldSelector] = None
    ) -> Optional[Dict[str, Any]]:
        """Find the first user whose fields equal every key of ``criteria``.

        Returns:
            User record, or None if not found
        """
        pass

    @abstractmethod
    async def update(self, user_id: Any, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Merge ``data`` into the stored user.

        Every key overwrites the stored field; ``expiresAt`` is always
        removed so a touched user never expires.

        Returns:
            The post-update record, or None if the id does not exist

        Raises:
            UserValidationError: If a supplied field is invalid
        """
        pass

    @abstractmethod
    async def count(self, filter_dict: Optional[Dict[str, Any]] = None) -> int:
        """Count users matching ``filter_dict`` (all users when empty)."""
        pass

    @abstractmethod
    async def delete_by_id(self, user_id: Any) -> DeleteResult:
        """Delete at most one user.

        Returns:
            DeleteResult with ``deleted_count`` 0 (nothing matched) or 1

        Raises:
            UserDeletionError: If the storage layer fails
        """
        pass
