"""User domain exceptions."""

from typing import Any, Optional


class UserDomainError(Exception):
    """Base exception for User domain errors."""

    pass


class UserAlreadyExistsError(UserDomainError):
    """User with given natural key already exists."""

    def __init__(self, identifier: str):
        """Initialize with user identifier.

        Args:
            identifier: Natural key value that already exists
        """
        self.identifier = identifier
        super().__init__(f"User already exists: {identifier}")


class UserValidationError(UserDomainError):
    """User document failed schema validation."""

    def __init__(self, errors: Any):
        """Initialize with validation errors.

        Args:
            errors: Error details reported by the schema layer
        """
        self.errors = errors
        super().__init__(f"User validation failed: {errors}")


class UserDeletionError(UserDomainError):
    """Storage fault while deleting a user."""

    def __init__(self, detail: str):
        """Initialize with the original storage error message.

        Args:
            detail: Message of the underlying storage error
        """
        self.detail = detail
        super().__init__(f"Error deleting user: {detail}")


class MissingUserError(UserDomainError):
    """An operation that needs a user record was called without one."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "No user provided")


class PasswordVerificationError(UserDomainError):
    """Password hash comparison could not be performed.

    Distinct from a wrong password, which is reported as ``False``.
    """

    pass
