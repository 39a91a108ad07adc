"""DeleteResult value object."""

from dataclasses import dataclass

NO_USER_FOUND_MESSAGE = "No user found with that ID."
USER_DELETED_MESSAGE = "User was deleted successfully."


@dataclass(frozen=True)
class DeleteResult:
    """Outcome of a delete-by-id operation.

    ``deleted_count == 0`` is a normal outcome meaning nothing matched.

    Examples:
        >>> DeleteResult.not_found()
        DeleteResult(deleted_count=0, message='No user found with that ID.')
    """

    deleted_count: int
    message: str

    @staticmethod
    def not_found() -> "DeleteResult":
        return DeleteResult(deleted_count=0, message=NO_USER_FOUND_MESSAGE)

    @staticmethod
    def deleted(count: int = 1) -> "DeleteResult":
        return DeleteResult(deleted_count=count, message=USER_DELETED_MESSAGE)

    def to_dict(self) -> dict:
        """Plain dict form, as returned to request handlers."""
        return {"deletedCount": self.deleted_count, "message": self.message}
