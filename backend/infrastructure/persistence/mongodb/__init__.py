"""MongoDB repository implementations."""

from .base import MongoBaseRepository

__all__ = [
    "MongoBaseRepository",
]
