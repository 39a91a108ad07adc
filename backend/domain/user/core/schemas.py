"""Schema validation for user documents.

Documents are stored as plain dicts; these models only validate and
normalise the known fields before a write. Unknown profile fields pass
through untouched.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from domain.user.core.exceptions.user_errors import UserValidationError

EMAIL_PATTERN = re.compile(r"^\S+@\S+\.\S+$")

DEFAULT_PROVIDER = "local"
DEFAULT_ROLE = "USER"


def _normalize_email(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip().lower()
    if not EMAIL_PATTERN.match(value):
        raise ValueError(f"Invalid email: {value}")
    return value


class UserSchema(BaseModel):
    """Schema applied when a user document is inserted."""

    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    username: Optional[str] = None
    email: Optional[str] = None
    emailVerified: bool = False
    password: Optional[str] = Field(None, min_length=8, max_length=128)
    avatar: Optional[str] = None
    provider: str = DEFAULT_PROVIDER
    role: str = DEFAULT_ROLE
    plugins: List[str] = Field(default_factory=list)
    termsAccepted: bool = False
    expiresAt: Optional[datetime] = None

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: Optional[str]) -> Optional[str]:
        """Lower-case and check email format."""
        return _normalize_email(v)

    @field_validator("username")
    @classmethod
    def normalize_username(cls, v: Optional[str]) -> Optional[str]:
        return v.strip().lower() if v is not None else None


class UserUpdateSchema(BaseModel):
    """Schema applied to the partial fields of an update.

    No defaults: only the fields present in the patch are validated and
    written back.
    """

    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    username: Optional[str] = None
    email: Optional[str] = None
    emailVerified: Optional[bool] = None
    password: Optional[str] = Field(None, min_length=8, max_length=128)
    avatar: Optional[str] = None
    provider: Optional[str] = None
    role: Optional[str] = None
    plugins: Optional[List[str]] = None
    termsAccepted: Optional[bool] = None

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: Optional[str]) -> Optional[str]:
        return _normalize_email(v)

    @field_validator("username")
    @classmethod
    def normalize_username(cls, v: Optional[str]) -> Optional[str]:
        return v.strip().lower() if v is not None else None


def _split_id(data: Dict[str, Any]) -> tuple[Dict[str, Any], Dict[str, Any]]:
    # Underscore-prefixed keys are not valid pydantic fields
    reserved = {k: v for k, v in data.items() if k.startswith("_")}
    fields = {k: v for k, v in data.items() if not k.startswith("_")}
    return reserved, fields


def validate_new_user(data: Dict[str, Any]) -> Dict[str, Any]:
    """Validate and normalise a document about to be inserted.

    Args:
        data: Raw user fields supplied by the caller

    Returns:
        Document with defaults applied and ``None`` values dropped

    Raises:
        UserValidationError: If a known field is invalid
    """
    reserved, fields = _split_id(data)
    try:
        model = UserSchema.model_validate(fields)
    except ValidationError as e:
        raise UserValidationError(e.errors()) from e
    document = model.model_dump(exclude_none=True)
    document.update(reserved)
    return document


def validate_user_update(data: Dict[str, Any]) -> Dict[str, Any]:
    """Validate the fields of a merge-patch.

    Args:
        data: Partial fields to overwrite

    Returns:
        Normalised patch containing only the keys that were supplied

    Raises:
        UserValidationError: If a supplied field is invalid
    """
    reserved, fields = _split_id(data)
    try:
        model = UserUpdateSchema.model_validate(fields)
    except ValidationError as e:
        raise UserValidationError(e.errors()) from e
    patch = model.model_dump(exclude_unset=True)
    patch.update(reserved)
    return patch
