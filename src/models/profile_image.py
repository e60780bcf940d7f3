"""Profile image record type definitions for database operations."""

from datetime import datetime
from typing import TypedDict
from uuid import UUID


class ProfileImageRecord(TypedDict):
    """profile_images table row representation.

    Rows are created elsewhere; this service only replaces the image fields.
    """

    id: UUID
    email: str
    profile_image: str | None
    profile_image_id: str | None
    created_at: datetime
    updated_at: datetime


class ProfileImageUpdate(TypedDict, total=False):
    """Fields written when a profile image is replaced."""

    profile_image: str | None
    profile_image_id: str | None
