"""Persistence for profile image records."""

import logging

from src.api.middleware.error_handler import PersistenceError
from src.core.supabase import get_supabase_client
from src.models.profile_image import ProfileImageRecord, ProfileImageUpdate

logger = logging.getLogger(__name__)

TABLE = "profile_images"


class ProfileStore:
    """Reads and writes rows of the profile_images table."""

    def __init__(self) -> None:
        """Initialize profile store with Supabase client."""
        self.client = get_supabase_client()

    async def find_by_email(self, email: str) -> ProfileImageRecord | None:
        """Get the profile record for an email address.

        Emails are unique in the table, so at most one row comes back.

        Args:
            email: The record's email.

        Returns:
            ProfileImageRecord | None: The record or None if not found.

        Raises:
            PersistenceError: If the query fails.
        """
        try:
            response = (
                self.client.table(TABLE)
                .select("*")
                .eq("email", email)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.error("Profile lookup failed: %s", e)
            raise PersistenceError() from e

        return response.data[0] if response.data else None

    async def save(self, record: ProfileImageRecord) -> ProfileImageRecord:
        """Write a record's image fields back to the table.

        Args:
            record: The mutated record, including its id.

        Returns:
            ProfileImageRecord: The stored row, or the given record if nothing was echoed back.

        Raises:
            PersistenceError: If the update fails.
        """
        update_data: ProfileImageUpdate = {
            "profile_image": record.get("profile_image"),
            "profile_image_id": record.get("profile_image_id"),
        }

        try:
            response = (
                self.client.table(TABLE)
                .update(update_data)
                .eq("id", str(record["id"]))
                .execute()
            )
        except Exception as e:
            logger.error("Profile save failed for %s: %s", record.get("id"), e)
            raise PersistenceError() from e

        return response.data[0] if response.data else record
