"""Profile image upload-and-replace workflow."""

import logging

from src.api.middleware.error_handler import NotFoundError, ValidationError
from src.core.config import get_settings
from src.core.data_uri import encode_data_uri
from src.services.media_host_service import (
    DeleteOutcome,
    MediaHostService,
    derive_public_id,
)
from src.services.profile_store import ProfileStore

logger = logging.getLogger(__name__)


class ProfileImageService:
    """Replaces the profile image stored against a profile record.

    Steps run strictly in order: validate, encode, upload, lookup,
    best-effort delete of the previous asset, save. Concurrent calls for
    the same email are not coordinated; the last save wins and the other
    upload is left orphaned on the media host.
    """

    def __init__(
        self,
        media_host: MediaHostService | None = None,
        store: ProfileStore | None = None,
    ) -> None:
        """Initialize the workflow.

        Args:
            media_host: Media host wrapper, created lazily when omitted.
            store: Profile record store, created lazily when omitted.
        """
        self._media_host = media_host
        self._store = store
        self.settings = get_settings()

    @property
    def media_host(self) -> MediaHostService:
        """Get media host service (lazy load)."""
        if self._media_host is None:
            self._media_host = MediaHostService()
        return self._media_host

    @property
    def store(self) -> ProfileStore:
        """Get profile store (lazy load)."""
        if self._store is None:
            self._store = ProfileStore()
        return self._store

    async def replace_profile_image(
        self,
        email: str | None,
        data: bytes | None,
        media_type: str | None = None,
    ) -> str:
        """Upload a new profile image and point the record at it.

        An upload for an unknown email still reaches the media host before
        the lookup fails, leaving the new asset orphaned.

        Args:
            email: Email identifying the profile record.
            data: Raw image bytes, None when no file was attached.
            media_type: Declared content type of the image.

        Returns:
            str: Public URL of the new image.

        Raises:
            ValidationError: If the email or file is missing.
            UpstreamError: If the media host upload fails.
            NotFoundError: If no record matches the email.
            PersistenceError: If the record cannot be read or saved.
        """
        if not email:
            raise ValidationError("Email required")
        if data is None:
            raise ValidationError("No file uploaded")

        data_uri = encode_data_uri(data, media_type)
        asset = await self.media_host.upload(data_uri, folder=self.settings.profile_image_folder)

        logger.info("Looking up profile for %s", email)
        record = await self.store.find_by_email(email)
        if record is None:
            logger.warning("No profile for %s, uploaded asset %s is orphaned", email, asset.public_id)
            raise NotFoundError("User not found")

        previous_url = record.get("profile_image")
        if previous_url:
            await self._delete_previous(previous_url, record.get("profile_image_id"))

        record["profile_image"] = asset.secure_url
        record["profile_image_id"] = asset.public_id
        await self.store.save(record)

        return asset.secure_url

    async def _delete_previous(self, url: str, public_id: str | None) -> DeleteOutcome:
        """Remove the superseded asset, logging instead of raising."""
        public_id = public_id or derive_public_id(url)
        if not public_id:
            logger.warning("Could not derive media id from %s, leaving it in place", url)
            return DeleteOutcome.FAILED

        outcome = await self.media_host.delete(public_id)
        if outcome is DeleteOutcome.DELETED:
            logger.info("Deleted previous profile image %s", public_id)
        else:
            logger.warning("Previous profile image %s not removed: %s", public_id, outcome.value)
        return outcome


def get_profile_image_service() -> ProfileImageService:
    """Create a profile image service for one request."""
    return ProfileImageService()
