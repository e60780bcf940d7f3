"""Media host wrapper over Supabase Storage."""

import logging
from dataclasses import dataclass
from enum import Enum
from urllib.parse import urlparse
from uuid import uuid4

from src.api.middleware.error_handler import UpstreamError
from src.core.config import get_settings
from src.core.data_uri import decode_data_uri
from src.core.supabase import get_supabase_client

logger = logging.getLogger(__name__)


class DeleteOutcome(str, Enum):
    """Result of a best-effort asset deletion."""

    DELETED = "deleted"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class UploadedAsset:
    """An object stored on the media host."""

    public_id: str
    secure_url: str


def derive_public_id(url: str) -> str | None:
    """Recover a media host object identifier from its public URL.

    Takes the last two path segments and strips the extension from the
    final one, so ``https://host/profile-images/abc123.jpg`` gives
    ``profile-images/abc123``. Only used for rows that predate the
    stored profile_image_id.

    Args:
        url: Public URL of the asset.

    Returns:
        str | None: The identifier, or None if the URL has no path segment.
    """
    segments = [segment for segment in urlparse(url).path.split("/") if segment]
    if not segments:
        return None

    tail = segments[-2:]
    tail[-1] = tail[-1].split(".")[0]
    return "/".join(tail)


class MediaHostService:
    """Stores and removes media objects in the public media bucket."""

    def __init__(self) -> None:
        """Initialize media host service with Supabase client."""
        self.client = get_supabase_client()
        self.settings = get_settings()

    @property
    def bucket(self):
        """Storage bucket handle for the media bucket."""
        return self.client.storage.from_(self.settings.media_bucket)

    def public_url(self, public_id: str) -> str:
        """Build the public URL serving an object."""
        return f"{self.settings.media_public_base_url}/{public_id}"

    async def upload(self, data_uri: str, folder: str) -> UploadedAsset:
        """Store an encoded payload under a folder.

        Args:
            data_uri: Base64 data URI carrying the payload and its content type.
            folder: Folder grouping inside the bucket.

        Returns:
            UploadedAsset: Identifier and public URL of the new object.

        Raises:
            UpstreamError: If the payload is malformed or the upload fails.
        """
        public_id = f"{folder}/{uuid4().hex}"

        try:
            data, media_type = decode_data_uri(data_uri)
            self.bucket.upload(
                path=public_id,
                file=data,
                file_options={"content-type": media_type},
            )
        except Exception as e:
            logger.error("Media upload to %s failed: %s", public_id, e)
            raise UpstreamError() from e

        logger.info("Uploaded media object %s (%d bytes)", public_id, len(data))
        return UploadedAsset(public_id=public_id, secure_url=self.public_url(public_id))

    async def delete(self, public_id: str) -> DeleteOutcome:
        """Remove an object, best-effort.

        Never raises; callers log the outcome and carry on.

        Args:
            public_id: Identifier of the object inside the bucket.

        Returns:
            DeleteOutcome: What happened to the object.
        """
        try:
            removed = self.bucket.remove([public_id])
        except Exception as e:
            logger.warning("Failed to delete media object %s: %s", public_id, e)
            return DeleteOutcome.FAILED

        if not removed:
            return DeleteOutcome.NOT_FOUND
        return DeleteOutcome.DELETED
