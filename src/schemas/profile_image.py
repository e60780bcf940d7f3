"""Profile image Pydantic schemas for API responses."""

from pydantic import BaseModel, ConfigDict, Field


class ProfileImageUploadResponse(BaseModel):
    """Response for a successful profile image upload.

    Serialized as ``{"cloudinaryUrl": ...}``, the key existing clients read.
    """

    model_config = ConfigDict(populate_by_name=True)

    secure_url: str = Field(
        alias="cloudinaryUrl",
        description="Public URL of the newly stored profile image",
    )
