"""Profile image API routes."""

from fastapi import APIRouter, File, Form, UploadFile

from src.api.deps import ProfileImageServiceDep
from src.schemas.profile_image import ProfileImageUploadResponse

router = APIRouter(prefix="/profile", tags=["profile-images"])


@router.post(
    "/profileimage",
    response_model=ProfileImageUploadResponse,
    summary="Replace a profile image",
    responses={
        200: {"description": "Image stored and profile updated"},
        400: {"description": "Missing email or file"},
        404: {"description": "No profile for the given email"},
        413: {"description": "Upload too large"},
        500: {"description": "Upload failed"},
    },
)
async def upload_profile_image(
    service: ProfileImageServiceDep,
    email: str | None = Form(default=None, description="Email of the profile to update"),
    file: UploadFile | None = File(default=None, description="Image to store, any media type"),
) -> ProfileImageUploadResponse:
    """Upload a new profile image and record its URL on the profile.

    Both fields are optional at the form level so that a missing field is
    answered with 400 by the service rather than FastAPI's 422.

    The previous image, if any, is deleted from the media host on a
    best-effort basis.
    """
    data = await file.read() if file is not None else None
    media_type = file.content_type if file is not None else None

    secure_url = await service.replace_profile_image(
        email=email,
        data=data,
        media_type=media_type,
    )
    return ProfileImageUploadResponse(secure_url=secure_url)
