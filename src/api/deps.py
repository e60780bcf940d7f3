"""FastAPI dependency injection functions."""

from typing import Annotated

from fastapi import Depends

from src.services.profile_image_service import (
    ProfileImageService,
    get_profile_image_service,
)

# Type alias for the upload workflow, overridable in tests via app.dependency_overrides
ProfileImageServiceDep = Annotated[ProfileImageService, Depends(get_profile_image_service)]
