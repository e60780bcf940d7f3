"""Database model type definitions."""

from src.models.otp import Otp
from src.models.profile_image import ProfileImageRecord, ProfileImageUpdate

__all__ = [
    "Otp",
    "ProfileImageRecord",
    "ProfileImageUpdate",
]
