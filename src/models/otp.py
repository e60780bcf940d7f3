"""One-time passcode record type definitions."""

from datetime import datetime, timezone
from typing import TypedDict
from uuid import UUID


class Otp(TypedDict):
    """otps table row representation.

    Rows are issued and verified by other services. Any row whose
    expires_at has passed is removed by the OTP expiry sweeper.
    """

    id: UUID
    email: str
    otp: str
    expires_at: datetime
    created_at: datetime


def is_expired(otp: Otp, now: datetime | None = None) -> bool:
    """Check whether an OTP row is past its expiry timestamp.

    Args:
        otp: The OTP row.
        now: Reference time, defaults to the current UTC time.

    Returns:
        bool: True once expires_at is in the past.
    """
    now = now or datetime.now(timezone.utc)
    expires_at = otp["expires_at"]
    if expires_at.tzinfo is None:
        expires_at = expires_at.replace(tzinfo=timezone.utc)
    return expires_at < now
