"""Background removal of expired one-time passcodes."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone

from src.core.config import get_settings
from src.core.supabase import get_supabase_client

logger = logging.getLogger(__name__)

OTP_TABLE = "otps"


class OtpExpirySweeper:
    """Deletes otps rows once their expires_at has passed."""

    def __init__(self, interval_seconds: int | None = None) -> None:
        self.interval_seconds = interval_seconds or get_settings().otp_sweep_interval_seconds
        self._sweep_task: asyncio.Task | None = None

    async def start(self) -> None:
        """Start background sweep task."""
        if self._sweep_task is None:
            self._sweep_task = asyncio.create_task(self._sweep_loop())
            logger.info("OTP expiry sweeper started (every %ds)", self.interval_seconds)

    async def stop(self) -> None:
        """Stop background sweep task."""
        if self._sweep_task:
            self._sweep_task.cancel()
            try:
                await self._sweep_task
            except asyncio.CancelledError:
                pass
            self._sweep_task = None
            logger.info("OTP expiry sweeper stopped")

    async def _sweep_loop(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            try:
                count = await self.sweep()
            except Exception as e:
                logger.warning("OTP sweep failed: %s", e)
                continue
            if count > 0:
                logger.debug("OTP sweeper removed %d expired codes", count)

    async def sweep(self, now: datetime | None = None) -> int:
        """Delete every OTP whose expiry is before now.

        Args:
            now: Reference time, defaults to the current UTC time.

        Returns:
            int: Number of rows removed.
        """
        now = now or datetime.now(timezone.utc)
        response = (
            get_supabase_client()
            .table(OTP_TABLE)
            .delete()
            .lt("expires_at", now.isoformat())
            .execute()
        )
        return len(response.data or [])


# Global singleton instance
_otp_sweeper: OtpExpirySweeper | None = None


def get_otp_sweeper() -> OtpExpirySweeper:
    """Get or create the global OTP sweeper instance."""
    global _otp_sweeper
    if _otp_sweeper is None:
        _otp_sweeper = OtpExpirySweeper()
    return _otp_sweeper


async def init_otp_sweeper() -> OtpExpirySweeper | None:
    """Start the OTP sweeper if enabled. Call at app startup."""
    if not get_settings().otp_sweep_enabled:
        logger.info("OTP expiry sweeper disabled")
        return None
    sweeper = get_otp_sweeper()
    await sweeper.start()
    return sweeper


async def shutdown_otp_sweeper() -> None:
    """Stop the OTP sweeper. Call at app shutdown."""
    global _otp_sweeper
    if _otp_sweeper:
        await _otp_sweeper.stop()
        _otp_sweeper = None
