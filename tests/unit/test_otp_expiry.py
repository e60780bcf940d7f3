"""Unit tests for OTP expiry."""

import asyncio
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from src.core.otp_expiry import OtpExpirySweeper, init_otp_sweeper
from src.models.otp import Otp, is_expired

NOW = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


def make_otp(expires_at: datetime) -> Otp:
    """Build an otps row."""
    return Otp(
        id="550e8400-e29b-41d4-a716-446655440000",
        email="test@example.com",
        otp="123456",
        expires_at=expires_at,
        created_at=NOW - timedelta(minutes=10),
    )


class TestIsExpired:
    """Tests for is_expired helper."""

    def test_past_expiry_is_expired(self) -> None:
        """Test that a code past its expiry is expired."""
        assert is_expired(make_otp(NOW - timedelta(seconds=1)), now=NOW) is True

    def test_future_expiry_is_live(self) -> None:
        """Test that a code before its expiry is still valid."""
        assert is_expired(make_otp(NOW + timedelta(minutes=5)), now=NOW) is False

    def test_expiry_at_now_is_live(self) -> None:
        """Test that a code is removed only once its expiry is in the past."""
        assert is_expired(make_otp(NOW), now=NOW) is False

    def test_naive_expiry_treated_as_utc(self) -> None:
        """Test that naive timestamps are compared as UTC."""
        naive = (NOW - timedelta(minutes=1)).replace(tzinfo=None)

        assert is_expired(make_otp(naive), now=NOW) is True


class TestOtpExpirySweeper:
    """Tests for OtpExpirySweeper."""

    @pytest.mark.asyncio
    async def test_sweep_deletes_rows_before_now(self) -> None:
        """Test that the sweep deletes by expires_at and counts the rows."""
        mock_client = MagicMock()
        mock_response = MagicMock()
        mock_response.data = [{"id": "a"}, {"id": "b"}]
        mock_client.table.return_value.delete.return_value.lt.return_value.execute.return_value = (
            mock_response
        )

        with patch("src.core.otp_expiry.get_supabase_client", return_value=mock_client):
            removed = await OtpExpirySweeper(interval_seconds=30).sweep(now=NOW)

        assert removed == 2
        mock_client.table.assert_called_with("otps")
        mock_client.table.return_value.delete.return_value.lt.assert_called_once_with(
            "expires_at", NOW.isoformat()
        )

    @pytest.mark.asyncio
    async def test_sweep_with_nothing_expired(self) -> None:
        """Test that an empty delete reports zero."""
        mock_client = MagicMock()
        mock_client.table.return_value.delete.return_value.lt.return_value.execute.return_value.data = None

        with patch("src.core.otp_expiry.get_supabase_client", return_value=mock_client):
            assert await OtpExpirySweeper(interval_seconds=30).sweep(now=NOW) == 0

    @pytest.mark.asyncio
    async def test_loop_keeps_running_after_failed_sweep(self) -> None:
        """Test that a database error in one sweep does not stop later sweeps."""
        sweeper = OtpExpirySweeper(interval_seconds=30)
        sleep = AsyncMock(side_effect=[None, None, asyncio.CancelledError()])

        with (
            patch("src.core.otp_expiry.asyncio.sleep", sleep),
            patch.object(
                sweeper, "sweep", AsyncMock(side_effect=[Exception("db down"), 3])
            ) as mock_sweep,
        ):
            with pytest.raises(asyncio.CancelledError):
                await sweeper._sweep_loop()

        assert mock_sweep.await_count == 2
        sleep.assert_awaited_with(30)

    @pytest.mark.asyncio
    async def test_start_and_stop(self) -> None:
        """Test that the background task is created and cancelled."""
        sweeper = OtpExpirySweeper(interval_seconds=3600)

        await sweeper.start()
        assert sweeper._sweep_task is not None

        await sweeper.stop()
        assert sweeper._sweep_task is None

    @pytest.mark.asyncio
    async def test_init_respects_disabled_setting(self) -> None:
        """Test that no sweeper starts when disabled."""
        with patch("src.core.otp_expiry.get_settings") as mock_settings:
            mock_settings.return_value.otp_sweep_enabled = False

            assert await init_otp_sweeper() is None
