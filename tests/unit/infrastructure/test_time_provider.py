"""Tests for TimeProvider implementations.

Tests cover:
- SystemTimeProvider returns UTC datetime
- FixedTimeProvider returns fixed time and supports set_time()/advance()
- advance() only moves forward and keeps the clock in UTC
- UTC validation rejects non-UTC datetimes
"""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from payment_intentions.application.ports import TimeProvider
from payment_intentions.infrastructure.time_provider import (
    FixedTimeProvider,
    SystemTimeProvider,
)


class TestSystemTimeProvider:
    def test_implements_time_provider_interface(self) -> None:
        assert isinstance(SystemTimeProvider(), TimeProvider)

    def test_now_returns_utc_datetime(self) -> None:
        result = SystemTimeProvider().now()

        assert result.tzinfo is UTC

    def test_now_returns_current_time(self) -> None:
        provider = SystemTimeProvider()
        before = datetime.now(UTC)

        result = provider.now()

        after = datetime.now(UTC)
        assert before <= result <= after


class TestFixedTimeProvider:
    def test_now_returns_fixed_time(self) -> None:
        fixed_time = datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)

        assert FixedTimeProvider(fixed_time).now() == fixed_time

    def test_set_time_changes_now(self) -> None:
        provider = FixedTimeProvider(datetime(2024, 1, 1, tzinfo=UTC))
        new_time = datetime(2024, 6, 1, tzinfo=UTC)

        provider.set_time(new_time)

        assert provider.now() == new_time

    def test_advance_moves_time_forward(self) -> None:
        provider = FixedTimeProvider(datetime(2024, 1, 1, tzinfo=UTC))

        provider.advance(timedelta(hours=25))

        assert provider.now() == datetime(2024, 1, 2, 1, 0, 0, tzinfo=UTC)

    def test_rejects_naive_datetime(self) -> None:
        with pytest.raises(ValueError, match="tzinfo=UTC"):
            FixedTimeProvider(datetime(2024, 1, 1))

    def test_rejects_non_utc_offset(self) -> None:
        minus_six = timezone(timedelta(hours=-6))

        with pytest.raises(ValueError):
            FixedTimeProvider(datetime(2024, 1, 1, tzinfo=minus_six))

    def test_set_time_rejects_naive_datetime(self) -> None:
        provider = FixedTimeProvider(datetime(2024, 1, 1, tzinfo=UTC))

        with pytest.raises(ValueError):
            provider.set_time(datetime(2024, 1, 2))

    def test_advance_rejects_negative_delta(self) -> None:
        start = datetime(2024, 1, 1, tzinfo=UTC)
        provider = FixedTimeProvider(start)

        with pytest.raises(ValueError, match="non-negative"):
            provider.advance(timedelta(seconds=-1))

        assert provider.now() == start

    def test_advance_keeps_utc(self) -> None:
        provider = FixedTimeProvider(datetime(2024, 1, 1, tzinfo=UTC))

        provider.advance(timedelta(days=1, microseconds=1))

        assert provider.now().tzinfo is UTC
