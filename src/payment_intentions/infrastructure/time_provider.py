from datetime import UTC, datetime, timedelta

from payment_intentions.application.ports import TimeProvider


class SystemTimeProvider(TimeProvider):
    """Wall clock in UTC, the only source of created_at in production."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FixedTimeProvider(TimeProvider):
    """Pinned clock for tests that control when intentions are stamped.

    Reads are safe from several threads; set_time()/advance() are meant to
    be called between creation attempts, not during them. The clock never
    holds a non-UTC value and never moves backwards through advance().
    """

    def __init__(self, fixed_time: datetime) -> None:
        self._fixed_time = self._require_utc(fixed_time)

    def now(self) -> datetime:
        return self._fixed_time

    def set_time(self, new_time: datetime) -> None:
        """Jump to an arbitrary instant, earlier or later."""
        self._fixed_time = self._require_utc(new_time)

    def advance(self, delta: timedelta) -> None:
        """Age stored intentions by moving the clock forward by delta."""
        if delta < timedelta(0):
            raise ValueError(f"advance() needs a non-negative delta, got {delta}")
        self._fixed_time = self._require_utc(self._fixed_time + delta)

    @staticmethod
    def _require_utc(dt: datetime) -> datetime:
        if dt.tzinfo is not UTC:
            raise ValueError(f"datetime must have tzinfo=UTC, got tzinfo={dt.tzinfo}")
        return dt
