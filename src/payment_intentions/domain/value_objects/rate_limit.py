from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from payment_intentions.domain.exceptions import InvalidConfigurationError


@dataclass(frozen=True, slots=True)
class RateLimit:
    """Maximum number of intentions a payer may create per rolling window.

    The window is rolling: at instant ``now`` it spans ``[now - period, now]``
    with both bounds inclusive. An intention created exactly ``period`` ago
    still counts; it ages out immediately after.
    """

    max_per_window: int
    period: timedelta

    def __post_init__(self) -> None:
        if self.max_per_window < 1:
            raise InvalidConfigurationError(
                f"max_per_window must be at least 1, got {self.max_per_window}"
            )
        if self.period <= timedelta(0):
            raise InvalidConfigurationError(f"Rate limit period must be positive, got {self.period}")

    def bounds(self, now: datetime) -> tuple[datetime, datetime]:
        """Return the (start, end) of the window ending at ``now``."""
        return now - self.period, now

    def is_reached(self, current_count: int) -> bool:
        return current_count >= self.max_per_window
