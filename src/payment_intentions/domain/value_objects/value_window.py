from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from payment_intentions.domain.exceptions import InvalidConfigurationError


@dataclass(frozen=True, slots=True)
class ValueWindow:
    """Inclusive range an intention's value must fall within."""

    minimum: Decimal
    maximum: Decimal

    def __post_init__(self) -> None:
        if self.minimum > self.maximum:
            raise InvalidConfigurationError(
                f"Value window minimum ({self.minimum}) exceeds maximum ({self.maximum})"
            )

    def contains(self, value: Decimal) -> bool:
        return self.minimum <= value <= self.maximum
