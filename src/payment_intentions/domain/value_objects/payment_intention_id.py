from __future__ import annotations

from dataclasses import dataclass
from uuid import uuid4

from payment_intentions.domain.exceptions import InvalidPaymentIntentionIdError

MAX_LENGTH = 64


@dataclass(frozen=True, slots=True)
class PaymentIntentionId:
    """Value object for payment intention identifiers.

    Callers may supply their own ID (any non-empty string up to 64 chars,
    surrounding whitespace trimmed); otherwise one is generated from a UUID4.
    """

    value: str

    def __post_init__(self) -> None:
        normalized = self.value.strip()

        if normalized != self.value:
            object.__setattr__(self, "value", normalized)

        if not normalized:
            raise InvalidPaymentIntentionIdError("Payment intention ID cannot be empty")

        if len(normalized) > MAX_LENGTH:
            raise InvalidPaymentIntentionIdError(
                f"Payment intention ID cannot exceed {MAX_LENGTH} characters"
            )

    @classmethod
    def generate(cls) -> PaymentIntentionId:
        """Generate a new unique PaymentIntentionId."""
        return cls(value=str(uuid4()))

    def __str__(self) -> str:
        return self.value
