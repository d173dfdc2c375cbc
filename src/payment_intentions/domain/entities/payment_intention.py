"""Payment intention entity.

A payment intention records that a payer intends to transfer a value to a
receiver. It is created exactly once, after every creation rule passed, and
is never mutated or deleted by this package.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime
    from decimal import Decimal

    from payment_intentions.domain.value_objects import PaymentIntentionId


@dataclass(frozen=True, slots=True)
class PaymentIntention:
    """Persisted record of an intended transfer from payer to receiver.

    Invariants for every persisted intention:
        - payer_id != receiver_id
        - value lies within the configured ValueWindow
        - created_at == updated_at at creation time

    updated_at is kept for future mutations; creation never moves it away
    from created_at.
    """

    id: PaymentIntentionId
    payer_id: int
    receiver_id: int
    description: str | None
    value: Decimal
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(
        cls,
        intention_id: PaymentIntentionId,
        payer_id: int,
        receiver_id: int,
        value: Decimal,
        now: datetime,
        description: str | None = None,
    ) -> PaymentIntention:
        """Factory method stamping both timestamps with the creation instant.

        Args:
            intention_id: Caller-supplied or generated identifier.
            payer_id: The initiating user.
            receiver_id: The recipient user.
            value: Amount of the intended transfer.
            now: Creation instant (UTC).
            description: Optional free text.

        Returns:
            A new PaymentIntention instance.
        """
        return cls(
            id=intention_id,
            payer_id=payer_id,
            receiver_id=receiver_id,
            description=description,
            value=value,
            created_at=now,
            updated_at=now,
        )
