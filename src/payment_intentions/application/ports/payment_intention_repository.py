from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime

    from payment_intentions.domain.entities import PaymentIntention
    from payment_intentions.domain.value_objects import PaymentIntentionId, RateLimit


class PaymentIntentionRepository(ABC):
    """Port for payment intention persistence.

    Contract:
    - get() returns None if the intention does not exist (no exception)
    - count_by_payer_in_window() counts on created_at, both bounds inclusive
    - insert() is the consistency checkpoint: ID uniqueness and the payer's
      rate limit are checked atomically with the write
    - All methods MUST be safe to call concurrently; callers hold no lock
      across port calls

    Thread safety note:
    The read-based checks done before insert() are advisory. Two concurrent
    creations can both pass them; insert() decides which one commits. This
    matches a database where a unique constraint and a serialized counter
    enforce the invariants inside the insert transaction.
    """

    @abstractmethod
    def get(self, intention_id: PaymentIntentionId) -> PaymentIntention | None:
        """Retrieve a payment intention by ID.

        Args:
            intention_id: The payment intention identifier.

        Returns:
            The PaymentIntention if found, None otherwise.
            Returned entity is a copy; mutations do not affect stored state.
        """

    @abstractmethod
    def count_by_payer_in_window(
        self,
        payer_id: int,
        window_start: datetime,
        window_end: datetime,
    ) -> int:
        """Count intentions created by payer_id with window_start <= created_at <= window_end."""

    @abstractmethod
    def insert(self, intention: PaymentIntention, rate_limit: RateLimit) -> None:
        """Persist a new payment intention.

        Args:
            intention: The entity to store.
            rate_limit: Limit evaluated against intention.created_at at commit time.

        Raises:
            DuplicatePaymentIntentionError: An intention with the same ID exists.
            RateLimitExceededError: The payer already has rate_limit.max_per_window
                intentions with created_at >= intention.created_at - rate_limit.period.
                No upper bound: rows stamped later by concurrent requests that
                committed first still count. Checked only when the ID is free.
        """
