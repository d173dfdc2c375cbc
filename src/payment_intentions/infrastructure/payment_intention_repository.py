from __future__ import annotations

import copy
from threading import Lock
from typing import TYPE_CHECKING

from payment_intentions.application.ports import PaymentIntentionRepository
from payment_intentions.domain.exceptions import (
    DuplicatePaymentIntentionError,
    RateLimitExceededError,
)

if TYPE_CHECKING:
    from datetime import datetime

    from payment_intentions.domain.entities import PaymentIntention
    from payment_intentions.domain.value_objects import PaymentIntentionId, RateLimit


class InMemoryPaymentIntentionRepository(PaymentIntentionRepository):
    """In-memory payment intention repository for testing and local wiring.

    Implementation notes:
    - Keyed by PaymentIntentionId (frozen dataclass, hashable)
    - Returns deep copies from get() and stores deep copies in insert()
    - A single internal lock makes insert() a compare-and-set: the duplicate
      ID check, the payer's window count and the write happen together,
      standing in for a unique constraint plus a serialized counter
    - count_by_payer_in_window() scans all rows; fine for tests, not for volume
    """

    def __init__(self) -> None:
        self._intentions: dict[PaymentIntentionId, PaymentIntention] = {}
        self._lock = Lock()

    def get(self, intention_id: PaymentIntentionId) -> PaymentIntention | None:
        with self._lock:
            intention = self._intentions.get(intention_id)
        if intention is None:
            return None
        return copy.deepcopy(intention)

    def count_by_payer_in_window(
        self,
        payer_id: int,
        window_start: datetime,
        window_end: datetime,
    ) -> int:
        with self._lock:
            return self._count(payer_id, window_start, window_end)

    def insert(self, intention: PaymentIntention, rate_limit: RateLimit) -> None:
        with self._lock:
            if intention.id in self._intentions:
                raise DuplicatePaymentIntentionError(intention.id.value)

            # No upper bound: a concurrent request that read a later now()
            # may have committed first, and its row still counts
            window_start, _ = rate_limit.bounds(intention.created_at)
            current_count = self._count(intention.payer_id, window_start, None)
            if rate_limit.is_reached(current_count):
                raise RateLimitExceededError(
                    payer_id=intention.payer_id,
                    current_count=current_count,
                    limit=rate_limit.max_per_window,
                )

            self._intentions[intention.id] = copy.deepcopy(intention)

    def _count(
        self, payer_id: int, window_start: datetime, window_end: datetime | None
    ) -> int:
        # Caller must hold self._lock; window_end=None leaves the window open-ended
        return sum(
            1
            for intention in self._intentions.values()
            if intention.payer_id == payer_id
            and window_start <= intention.created_at
            and (window_end is None or intention.created_at <= window_end)
        )
