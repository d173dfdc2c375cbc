from __future__ import annotations

from itertools import count
from threading import Lock

from payment_intentions.application.ports import IdentityProvider
from payment_intentions.domain.value_objects import PaymentIntentionId


class UuidIdentityProvider(IdentityProvider):
    """Production identity provider backed by uuid4."""

    def next_id(self) -> PaymentIntentionId:
        return PaymentIntentionId.generate()


class SequentialIdentityProvider(IdentityProvider):
    """Deterministic identity provider for tests: pi-1, pi-2, ..."""

    def __init__(self, prefix: str = "pi") -> None:
        self._prefix = prefix
        self._counter = count(1)
        self._lock = Lock()

    def next_id(self) -> PaymentIntentionId:
        with self._lock:
            number = next(self._counter)
        return PaymentIntentionId(f"{self._prefix}-{number}")
