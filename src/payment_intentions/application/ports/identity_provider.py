from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payment_intentions.domain.value_objects import PaymentIntentionId


class IdentityProvider(ABC):
    """Port for generating payment intention identifiers.

    Only consulted when the caller did not supply an ID. Every call MUST
    return an ID that has never been returned before.
    """

    @abstractmethod
    def next_id(self) -> PaymentIntentionId:
        """Return a fresh, unique PaymentIntentionId."""
        ...
