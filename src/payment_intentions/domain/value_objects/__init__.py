"""Value objects - Immutable objects defined by their attributes."""

from payment_intentions.domain.value_objects.payment_intention_id import PaymentIntentionId
from payment_intentions.domain.value_objects.rate_limit import RateLimit
from payment_intentions.domain.value_objects.value_window import ValueWindow

__all__ = [
    "PaymentIntentionId",
    "RateLimit",
    "ValueWindow",
]
