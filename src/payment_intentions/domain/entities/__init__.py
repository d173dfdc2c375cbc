"""Domain entities - Objects with identity and lifecycle."""

from payment_intentions.domain.entities.payment_intention import PaymentIntention

__all__ = [
    "PaymentIntention",
]
