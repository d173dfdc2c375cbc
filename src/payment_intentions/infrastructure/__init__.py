"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Persistence: In-memory payment intention repository
- Identity: User directory and intention ID generation
- Time Provider: Clock abstraction for testability

Infrastructure adapters implement the ports defined in the application layer.
"""

from payment_intentions.infrastructure.identity_provider import (
    SequentialIdentityProvider,
    UuidIdentityProvider,
)
from payment_intentions.infrastructure.payment_intention_repository import (
    InMemoryPaymentIntentionRepository,
)
from payment_intentions.infrastructure.time_provider import FixedTimeProvider, SystemTimeProvider
from payment_intentions.infrastructure.user_directory import InMemoryUserDirectory

__all__ = [
    "FixedTimeProvider",
    "InMemoryPaymentIntentionRepository",
    "InMemoryUserDirectory",
    "SequentialIdentityProvider",
    "SystemTimeProvider",
    "UuidIdentityProvider",
]
