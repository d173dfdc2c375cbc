"""Ports - Abstract interfaces for external dependencies.

Ports define the contracts that infrastructure adapters must implement.
This allows the application layer to remain decoupled from concrete implementations.
"""

from payment_intentions.application.ports.identity_provider import IdentityProvider
from payment_intentions.application.ports.payment_intention_repository import (
    PaymentIntentionRepository,
)
from payment_intentions.application.ports.time_provider import TimeProvider
from payment_intentions.application.ports.user_directory import UserDirectory

__all__ = [
    "IdentityProvider",
    "PaymentIntentionRepository",
    "TimeProvider",
    "UserDirectory",
]
