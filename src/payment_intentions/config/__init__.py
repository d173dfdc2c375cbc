"""Configuration - Settings loading and logging setup."""

from payment_intentions.config.logging import configure_logging
from payment_intentions.config.settings import PaymentIntentionSettings

__all__ = [
    "PaymentIntentionSettings",
    "configure_logging",
]
