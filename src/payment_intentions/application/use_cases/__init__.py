"""Use cases - Application workflows."""

from payment_intentions.application.use_cases.create_payment_intention import (
    CreatePaymentIntentionRequest,
    CreatePaymentIntentionUseCase,
    CreationPolicy,
)

__all__ = [
    "CreatePaymentIntentionRequest",
    "CreatePaymentIntentionUseCase",
    "CreationPolicy",
]
