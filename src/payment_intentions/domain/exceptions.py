"""Domain exceptions for payment-intentions.

Exception hierarchy:
    DomainException (base)
    ├── Validation Errors
    │   ├── InvalidPaymentIntentionIdError
    │   └── InvalidConfigurationError
    └── Persistence Conflicts (raised by PaymentIntentionRepository.insert)
        ├── DuplicatePaymentIntentionError
        └── RateLimitExceededError

Expected rejections of a creation attempt are NOT exceptions; they are
returned as variants from payment_intentions.domain.failures. The two
persistence conflicts are translated into those variants by the use case.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from infrastructure errors.
    """


# =============================================================================
# Validation Errors
# =============================================================================


class InvalidPaymentIntentionIdError(DomainException):
    """Raised when a payment intention ID is empty or longer than 64 characters."""


class InvalidConfigurationError(DomainException):
    """Raised when a value window or rate limit is built from inconsistent bounds."""


# =============================================================================
# Persistence Conflicts
# =============================================================================


class DuplicatePaymentIntentionError(DomainException):
    """Raised when insert finds an intention already stored under the same ID.

    The repository is the final arbiter for ID uniqueness: two concurrent
    requests carrying the same caller-supplied ID can both pass the read
    check, only one insert may win.
    """

    def __init__(self, intention_id: str) -> None:
        super().__init__(f"Payment intention already exists: id={intention_id}")
        self.intention_id = intention_id


class RateLimitExceededError(DomainException):
    """Raised when insert finds the payer already at the limit for the window.

    Counterpart of the read-based rate limit rule, evaluated atomically with
    the insert so concurrent creations cannot overshoot the limit.
    """

    def __init__(self, payer_id: int, current_count: int, limit: int) -> None:
        super().__init__(
            f"Payer {payer_id} already has {current_count} payment intentions "
            f"in the current window (limit={limit})"
        )
        self.payer_id = payer_id
        self.current_count = current_count
        self.limit = limit
