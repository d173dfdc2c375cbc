from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog

from payment_intentions.application.validation import ValidationContext, ValidationRuleChain
from payment_intentions.domain.entities import PaymentIntention
from payment_intentions.domain.exceptions import (
    DuplicatePaymentIntentionError,
    RateLimitExceededError,
)
from payment_intentions.domain.failures import DuplicateIntention, MaxLimitReached
from payment_intentions.domain.value_objects import PaymentIntentionId

if TYPE_CHECKING:
    from decimal import Decimal

    from payment_intentions.application.ports import (
        IdentityProvider,
        PaymentIntentionRepository,
        TimeProvider,
        UserDirectory,
    )
    from payment_intentions.domain.failures import CreationFailure
    from payment_intentions.domain.value_objects import RateLimit, ValueWindow

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class CreatePaymentIntentionRequest:
    """Input DTO for the create payment intention use case.

    Structure (types, required fields) is validated by the transport layer
    before the request reaches the use case.
    """

    payer_id: int
    receiver_id: int
    value: Decimal
    id: str | None = None
    description: str | None = None


@dataclass(frozen=True, slots=True)
class CreationPolicy:
    """Configured bounds applied to every creation attempt."""

    value_window: ValueWindow
    rate_limit: RateLimit


class CreatePaymentIntentionUseCase:
    """Orchestrates the payment intention creation workflow.

    Per attempt: Received -> Validating -> {Rejected(kind) | Persisting -> Created}

    Responsibilities:
    - Fetch current time once per attempt
    - Reject a caller-supplied ID that is already stored (DuplicateIntention)
    - Run the validation rule chain, returning the first failure
    - Build the entity and insert it; the insert is the final arbiter
      for ID uniqueness and the payer's rate limit

    Expected rejections are returned, not raised. Exceptions from ports
    (store or directory unavailable) propagate unmodified. No retries.
    """

    def __init__(
        self,
        time_provider: TimeProvider,
        identity_provider: IdentityProvider,
        repository: PaymentIntentionRepository,
        user_directory: UserDirectory,
        policy: CreationPolicy,
    ) -> None:
        self._time_provider = time_provider
        self._identity_provider = identity_provider
        self._repository = repository
        self._rate_limit = policy.rate_limit
        self._rules = ValidationRuleChain.default(
            window=policy.value_window,
            rate_limit=policy.rate_limit,
            repository=repository,
            user_directory=user_directory,
        )

    def execute(
        self, request: CreatePaymentIntentionRequest
    ) -> PaymentIntention | CreationFailure:
        """Execute the creation workflow.

        Args:
            request: Payer, receiver, value and the optional id/description.

        Returns:
            The created PaymentIntention, or the failure that rejected it.

        Raises:
            InvalidPaymentIntentionIdError: Supplied id is empty or too long.
        """
        now = self._time_provider.now()
        supplied_id = PaymentIntentionId(request.id) if request.id is not None else None

        # A reused ID is a conflict; the stored record is not re-validated
        if supplied_id is not None and self._repository.get(supplied_id) is not None:
            return self._reject(request, DuplicateIntention(intention_id=supplied_id.value))

        failure = self._rules.validate(
            ValidationContext(
                payer_id=request.payer_id,
                receiver_id=request.receiver_id,
                value=request.value,
                now=now,
            )
        )
        if failure is not None:
            return self._reject(request, failure)

        intention = PaymentIntention.create(
            intention_id=supplied_id or self._identity_provider.next_id(),
            payer_id=request.payer_id,
            receiver_id=request.receiver_id,
            value=request.value,
            now=now,
            description=request.description,
        )

        try:
            self._repository.insert(intention, self._rate_limit)
        except DuplicatePaymentIntentionError as e:
            return self._reject(request, DuplicateIntention(intention_id=e.intention_id))
        except RateLimitExceededError as e:
            return self._reject(
                request, MaxLimitReached(current_count=e.current_count, limit=e.limit)
            )

        logger.info(
            "payment_intention.created",
            intention_id=intention.id.value,
            payer_id=intention.payer_id,
            receiver_id=intention.receiver_id,
        )
        return intention

    def _reject(
        self, request: CreatePaymentIntentionRequest, failure: CreationFailure
    ) -> CreationFailure:
        logger.info(
            "payment_intention.rejected",
            code=failure.code,
            payer_id=request.payer_id,
            receiver_id=request.receiver_id,
        )
        return failure
