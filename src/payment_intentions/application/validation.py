"""Ordered validation rules for payment intention creation.

Rules run in a fixed order and the first failure wins:

    1. ValueWindowRule     (local)      -> OutOfWindowValue
    2. RateLimitRule       (repository) -> MaxLimitReached
    3. SameOriginRule      (local)      -> SameOrigin
    4. UserExistenceRule   (directory)  -> UserNotFound

The order decides which failure is reported when several rules would fail,
so it is part of the contract and covered by tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from payment_intentions.domain.failures import (
    MaxLimitReached,
    OutOfWindowValue,
    SameOrigin,
    UserNotFound,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import datetime
    from decimal import Decimal

    from payment_intentions.application.ports import PaymentIntentionRepository, UserDirectory
    from payment_intentions.domain.failures import CreationFailure
    from payment_intentions.domain.value_objects import RateLimit, ValueWindow


@dataclass(frozen=True, slots=True)
class ValidationContext:
    """Candidate intention fields, plus the instant the attempt started."""

    payer_id: int
    receiver_id: int
    value: Decimal
    now: datetime


class ValidationRule(ABC):
    """A single creation rule. Returns None when the candidate passes."""

    @abstractmethod
    def check(self, context: ValidationContext) -> CreationFailure | None: ...


class ValueWindowRule(ValidationRule):
    def __init__(self, window: ValueWindow) -> None:
        self._window = window

    def check(self, context: ValidationContext) -> OutOfWindowValue | None:
        if self._window.contains(context.value):
            return None
        return OutOfWindowValue(
            value=context.value,
            minimum=self._window.minimum,
            maximum=self._window.maximum,
        )


class RateLimitRule(ValidationRule):
    """Read-based limit check.

    Only a first filter: the repository re-checks the limit atomically on
    insert, which is what keeps concurrent creations under the limit.
    """

    def __init__(self, rate_limit: RateLimit, repository: PaymentIntentionRepository) -> None:
        self._rate_limit = rate_limit
        self._repository = repository

    def check(self, context: ValidationContext) -> MaxLimitReached | None:
        window_start, window_end = self._rate_limit.bounds(context.now)
        count = self._repository.count_by_payer_in_window(
            context.payer_id, window_start, window_end
        )
        if not self._rate_limit.is_reached(count):
            return None
        return MaxLimitReached(current_count=count, limit=self._rate_limit.max_per_window)


class SameOriginRule(ValidationRule):
    def check(self, context: ValidationContext) -> SameOrigin | None:
        if context.payer_id != context.receiver_id:
            return None
        return SameOrigin(payer_id=context.payer_id, receiver_id=context.receiver_id)


class UserExistenceRule(ValidationRule):
    """Both users must resolve; every unresolved ID is reported, payer first."""

    def __init__(self, user_directory: UserDirectory) -> None:
        self._user_directory = user_directory

    def check(self, context: ValidationContext) -> UserNotFound | None:
        missing: list[int] = []
        for user_id in (context.payer_id, context.receiver_id):
            if user_id in missing:
                continue
            if not self._user_directory.exists(user_id):
                missing.append(user_id)

        if not missing:
            return None
        return UserNotFound(missing_user_ids=tuple(missing))


class ValidationRuleChain:
    """Runs rules in order, short-circuiting on the first failure."""

    def __init__(self, rules: Sequence[ValidationRule]) -> None:
        self._rules = tuple(rules)

    @classmethod
    def default(
        cls,
        window: ValueWindow,
        rate_limit: RateLimit,
        repository: PaymentIntentionRepository,
        user_directory: UserDirectory,
    ) -> ValidationRuleChain:
        """Build the production chain in its fixed order."""
        return cls(
            [
                ValueWindowRule(window),
                RateLimitRule(rate_limit, repository),
                SameOriginRule(),
                UserExistenceRule(user_directory),
            ]
        )

    @property
    def rules(self) -> tuple[ValidationRule, ...]:
        return self._rules

    def validate(self, context: ValidationContext) -> CreationFailure | None:
        for rule in self._rules:
            failure = rule.check(context)
            if failure is not None:
                return failure
        return None
