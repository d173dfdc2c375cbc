"""Failure variants returned by the payment intention creation workflow.

Each variant is a frozen dataclass carrying its own payload plus a ``kind``
discriminator, a stable machine-readable ``code`` and a human-readable
``message``. Callers branch on ``kind`` (see
payment_intentions.entrypoints.error_mapping) instead of on types.

    FailureKind.OUT_OF_WINDOW_VALUE  -> OutOfWindowValue
    FailureKind.MAX_LIMIT_REACHED    -> MaxLimitReached
    FailureKind.SAME_ORIGIN          -> SameOrigin
    FailureKind.USER_NOT_FOUND       -> UserNotFound
    FailureKind.DUPLICATE_INTENTION  -> DuplicateIntention
    FailureKind.INTERNAL             -> InternalFailure (entrypoints only)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from decimal import Decimal


class FailureKind(Enum):
    """Discriminator for every failure surfaced to callers."""

    OUT_OF_WINDOW_VALUE = "OUT_OF_WINDOW_VALUE"
    MAX_LIMIT_REACHED = "MAX_LIMIT_REACHED"
    SAME_ORIGIN = "SAME_ORIGIN"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    DUPLICATE_INTENTION = "DUPLICATE_INTENTION"
    INTERNAL = "INTERNAL_ERROR"

    @property
    def code(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class OutOfWindowValue:
    value: Decimal
    minimum: Decimal
    maximum: Decimal

    kind: ClassVar[FailureKind] = FailureKind.OUT_OF_WINDOW_VALUE

    @property
    def code(self) -> str:
        return self.kind.code

    @property
    def message(self) -> str:
        return f"Value {self.value} is outside of the allowed window [{self.minimum}, {self.maximum}]"


@dataclass(frozen=True, slots=True)
class MaxLimitReached:
    current_count: int
    limit: int

    kind: ClassVar[FailureKind] = FailureKind.MAX_LIMIT_REACHED

    @property
    def code(self) -> str:
        return self.kind.code

    @property
    def message(self) -> str:
        return (
            f"Maximum number of payment intentions reached for the current window "
            f"({self.current_count}/{self.limit})"
        )


@dataclass(frozen=True, slots=True)
class SameOrigin:
    payer_id: int
    receiver_id: int

    kind: ClassVar[FailureKind] = FailureKind.SAME_ORIGIN

    @property
    def code(self) -> str:
        return self.kind.code

    @property
    def message(self) -> str:
        return f"Payer and receiver must be different users (payer_id={self.payer_id}, receiver_id={self.receiver_id})"


@dataclass(frozen=True, slots=True)
class UserNotFound:
    """One or both users could not be resolved; payer listed first."""

    missing_user_ids: tuple[int, ...]

    kind: ClassVar[FailureKind] = FailureKind.USER_NOT_FOUND

    @property
    def code(self) -> str:
        return self.kind.code

    @property
    def message(self) -> str:
        ids = ", ".join(str(user_id) for user_id in self.missing_user_ids)
        return f"User(s) not found: {ids}"


@dataclass(frozen=True, slots=True)
class DuplicateIntention:
    intention_id: str

    kind: ClassVar[FailureKind] = FailureKind.DUPLICATE_INTENTION

    @property
    def code(self) -> str:
        return self.kind.code

    @property
    def message(self) -> str:
        return f"Payment intention already exists: {self.intention_id}"


@dataclass(frozen=True, slots=True)
class InternalFailure:
    """Uncategorized failure; produced at the transport boundary only."""

    detail: str = "Internal server error"

    kind: ClassVar[FailureKind] = FailureKind.INTERNAL

    @property
    def code(self) -> str:
        return self.kind.code

    @property
    def message(self) -> str:
        return self.detail


CreationFailure = OutOfWindowValue | MaxLimitReached | SameOrigin | UserNotFound | DuplicateIntention
Failure = CreationFailure | InternalFailure
