"""HTTP status mapping for creation outcomes.

    created intention                                   -> 201 Created
    OUT_OF_WINDOW_VALUE, MAX_LIMIT_REACHED, SAME_ORIGIN -> 400 Bad Request
    USER_NOT_FOUND                                      -> 404 Not Found
    DUPLICATE_INTENTION                                 -> 409 Conflict
    INTERNAL                                            -> 500 Internal Server Error
"""

from __future__ import annotations

from http import HTTPStatus
from typing import TYPE_CHECKING

import structlog

from payment_intentions.domain.failures import FailureKind, InternalFailure

if TYPE_CHECKING:
    from payment_intentions.domain.failures import Failure

logger = structlog.get_logger(__name__)

CREATED_STATUS = HTTPStatus.CREATED


def status_code_for(kind: FailureKind) -> int:
    match kind:
        case FailureKind.OUT_OF_WINDOW_VALUE | FailureKind.MAX_LIMIT_REACHED | FailureKind.SAME_ORIGIN:
            return HTTPStatus.BAD_REQUEST
        case FailureKind.USER_NOT_FOUND:
            return HTTPStatus.NOT_FOUND
        case FailureKind.DUPLICATE_INTENTION:
            return HTTPStatus.CONFLICT
        case FailureKind.INTERNAL:
            return HTTPStatus.INTERNAL_SERVER_ERROR


def error_body(failure: Failure) -> dict[str, str]:
    return {"code": failure.code, "message": failure.message}


def failure_from_exception(exc: Exception) -> InternalFailure:
    """Wrap an uncategorized exception; its details stay in the logs only."""
    logger.error(
        "payment_intention.internal_error", error_type=type(exc).__name__, error=str(exc)
    )
    return InternalFailure()
