from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any

from payment_intentions.application.use_cases import CreatePaymentIntentionRequest

if TYPE_CHECKING:
    from collections.abc import Mapping

    from payment_intentions.domain.entities import PaymentIntention


def request_from_json(body: Mapping[str, Any]) -> CreatePaymentIntentionRequest:
    """Map an already schema-validated request body to the use case input.

    Numeric values go through str() so floats keep their decimal spelling
    (100.1 becomes Decimal("100.1"), not its binary expansion).
    """
    return CreatePaymentIntentionRequest(
        id=body.get("id"),
        payer_id=body["payer_id"],
        receiver_id=body["receiver_id"],
        description=body.get("description"),
        value=Decimal(str(body["value"])),
    )


def to_json(intention: PaymentIntention) -> dict[str, Any]:
    """Serialize a payment intention into the response body shape."""
    data: dict[str, Any] = {
        "id": intention.id.value,
        "payer_id": intention.payer_id,
        "receiver_id": intention.receiver_id,
        "value": _to_number(intention.value),
        "created_at": intention.created_at.isoformat(),
        "updated_at": intention.updated_at.isoformat(),
    }
    if intention.description is not None:
        data["description"] = intention.description
    return data


def _to_number(value: Decimal) -> int | float:
    if value == value.to_integral_value():
        return int(value)
    return float(value)
