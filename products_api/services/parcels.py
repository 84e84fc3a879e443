"""Fixed-installment (parcel) calculation.

The per-installment value is the standard amortization payment::

    rate = fees_percent / 100
    value = amount * rate / (1 - (1 + rate) ** -parcel_amount)

A zero fee has no interest to amortize, so the value falls back to the
straight-line split ``amount / parcel_amount``.

Masked values follow the Indonesian number convention: ``.`` groups
thousands, ``,`` separates at most three decimals, trailing zeros dropped.
Rounding is half-up on the exact binary value of the float.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal, localcontext

from products_api.errors import ServerError, ValidationError
from products_api.models import Parcel
from products_api.services.utils import require_object_id

logger = logging.getLogger(__name__)

MASK_DECIMAL_PLACES = 3
MASK_DECIMALS = Decimal("0.001")


def calculate_parcel_value(
    amount: float, fees_percent: float, parcel_amount: int
) -> float:
    rate = fees_percent / 100
    if rate == 0:
        return amount / parcel_amount
    return amount * rate / (1 - (1 + rate) ** -parcel_amount)


def format_parcel_value(value: float) -> str:
    exact = Decimal(value)
    with localcontext() as context:
        # Integer digits, a carry digit from rounding, and the kept decimals.
        context.prec = max(exact.adjusted(), 0) + 2 + MASK_DECIMAL_PLACES
        rounded = exact.quantize(MASK_DECIMALS, rounding=ROUND_HALF_UP)
    formatted = f"{rounded:,f}"
    if "." in formatted:
        formatted = formatted.rstrip("0").rstrip(".")
    return formatted.replace(",", "TEMP").replace(".", ",").replace("TEMP", ".")


class ParcelsService:
    def calculate_parcel(
        self,
        *,
        name: str | None,
        description: str | None,
        amount: float | None,
        id_category: str | int | None,
        product_id: str | int | None,
        parcel_amount: int | None,
        fees_percent: float | None,
    ) -> Parcel:
        required = (name, description, amount, id_category, product_id, parcel_amount)
        if not all(required) or fees_percent is None:
            raise ValidationError("All fields are required")

        require_object_id(id_category, "Invalid category ID")
        require_object_id(product_id, "Invalid product ID")

        try:
            value_by_parcel = calculate_parcel_value(amount, fees_percent, parcel_amount)
            mask_value_by_parcel = format_parcel_value(value_by_parcel)
        except ArithmeticError as exc:
            logger.exception(
                "Error calculating parcel for amount=%s fees=%s parcels=%s",
                amount,
                fees_percent,
                parcel_amount,
            )
            raise ServerError() from exc

        return Parcel(
            full_amount=amount,
            fee_percent=fees_percent / 100,
            parcel_amount=parcel_amount,
            value_by_parcel=value_by_parcel,
            mask_value_by_parcel=mask_value_by_parcel,
        )
