from __future__ import annotations

from dataclasses import dataclass

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ParcelPayload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str | None = None
    description: str | None = None
    amount: float | None = None
    id_category: str | int | None = None
    # Older clients send the product id as ``_id``.
    product_id: str | int | None = Field(
        None, validation_alias=AliasChoices("productId", "_id", "product_id")
    )
    parcel_amount: int | None = None
    fees_percent: float | None = None


class ParcelResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    full_amount: float
    fee_percent: float
    parcel_amount: int
    value_by_parcel: float
    mask_value_by_parcel: str


@dataclass(frozen=True, slots=True)
class Parcel:
    full_amount: float
    fee_percent: float
    parcel_amount: int
    value_by_parcel: float
    mask_value_by_parcel: str
