from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ProductPayload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str | None = None
    description: str | None = None
    amount: float | None = None
    id_category: str | int | None = None


class ProductResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    description: str
    amount: float
    id_category: str


class ProductRemovedResponse(BaseModel):
    removed: bool
    id: str


@dataclass(frozen=True, slots=True)
class Product:
    id: str
    name: str
    description: str
    amount: float
    id_category: str
