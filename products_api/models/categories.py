from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel


class CategoryPayload(BaseModel):
    name: str | None = None


class CategoryResponse(BaseModel):
    id: str
    name: str


@dataclass(frozen=True, slots=True)
class Category:
    id: str
    name: str
