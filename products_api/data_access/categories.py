from __future__ import annotations

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from products_api import db
from products_api.models import Category
from products_api.tables import CategoriesTable


class CategoriesDataAccess:
    def __init__(self, session: AsyncSession = Depends(db.get_session)) -> None:
        self._session = session

    async def get_category(self, category_id: str) -> Category | None:
        category = await self._session.get(CategoriesTable, category_id)
        if category is None:
            return None
        return _to_category(category)

    async def list_categories(self) -> list[Category]:
        result = await self._session.execute(
            select(CategoriesTable).order_by(CategoriesTable.id)
        )
        return [_to_category(category) for category in result.scalars()]

    async def create_category(self, *, name: str) -> Category:
        category = CategoriesTable(name=name)
        self._session.add(category)
        await self._session.flush()
        await self._session.refresh(category)
        return _to_category(category)

    async def update_category(self, category_id: str, *, name: str) -> Category | None:
        category = await self._session.get(CategoriesTable, category_id)
        if category is None:
            return None
        category.name = name
        await self._session.flush()
        await self._session.refresh(category)
        return _to_category(category)

    async def delete_category(self, category_id: str) -> bool:
        category = await self._session.get(CategoriesTable, category_id)
        if category is None:
            return False
        await self._session.delete(category)
        await self._session.flush()
        return True


def _to_category(category: CategoriesTable) -> Category:
    return Category(id=category.id, name=category.name)
