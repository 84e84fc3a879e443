from __future__ import annotations

from fastapi import Depends

from products_api.data_access import CategoriesDataAccess
from products_api.errors import NotFoundError, ValidationError
from products_api.models import Category
from products_api.services.utils import require_object_id, store_errors


class CategoriesService:
    def __init__(
        self,
        categories_store: CategoriesDataAccess = Depends(),
    ) -> None:
        self._categories_store = categories_store

    @staticmethod
    def _require_name(name: str | None) -> str:
        if not name:
            raise ValidationError("Name is required")
        return name

    async def create_category(self, *, name: str | None) -> Category:
        name = self._require_name(name)
        async with store_errors("creating category"):
            return await self._categories_store.create_category(name=name)

    async def list_categories(self) -> list[Category]:
        async with store_errors("getting categories"):
            return await self._categories_store.list_categories()

    async def get_category(self, category_id: str) -> Category:
        category_id = require_object_id(category_id, "Invalid category ID")
        async with store_errors("getting category by ID"):
            category = await self._categories_store.get_category(category_id)
        if category is None:
            raise NotFoundError("Category not found")
        return category

    async def update_category(self, category_id: str, *, name: str | None) -> Category:
        category_id = require_object_id(category_id, "Invalid category ID")
        name = self._require_name(name)
        async with store_errors("updating category"):
            updated_category = await self._categories_store.update_category(
                category_id, name=name
            )
        if updated_category is None:
            raise NotFoundError("Category not found")
        return updated_category

    async def delete_category(self, category_id: str) -> None:
        category_id = require_object_id(category_id, "Invalid category ID")
        async with store_errors("deleting category"):
            deleted = await self._categories_store.delete_category(category_id)
        if not deleted:
            raise NotFoundError("Category not found")
