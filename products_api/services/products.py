from __future__ import annotations

from fastapi import Depends

from products_api.data_access import CategoriesDataAccess, ProductsDataAccess
from products_api.errors import NotFoundError, ValidationError
from products_api.models import Product
from products_api.services.utils import require_object_id, store_errors


class ProductsService:
    def __init__(
        self,
        products_store: ProductsDataAccess = Depends(),
        categories_store: CategoriesDataAccess = Depends(),
    ) -> None:
        self._products_store = products_store
        self._categories_store = categories_store

    @staticmethod
    def _require_fields(*values: object) -> None:
        if not all(values):
            raise ValidationError("All fields are required")

    async def _require_category(self, category_id: str, action: str) -> None:
        async with store_errors(action):
            category = await self._categories_store.get_category(category_id)
        if category is None:
            raise NotFoundError("Category does not exist")

    async def create_product(
        self,
        *,
        name: str | None,
        description: str | None,
        amount: float | None,
        id_category: str | int | None,
    ) -> Product:
        self._require_fields(name, description, amount, id_category)
        id_category = require_object_id(id_category, "Invalid category ID")
        await self._require_category(id_category, "creating product")

        async with store_errors("creating product"):
            return await self._products_store.create_product(
                name=name,
                description=description,
                amount=amount,
                category_id=id_category,
            )

    async def list_products(self) -> list[Product]:
        async with store_errors("getting products"):
            return await self._products_store.list_products()

    async def get_product(self, product_id: str) -> Product:
        product_id = require_object_id(product_id, "Invalid product ID")
        async with store_errors("getting product by ID"):
            product = await self._products_store.get_product(product_id)
        if product is None:
            raise NotFoundError("Product not found")
        return product

    async def update_product(
        self,
        product_id: str,
        *,
        name: str | None,
        description: str | None,
        amount: float | None,
        id_category: str | int | None,
    ) -> Product:
        self._require_fields(name, description, amount, id_category)
        product_id = require_object_id(product_id, "Invalid product ID")
        id_category = require_object_id(id_category, "Invalid category ID")
        await self._require_category(id_category, "updating product")

        async with store_errors("updating product"):
            updated_product = await self._products_store.update_product(
                product_id,
                name=name,
                description=description,
                amount=amount,
                category_id=id_category,
            )
        if updated_product is None:
            raise NotFoundError("Product not found")
        return updated_product

    async def delete_product(self, product_id: str) -> str:
        product_id = require_object_id(product_id, "Invalid product ID")
        async with store_errors("deleting product"):
            deleted = await self._products_store.delete_product(product_id)
        if not deleted:
            raise NotFoundError("Product not found")
        return product_id
