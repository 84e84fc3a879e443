from __future__ import annotations

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from products_api import db
from products_api.models import Product
from products_api.tables import ProductsTable


class ProductsDataAccess:
    def __init__(self, session: AsyncSession = Depends(db.get_session)) -> None:
        self._session = session

    async def get_product(self, product_id: str) -> Product | None:
        product = await self._session.get(ProductsTable, product_id)
        if product is None:
            return None
        return _to_product(product)

    async def list_products(self) -> list[Product]:
        result = await self._session.execute(
            select(ProductsTable).order_by(ProductsTable.id)
        )
        return [_to_product(product) for product in result.scalars()]

    async def create_product(
        self,
        *,
        name: str,
        description: str,
        amount: float,
        category_id: str,
    ) -> Product:
        product = ProductsTable(
            name=name,
            description=description,
            amount=amount,
            category_id=category_id,
        )
        self._session.add(product)
        await self._session.flush()
        await self._session.refresh(product)
        return _to_product(product)

    async def update_product(
        self,
        product_id: str,
        *,
        name: str,
        description: str,
        amount: float,
        category_id: str,
    ) -> Product | None:
        product = await self._session.get(ProductsTable, product_id)
        if product is None:
            return None
        product.name = name
        product.description = description
        product.amount = amount
        product.category_id = category_id
        await self._session.flush()
        await self._session.refresh(product)
        return _to_product(product)

    async def delete_product(self, product_id: str) -> bool:
        product = await self._session.get(ProductsTable, product_id)
        if product is None:
            return False
        await self._session.delete(product)
        await self._session.flush()
        return True


def _to_product(product: ProductsTable) -> Product:
    return Product(
        id=product.id,
        name=product.name,
        description=product.description,
        amount=product.amount,
        id_category=product.category_id,
    )
