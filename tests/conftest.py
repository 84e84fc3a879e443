from dataclasses import replace

import pytest
from httpx import ASGITransport, AsyncClient

from products_api.data_access import CategoriesDataAccess, ProductsDataAccess
from products_api.main import app as fastapi_app
from products_api.models import Category, Product
from products_api.object_ids import new_object_id


class FakeStore:
    """Base for the in-memory stores; records calls and can be told to fail."""

    def __init__(self) -> None:
        self.calls: list[str] = []
        self.failure: Exception | None = None

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if self.failure is not None:
            raise self.failure


class FakeCategoriesStore(FakeStore):
    def __init__(self) -> None:
        super().__init__()
        self.categories: dict[str, Category] = {}

    async def get_category(self, category_id: str) -> Category | None:
        self._record("get_category")
        return self.categories.get(category_id)

    async def list_categories(self) -> list[Category]:
        self._record("list_categories")
        return list(self.categories.values())

    async def create_category(self, *, name: str) -> Category:
        self._record("create_category")
        category = Category(id=new_object_id(), name=name)
        self.categories[category.id] = category
        return category

    async def update_category(self, category_id: str, *, name: str) -> Category | None:
        self._record("update_category")
        category = self.categories.get(category_id)
        if category is None:
            return None
        self.categories[category_id] = replace(category, name=name)
        return self.categories[category_id]

    async def delete_category(self, category_id: str) -> bool:
        self._record("delete_category")
        return self.categories.pop(category_id, None) is not None


class FakeProductsStore(FakeStore):
    def __init__(self) -> None:
        super().__init__()
        self.products: dict[str, Product] = {}

    async def get_product(self, product_id: str) -> Product | None:
        self._record("get_product")
        return self.products.get(product_id)

    async def list_products(self) -> list[Product]:
        self._record("list_products")
        return list(self.products.values())

    async def create_product(
        self, *, name: str, description: str, amount: float, category_id: str
    ) -> Product:
        self._record("create_product")
        product = Product(
            id=new_object_id(),
            name=name,
            description=description,
            amount=amount,
            id_category=category_id,
        )
        self.products[product.id] = product
        return product

    async def update_product(
        self,
        product_id: str,
        *,
        name: str,
        description: str,
        amount: float,
        category_id: str,
    ) -> Product | None:
        self._record("update_product")
        product = self.products.get(product_id)
        if product is None:
            return None
        self.products[product_id] = replace(
            product,
            name=name,
            description=description,
            amount=amount,
            id_category=category_id,
        )
        return self.products[product_id]

    async def delete_product(self, product_id: str) -> bool:
        self._record("delete_product")
        return self.products.pop(product_id, None) is not None


@pytest.fixture(autouse=True, scope="session")
def anyio_backend():
    return ("asyncio", {"use_uvloop": True})


@pytest.fixture
def categories_store() -> FakeCategoriesStore:
    return FakeCategoriesStore()


@pytest.fixture
def products_store() -> FakeProductsStore:
    return FakeProductsStore()


@pytest.fixture
def app(categories_store, products_store):
    fastapi_app.dependency_overrides[CategoriesDataAccess] = lambda: categories_store
    fastapi_app.dependency_overrides[ProductsDataAccess] = lambda: products_store
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
async def async_client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
