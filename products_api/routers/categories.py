from fastapi import APIRouter, Depends, Response, status

from products_api.models import Category, CategoryPayload, CategoryResponse
from products_api.services import CategoriesService

router = APIRouter(prefix="/categories", tags=["categories"])


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    payload: CategoryPayload,
    categories_service: CategoriesService = Depends(),
) -> Category:
    return await categories_service.create_category(name=payload.name)


# Listing answers 201, as existing clients expect.
@router.get("", response_model=list[CategoryResponse], status_code=status.HTTP_201_CREATED)
async def list_categories(
    categories_service: CategoriesService = Depends(),
) -> list[Category]:
    return await categories_service.list_categories()


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: str,
    categories_service: CategoriesService = Depends(),
) -> Category:
    return await categories_service.get_category(category_id)


@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: str,
    payload: CategoryPayload,
    categories_service: CategoriesService = Depends(),
) -> Category:
    return await categories_service.update_category(category_id, name=payload.name)


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_category(
    category_id: str,
    categories_service: CategoriesService = Depends(),
) -> None:
    await categories_service.delete_category(category_id)
