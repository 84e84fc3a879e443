from fastapi import APIRouter, Depends, status

from products_api.models import (
    Parcel,
    ParcelPayload,
    ParcelResponse,
    Product,
    ProductPayload,
    ProductRemovedResponse,
    ProductResponse,
)
from products_api.services import ParcelsService, ProductsService

router = APIRouter(prefix="/products", tags=["products"])


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    payload: ProductPayload,
    products_service: ProductsService = Depends(),
) -> Product:
    return await products_service.create_product(
        name=payload.name,
        description=payload.description,
        amount=payload.amount,
        id_category=payload.id_category,
    )


@router.post("/parcel", response_model=ParcelResponse)
async def calculate_parcel(
    payload: ParcelPayload,
    parcels_service: ParcelsService = Depends(),
) -> Parcel:
    return parcels_service.calculate_parcel(
        name=payload.name,
        description=payload.description,
        amount=payload.amount,
        id_category=payload.id_category,
        product_id=payload.product_id,
        parcel_amount=payload.parcel_amount,
        fees_percent=payload.fees_percent,
    )


# Listing answers 201, as existing clients expect.
@router.get("", response_model=list[ProductResponse], status_code=status.HTTP_201_CREATED)
async def list_products(
    products_service: ProductsService = Depends(),
) -> list[Product]:
    return await products_service.list_products()


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: str,
    products_service: ProductsService = Depends(),
) -> Product:
    return await products_service.get_product(product_id)


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: str,
    payload: ProductPayload,
    products_service: ProductsService = Depends(),
) -> Product:
    return await products_service.update_product(
        product_id,
        name=payload.name,
        description=payload.description,
        amount=payload.amount,
        id_category=payload.id_category,
    )


@router.delete("/{product_id}", response_model=ProductRemovedResponse)
async def delete_product(
    product_id: str,
    products_service: ProductsService = Depends(),
) -> ProductRemovedResponse:
    removed_id = await products_service.delete_product(product_id)
    return ProductRemovedResponse(removed=True, id=removed_id)
