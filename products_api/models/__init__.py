from .categories import Category, CategoryPayload, CategoryResponse
from .parcels import Parcel, ParcelPayload, ParcelResponse
from .products import (
    Product,
    ProductPayload,
    ProductRemovedResponse,
    ProductResponse,
)
