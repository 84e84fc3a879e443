from .categories import CategoriesService
from .parcels import ParcelsService
from .products import ProductsService
