from .categories import CategoriesDataAccess
from .products import ProductsDataAccess
