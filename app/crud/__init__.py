from app.crud.base import CRUDBase
from .product import product
from .tenant import tenant

__all__ = ["CRUDBase", "product", "tenant"]
