from .product import Product
from .tenant import Tenant
