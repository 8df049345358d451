from app.services.tenant import tenant_service
from app.services.product import product_service
from .tenant_resolver import tenant_resolver
from .registration import registration_service

__all__ = ["tenant_service", "product_service", "tenant_resolver", "registration_service"]
