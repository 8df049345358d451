from typing import List
from sqlalchemy.orm import Session
from sqlalchemy import select, func
from app.crud.base import CRUDBase
from app.models.product import Product
from app.schemas.product import ProductCreate, ProductUpdate


class CRUDProduct(CRUDBase[Product, ProductCreate, ProductUpdate]):
    """
    CRUD operations for Product model.

    Inherits the tenant-isolated operations from CRUDBase.
    """

    def get_active(self, db: Session, *, tenant_id: int) -> List[Product]:
        """
        Active products of a tenant, newest first.
        """
        stmt = (
            select(Product)
            .where(Product.tenant_id == tenant_id, Product.is_active.is_(True))
            .order_by(Product.created_at.desc(), Product.id.desc())
        )
        result = db.execute(stmt)
        return list(result.scalars().all())

    def count(self, db: Session) -> int:
        """Number of products across all tenants (admin dashboard)."""
        return db.execute(select(func.count(Product.id))).scalar_one()

    def create(
        self,
        db: Session,
        *,
        obj_in: ProductCreate,
        tenant_id: int
    ) -> Product:
        """
        Create a product; new products always start active.
        """
        db_obj = Product(tenant_id=tenant_id, is_active=True, **obj_in.model_dump())
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj


# Create a singleton instance
product = CRUDProduct(Product)
