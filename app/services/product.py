from typing import List
from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from app.crud import product as product_crud
from app.schemas.product import ProductCreate, ProductUpdate
from app.models.product import Product
from app.core.logging_config import logger


class ProductService:
    """
    Service layer for product business logic.

    Every operation is scoped by tenant_id. A product that exists but
    belongs to another tenant is reported as not found.
    """

    def __init__(self):
        self.crud = product_crud

    def _not_found(self) -> HTTPException:
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found"
        )

    def get_product(
        self,
        db: Session,
        product_id: int,
        tenant_id: int
    ) -> Product:
        """
        Get a product by ID with tenant isolation.

        Args:
            db: Database session
            product_id: Product ID
            tenant_id: Tenant ID for isolation

        Returns:
            Product instance

        Raises:
            HTTPException 404: If product not found for this tenant
        """
        product = self.crud.get(db=db, id=product_id, tenant_id=tenant_id)

        if not product:
            raise self._not_found()

        return product

    def get_active_products(self, db: Session, tenant_id: int) -> List[Product]:
        """
        Active products of the tenant, newest first.

        Raises:
            HTTPException 500: Datastore failure
        """
        try:
            return self.crud.get_active(db, tenant_id=tenant_id)
        except SQLAlchemyError as e:
            logger.error(f"Error fetching products for tenant {tenant_id}: {type(e).__name__}: {str(e)}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to fetch products"
            )

    def create_product(
        self,
        db: Session,
        product_data: ProductCreate,
        tenant_id: int
    ) -> Product:
        """
        Create a new, active product for the tenant.

        Raises:
            HTTPException 500: Datastore failure
        """
        try:
            return self.crud.create(db=db, obj_in=product_data, tenant_id=tenant_id)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error creating product: {type(e).__name__}: {str(e)}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to create product"
            )

    def update_product(
        self,
        db: Session,
        product_id: int,
        product_data: ProductUpdate,
        tenant_id: int
    ) -> Product:
        """
        Update a product.

        Raises:
            HTTPException 404: If product not found for this tenant
            HTTPException 500: Datastore failure
        """
        product = self.get_product(db=db, product_id=product_id, tenant_id=tenant_id)

        try:
            return self.crud.update(db=db, db_obj=product, obj_in=product_data)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error updating product {product_id}: {type(e).__name__}: {str(e)}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to update product"
            )

    def delete_product(
        self,
        db: Session,
        product_id: int,
        tenant_id: int
    ) -> None:
        """
        Delete a product.

        Raises:
            HTTPException 404: If product not found for this tenant
            HTTPException 500: Datastore failure
        """
        try:
            deleted = self.crud.delete(db=db, id=product_id, tenant_id=tenant_id)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error deleting product {product_id}: {type(e).__name__}: {str(e)}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to delete product"
            )

        if not deleted:
            raise self._not_found()


# Create a singleton instance
product_service = ProductService()
