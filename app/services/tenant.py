from typing import List
from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from app.crud import tenant as tenant_crud
from app.schemas.tenant import TenantCreate, TenantUpdate
from app.models.tenant import Tenant
from app.core.config import settings
from app.core.logging_config import logger
from app.core.subdomain import sanitize_subdomain, is_valid_subdomain


class TenantService:
    """
    Service layer for tenant business logic.

    Owns subdomain sanitization, validation and uniqueness on creation.
    Datastore failures are logged here and surfaced as generic 500s.
    """

    def __init__(self):
        self.crud = tenant_crud

    def get_tenant(self, db: Session, tenant_id: int) -> Tenant:
        """
        Get a tenant by ID.

        Raises:
            HTTPException 404: If tenant not found
        """
        tenant = self.crud.get(db, tenant_id)

        if not tenant:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Tenant not found"
            )

        return tenant

    def get_tenant_by_subdomain(self, db: Session, subdomain: str) -> Tenant:
        """
        Get a tenant by exact subdomain.

        Raises:
            HTTPException 404: If no tenant uses this subdomain
        """
        tenant = self.crud.get_by_subdomain(db, subdomain)

        if not tenant:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Tenant not found"
            )

        return tenant

    def get_tenants(self, db: Session) -> List[Tenant]:
        """All tenants, newest first, for administrative listing."""
        try:
            return self.crud.get_multi(db)
        except SQLAlchemyError as e:
            logger.error(f"Error fetching tenants: {type(e).__name__}: {str(e)}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to fetch tenants"
            )

    def create_tenant(self, db: Session, tenant_data: TenantCreate) -> Tenant:
        """
        Create a tenant from user input.

        The requested subdomain is sanitized first; the sanitized value must
        be valid, not reserved, and not already taken.

        Args:
            db: Database session
            tenant_data: Tenant creation data

        Returns:
            Created Tenant instance

        Raises:
            HTTPException 400: Invalid or reserved subdomain
            HTTPException 409: Subdomain already exists
            HTTPException 500: Datastore failure
        """
        subdomain = sanitize_subdomain(tenant_data.subdomain)

        if not is_valid_subdomain(subdomain):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid subdomain format"
            )

        if subdomain in settings.RESERVED_SUBDOMAINS:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Subdomain is reserved"
            )

        conflict = HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Subdomain already exists"
        )

        try:
            if self.crud.get_by_subdomain(db, subdomain):
                raise conflict

            return self.crud.create(
                db,
                name=tenant_data.name,
                subdomain=subdomain,
                primary_color=tenant_data.primary_color or settings.DEFAULT_PRIMARY_COLOR,
            )
        except ValueError:
            raise conflict
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error creating tenant: {type(e).__name__}: {str(e)}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to create tenant"
            )

    def update_tenant(
        self,
        db: Session,
        tenant_id: int,
        tenant_data: TenantUpdate
    ) -> Tenant:
        """
        Partially update name, primary_color and logo_url.

        Raises:
            HTTPException 404: If tenant not found
        """
        tenant = self.get_tenant(db, tenant_id)

        try:
            return self.crud.update(db, db_obj=tenant, obj_in=tenant_data)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error updating tenant {tenant_id}: {type(e).__name__}: {str(e)}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to update tenant"
            )

    def delete_tenant(self, db: Session, tenant_id: int) -> None:
        """
        Delete a tenant together with its products.

        Raises:
            HTTPException 404: If tenant not found
        """
        try:
            deleted = self.crud.delete(db, tenant_id=tenant_id)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error deleting tenant {tenant_id}: {type(e).__name__}: {str(e)}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to delete tenant"
            )

        if not deleted:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Tenant not found"
            )


# Create a singleton instance
tenant_service = TenantService()
