from typing import Optional, List, Any, Dict
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from sqlalchemy import select
from app.models.tenant import Tenant
from app.schemas.tenant import TenantUpdate


class CRUDTenant:
    """
    CRUD operations for Tenant model.

    Note: Tenant model doesn't have tenant_id (it IS the tenant),
    so we don't inherit from CRUDBase.
    """

    def __init__(self):
        self.model = Tenant

    def get(self, db: Session, tenant_id: int) -> Optional[Tenant]:
        """
        Retrieve tenant by ID.

        Args:
            db: Database session
            tenant_id: Tenant ID

        Returns:
            Tenant instance or None if not found
        """
        stmt = select(Tenant).where(Tenant.id == tenant_id)
        result = db.execute(stmt)
        return result.scalar_one_or_none()

    def get_by_subdomain(self, db: Session, subdomain: str) -> Optional[Tenant]:
        """
        Retrieve tenant by exact subdomain match.

        Args:
            db: Database session
            subdomain: Subdomain, compared verbatim

        Returns:
            Tenant instance or None if not found
        """
        stmt = select(Tenant).where(Tenant.subdomain == subdomain)
        result = db.execute(stmt)
        return result.scalar_one_or_none()

    def get_multi(self, db: Session) -> List[Tenant]:
        """All tenants, newest first."""
        stmt = select(Tenant).order_by(Tenant.created_at.desc(), Tenant.id.desc())
        result = db.execute(stmt)
        return list(result.scalars().all())

    def create(
        self,
        db: Session,
        *,
        name: str,
        subdomain: str,
        primary_color: Optional[str] = None
    ) -> Tenant:
        """
        Create a tenant with an already sanitized subdomain.

        Args:
            db: Database session
            name: Display name
            subdomain: Sanitized, validated subdomain
            primary_color: Hex colour for storefront branding

        Returns:
            Created Tenant instance

        Raises:
            ValueError: If the subdomain is already taken
        """
        tenant = Tenant(name=name, subdomain=subdomain, primary_color=primary_color)
        db.add(tenant)

        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            # Lost a race with a concurrent insert of the same subdomain
            if "subdomain" in str(e).lower() or "unique" in str(e).lower():
                raise ValueError(f"Subdomain {subdomain} already exists")
            raise e

        db.refresh(tenant)
        return tenant

    def update(
        self,
        db: Session,
        *,
        db_obj: Tenant,
        obj_in: TenantUpdate | Dict[str, Any]
    ) -> Tenant:
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)

        for field, value in update_data.items():
            setattr(db_obj, field, value)

        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def delete(self, db: Session, *, tenant_id: int) -> Optional[Tenant]:
        """
        Delete a tenant and, through the relationship cascade, its products.

        Returns:
            Deleted Tenant instance or None if not found
        """
        tenant = self.get(db, tenant_id)
        if tenant:
            db.delete(tenant)
            db.commit()
        return tenant


# Create singleton instance
tenant = CRUDTenant()
