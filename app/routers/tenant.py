from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional, Union
from app.database import get_db
from app.schemas.common import MessageResponse
from app.schemas.tenant import TenantCreate, TenantUpdate, TenantResponse
from app.services.tenant import tenant_service
from app.core.logging_config import logger

router = APIRouter()


@router.post("", response_model=TenantResponse, status_code=status.HTTP_201_CREATED)
def create_tenant(
    tenant_data: TenantCreate,
    db: Session = Depends(get_db)
):
    """
    Create a new tenant.

    The subdomain is sanitized (lower-cased, stripped of invalid characters)
    before validation and the uniqueness check.

    Args:
        tenant_data: Name, requested subdomain and optional primary colour
        db: Database session

    Returns:
        Created tenant

    Raises:
        HTTPException 400: Invalid or reserved subdomain
        HTTPException 409: Subdomain already exists
    """
    logger.info(f"Creating tenant: name={tenant_data.name}, subdomain={tenant_data.subdomain}")
    result = tenant_service.create_tenant(db=db, tenant_data=tenant_data)
    logger.info(f"Tenant created successfully: id={result.id}, subdomain={result.subdomain}")
    return result


@router.get("", response_model=Union[TenantResponse, List[TenantResponse]])
def get_tenants(
    subdomain: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """
    Look up a tenant by subdomain, or list all tenants newest first.

    Args:
        subdomain: Exact subdomain to look up (optional)
        db: Database session

    Returns:
        A single tenant when ``subdomain`` is given, otherwise all tenants

    Raises:
        HTTPException 404: No tenant with this subdomain
    """
    if subdomain:
        return tenant_service.get_tenant_by_subdomain(db=db, subdomain=subdomain)
    return tenant_service.get_tenants(db=db)


@router.get("/{tenant_id}", response_model=TenantResponse)
def get_tenant(
    tenant_id: int,
    db: Session = Depends(get_db)
):
    """
    Retrieve a tenant by ID.

    Raises:
        HTTPException 404: If tenant not found
    """
    return tenant_service.get_tenant(db=db, tenant_id=tenant_id)


@router.put("/{tenant_id}", response_model=TenantResponse)
def update_tenant(
    tenant_id: int,
    tenant_data: TenantUpdate,
    db: Session = Depends(get_db)
):
    """
    Update name, primary colour or logo of a tenant.

    Raises:
        HTTPException 404: If tenant not found
    """
    logger.info(f"Updating tenant: id={tenant_id}")
    return tenant_service.update_tenant(db=db, tenant_id=tenant_id, tenant_data=tenant_data)


@router.delete("/{tenant_id}", response_model=MessageResponse)
def delete_tenant(
    tenant_id: int,
    db: Session = Depends(get_db)
):
    """
    Delete a tenant and its products.

    Raises:
        HTTPException 404: If tenant not found
    """
    logger.info(f"Deleting tenant: id={tenant_id}")
    tenant_service.delete_tenant(db=db, tenant_id=tenant_id)
    return MessageResponse(message="Tenant deleted successfully")
