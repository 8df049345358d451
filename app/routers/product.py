from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from app.database import get_db
from app.schemas.common import MessageResponse
from app.schemas.product import ProductCreate, ProductUpdate, ProductResponse
from app.services.product import product_service
from app.core.tenant_context import get_tenant_id
from app.core.logging_config import logger

router = APIRouter()


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(
    product_data: ProductCreate,
    db: Session = Depends(get_db),
    _tenant_id: int = Depends(get_tenant_id)
):
    """
    Create a new product.

    The tenant is identified from the forwarded ``x-tenant-id`` header.

    Args:
        product_data: Product creation data
        db: Database session
        _tenant_id: Tenant context (set by the routing middleware)

    Returns:
        Created product, active
    """
    try:
        logger.info(f"Creating product: name={product_data.name}, tenant_id={_tenant_id}")
        result = product_service.create_product(
            db=db,
            product_data=product_data,
            tenant_id=_tenant_id
        )
        logger.info(f"Product created successfully: id={result.id}")
        return result
    except Exception as e:
        logger.error(f"Error creating product: {type(e).__name__}: {str(e)}")
        raise


@router.get("", response_model=List[ProductResponse])
def get_products(
    db: Session = Depends(get_db),
    _tenant_id: int = Depends(get_tenant_id)
):
    """
    Retrieve the active products of your tenant, newest first.
    """
    return product_service.get_active_products(db=db, tenant_id=_tenant_id)


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: int,
    db: Session = Depends(get_db),
    _tenant_id: int = Depends(get_tenant_id)
):
    """
    Retrieve a specific product by ID.

    Raises:
        HTTPException 404: If product not found for your tenant
    """
    return product_service.get_product(
        db=db,
        product_id=product_id,
        tenant_id=_tenant_id
    )


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: int,
    product_data: ProductUpdate,
    db: Session = Depends(get_db),
    _tenant_id: int = Depends(get_tenant_id)
):
    """
    Update an existing product.

    Args:
        product_id: Product ID
        product_data: Fields to change
        db: Database session
        _tenant_id: Tenant context (set by the routing middleware)

    Returns:
        Updated product

    Raises:
        HTTPException 404: If product not found for your tenant
    """
    return product_service.update_product(
        db=db,
        product_id=product_id,
        product_data=product_data,
        tenant_id=_tenant_id
    )


@router.delete("/{product_id}", response_model=MessageResponse)
def delete_product(
    product_id: int,
    db: Session = Depends(get_db),
    _tenant_id: int = Depends(get_tenant_id)
):
    """
    Delete a product.

    Raises:
        HTTPException 404: If product not found for your tenant
    """
    product_service.delete_product(
        db=db,
        product_id=product_id,
        tenant_id=_tenant_id
    )
    return MessageResponse(message="Product deleted successfully")
