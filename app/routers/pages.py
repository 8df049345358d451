"""
Page endpoints.

They return the data each page renders as JSON; markup is left to the
frontend.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from typing import Optional
from app.database import get_db
from app.core.config import settings
from app.core.tenant_context import TenantContext, get_tenant_context
from app.crud import product as product_crud
from app.schemas.pages import (
    AdminDashboard,
    AdminStats,
    LandingPage,
    RegisterPage,
    StorefrontPage,
    TenantNotFoundPage,
)
from app.schemas.product import ProductResponse
from app.schemas.tenant import TenantResponse
from app.services.product import product_service
from app.services.tenant import tenant_service

router = APIRouter()


@router.get("/", response_model=LandingPage)
def landing_page():
    return LandingPage(
        title=settings.APP_NAME,
        tagline="Each tenant gets its own subdomain with automatic routing and tenant isolation.",
        register_url="/register",
        admin_url="/admin",
    )


@router.get("/register", response_model=RegisterPage)
def register_page():
    return RegisterPage(
        title="Create your store",
        fields=["name", "subdomain", "primary_color"],
        default_primary_color=settings.DEFAULT_PRIMARY_COLOR,
        submit_url="/api/tenants",
    )


@router.get(settings.STOREFRONT_PATH, response_model=StorefrontPage)
def storefront_page(
    context: Optional[TenantContext] = Depends(get_tenant_context),
    db: Session = Depends(get_db)
):
    """
    Storefront of the tenant in scope: branding plus active products.

    Raises:
        HTTPException 404: No tenant in scope (main domain)
    """
    if context is None or context.tenant is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Tenant not found"
        )

    products = product_service.get_active_products(db=db, tenant_id=context.tenant.id)
    return StorefrontPage(
        tenant=context.tenant,
        products=[ProductResponse.model_validate(p) for p in products],
    )


@router.get(settings.TENANT_NOT_FOUND_PATH, response_model=TenantNotFoundPage)
def tenant_not_found_page(context: Optional[TenantContext] = Depends(get_tenant_context)):
    page = TenantNotFoundPage(
        message="The store you are looking for does not exist.",
        subdomain=context.subdomain if context else None,
        home_url="/",
    )
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=page.model_dump())


@router.get("/admin", response_model=AdminDashboard)
def admin_page(db: Session = Depends(get_db)):
    """
    Platform dashboard: totals and every tenant, newest first.

    Users live with the auth provider, so the user total is always 0 here.
    """
    tenants = tenant_service.get_tenants(db=db)
    return AdminDashboard(
        stats=AdminStats(
            total_tenants=len(tenants),
            total_users=0,
            total_products=product_crud.count(db),
        ),
        tenants=[TenantResponse.model_validate(t) for t in tenants],
    )
