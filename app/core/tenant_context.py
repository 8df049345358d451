from dataclasses import dataclass
from typing import Optional
from fastapi import Header, HTTPException, Request, status
from app.core.config import settings
from app.core.subdomain import extract_subdomain
from app.schemas.tenant import TenantResponse
from app.services.tenant_resolver import TenantResolver

TENANT_ID_HEADER = "x-tenant-id"
TENANT_SUBDOMAIN_HEADER = "x-tenant-subdomain"
TENANT_NAME_HEADER = "x-tenant-name"
TENANT_COLOR_HEADER = "x-tenant-color"

TENANT_HEADERS = (
    TENANT_ID_HEADER,
    TENANT_SUBDOMAIN_HEADER,
    TENANT_NAME_HEADER,
    TENANT_COLOR_HEADER,
)


@dataclass(frozen=True)
class TenantContext:
    """Tenant identity of a single request. Never shared between requests."""
    tenant: Optional[TenantResponse]
    subdomain: Optional[str]
    is_main_domain: bool


def build_tenant_context(host: str, resolver: TenantResolver) -> TenantContext:
    """
    Build the tenant context for a Host header.

    Reserved subdomains (``www``) count as the main domain. The resolver is
    only consulted when a subdomain is present.

    Args:
        host: Raw Host header value
        resolver: Tenant lookup, consulted at most once

    Returns:
        TenantContext for this request
    """
    subdomain = extract_subdomain(host)
    if subdomain in settings.RESERVED_SUBDOMAINS:
        subdomain = None

    if subdomain is None:
        return TenantContext(tenant=None, subdomain=None, is_main_domain=True)

    return TenantContext(
        tenant=resolver.resolve(subdomain),
        subdomain=subdomain,
        is_main_domain=False,
    )


def get_tenant_id(x_tenant_id: Optional[str] = Header(None)) -> int:
    """
    FastAPI dependency that reads the tenant id forwarded by the routing middleware.

    The middleware strips any client-supplied tenant headers, so the header
    is present exactly when a tenant is in scope.

    Returns:
        Tenant ID of the current request

    Raises:
        HTTPException 400: No tenant in scope
    """
    if not x_tenant_id or not x_tenant_id.isdigit():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Tenant context required"
        )
    return int(x_tenant_id)


def get_tenant_context(request: Request) -> Optional[TenantContext]:
    """The TenantContext the middleware attached to this request, if any."""
    return getattr(request.state, "tenant_context", None)
