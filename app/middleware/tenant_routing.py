"""
Host based tenant routing.

For every HTTP request the middleware builds a TenantContext from the Host
header, decides between continuing, redirecting, or forwarding with tenant
headers attached, and applies that decision.
"""

import enum
from dataclasses import dataclass, field
from typing import Dict, Optional
from urllib.parse import quote
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import Headers
from starlette.responses import RedirectResponse
from starlette.types import ASGIApp, Receive, Scope, Send
from app.core.config import settings
from app.core.logging_config import logger
from app.core.tenant_context import (
    TenantContext,
    build_tenant_context,
    TENANT_HEADERS,
    TENANT_ID_HEADER,
    TENANT_SUBDOMAIN_HEADER,
    TENANT_NAME_HEADER,
    TENANT_COLOR_HEADER,
)
from app.schemas.tenant import TenantResponse
from app.services.tenant_resolver import TenantResolver, tenant_resolver


class RouteAction(str, enum.Enum):
    CONTINUE = "continue"
    REDIRECT = "redirect"
    DECORATE = "decorate"


@dataclass(frozen=True)
class RouteDecision:
    action: RouteAction
    location: Optional[str] = None
    headers: Dict[str, str] = field(default_factory=dict)


def is_allowed_on_main_domain(path: str) -> bool:
    if path == "/":
        return True
    return any(path.startswith(prefix) for prefix in settings.MAIN_DOMAIN_ALLOWED_PREFIXES)


def tenant_headers(tenant: TenantResponse) -> Dict[str, str]:
    """
    Forwarded headers describing a resolved tenant.

    The display name is percent-encoded so non latin-1 names survive the trip
    through raw ASGI headers.
    """
    headers = {
        TENANT_ID_HEADER: str(tenant.id),
        TENANT_SUBDOMAIN_HEADER: tenant.subdomain,
        TENANT_NAME_HEADER: quote(tenant.name),
    }
    if tenant.primary_color:
        headers[TENANT_COLOR_HEADER] = tenant.primary_color
    return headers


def decide_route(path: str, context: TenantContext) -> RouteDecision:
    """
    Routing decision for one request.

    Main domain: allow-listed paths continue, everything else goes to ``/``.
    Subdomain without tenant: redirect to the not-found page.
    Subdomain with tenant: ``/`` goes to the storefront, any other path is
    forwarded with tenant headers.

    Args:
        path: Request path
        context: TenantContext built from the Host header

    Returns:
        RouteDecision
    """
    if context.is_main_domain:
        if is_allowed_on_main_domain(path):
            return RouteDecision(RouteAction.CONTINUE)
        return RouteDecision(RouteAction.REDIRECT, location="/")

    if context.tenant is None:
        # Already on the not-found page; redirecting again would loop
        if path == settings.TENANT_NOT_FOUND_PATH:
            return RouteDecision(RouteAction.CONTINUE)
        return RouteDecision(RouteAction.REDIRECT, location=settings.TENANT_NOT_FOUND_PATH)

    if path == "/":
        return RouteDecision(RouteAction.REDIRECT, location=settings.STOREFRONT_PATH)

    return RouteDecision(RouteAction.DECORATE, headers=tenant_headers(context.tenant))


class TenantRoutingMiddleware:
    """Pure ASGI middleware applying decide_route to every HTTP request.

    Client supplied ``x-tenant-*`` headers are always dropped; only the
    middleware sets them. The TenantContext is also exposed as
    ``request.state.tenant_context``.
    """

    def __init__(self, app: ASGIApp, resolver: Optional[TenantResolver] = None):
        self.app = app
        self.resolver = resolver or tenant_resolver

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        host = Headers(scope=scope).get("host", "")
        path = scope["path"]

        # Blocking datastore lookup
        context = await run_in_threadpool(build_tenant_context, host, self.resolver)
        decision = decide_route(path, context)

        if decision.action == RouteAction.REDIRECT:
            logger.debug(f"Redirecting host={host} path={path} -> {decision.location}")
            response = RedirectResponse(url=decision.location, status_code=307)
            await response(scope, receive, send)
            return

        raw_headers = [
            (name, value)
            for name, value in scope["headers"]
            if name.decode("latin-1").lower() not in TENANT_HEADERS
        ]
        raw_headers.extend(
            (name.encode("latin-1"), value.encode("latin-1"))
            for name, value in decision.headers.items()
        )

        scope = dict(scope)
        scope["headers"] = raw_headers
        scope["state"] = {**scope.get("state", {}), "tenant_context": context}

        await self.app(scope, receive, send)
