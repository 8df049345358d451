from fastapi import FastAPI, Depends, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session
from sqlalchemy import text
from app.database import get_db
from app.models.tenant import Tenant
from app.models.product import Product
from app.routers import auth, pages, product, tenant
from app.middleware.tenant_routing import TenantRoutingMiddleware
from app.core.config import settings
from app.core.exceptions import register_exception_handlers
from app.core.logging_config import logger

# Schema is managed by Alembic migrations
# Base.metadata.create_all(bind=engine)

app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url=None if settings.is_production else "/docs",
    redoc_url=None if settings.is_production else "/redoc",
    redirect_slashes=False  # Disable automatic redirects to prevent POST data loss
)

register_exception_handlers(app)

# Resolves the tenant from the Host header on every request
app.add_middleware(TenantRoutingMiddleware)

# Added last so it wraps tenant routing and answers preflights first
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])
app.include_router(tenant.router, prefix="/api/tenants", tags=["Tenants"])
app.include_router(product.router, prefix="/api/products", tags=["Products"])
app.include_router(pages.router, tags=["Pages"])


@app.get("/health")
def health_check(db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
        return {
            "status": "healthy",
            "database": "connected"
        }
    except Exception as e:
        logger.error(f"Health check failed: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service unhealthy"
        )
