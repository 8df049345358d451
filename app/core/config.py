from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    APP_NAME: str = "Subdomain Storefront API"
    ENVIRONMENT: str = "development"  # "development" or "production"

    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    # Tenant routing
    STOREFRONT_PATH: str = "/tenant"
    TENANT_NOT_FOUND_PATH: str = "/tenant-not-found"
    MAIN_DOMAIN_ALLOWED_PREFIXES: List[str] = [
        "/register",
        "/admin",
        "/tenant-not-found",
        "/api",
        "/health",
        "/docs",
        "/redoc",
        "/openapi.json",
        "/favicon.ico",
        "/static",
    ]
    RESERVED_SUBDOMAINS: List[str] = ["www"]
    DEFAULT_PRIMARY_COLOR: str = "#3b82f6"

    # Hosted auth provider
    AUTH_PROVIDER_URL: Optional[str] = None
    AUTH_PROVIDER_API_KEY: Optional[str] = None
    AUTH_PROVIDER_TIMEOUT: float = 10.0

    @property
    def is_production(self):
        return self.ENVIRONMENT == "production"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
