from pydantic import BaseModel
from typing import List, Optional
from app.schemas.product import ProductResponse
from app.schemas.tenant import TenantResponse

class LandingPage(BaseModel):
    title: str
    tagline: str
    register_url: str
    admin_url: str

class RegisterPage(BaseModel):
    title: str
    fields: List[str]
    default_primary_color: str
    submit_url: str

class StorefrontPage(BaseModel):
    tenant: TenantResponse
    products: List[ProductResponse]

class TenantNotFoundPage(BaseModel):
    message: str
    subdomain: Optional[str] = None
    home_url: str

class AdminStats(BaseModel):
    total_tenants: int
    total_users: int
    total_products: int

class AdminDashboard(BaseModel):
    stats: AdminStats
    tenants: List[TenantResponse]
