from datetime import datetime
from pydantic import BaseModel, Field, field_validator
from typing import Optional

HEX_COLOR_PATTERN = r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$"

class TenantBase(BaseModel):
    name: str = Field(..., min_length=1)
    primary_color: Optional[str] = Field(None, pattern=HEX_COLOR_PATTERN)

class TenantCreate(TenantBase):
    # Sanitized and validated by the tenant service, not here
    subdomain: str = Field(..., min_length=1)

class TenantUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    primary_color: Optional[str] = Field(None, pattern=HEX_COLOR_PATTERN)
    logo_url: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_null(cls, v):
        if v is None:
            raise ValueError("name cannot be null")
        return v

class TenantResponse(BaseModel):
    # Stored rows are returned as-is; input rules apply on the way in only
    id: int
    subdomain: str
    name: str
    primary_color: Optional[str] = None
    logo_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
