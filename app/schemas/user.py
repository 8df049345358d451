from pydantic import BaseModel, EmailStr, Field
from typing import Any, Dict, Optional

class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)
    full_name: Optional[str] = None
    tenant_id: int

class AuthUser(BaseModel):
    """User identity as returned by the hosted auth provider."""
    id: str
    email: Optional[str] = None
    user_metadata: Dict[str, Any] = Field(default_factory=dict)

class RegisterResponse(BaseModel):
    user: AuthUser
    message: str
