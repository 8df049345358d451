from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.user import RegisterRequest, RegisterResponse
from app.services.auth_provider import AuthProviderClient, get_auth_provider
from app.services.registration import registration_service

router = APIRouter()


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(
    request: RegisterRequest,
    db: Session = Depends(get_db),
    auth_provider: AuthProviderClient = Depends(get_auth_provider)
):
    """
    Register a user for a tenant.

    Credentials are created by the hosted auth provider, which also sends
    the verification email. Sessions are handled there too.

    Args:
        request: Email, password, optional full name and tenant id
        db: Database session
        auth_provider: Provider client

    Returns:
        Created user identity and a verification-pending message
    """
    return registration_service.register_user(
        db=db,
        request=request,
        auth_provider=auth_provider
    )
