from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from app.crud import tenant as tenant_crud
from app.schemas.user import RegisterRequest, RegisterResponse
from app.services.auth_provider import AuthProviderClient, AuthProviderError, AuthProviderRejected
from app.core.logging_config import logger

VERIFICATION_PENDING_MESSAGE = (
    "User created successfully. Please check your email to verify your account."
)


class RegistrationService:
    """
    Registers tenant users with the hosted auth provider.

    The tenant link is only passed to the provider as user metadata; no user
    row is stored locally.
    """

    def register_user(
        self,
        db: Session,
        request: RegisterRequest,
        auth_provider: AuthProviderClient
    ) -> RegisterResponse:
        """
        Create a user for a tenant.

        Args:
            db: Database session
            request: Email, password, optional full name, tenant id
            auth_provider: Provider client performing the sign-up

        Returns:
            Created user identity and a verification-pending message

        Raises:
            HTTPException 404: Unknown tenant
            HTTPException 400: Provider rejected the sign-up
            HTTPException 500: Provider failure
        """
        if tenant_crud.get(db, request.tenant_id) is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Tenant not found"
            )

        try:
            user = auth_provider.sign_up(
                email=request.email,
                password=request.password,
                metadata={
                    "full_name": request.full_name,
                    "tenant_id": request.tenant_id,
                },
            )
        except AuthProviderRejected as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(e)
            )
        except AuthProviderError as e:
            logger.error(f"Error creating user {request.email}: {str(e)}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to create user"
            )

        logger.info(f"User registered: id={user.id}, tenant_id={request.tenant_id}")
        return RegisterResponse(user=user, message=VERIFICATION_PENDING_MESSAGE)


# Create a singleton instance
registration_service = RegistrationService()
