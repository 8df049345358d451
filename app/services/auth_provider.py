"""
Hosted auth provider client.

Credential storage, email verification and sessions live with the provider;
this client only creates accounts through its sign-up endpoint.
"""

import httpx
from typing import Any, Dict, Optional
from app.core.config import settings
from app.core.logging_config import logger
from app.schemas.user import AuthUser


class AuthProviderError(Exception):
    """Provider unreachable, misconfigured, or returned an unusable answer."""


class AuthProviderRejected(AuthProviderError):
    """Provider refused the sign-up (e.g. email already registered, weak password)."""


class AuthProviderClient:
    """Client for the hosted auth provider's sign-up API."""

    SIGNUP_PATH = "/signup"

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None
    ):
        """
        Initialize auth provider client.

        Args:
            base_url: Provider auth API root, e.g. https://<project>.supabase.co/auth/v1
            api_key: Public API key sent as ``apikey``
            timeout: Request timeout in seconds
            transport: httpx transport override (tests use httpx.MockTransport)
        """
        self.base_url = (base_url or settings.AUTH_PROVIDER_URL or "").rstrip("/")
        self.api_key = api_key or settings.AUTH_PROVIDER_API_KEY
        self.timeout = timeout or settings.AUTH_PROVIDER_TIMEOUT
        self.transport = transport
        if not self.base_url:
            logger.warning("AUTH_PROVIDER_URL not set. User registration will fail.")

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["apikey"] = self.api_key
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            return response.text or f"Auth provider returned {response.status_code}"
        for key in ("msg", "error_description", "message", "error"):
            if isinstance(data, dict) and data.get(key):
                return str(data[key])
        return f"Auth provider returned {response.status_code}"

    def sign_up(
        self,
        email: str,
        password: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> AuthUser:
        """
        Create a user account with the provider.

        Args:
            email: User email
            password: Plain text password, never stored here
            metadata: Extra user data kept by the provider (full_name, tenant_id)

        Returns:
            The created user as reported by the provider

        Raises:
            AuthProviderRejected: Provider answered 4xx
            AuthProviderError: Provider unreachable, 5xx, or no user returned
        """
        if not self.base_url:
            raise AuthProviderError("Auth provider is not configured")

        payload = {"email": email, "password": password, "data": metadata or {}}
        url = f"{self.base_url}{self.SIGNUP_PATH}"

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.post(url, json=payload, headers=self._headers())
        except httpx.HTTPError as e:
            logger.error(f"Auth provider request failed: {type(e).__name__}: {str(e)}")
            raise AuthProviderError("Auth provider unreachable") from e

        if 400 <= response.status_code < 500:
            message = self._error_message(response)
            logger.warning(f"Auth provider rejected sign-up for {email}: {message}")
            raise AuthProviderRejected(message)

        if response.status_code >= 500:
            logger.error(f"Auth provider error {response.status_code}: {response.text}")
            raise AuthProviderError(f"Auth provider returned {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise AuthProviderError("Auth provider returned invalid JSON") from e

        # Depending on email confirmation settings the user is either the
        # top-level object or nested under "user"
        user_data = data.get("user") or data if isinstance(data, dict) else {}
        if not user_data.get("id"):
            raise AuthProviderError("Auth provider returned no user")

        return AuthUser.model_validate(user_data)


# Create a singleton instance
auth_provider = AuthProviderClient()


def get_auth_provider() -> AuthProviderClient:
    """FastAPI dependency returning the shared auth provider client."""
    return auth_provider
