"""
Subdomain to tenant resolution.

One point lookup per call, no cache, no retry. A missing tenant and a
datastore failure both come back as None; only the logs tell them apart.
"""

from typing import Callable, Optional
from sqlalchemy.orm import Session
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from app.crud import tenant as tenant_crud
from app.database import SessionLocal
from app.schemas.tenant import TenantResponse
from app.core.logging_config import logger


class TenantResolver:
    """Resolve a subdomain to a detached tenant record."""

    def __init__(self, session_factory: Callable[[], Session] = SessionLocal):
        """
        Args:
            session_factory: Callable returning a new Session per lookup
        """
        self.session_factory = session_factory

    def resolve(self, subdomain: Optional[str]) -> Optional[TenantResponse]:
        """
        Look up the tenant owning a subdomain.

        Args:
            subdomain: Subdomain as extracted from the Host header, matched verbatim

        Returns:
            TenantResponse, or None when there is no such tenant or the
            lookup failed
        """
        if not subdomain:
            return None

        db = self.session_factory()
        try:
            tenant = tenant_crud.get_by_subdomain(db, subdomain)
            if tenant is None:
                logger.info(f"No tenant for subdomain={subdomain}")
                return None
            return TenantResponse.model_validate(tenant)
        except (SQLAlchemyError, ValidationError) as e:
            logger.error(f"Error resolving tenant for subdomain={subdomain}: {type(e).__name__}: {str(e)}")
            return None
        finally:
            db.close()


# Create a singleton instance
tenant_resolver = TenantResolver()
