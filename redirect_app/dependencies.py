"""
FastAPI dependencies for dependency injection.

The redirect service is built per request from a request-scoped
database session and handed to routes explicitly; there is no
process-wide service singleton.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from redirect_app.database.connection import get_db
from redirect_app.services.redirect_service import RedirectService
from redirect_app.storage.strategies import (
    RedirectStorageStrategy,
    SQLAlchemyRedirectStorage,
)


def get_storage(db: Session = Depends(get_db)) -> RedirectStorageStrategy:
    """Get the storage strategy bound to this request's session"""
    return SQLAlchemyRedirectStorage(db)


def get_redirect_service(
    storage: RedirectStorageStrategy = Depends(get_storage)
) -> RedirectService:
    """
    Get RedirectService with its storage injected.
    
    Routes depend on the service only; tests can override get_db
    (real database) or get_storage (fake backend).
    """
    return RedirectService(storage=storage)
