"""
Redirect storage module.

This module implements the Strategy Pattern for the persistence backend
behind RedirectService.
"""

from .strategies import RedirectStorageStrategy, SQLAlchemyRedirectStorage

__all__ = [
    "RedirectStorageStrategy",
    "SQLAlchemyRedirectStorage",
]
