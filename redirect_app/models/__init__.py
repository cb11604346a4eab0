"""
Database models for the redirect registry.

There is a single table: redirects, keyed by alias.
"""

from .redirect import Redirect

__all__ = ["Redirect"]
