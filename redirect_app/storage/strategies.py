"""
Redirect storage strategies using Strategy Pattern.

The storage strategy is the persistence backend behind RedirectService.
It runs exactly one statement per call and reports raw outcomes
(records, affected row counts, SQLAlchemy errors); classifying those
outcomes into the service's error taxonomy is the service's job.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from redirect_app.models.redirect import Redirect


class RedirectStorageStrategy(ABC):
    """
    Abstract base class for redirect storage backends.
    
    All methods are async because storage involves I/O. Implementations
    must enforce alias uniqueness themselves (no read-then-write) and must
    leave no partial record behind when a write fails.
    """
    
    @abstractmethod
    async def get(self, alias: str) -> Optional[Redirect]:
        """
        Look up a redirect by alias.
        
        Returns:
            The record, or None if no record has this alias
        """
        pass
    
    @abstractmethod
    async def list_all(self) -> List[Redirect]:
        """Return every stored redirect (unordered)"""
        pass
    
    @abstractmethod
    async def insert(self, alias: str, url: str) -> Redirect:
        """
        Persist a new redirect.
        
        Raises:
            sqlalchemy.exc.IntegrityError: if the alias already exists
        """
        pass
    
    @abstractmethod
    async def update_url(self, alias: str, url: str) -> int:
        """
        Replace the url of the redirect with this alias.
        
        Returns:
            Number of affected rows (0 if the alias does not exist)
        """
        pass
    
    @abstractmethod
    async def delete(self, alias: str) -> int:
        """
        Remove the redirect with this alias.
        
        Returns:
            Number of affected rows (0 if the alias does not exist)
        """
        pass


class SQLAlchemyRedirectStorage(RedirectStorageStrategy):
    """
    SQLAlchemy implementation backed by the redirects table.
    
    Works with any database SQLAlchemy supports (SQLite by default).
    Uniqueness comes from the alias primary key, so two racing inserts of
    the same alias cannot both commit. Every write commits on success and
    rolls back on failure, leaving the session usable.
    
    The session is sync, so every call runs in the threadpool and the
    event loop keeps serving other requests while the database works.
    """
    
    def __init__(self, db: Session):
        """
        Initialize storage.
        
        Args:
            db: Database session (one per request)
        """
        self.db = db
    
    async def get(self, alias: str) -> Optional[Redirect]:
        return await run_in_threadpool(self._get, alias)
    
    async def list_all(self) -> List[Redirect]:
        return await run_in_threadpool(self._list_all)
    
    async def insert(self, alias: str, url: str) -> Redirect:
        # Plain INSERT straight to the database: the primary key decides,
        # not the session's identity map.
        await self._write(insert(Redirect).values(alias=alias, url=url))
        return Redirect(alias=alias, url=url)
    
    async def update_url(self, alias: str, url: str) -> int:
        return await self._write(
            update(Redirect).where(Redirect.alias == alias).values(url=url)
        )
    
    async def delete(self, alias: str) -> int:
        return await self._write(
            delete(Redirect).where(Redirect.alias == alias)
        )
    
    async def _write(self, statement) -> int:
        return await run_in_threadpool(self._execute_write, statement)
    
    def _get(self, alias: str) -> Optional[Redirect]:
        return self.db.execute(
            select(Redirect).where(Redirect.alias == alias)
        ).scalar_one_or_none()
    
    def _list_all(self) -> List[Redirect]:
        return list(self.db.execute(select(Redirect)).scalars().all())
    
    def _execute_write(self, statement) -> int:
        """Execute a single keyed write and return its affected row count"""
        try:
            result = self.db.execute(statement)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return result.rowcount
