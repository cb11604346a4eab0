import logging
from typing import List

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from redirect_app.models.redirect import Redirect
from redirect_app.services.exceptions import Conflict, NotFound, StorageFailure
from redirect_app.services.validator import ALIAS_RULES, URL_RULES, ensure_valid
from redirect_app.storage.strategies import RedirectStorageStrategy

logger = logging.getLogger(__name__)


class RedirectService:
    """
    Redirect store: CRUD over the redirect collection.
    
    The storage strategy is injected, so the service never knows which
    database it talks to. The service owns the lifecycle rules:
    - Payloads are validated before any storage call
    - Duplicate aliases surface as Conflict (the backend's unique
      constraint decides, there is no read-then-write check)
    - Writes that touch zero rows surface as NotFound
    - Any other SQLAlchemy error is wrapped in StorageFailure
    """
    
    def __init__(self, storage: RedirectStorageStrategy):
        """
        Initialize redirect service.
        
        Args:
            storage: Storage strategy the records live in
        """
        self.storage = storage

    async def create(self, alias: str, url: str) -> Redirect:
        """Register a new alias.

        Raises:
            ValidationFailed: alias or url is invalid (alias checked first)
            Conflict: the alias is already registered
            StorageFailure: any other backend error
        """
        ensure_valid("alias", alias, ALIAS_RULES)
        ensure_valid("url", url, URL_RULES)
        
        try:
            redirect = await self.storage.insert(alias, url)
        except IntegrityError:
            logger.warning("Alias '%s' already exists", alias)
            raise Conflict(alias)
        except SQLAlchemyError as e:
            raise self._storage_failure("create", e)
        
        logger.info("Created redirect '%s' -> %s", alias, url)
        return redirect

    async def read_by_alias(self, alias: str) -> Redirect:
        """Get the redirect for alias or raise NotFound"""
        try:
            redirect = await self.storage.get(alias)
        except SQLAlchemyError as e:
            raise self._storage_failure("read", e)
        
        if redirect is None:
            raise NotFound(alias)
        return redirect

    async def read_all(self) -> List[Redirect]:
        """Get every redirect (possibly none)"""
        try:
            return await self.storage.list_all()
        except SQLAlchemyError as e:
            raise self._storage_failure("list", e)

    async def update_url(self, alias: str, url: str) -> Redirect:
        """
        Point an existing alias at a new url.
        
        The alias itself never changes. An unknown alias raises NotFound
        and creates nothing.
        """
        ensure_valid("url", url, URL_RULES)
        
        try:
            affected = await self.storage.update_url(alias, url)
        except SQLAlchemyError as e:
            raise self._storage_failure("update", e)
        
        if affected == 0:
            logger.warning("Update of unknown alias '%s'", alias)
            raise NotFound(alias)
        
        logger.info("Updated redirect '%s' -> %s", alias, url)
        return Redirect(alias=alias, url=url)

    async def delete(self, alias: str) -> None:
        """Permanently remove a redirect or raise NotFound"""
        try:
            affected = await self.storage.delete(alias)
        except SQLAlchemyError as e:
            raise self._storage_failure("delete", e)
        
        if affected == 0:
            logger.warning("Delete of unknown alias '%s'", alias)
            raise NotFound(alias)
        
        logger.info("Deleted redirect '%s'", alias)

    @staticmethod
    def _storage_failure(operation: str, error: SQLAlchemyError) -> StorageFailure:
        logger.error("Storage failure during %s: %s", operation, error)
        return StorageFailure(str(error))
