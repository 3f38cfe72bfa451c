"""Base MongoDB repository with reusable patterns.

Provides common functionality for all MongoDB repositories:
- Connection management
- Document mapping (domain <-> MongoDB)
- Error handling (driver errors surface as PersistenceError)
- Participation in the transaction opened by MongoTransactionManager

All concrete MongoDB repositories should inherit from MongoBaseRepository.
"""

from abc import ABC, abstractmethod
from contextvars import ContextVar
from datetime import date
from typing import TypeVar, Generic, NoReturn, Optional, Dict, Any, List, Tuple
import logging
from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorClientSession,
    AsyncIOMotorCollection,
)

from domain.shared.exceptions import PersistenceError
from infrastructure.config import get_mongodb_uri, get_mongodb_database


# Type variables for generics
TEntity = TypeVar("TEntity")  # Domain entity type

logger = logging.getLogger(__name__)

# Session of the transaction currently open in this task, if any
current_session: ContextVar[Optional[AsyncIOMotorClientSession]] = ContextVar(
    "current_mongo_session", default=None
)


def create_client() -> AsyncIOMotorClient[Dict[str, Any]]:
    """Create a motor client from MONGODB_URI.

    Raises:
        ValueError: If MONGODB_URI is not configured
    """
    uri = get_mongodb_uri()
    if not uri:
        raise ValueError(
            "MONGODB_URI not configured. "
            "Set MONGODB_URI, MONGODB_USER, "
            "and MONGODB_PASSWORD environment variables."
        )
    return AsyncIOMotorClient(uri)


class MongoBaseRepository(ABC, Generic[TEntity]):
    """
    Abstract base class for MongoDB repositories.

    Subclasses must implement:
    - collection_name: Name of MongoDB collection
    - to_document(): Convert domain entity to MongoDB document
    - from_document(): Convert MongoDB document to domain entity

    Example:
        class MongoAccountRepository(MongoBaseRepository[Account]):
            @property
            def collection_name(self) -> str:
                return "accounts"

            def to_document(self, account: Account) -> Dict[str, Any]:
                ...

            def from_document(self, doc: Dict[str, Any]) -> Account:
                ...
    """

    def __init__(self, client: Optional[AsyncIOMotorClient[Dict[str, Any]]] = None):
        """
        Initialize repository with optional client.

        Args:
            client: Motor client (if None, creates new one from config)
        """
        self._client = client if client is not None else create_client()

        database_name = get_mongodb_database()
        self._db = self._client[database_name]
        self._collection = self._db[self.collection_name]

        logger.info(
            f"Initialized {self.__class__.__name__} " f"for collection '{self.collection_name}'"
        )

    @property
    @abstractmethod
    def collection_name(self) -> str:
        """MongoDB collection name."""
        pass

    @abstractmethod
    def to_document(self, entity: TEntity) -> Dict[str, Any]:
        """Convert domain entity to MongoDB document."""
        pass

    @abstractmethod
    def from_document(self, doc: Dict[str, Any]) -> TEntity:
        """
        Convert MongoDB document to domain entity.

        Raises:
            ValueError: If document is invalid or missing required fields
        """
        pass

    @property
    def collection(self) -> AsyncIOMotorCollection[Dict[str, Any]]:
        """Get MongoDB collection handle."""
        return self._collection

    @staticmethod
    def date_to_str(value: Optional[date]) -> Optional[str]:
        return value.isoformat() if value else None

    @staticmethod
    def str_to_date(value: Optional[str]) -> Optional[date]:
        return date.fromisoformat(value) if value else None

    def _fail(self, operation: str, filter_dict: Dict[str, Any], error: Exception) -> NoReturn:
        logger.error(
            f"Error in {operation}: collection={self.collection_name}, "
            f"filter={filter_dict}, error={error}"
        )
        raise PersistenceError(f"{self.collection_name}.{operation}", str(error)) from error

    async def _find_one(self, filter_dict: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Find single document.

        Returns:
            Document dict or None if not found

        Raises:
            PersistenceError: If MongoDB operation fails
        """
        try:
            return await self._collection.find_one(filter_dict, session=current_session.get())
        except Exception as e:
            self._fail("find_one", filter_dict, e)

    async def _find_many(
        self,
        filter_dict: Dict[str, Any],
        sort: Optional[List[Tuple[str, int]]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Find multiple documents.

        Args:
            filter_dict: MongoDB filter
            sort: Sort specification [(field, direction), ...]

        Raises:
            PersistenceError: If MongoDB operation fails
        """
        try:
            cursor = self._collection.find(filter_dict, session=current_session.get())
            if sort:
                cursor = cursor.sort(sort)
            return await cursor.to_list(length=None)
        except Exception as e:
            self._fail("find_many", filter_dict, e)

    async def _insert_one(self, document: Dict[str, Any]) -> None:
        try:
            await self._collection.insert_one(document, session=current_session.get())
        except Exception as e:
            self._fail("insert_one", {"_id": document.get("_id")}, e)

    async def _replace_one(self, filter_dict: Dict[str, Any], document: Dict[str, Any]) -> None:
        """Upsert a whole document."""
        try:
            await self._collection.replace_one(
                filter_dict, document, upsert=True, session=current_session.get()
            )
        except Exception as e:
            self._fail("replace_one", filter_dict, e)

    async def _update_one(
        self,
        filter_dict: Dict[str, Any],
        update_dict: Dict[str, Any],
    ) -> int:
        """
        Update single document.

        Returns:
            Number of documents matched (0 or 1)

        Raises:
            PersistenceError: If MongoDB operation fails
        """
        try:
            result = await self._collection.update_one(
                filter_dict, update_dict, session=current_session.get()
            )
            return result.matched_count
        except Exception as e:
            self._fail("update_one", filter_dict, e)

    async def _delete_one(self, filter_dict: Dict[str, Any]) -> int:
        """
        Delete single document.

        Returns:
            Number of documents deleted (0 or 1)
        """
        try:
            result = await self._collection.delete_one(filter_dict, session=current_session.get())
            return result.deleted_count
        except Exception as e:
            self._fail("delete_one", filter_dict, e)

    async def _delete_many(self, filter_dict: Dict[str, Any]) -> int:
        """
        Delete matching documents.

        Returns:
            Number of documents deleted
        """
        try:
            result = await self._collection.delete_many(filter_dict, session=current_session.get())
            return result.deleted_count
        except Exception as e:
            self._fail("delete_many", filter_dict, e)

    async def close(self) -> None:
        """Close MongoDB connection."""
        self._client.close()
        logger.info(f"Closed connection for {self.__class__.__name__}")
