"""Shared plumbing for motor-backed repositories.

Subclasses name their collection and map entities to documents. Driver
calls go through the ``_find_one`` / ``_upsert`` / ``_delete_one``
helpers, which log failures with the collection and filter and re-raise.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Awaitable, Dict, Generic, Optional, TypeVar
from uuid import UUID

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection

from infrastructure.config import get_mongodb_database, get_mongodb_uri

TEntity = TypeVar("TEntity")
TResult = TypeVar("TResult")

Document = Dict[str, Any]

logger = logging.getLogger(__name__)


class MongoBaseRepository(ABC, Generic[TEntity]):
    """Base class for one-collection MongoDB repositories."""

    def __init__(self, client: Optional[AsyncIOMotorClient[Document]] = None):
        """
        Args:
            client: Motor client to reuse. When omitted a client is built
                from MONGODB_URI.

        Raises:
            ValueError: If no client is given and MONGODB_URI is not set
        """
        if client is None:
            uri = get_mongodb_uri()
            if not uri:
                raise ValueError(
                    "MONGODB_URI not configured. Set MONGODB_URI (with optional "
                    "${MONGODB_USER}/${MONGODB_PASSWORD} placeholders)."
                )
            client = AsyncIOMotorClient(uri)

        self._client: AsyncIOMotorClient[Document] = client
        self._collection: AsyncIOMotorCollection[Document] = client[get_mongodb_database()][
            self.collection_name
        ]

        logger.info(
            "Mongo repository ready",
            extra={"repository": type(self).__name__, "collection": self.collection_name},
        )

    @property
    @abstractmethod
    def collection_name(self) -> str:
        """Name of the backing collection."""

    @abstractmethod
    def to_document(self, entity: TEntity) -> Document:
        """Serialize an entity; the result must carry ``_id``."""

    @abstractmethod
    def from_document(self, doc: Document) -> TEntity:
        """Rebuild an entity from a stored document."""

    # Field converters

    @staticmethod
    def uuid_to_str(value: UUID) -> str:
        return str(value)

    @staticmethod
    def str_to_uuid(value: str) -> UUID:
        return UUID(value)

    @staticmethod
    def datetime_to_iso(dt: datetime) -> str:
        """Raises ValueError for naive datetimes."""
        if dt.tzinfo is None:
            raise ValueError("Datetime must be timezone-aware")
        return dt.isoformat()

    @staticmethod
    def iso_to_datetime(value: str) -> datetime:
        dt = datetime.fromisoformat(value)
        return dt if dt.tzinfo is not None else dt.replace(tzinfo=timezone.utc)

    # Driver calls

    async def _guarded(
        self, operation: str, filter_dict: Document, call: Awaitable[TResult]
    ) -> TResult:
        try:
            return await call
        except Exception:
            logger.exception(
                "Mongo operation failed",
                extra={
                    "operation": operation,
                    "collection": self.collection_name,
                    "filter": filter_dict,
                },
            )
            raise

    async def _find_one(
        self, filter_dict: Document, projection: Optional[Dict[str, int]] = None
    ) -> Optional[Document]:
        return await self._guarded(
            "find_one", filter_dict, self._collection.find_one(filter_dict, projection)
        )

    async def _upsert(self, document: Document) -> None:
        filter_dict = {"_id": document["_id"]}
        await self._guarded(
            "update_one",
            filter_dict,
            self._collection.update_one(filter_dict, {"$set": document}, upsert=True),
        )

    async def _delete_one(self, filter_dict: Document) -> int:
        result = await self._guarded(
            "delete_one", filter_dict, self._collection.delete_one(filter_dict)
        )
        return int(result.deleted_count)

    async def close(self) -> None:
        self._client.close()
        logger.info("Mongo client closed", extra={"repository": type(self).__name__})
