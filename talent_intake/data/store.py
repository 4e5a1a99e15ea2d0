"""
Record store boundary for Talent Intake.

Entities persist themselves through a store client exposing one delegate
per model. Every delegate offers the same four operations (create, update,
find_unique, delete) and returns plain dict records keyed by ``id``.

The default client keeps each model in its own MongoDB collection with
integer auto-increment ids, and maps driver failures onto the store error
hierarchy in ``talent_intake.errors``.
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Iterator, Optional

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument
from pymongo.errors import (
    ConnectionFailure,
    DuplicateKeyError,
    PyMongoError,
    ServerSelectionTimeoutError,
)

from talent_intake.data.database import DatabaseManager, get_database_manager
from talent_intake.errors import (
    RecordNotFoundError,
    StoreError,
    StoreInitializationError,
    UniqueConstraintError,
)
from talent_intake.utils.constants import (
    CANDIDATES_COLLECTION,
    COUNTERS_COLLECTION,
    EDUCATIONS_COLLECTION,
    RESUMES_COLLECTION,
    WORK_EXPERIENCES_COLLECTION,
)
from talent_intake.utils.logger import get_logger

logger = get_logger(__name__)

Record = dict[str, Any]


class ModelDelegate(ABC):
    """Operations the store offers for a single model."""

    @abstractmethod
    async def create(self, data: dict[str, Any]) -> Record:
        """Insert a record, including nested ``{"create": [...]}`` relation blocks."""

    @abstractmethod
    async def update(self, where: dict[str, Any], data: dict[str, Any]) -> Record:
        """Update the record matching ``where``; RecordNotFoundError if none."""

    @abstractmethod
    async def find_unique(self, where: dict[str, Any]) -> Optional[Record]:
        """Return the record matching ``where`` or None."""

    @abstractmethod
    async def delete(self, where: dict[str, Any]) -> Record:
        """Delete the record matching ``where``; RecordNotFoundError if none."""


class StoreClient(ABC):
    """A store client with one delegate per model."""

    candidate: ModelDelegate
    education: ModelDelegate
    work_experience: ModelDelegate
    resume: ModelDelegate

    def delegate(self, model_name: str) -> ModelDelegate:
        """Look up a delegate by model name (e.g. ``"work_experience"``)."""
        try:
            return getattr(self, model_name)
        except AttributeError:
            raise KeyError(f"Unknown model: {model_name}") from None

    @abstractmethod
    async def disconnect(self) -> None:
        """Release the underlying connection."""


# -----------------------------------------------------------------------------
# MongoDB implementation
# -----------------------------------------------------------------------------


@contextmanager
def translate_driver_errors() -> Iterator[None]:
    """Re-raise PyMongo errors as store errors."""
    try:
        yield
    except DuplicateKeyError as e:
        key_pattern = (e.details or {}).get("keyPattern") or {}
        fields = tuple(key_pattern)
        raise UniqueConstraintError(
            f"Unique constraint failed on the fields: ({', '.join(fields)})",
            fields=fields,
        ) from e
    except (ConnectionFailure, ServerSelectionTimeoutError) as e:
        raise StoreInitializationError(str(e)) from e
    except PyMongoError as e:
        raise StoreError(str(e)) from e


class MongoModelDelegate(ModelDelegate):
    """
    Model delegate backed by one MongoDB collection.

    Records are stored with an integer ``_id`` drawn from the counters
    collection and returned with that value under ``id``.
    """

    def __init__(
        self,
        client: "MongoStoreClient",
        collection_name: str,
        relations: Optional[dict[str, str]] = None,
        foreign_key: Optional[str] = None,
    ) -> None:
        """
        Args:
            client: Owning store client, used to reach related delegates
            collection_name: Collection holding this model's records
            relations: Nested relation key -> related model name
            foreign_key: Field set on related records to this record's id
        """
        self._client = client
        self.collection_name = collection_name
        self._relations = relations or {}
        self._foreign_key = foreign_key

    def _collection(self) -> AsyncIOMotorCollection:
        return self._client.manager.get_collection(self.collection_name)

    @staticmethod
    def _to_query(where: dict[str, Any]) -> dict[str, Any]:
        return {("_id" if key == "id" else key): value for key, value in where.items()}

    @staticmethod
    def _to_record(document: dict[str, Any]) -> Record:
        record = dict(document)
        record_id = record.pop("_id")
        return {"id": record_id, **record}

    async def _next_id(self) -> int:
        counters = self._client.manager.get_collection(COUNTERS_COLLECTION)
        counter = await counters.find_one_and_update(
            {"_id": self.collection_name},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return counter["seq"]

    async def create(self, data: dict[str, Any]) -> Record:
        data = dict(data)
        nested = {key: data.pop(key) for key in list(data) if key in self._relations}

        with translate_driver_errors():
            record_id = await self._next_id()
            now = datetime.utcnow()
            document = {"_id": record_id, **data, "created_at": now, "updated_at": now}
            await self._collection().insert_one(document)
            logger.debug(f"Created {self.collection_name} record: {record_id}")

        # Related rows go in after the parent so they can reference its id
        for relation, block in nested.items():
            related = self._client.delegate(self._relations[relation])
            for item in block.get("create", []):
                await related.create({**item, self._foreign_key: record_id})

        return self._to_record(document)

    async def update(self, where: dict[str, Any], data: dict[str, Any]) -> Record:
        changes = {**data, "updated_at": datetime.utcnow()}
        with translate_driver_errors():
            document = await self._collection().find_one_and_update(
                self._to_query(where),
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        if document is None:
            raise RecordNotFoundError("Record to update not found.")
        logger.debug(f"Updated {self.collection_name} record: {document['_id']}")
        return self._to_record(document)

    async def find_unique(self, where: dict[str, Any]) -> Optional[Record]:
        with translate_driver_errors():
            document = await self._collection().find_one(self._to_query(where))
        if document is None:
            return None
        return self._to_record(document)

    async def delete(self, where: dict[str, Any]) -> Record:
        with translate_driver_errors():
            document = await self._collection().find_one_and_delete(self._to_query(where))
        if document is None:
            raise RecordNotFoundError("Record to delete does not exist.")
        logger.debug(f"Deleted {self.collection_name} record: {document['_id']}")
        return self._to_record(document)


class MongoStoreClient(StoreClient):
    """Store client keeping candidates and their child records in MongoDB."""

    def __init__(self, manager: Optional[DatabaseManager] = None) -> None:
        self.manager = manager or get_database_manager()
        self.candidate = MongoModelDelegate(
            self,
            CANDIDATES_COLLECTION,
            relations={
                "educations": "education",
                "work_experiences": "work_experience",
                "resumes": "resume",
            },
            foreign_key="candidate_id",
        )
        self.education = MongoModelDelegate(self, EDUCATIONS_COLLECTION)
        self.work_experience = MongoModelDelegate(self, WORK_EXPERIENCES_COLLECTION)
        self.resume = MongoModelDelegate(self, RESUMES_COLLECTION)

    async def disconnect(self) -> None:
        self.manager.close()


# Singleton instance
_store_client: Optional[StoreClient] = None


def get_store_client() -> StoreClient:
    """Get the default store client instance."""
    global _store_client
    if _store_client is None:
        _store_client = MongoStoreClient()
    return _store_client


def set_store_client(client: Optional[StoreClient]) -> None:
    """Replace the default store client (None resets to MongoDB on next use)."""
    global _store_client
    _store_client = client
