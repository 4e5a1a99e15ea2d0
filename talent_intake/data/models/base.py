"""
Base entity class for Talent Intake data models.

An entity wraps the plain data of one store record and persists itself
with a single store call: ``create`` when it has no identity, ``update``
keyed on its identity otherwise.
"""

from typing import Any, ClassVar, Optional, Union

from pydantic import BaseModel, ConfigDict

from talent_intake.data.store import ModelDelegate, StoreClient, get_store_client
from talent_intake.errors import RecordNotFoundError, error_code
from talent_intake.utils.constants import RECORD_NOT_FOUND_CODE
from talent_intake.utils.logger import get_logger

logger = get_logger(__name__)

RecordId = Union[int, str]


class Entity(BaseModel):
    """
    Base model for persisted entities.

    Subclasses name the store delegate they write through and the message
    reported when an update targets a missing record.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )

    # Delegate attribute on the store client (e.g. "candidate")
    store_model: ClassVar[str]
    not_found_message: ClassVar[str]
    # Fields that are relations, never part of the scalar payload
    relation_fields: ClassVar[frozenset[str]] = frozenset()

    id: Optional[RecordId] = None

    @property
    def is_new(self) -> bool:
        return not self.id

    def scalar_payload(self) -> dict[str, Any]:
        """Own scalar fields that hold a value, without the identity."""
        return self.model_dump(exclude={"id", *self.relation_fields}, exclude_none=True)

    def nested_payload(self) -> dict[str, Any]:
        """Payload used inside a parent's nested create block."""
        return self.model_dump(
            exclude={"id", "candidate_id", *self.relation_fields}, exclude_none=True
        )

    def create_payload(self) -> dict[str, Any]:
        return self.scalar_payload()

    def update_payload(self) -> dict[str, Any]:
        """Only fields the caller set; defaults such as timestamps are left alone."""
        return self.model_dump(
            exclude={"id", *self.relation_fields}, exclude_unset=True, exclude_none=True
        )

    @classmethod
    def _delegate(cls, client: Optional[StoreClient]) -> ModelDelegate:
        return (client or get_store_client()).delegate(cls.store_model)

    async def save(self, client: Optional[StoreClient] = None) -> dict[str, Any]:
        """
        Persist the entity.

        Args:
            client: Store client to write through; the default client when omitted

        Returns:
            The record returned by the store

        Raises:
            RecordNotFoundError: When updating an id the store does not know
        """
        delegate = self._delegate(client)

        if self.is_new:
            logger.debug(f"Creating {self.store_model} record")
            return await delegate.create(data=self.create_payload())

        logger.debug(f"Updating {self.store_model} record {self.id}")
        try:
            return await delegate.update(where={"id": self.id}, data=self.update_payload())
        except Exception as e:
            if error_code(e) == RECORD_NOT_FOUND_CODE:
                raise RecordNotFoundError(self.not_found_message) from e
            raise
