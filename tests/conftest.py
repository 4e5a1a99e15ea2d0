"""
Shared test fixtures for the Talent Intake test suite.

Sets environment variables before any package imports to keep logging off
disk, then provides an in-memory store client and sample payloads.
"""

import os

# === Set environment BEFORE any talent_intake imports ===
os.environ.setdefault("APP_ENVIRONMENT", "testing")
os.environ.setdefault("DB_NAME", "talent_intake_test")
os.environ.setdefault("LOG_FILE_OUTPUT", "false")
os.environ.setdefault("LOG_CONSOLE_OUTPUT", "false")

import copy
import itertools
from typing import Any, Optional

import pytest

from talent_intake.data.store import ModelDelegate, StoreClient, set_store_client
from talent_intake.errors import RecordNotFoundError, UniqueConstraintError


# ---------------------------------------------------------------------------
# In-memory store
# ---------------------------------------------------------------------------


class InMemoryDelegate(ModelDelegate):
    """
    Delegate keeping records in a dict and recording every call.

    Set ``result`` to make ``create``/``update`` return a fixed record, or
    ``error`` to make every operation raise it.
    """

    def __init__(
        self,
        store: "InMemoryStore",
        name: str,
        unique_fields: tuple[str, ...] = (),
        relations: Optional[dict[str, str]] = None,
    ) -> None:
        self._store = store
        self.name = name
        self.unique_fields = unique_fields
        self.relations = relations or {}
        self.records: dict[int, dict[str, Any]] = {}
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.result: Optional[dict[str, Any]] = None
        self.error: Optional[BaseException] = None
        self._ids = itertools.count(1)

    def _record_call(self, operation: str, **kwargs: Any) -> None:
        self.calls.append((operation, copy.deepcopy(kwargs)))
        self._store.calls.append((self.name, operation))
        if self.error is not None:
            raise self.error

    def operations(self, operation: str) -> list[dict[str, Any]]:
        return [kwargs for op, kwargs in self.calls if op == operation]

    async def create(self, data: dict[str, Any]) -> dict[str, Any]:
        self._record_call("create", data=data)
        if self.result is not None:
            return self.result

        scalars = {key: value for key, value in data.items() if key not in self.relations}
        for field in self.unique_fields:
            if any(r.get(field) == scalars.get(field) for r in self.records.values()):
                raise UniqueConstraintError(
                    f"Unique constraint failed on the fields: ({field})", fields=(field,)
                )

        record = {"id": next(self._ids), **scalars}
        self.records[record["id"]] = record
        for relation, related_name in self.relations.items():
            for item in data.get(relation, {}).get("create", []):
                await self._store.delegate(related_name).create(
                    {**item, "candidate_id": record["id"]}
                )
        return dict(record)

    async def update(self, where: dict[str, Any], data: dict[str, Any]) -> dict[str, Any]:
        self._record_call("update", where=where, data=data)
        if self.result is not None:
            return self.result
        record = self.records.get(where["id"])
        if record is None:
            raise RecordNotFoundError("Record to update not found.")
        record.update(data)
        return dict(record)

    async def find_unique(self, where: dict[str, Any]) -> Optional[dict[str, Any]]:
        self._record_call("find_unique", where=where)
        record = self.records.get(where["id"])
        return dict(record) if record is not None else None

    async def delete(self, where: dict[str, Any]) -> dict[str, Any]:
        self._record_call("delete", where=where)
        record = self.records.pop(where["id"], None)
        if record is None:
            raise RecordNotFoundError("Record to delete does not exist.")
        return record


class InMemoryStore(StoreClient):
    """Store client whose delegates share one ordered call log."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []
        self.disconnected = False
        self.candidate = InMemoryDelegate(
            self,
            "candidate",
            unique_fields=("email",),
            relations={
                "educations": "education",
                "work_experiences": "work_experience",
                "resumes": "resume",
            },
        )
        self.education = InMemoryDelegate(self, "education")
        self.work_experience = InMemoryDelegate(self, "work_experience")
        self.resume = InMemoryDelegate(self, "resume")

    async def disconnect(self) -> None:
        self.disconnected = True


class CodedError(Exception):
    """Plain exception carrying a store error code, as other drivers raise."""

    def __init__(self, message: str, code: str) -> None:
        super().__init__(message)
        self.code = code


@pytest.fixture
def coded_error():
    return CodedError


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def default_store(store):
    """Install the in-memory store as the process-wide default client."""
    set_store_client(store)
    yield store
    set_store_client(None)


# ---------------------------------------------------------------------------
# Sample payloads
# ---------------------------------------------------------------------------


@pytest.fixture
def minimal_candidate_data():
    return {
        "first_name": "Juan",
        "last_name": "Pérez",
        "email": "juan.perez@email.com",
    }


@pytest.fixture
def complete_candidate_data():
    return {
        "first_name": "Laura",
        "last_name": "Fernández",
        "email": "laura.fernandez@email.com",
        "phone": "654321987",
        "address": "Avenida de la Paz 456, Barcelona",
        "educations": [
            {
                "institution": "Universidad Politécnica",
                "title": "Máster en Desarrollo Web",
                "start_date": "2020-09-01",
                "end_date": "2022-06-30",
            }
        ],
        "work_experiences": [
            {
                "company": "StartupXYZ",
                "position": "Full Stack Developer",
                "description": "Desarrollo de aplicaciones web completas",
                "start_date": "2022-07-01",
                "end_date": "2024-12-31",
            }
        ],
        "cv": {
            "file_path": "/uploads/laura-fernandez-cv.pdf",
            "file_type": "application/pdf",
        },
    }
