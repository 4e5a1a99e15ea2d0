"""
Data layer for Talent Intake.

Provides the database connection, the record store boundary and the
entity models that persist through it.

Submodules:
- database: MongoDB connection management
- store: Store client and per-model delegates
- models: Candidate, Education, WorkExperience and Resume entities
"""

from .database import DatabaseManager, get_database_manager
from .store import (
    ModelDelegate,
    MongoModelDelegate,
    MongoStoreClient,
    StoreClient,
    get_store_client,
    set_store_client,
)

__all__ = [
    "DatabaseManager",
    "get_database_manager",
    "ModelDelegate",
    "MongoModelDelegate",
    "MongoStoreClient",
    "StoreClient",
    "get_store_client",
    "set_store_client",
]
