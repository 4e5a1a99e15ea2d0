"""
Database connection manager for Talent Intake.

Provides MongoDB connection management through the asynchronous Motor client.
"""

from typing import Optional
from urllib.parse import quote_plus

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)
from pymongo.errors import ConnectionFailure, ServerSelectionTimeoutError

from talent_intake.utils.config import DatabaseSettings, get_settings
from talent_intake.utils.constants import (
    CANDIDATES_COLLECTION,
    EDUCATIONS_COLLECTION,
    RESUMES_COLLECTION,
    WORK_EXPERIENCES_COLLECTION,
)
from talent_intake.utils.logger import get_logger

logger = get_logger(__name__)


def build_uri(db_settings: DatabaseSettings) -> str:
    """
    Build MongoDB connection URI from settings.

    Security: URL-encodes credentials to prevent injection attacks.
    """
    host = db_settings.host.strip()
    if not host or any(c in host for c in [";", "&", "|", "$", "`"]):
        raise ValueError(f"Invalid database host: {host}")

    auth = ""
    if db_settings.username and db_settings.password:
        encoded_user = quote_plus(db_settings.username)
        encoded_pass = quote_plus(db_settings.password)
        auth = f"{encoded_user}:{encoded_pass}@"

    return f"mongodb://{auth}{host}:{db_settings.port}"


class DatabaseManager:
    """
    Manages the MongoDB connection.

    Implements singleton pattern for connection reuse.
    """

    _instance: Optional["DatabaseManager"] = None
    _client: Optional[AsyncIOMotorClient] = None

    def __new__(cls) -> "DatabaseManager":
        """Ensure singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        """Initialize database manager with settings."""
        if hasattr(self, "_initialized") and self._initialized:
            return

        self._settings = get_settings().database
        self._db_name = self._settings.name
        self._uri = build_uri(self._settings)
        self._initialized = True

    @property
    def database_name(self) -> str:
        return self._db_name

    # -------------------------------------------------------------------------
    # Client Access
    # -------------------------------------------------------------------------

    def get_client(self) -> AsyncIOMotorClient:
        """Get or create the asynchronous MongoDB client."""
        if self._client is None:
            logger.info("Creating asynchronous MongoDB client")
            self._client = AsyncIOMotorClient(
                self._uri,
                serverSelectionTimeoutMS=self._settings.server_selection_timeout_ms,
                connectTimeoutMS=self._settings.connect_timeout_ms,
                maxPoolSize=self._settings.max_pool_size,
            )
        return self._client

    def get_database(self) -> AsyncIOMotorDatabase:
        """Get database instance."""
        return self.get_client()[self._db_name]

    def get_collection(self, collection_name: str) -> AsyncIOMotorCollection:
        """Get a collection by name."""
        return self.get_database()[collection_name]

    async def check_connection(self) -> bool:
        """Check if the connection is healthy."""
        try:
            await self.get_client().admin.command("ping")
            return True
        except (ConnectionFailure, ServerSelectionTimeoutError) as e:
            logger.error(f"Connection check failed: {e}")
            return False

    # -------------------------------------------------------------------------
    # Lifecycle Management
    # -------------------------------------------------------------------------

    def close(self) -> None:
        """Close the client connection."""
        if self._client:
            logger.info("Closing MongoDB client")
            self._client.close()
            self._client = None

    # -------------------------------------------------------------------------
    # Index Management
    # -------------------------------------------------------------------------

    async def ensure_indexes(self) -> None:
        """Create indexes for all collections."""
        logger.info("Ensuring database indexes")

        candidates = self.get_collection(CANDIDATES_COLLECTION)
        await candidates.create_index("email", unique=True)
        await candidates.create_index("created_at")

        for name in (EDUCATIONS_COLLECTION, WORK_EXPERIENCES_COLLECTION, RESUMES_COLLECTION):
            await self.get_collection(name).create_index("candidate_id")

        logger.info("Database indexes created successfully")


# Global database manager instance
_db_manager: Optional[DatabaseManager] = None


def get_database_manager() -> DatabaseManager:
    """Get the global database manager instance."""
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager()
    return _db_manager
