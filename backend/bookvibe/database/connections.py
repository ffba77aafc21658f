"""
Database connection management for MongoDB.

The application holds a single MongoStore for its whole lifetime. It is built
in the lifespan handler (or passed to ``create_app``) and reaches route
handlers through the ``get_store`` dependency.
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.server_api import ServerApi

from bookvibe.config import Settings

logger = logging.getLogger(__name__)


class MongoStore:
    """Long-lived handle to the Book Vibe MongoDB database."""

    def __init__(self, client: AsyncIOMotorClient, db_name: str):
        self.client = client
        self.db_name = db_name
        self.db: AsyncIOMotorDatabase = client[db_name]

    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoStore":
        """Create a store using the Stable API v1 client options."""
        client = AsyncIOMotorClient(
            settings.resolved_mongo_uri,
            server_api=ServerApi("1", strict=True, deprecation_errors=True),
        )
        return cls(client, settings.db_name)

    async def ping(self) -> dict:
        """Round-trip to the server; raises if MongoDB is unreachable."""
        return await self.client.admin.command("ping")

    def close(self) -> None:
        """Close the underlying client."""
        self.client.close()


def open_store(settings: Settings, client: Optional[AsyncIOMotorClient] = None) -> MongoStore:
    """Open a MongoStore, reusing ``client`` when one is given."""
    if client is not None:
        return MongoStore(client, settings.db_name)
    logger.info(f"Opening MongoDB connection to database '{settings.db_name}'")
    return MongoStore.from_settings(settings)
