"""
Book Vibe database configuration.

Structure:
- users: registered users and their roles
- books: catalog records (read-only here)
- upcoming: upcoming releases (read-only here)
- reviews: customer reviews (read-only here)
- carts: cart items, one document per added item
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

logger = logging.getLogger(__name__)


class Collections:
    """Collection names in the Book-vibe database."""
    USERS = "users"
    BOOKS = "books"
    UPCOMING = "upcoming"
    REVIEWS = "reviews"
    CARTS = "carts"

    # Index definitions for each collection.
    # users.email stays non-unique: uniqueness is checked by the register route only.
    INDEXES = {
        "users": [
            {"keys": [("email", 1)]},
        ],
        "carts": [
            {"keys": [("email", 1)]},
        ],
    }


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create indexes backing the email lookups."""
    for collection_name, indexes in Collections.INDEXES.items():
        collection = db[collection_name]
        for index_def in indexes:
            keys = index_def["keys"]
            kwargs = {k: v for k, v in index_def.items() if k != "keys"}
            try:
                await collection.create_index(keys, **kwargs)
            except Exception as e:
                # Index might already exist with different options
                logger.debug(f"Index on {collection_name} exists or error: {e}")
