"""
Database module - MongoDB connection and collection definitions.
"""
from bookvibe.database.connections import MongoStore, open_store
from bookvibe.database.collections import Collections, create_indexes

__all__ = [
    "MongoStore",
    "open_store",
    "Collections",
    "create_indexes",
]
