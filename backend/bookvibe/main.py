"""
Book Vibe Backend - FastAPI Application

REST backend for the Book Vibe bookstore: catalog, users and roles, carts and reviews.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bookvibe.config import get_settings
from bookvibe.database.collections import create_indexes
from bookvibe.database.connections import MongoStore, open_store
from bookvibe.routers import auth, carts, catalog, health, users

logger = logging.getLogger("bookvibe")


def configure_logging(level: str) -> None:
    """Configure root logging for the server process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Open the MongoDB store unless one was injected
    - Ping the server and create indexes

    Shutdown:
    - Close the store if this lifespan opened it
    """
    logger.info("Starting up Book Vibe backend...")

    owns_store = getattr(app.state, "store", None) is None
    if owns_store:
        app.state.store = open_store(get_settings())
    store: MongoStore = app.state.store

    try:
        await store.ping()
        await create_indexes(store.db)
        logger.info("Connected to MongoDB!")
    except Exception as e:
        logger.warning(f"Database initialization warning: {e}")

    yield

    logger.info("Shutting down Book Vibe backend...")
    if owns_store:
        store.close()
        app.state.store = None
        logger.info("Database connection closed")


def create_app(store: Optional[MongoStore] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        store: Optional already-open MongoStore; when omitted one is opened
            from settings at startup and closed at shutdown

    Returns:
        Configured FastAPI application
    """
    application = FastAPI(
        title="Book Vibe API",
        description="""
## Book Vibe Bookstore API

### Features
- **Catalog**: books, upcoming releases and reviews
- **Users**: self-registration and admin role management
- **Carts**: add items and list them by owner email

### Authentication
Obtain a token via `POST /jwt`, then send it as a header:
```
Authorization: Bearer <token>
```
        """,
        version="0.1.0",
        lifespan=lifespan,
    )
    application.state.store = store

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(health.router)
    application.include_router(auth.router)
    application.include_router(users.router)
    application.include_router(catalog.router)
    application.include_router(carts.router)

    return application


app = create_app()


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(f"Book Vibe is running at http://localhost:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)
