"""
Fitness API — MongoDB Client Management
=========================================

What:  Async MongoDB client construction, database resolution, and the
       FastAPI dependency that hands the database to route handlers.
How:   The application lifespan builds one AsyncMongoClient at startup,
       stores the client and its database on `app.state`, and closes the
       client at shutdown. Nothing in this module holds a global connection.
Who:   Used by main.py (lifecycle) and by route handlers via Depends(get_db).

Connection Pooling:
    The driver owns the pool (default maxPoolSize=100) and reconnects on its
    own. Operations wait up to `db_server_selection_timeout_ms` for a usable
    server before raising ServerSelectionTimeoutError.
"""

from typing import Optional

from fastapi import Request
from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

from fitness_api.config import settings
from fitness_api.exceptions import DatabaseError


def create_client(
    url: Optional[str] = None,
    server_selection_timeout_ms: Optional[int] = None,
) -> AsyncMongoClient:
    """
    Build an AsyncMongoClient without touching the network.

    Raises:
        pymongo.errors.ConfigurationError: The connection string is malformed.
    """
    return AsyncMongoClient(
        url or settings.database_url,
        serverSelectionTimeoutMS=(
            server_selection_timeout_ms or settings.db_server_selection_timeout_ms
        ),
        appname="fitness-api",
    )


def get_default_database(client: AsyncMongoClient) -> AsyncDatabase:
    """The database named in the connection string, else `settings.database_name`."""
    return client.get_default_database(default=settings.database_name)


async def ping(database: AsyncDatabase) -> None:
    """Round-trip to the server; raises a PyMongoError if it cannot be reached."""
    await database.command("ping")


async def close_client(client: AsyncMongoClient) -> None:
    """Closes all pooled connections."""
    await client.close()


# ── Request Dependency ────────────────────────────────────────────────────
def get_db(request: Request) -> AsyncDatabase:
    """
    FastAPI dependency returning the database handle created at startup.

    Example usage in a route:
        @router.get("/blogs")
        async def list_blogs(db: AsyncDatabase = Depends(get_db)):
            return await blog_service.list_blogs(db)

    Raises:
        DatabaseError: The lifespan could not create a client (bad URL).
    """
    database = getattr(request.app.state, "database", None)
    if database is None:
        raise DatabaseError(message="Database connection is not available")
    return database
