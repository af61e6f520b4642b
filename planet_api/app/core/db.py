"""
MongoDB integration.

This module provides ``PlanetStore``, a thin wrapper around
``pymongo``'s asyncio client.  One store is created when the
application starts (see ``main.lifespan``), verified with a ``ping``
and attached to ``app.state``; route handlers receive it through the
``get_store`` dependency in ``api.deps`` rather than importing a
module-level connection.

The store is read-only from the service's point of view.  Planet
documents are seeded externally (see ``seed_planets.py``).
"""

import logging
from typing import Any, Dict, Optional

from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from .config import Settings
from .exceptions import StartupFailure

logger = logging.getLogger(__name__)

DEFAULT_DATABASE = "solar-system"


def create_client(settings: Settings) -> AsyncMongoClient:
    """Build an async Mongo client from ``settings``.

    Credentials are only passed to the driver when configured so that
    a URI carrying its own credentials keeps working.
    """
    options: Dict[str, Any] = {"serverSelectionTimeoutMS": settings.mongo_timeout_ms}
    if settings.mongo_username:
        options["username"] = settings.mongo_username
    if settings.mongo_password:
        options["password"] = settings.mongo_password
    return AsyncMongoClient(settings.mongo_uri, **options)


class PlanetStore:
    """Read access to the planets collection."""

    def __init__(self, client: Any, database: str, collection: str = "planets") -> None:
        self.client = client
        self.database = client[database]
        self.collection = self.database[collection]

    @classmethod
    def from_settings(cls, settings: Settings) -> "PlanetStore":
        client = create_client(settings)
        database = settings.mongo_database
        if not database:
            database = client.get_default_database(default=DEFAULT_DATABASE).name
        return cls(client, database, settings.mongo_collection)

    async def connect(self) -> None:
        """Verify the server is reachable.

        Raises
        ------
        StartupFailure
            If the ``ping`` command fails for any reason.
        """
        try:
            await self.database.command("ping")
        except PyMongoError as exc:
            logger.error("MongoDB connection error: %s", exc)
            raise StartupFailure(f"MongoDB connection error: {exc}") from exc
        logger.info("MongoDB connection successful (database=%s)", self.database.name)

    async def find_planet(self, planet_id: Any) -> Optional[Dict[str, Any]]:
        """Return the first document whose ``id`` equals ``planet_id``.

        The identifier is passed to the query unchanged.  Driver errors
        propagate to the caller.
        """
        return await self.collection.find_one({"id": planet_id})

    async def close(self) -> None:
        await self.client.close()
