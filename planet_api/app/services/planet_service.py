"""
Service layer for planet lookups.

``PlanetService`` issues a single point query against the planets
collection and maps the outcome onto the error taxonomy in
``core.exceptions``: a missing document raises ``PlanetNotFound`` and
any driver error raises ``StoreFailure``.  The store is injected at
construction time; the service holds no other state.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from bson.errors import BSONError
from pymongo.errors import PyMongoError

from planet_api.app.core.db import PlanetStore
from planet_api.app.core.exceptions import PlanetNotFound, StoreFailure
from planet_api.app.schemas.planet import Planet

logger = logging.getLogger(__name__)


class PlanetService:
    """Look up planets by identifier."""

    def __init__(self, store: PlanetStore) -> None:
        self.store = store

    async def get_planet(self, planet_id: Any) -> Planet:
        """Return the first planet whose ``id`` equals ``planet_id``.

        ``planet_id`` is not validated; it is forwarded to the store
        as-is, so ids outside 0 - 9 and non-numeric ids surface as
        ``PlanetNotFound``.
        """
        try:
            document = await self.store.find_planet(planet_id)
        except (PyMongoError, BSONError, OverflowError) as exc:
            # BSON encoding of the filter fails before anything reaches
            # the server, e.g. for ints wider than 64 bits.
            logger.exception("Error fetching planet data for id=%r", planet_id)
            raise StoreFailure(str(exc)) from exc
        if not document:
            logger.debug("No planet found for id=%r", planet_id)
            raise PlanetNotFound(planet_id)
        return self._document_to_planet(document)

    @staticmethod
    def _document_to_planet(document: Dict[str, Any]) -> Planet:
        """Convert a Mongo document to a ``Planet``.

        Store-internal keys such as ``_id`` and ``__v`` are dropped.
        Fields absent from the document stay unset on the model.
        """
        fields = {key: value for key, value in document.items() if key in Planet.model_fields}
        return Planet(**fields)
