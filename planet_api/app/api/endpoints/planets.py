"""
Planet lookup endpoint.

``POST /planet`` takes ``{"id": <number>}`` and returns the matching
planet document.  Failures are reported as plain text: 404 with a hint
about the valid range when nothing matches, 500 when the store query
fails.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from planet_api.app.api.deps import get_planet_service
from planet_api.app.core.exceptions import PlanetNotFound, StoreFailure
from planet_api.app.schemas.planet import Planet, PlanetLookup
from planet_api.app.services.planet_service import PlanetService

router = APIRouter()


@router.post(
    "/planet",
    response_model=Planet,
    response_model_exclude_unset=True,
    responses={
        404: {"content": {"text/plain": {}}, "description": "No planet with this id"},
        500: {"content": {"text/plain": {}}, "description": "Store query failed"},
    },
)
async def get_planet(
    lookup: Optional[PlanetLookup] = None,
    service: PlanetService = Depends(get_planet_service),
):
    """Return the planet whose ``id`` matches the request body."""
    planet_id = lookup.id if lookup is not None else None
    try:
        return await service.get_planet(planet_id)
    except PlanetNotFound as exc:
        return PlainTextResponse(exc.message, status_code=status.HTTP_404_NOT_FOUND)
    except StoreFailure as exc:
        return PlainTextResponse(exc.message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
