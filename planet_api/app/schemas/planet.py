"""
Pydantic schemas for planet lookups and the operational endpoints.

Planet documents are seeded externally and returned as stored.  Every
field on ``Planet`` is optional so that a sparsely populated document
still round-trips; the endpoint excludes unset fields from the
response instead of emitting ``null`` for them.
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class PlanetLookup(BaseModel):
    """Request body for ``POST /planet``.

    ``id`` is deliberately untyped: the value is forwarded to the
    store without validation, so ``"abc"`` or ``42`` simply match
    nothing.
    """

    id: Any = Field(None, description="Planet identifier, 0 - 9")


class Planet(BaseModel):
    """A planet document as stored in the ``planets`` collection."""

    # Numeric velocity/distance values written by other tools are
    # served as text, matching the collection schema.
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: Optional[str] = Field(None, description="Display name")
    # Seeded ids are integers, but a numeric field in the collection can
    # hold fractions; those are returned as stored rather than rejected.
    id: Optional[Union[int, float]] = Field(None, description="Identifier used as lookup key")
    description: Optional[str] = None
    image: Optional[str] = Field(None, description="Path or URL of an image asset")
    velocity: Optional[str] = Field(None, description="Orbital velocity, stored as text")
    distance: Optional[str] = Field(None, description="Distance from the sun, stored as text")


class HostInfo(BaseModel):
    os: str
    env: Optional[str] = None


class ProbeStatus(BaseModel):
    status: str
