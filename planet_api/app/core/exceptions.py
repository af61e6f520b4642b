"""
Error taxonomy for the planet API.

Services raise these exceptions; the endpoint layer converts them into
fixed plain-text HTTP responses.  ``StartupFailure`` is the only one
that is fatal to the process.
"""


class PlanetAPIError(Exception):
    """Base class for all errors raised by the service."""


class PlanetNotFound(PlanetAPIError):
    """No planet document matches the requested identifier."""

    message = "Ooops, we only have 9 planets and a sun. Select a number from 0 - 9"

    def __init__(self, planet_id=None):
        super().__init__(self.message)
        self.planet_id = planet_id


class StoreFailure(PlanetAPIError):
    """The document store could not be queried."""

    message = "Error fetching planet data"


class DocumentReadFailure(PlanetAPIError):
    """The API description document is missing or is not valid JSON."""

    message = "Error reading file"


class StartupFailure(PlanetAPIError):
    """The document store was unreachable while the process was starting."""
