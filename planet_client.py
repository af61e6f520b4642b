"""Planet API client.

This module defines a small client wrapper around the planet API's
HTTP surface.  It uses the ``requests`` library internally and mirrors
the server's endpoints one method each:

* :meth:`get_planet` – look up a planet by its number.
* :meth:`host_info` – host name and environment label of the server.
* :meth:`live` / :meth:`ready` – the orchestration probes.
* :meth:`api_docs` – the server's API description document.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` and ``error`` is a
dictionary with keys ``status_code`` and ``message``.  The server
reports lookup failures as plain text, so the response body becomes
the message as-is.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class PlanetAPIClient:
    """Client for interacting with the planet API."""

    def __init__(
        self,
        *,
        base_url: str = "http://localhost:3000",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Result:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET`` or ``POST``).
            path: Path relative to :attr:`base_url` (e.g. ``/planet``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = exc.response.text if exc.response is not None else ""
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Planet operations
    # ------------------------------------------------------------------
    def get_planet(self, planet_id: Any) -> Result:
        """Retrieve a planet by number.

        Args:
            planet_id: Planet number, 0 - 9.  Sent to the server unchanged.
        Returns:
            A tuple ``(planet, error)``.  An unknown number yields a 404
            error whose message suggests the valid range.
        """
        return self._request("POST", "/planet", json_body={"id": planet_id})

    # ------------------------------------------------------------------
    # Operational endpoints
    # ------------------------------------------------------------------
    def host_info(self) -> Result:
        return self._request("GET", "/os")

    def live(self) -> Result:
        return self._request("GET", "/live")

    def ready(self) -> Result:
        return self._request("GET", "/ready")

    def api_docs(self) -> Result:
        """Download the API description document served at ``/api-docs``."""
        return self._request("GET", "/api-docs")
