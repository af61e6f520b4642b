"""
Service for the API description document.

The document (``oas.json``) is read from disk on every request and
returned exactly as parsed, so edits to the file are picked up without
a restart.  Reading happens in a worker thread to keep the event loop
free.
"""

from __future__ import annotations

import json
import logging
import math
from typing import Any

from starlette.concurrency import run_in_threadpool

from planet_api.app.core.exceptions import DocumentReadFailure

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON and cannot be rendered back out.
    raise ValueError(f"invalid JSON constant {name}")


def _parse_finite_float(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        raise ValueError(f"number out of range: {text}")
    return value


class ApiDocsService:
    """Load the API description document from ``path``."""

    def __init__(self, path: str) -> None:
        self.path = path

    def _read(self) -> Any:
        with open(self.path, "r", encoding="utf-8") as f:
            return json.load(f, parse_constant=_reject_constant, parse_float=_parse_finite_float)

    async def load(self) -> Any:
        """Return the parsed document.

        Raises ``DocumentReadFailure`` if the file cannot be opened or
        is not valid JSON; nothing partial is ever returned.
        """
        try:
            return await run_in_threadpool(self._read)
        except (OSError, ValueError) as exc:
            logger.error("Error reading file %s: %s", self.path, exc)
            raise DocumentReadFailure(str(exc)) from exc
