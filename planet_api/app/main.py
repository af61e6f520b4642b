"""
Main entrypoint for the planet API.

This module assembles the FastAPI application, sets up logging,
includes the routers and mounts the static directory.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn planet_api.app.main:app --port 3000

The MongoDB store is created and pinged by the lifespan handler when
the server starts.  If the ping fails the handler raises
``StartupFailure``; uvicorn then aborts startup and the process exits.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.db import PlanetStore
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    store = app.state.store
    if store is None:
        store = PlanetStore.from_settings(app.state.settings)
    await store.connect()
    app.state.store = store
    try:
        yield
    finally:
        await store.close()
        logger.info("MongoDB connection closed")


def create_app(settings: Optional[Settings] = None, store: Optional[PlanetStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the process-wide settings
        read from the environment.
    store : Optional[PlanetStore]
        Pre-built store.  When omitted, one is built from ``settings``
        during startup.  Tests pass a fake store here.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the modules below
    # can log during startup.
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)

    # Mounted last so API routes take precedence; serves the images and
    # other assets referenced by planet documents.
    app.mount("/", StaticFiles(directory=settings.static_dir, check_dir=False), name="static")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
