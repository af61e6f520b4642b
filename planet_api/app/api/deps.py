"""
FastAPI dependencies shared by the endpoint modules.

Settings and the store live on ``app.state`` (populated by
``create_app`` and the lifespan handler).  Tests pass a fake store to
``create_app`` so no MongoDB is needed.
"""

from fastapi import Depends, Request

from planet_api.app.core.config import Settings
from planet_api.app.core.db import PlanetStore
from planet_api.app.services.docs_service import ApiDocsService
from planet_api.app.services.planet_service import PlanetService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> PlanetStore:
    return request.app.state.store


def get_planet_service(store: PlanetStore = Depends(get_store)) -> PlanetService:
    return PlanetService(store)


def get_docs_service(settings: Settings = Depends(get_settings)) -> ApiDocsService:
    return ApiDocsService(settings.api_docs_path)
