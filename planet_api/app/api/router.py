"""
Top-level router.

Aggregates the endpoint routers.  Paths are served from the root
(``/planet``, ``/live`` ...) without a version prefix because existing
clients and orchestration probes call them there.
"""

from fastapi import APIRouter

from .endpoints import docs, pages, planets, system

router = APIRouter()

router.include_router(pages.router, tags=["pages"])
router.include_router(planets.router, tags=["planets"])
router.include_router(docs.router, tags=["docs"])
router.include_router(system.router, tags=["system"])
