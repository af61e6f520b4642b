"""
Operational endpoints: host information and orchestration probes.

``/live`` and ``/ready`` return fixed bodies and never touch the store.
"""

import socket

from fastapi import APIRouter, Depends

from planet_api.app.api.deps import get_settings
from planet_api.app.core.config import Settings
from planet_api.app.schemas.planet import HostInfo, ProbeStatus

router = APIRouter()


@router.get("/os", response_model=HostInfo)
async def host_info(settings: Settings = Depends(get_settings)) -> HostInfo:
    """Report the host name and the configured environment label."""
    return HostInfo(os=socket.gethostname(), env=settings.environment)


@router.get("/live", response_model=ProbeStatus)
async def live() -> ProbeStatus:
    return ProbeStatus(status="live")


@router.get("/ready", response_model=ProbeStatus)
async def ready() -> ProbeStatus:
    # TODO: answer 503 when a ping against the store fails.
    return ProbeStatus(status="ready")
