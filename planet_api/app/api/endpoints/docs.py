"""
API description passthrough.

``GET /api-docs`` returns the contents of ``oas.json`` as parsed JSON.
If the file is missing or corrupt the endpoint answers 500 with a
plain-text message.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, PlainTextResponse

from planet_api.app.api.deps import get_docs_service
from planet_api.app.core.exceptions import DocumentReadFailure
from planet_api.app.services.docs_service import ApiDocsService

router = APIRouter()


@router.get("/api-docs")
async def api_docs(service: ApiDocsService = Depends(get_docs_service)):
    try:
        document = await service.load()
    except DocumentReadFailure as exc:
        return PlainTextResponse(exc.message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return JSONResponse(document)
