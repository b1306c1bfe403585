"""JSON:API error handling for decode failures."""

import logging

from fastapi import FastAPI, Request
from starlette.responses import JSONResponse

from jsonapi_related.core.errors import DocumentDecodeError

logger = logging.getLogger(__name__)

JSONAPI_MEDIA_TYPE = "application/vnd.api+json"


async def decode_error_handler(request: Request, exc: DocumentDecodeError) -> JSONResponse:
    """Serialize every accumulated decode error into a 422 error document."""
    logger.info(
        "Rejected %s %s: %d decode error(s)",
        request.method,
        request.url.path,
        len(exc.errors),
    )
    return JSONResponse(
        exc.to_document(),
        status_code=422,
        media_type=JSONAPI_MEDIA_TYPE,
    )


def install_error_handlers(app: FastAPI) -> None:
    """Register the decode error handler on ``app``."""
    app.add_exception_handler(DocumentDecodeError, decode_error_handler)
