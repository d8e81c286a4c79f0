from __future__ import annotations

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import PlainTextResponse, Response

from alphacut.api import routes_transparency
from alphacut.core.config import get_settings
from alphacut.core.logging import get_logger
from alphacut.domain.pixels import InvalidBufferError
from alphacut.services.codec import ImageDecodeError

logger = get_logger()
settings = get_settings()
logger.setLevel(settings.log_level.upper())

app = FastAPI(title="Alphacut")
app.include_router(routes_transparency.router)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.exception_handler(ImageDecodeError)
async def decode_error_handler(request: Request, exc: ImageDecodeError) -> PlainTextResponse:
    logger.warning("Rejected image at path %s: %s", request.url.path, str(exc))
    return PlainTextResponse("Could not read the uploaded image.", status_code=400)


@app.exception_handler(InvalidBufferError)
async def invalid_buffer_handler(request: Request, exc: InvalidBufferError) -> PlainTextResponse:
    logger.warning("Invalid pixel buffer at path %s: %s", request.url.path, str(exc))
    return PlainTextResponse("Decoded image is not a valid RGBA buffer.", status_code=400)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> Response:
    detail = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return PlainTextResponse(detail, status_code=exc.status_code)
