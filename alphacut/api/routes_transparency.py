from __future__ import annotations

from fastapi import APIRouter, File, Form, HTTPException, UploadFile
from fastapi.responses import Response
from starlette.concurrency import run_in_threadpool

from alphacut.core.config import get_settings
from alphacut.core.logging import get_logger
from alphacut.domain.enums import SegmentationMode
from alphacut.services.analysis import analyze_image
from alphacut.services.transparency import make_transparent

router = APIRouter(prefix="/transparency", tags=["transparency"])
settings = get_settings()
logger = get_logger()


async def _read_upload(file: UploadFile) -> bytes:
    payload = await file.read(settings.max_upload_bytes + 1)
    if len(payload) > settings.max_upload_bytes:
        logger.warning("Rejected upload %s: over %d bytes", file.filename, settings.max_upload_bytes)
        raise HTTPException(status_code=413, detail="Upload too large")
    return payload


@router.post("")
async def make_upload_transparent(file: UploadFile = File(...), mode: str | None = Form(None)) -> Response:
    try:
        selected = SegmentationMode(mode) if mode else settings.mode
    except ValueError:
        raise HTTPException(status_code=422, detail=f"Unknown mode {mode!r}")

    payload = await _read_upload(file)
    outcome = await run_in_threadpool(make_transparent, payload, selected, settings.max_pixels)
    return Response(
        content=outcome.png,
        media_type="image/png",
        headers={
            "X-Alphacut-Cleared": str(outcome.cleared),
            "X-Alphacut-Mode": outcome.mode.value,
            "X-Alphacut-White-Ratio": f"{outcome.white_ratio:.4f}",
            "X-Alphacut-White-Regions": "true" if outcome.has_white_regions else "false",
        },
    )


@router.post("/analysis")
async def analyze_upload(file: UploadFile = File(...)) -> dict[str, int | float | bool]:
    payload = await _read_upload(file)
    analysis = await run_in_threadpool(analyze_image, payload, settings.max_pixels)
    return {
        "width": analysis.width,
        "height": analysis.height,
        "white_ratio": analysis.white_ratio,
        "white_regions": analysis.has_white_regions,
    }
