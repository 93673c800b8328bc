import logging

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from backend.models.schemas import (
    ASPECT_OPTIONS,
    CREATIVE_MODES,
    DURATION_OPTIONS,
    STYLE_PRESETS,
    ErrorResponse,
    GenerationResult,
    OptionsResponse,
)
from backend.services.validation import GenerationValidationError, validate_generation_request
from backend.services.veo_client import GENERIC_GENERATION_ERROR, ProviderError, VeoClient, get_veo_client

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@router.post(
    "/generate",
    response_model=GenerationResult,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_video(request: Request, response: Response, client: VeoClient = Depends(get_veo_client)):
    try:
        body = await request.json()
    except ValueError:
        return _error(400, "Request body must be valid JSON")

    try:
        payload = validate_generation_request(body)
    except GenerationValidationError as exc:
        logger.info("Rejected generation request: %s", exc)
        return _error(400, str(exc))

    try:
        result = await client.submit(payload)
    except ProviderError as exc:
        logger.warning("Veo generation failed (status %s): %s", exc.status_code or "n/a", exc)
        return _error(500, str(exc) or GENERIC_GENERATION_ERROR)
    except Exception:
        logger.exception("Unexpected failure while generating video")
        return _error(500, GENERIC_GENERATION_ERROR)

    response.headers["Cache-Control"] = "no-store"
    return result


@router.get("/options", response_model=OptionsResponse)
def get_options():
    return OptionsResponse(
        durations=DURATION_OPTIONS,
        aspect_ratios=ASPECT_OPTIONS,
        style_presets=STYLE_PRESETS,
        creative_modes=CREATIVE_MODES,
    )


@router.get("/health")
def health_check():
    return {"status": "ok"}
