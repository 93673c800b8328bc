import logging
from typing import Any, Optional

import httpx

from backend.config import settings
from backend.models.schemas import GenerationRequest, GenerationResult

logger = logging.getLogger(__name__)

RESULT_FIELDS = ("videoUrl", "thumbnailUrl", "transcript", "requestId")

GENERIC_GENERATION_ERROR = "Unexpected error while generating video"


class ProviderError(RuntimeError):
    """Raised when the Veo API fails or returns an unusable response."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class VeoClient:
    """Thin adapter around a single Veo generation call.

    The request is forwarded as-is and the response is awaited once: no
    polling, no streaming and no retry. ``timeout=None`` leaves the call
    unbounded.
    """

    def __init__(
        self,
        api_key: str,
        endpoint: str,
        model_id: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.endpoint = endpoint
        self.model_id = model_id
        self.timeout = timeout
        self._transport = transport

    async def submit(self, request: GenerationRequest) -> GenerationResult:
        body = {"model": self.model_id, **request.provider_payload()}
        headers = {"x-goog-api-key": self.api_key, "Content-Type": "application/json"}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(self.endpoint, json=body, headers=headers)
        except httpx.HTTPError as exc:
            logger.exception("Failed to reach the Veo API at %s", self.endpoint)
            raise ProviderError("Unable to reach the Veo API.") from exc

        if response.is_error:
            message = _provider_message(response) or f"Veo request failed with status {response.status_code}"
            logger.error("Veo generation failed (%s): %s", response.status_code, message)
            raise ProviderError(message, status_code=response.status_code)

        try:
            payload = response.json()
        except ValueError as exc:
            raise ProviderError("Veo returned an unexpected response.", status_code=response.status_code) from exc

        result = _map_result(payload)
        logger.info("Veo generation finished (request %s)", result.request_id or "n/a")
        return result


def _provider_message(response: httpx.Response) -> Optional[str]:
    try:
        payload = response.json()
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None

    error = payload.get("error")
    if isinstance(error, dict):
        error = error.get("message")
    if isinstance(error, str) and error.strip():
        return error
    return None


def _map_result(payload: Any) -> GenerationResult:
    if not isinstance(payload, dict):
        raise ProviderError("Veo returned an unexpected response.")

    fields = {}
    for key in RESULT_FIELDS:
        value = payload.get(key)
        if value is None:
            continue
        if not isinstance(value, str):
            raise ProviderError("Veo returned an unexpected response.")
        fields[key] = value
    return GenerationResult(**fields)


_veo_client: Optional[VeoClient] = None


def get_veo_client() -> VeoClient:
    global _veo_client
    if _veo_client is None:
        _veo_client = VeoClient(
            api_key=settings.google_api_key,
            endpoint=settings.veo_endpoint,
            model_id=settings.veo_model_id,
            timeout=settings.veo_timeout_seconds,
        )
    return _veo_client
