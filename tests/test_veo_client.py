import asyncio
import json

import httpx
import pytest

from backend.config import settings
from backend.models.schemas import GenerationRequest
from backend.services.veo_client import ProviderError, VeoClient, get_veo_client

ENDPOINT = "https://veo.test/v1/models/veo-test:generateVideo"


def make_client(handler) -> VeoClient:
    return VeoClient(
        api_key="secret",
        endpoint=ENDPOINT,
        model_id="veo-test",
        transport=httpx.MockTransport(handler),
    )


def submit(client: VeoClient, request: GenerationRequest):
    return asyncio.run(client.submit(request))


@pytest.fixture
def request_model():
    return GenerationRequest(prompt="Slow cinematic aerial shot over a city", aspect_ratio="16:9", seed=3)


class TestVeoClient:
    def test_forwards_request_and_maps_response(self, request_model):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["api_key"] = request.headers.get("x-goog-api-key")
            seen["body"] = json.loads(request.content)
            return httpx.Response(
                200,
                json={
                    "videoUrl": "https://cdn.test/v.mp4",
                    "thumbnailUrl": "https://cdn.test/t.jpg",
                    "transcript": "A city at dusk",
                    "requestId": "abc",
                    "extra": {"ignored": True},
                },
            )

        result = submit(make_client(handler), request_model)

        assert seen["url"] == ENDPOINT
        assert seen["api_key"] == "secret"
        assert seen["body"] == {
            "model": "veo-test",
            "prompt": "Slow cinematic aerial shot over a city",
            "duration": 8,
            "aspectRatio": "16:9",
            "seed": 3,
        }
        assert result.video_url == "https://cdn.test/v.mp4"
        assert result.thumbnail_url == "https://cdn.test/t.jpg"
        assert result.transcript == "A city at dusk"
        assert result.request_id == "abc"

    def test_missing_fields_stay_absent(self, request_model):
        result = submit(make_client(lambda request: httpx.Response(200, json={"videoUrl": "u"})), request_model)

        assert result.video_url == "u"
        assert result.thumbnail_url is None
        assert result.request_id is None

    def test_provider_error_message_is_surfaced(self, request_model):
        def handler(request):
            return httpx.Response(429, json={"error": {"message": "Quota exceeded"}})

        with pytest.raises(ProviderError) as exc_info:
            submit(make_client(handler), request_model)

        assert str(exc_info.value) == "Quota exceeded"
        assert exc_info.value.status_code == 429

    def test_plain_error_string_is_surfaced(self, request_model):
        def handler(request):
            return httpx.Response(400, json={"error": "Prompt rejected by safety filters"})

        with pytest.raises(ProviderError, match="Prompt rejected by safety filters"):
            submit(make_client(handler), request_model)

    def test_error_without_body_uses_status(self, request_model):
        with pytest.raises(ProviderError, match="Veo request failed with status 503"):
            submit(make_client(lambda request: httpx.Response(503, text="upstream down")), request_model)

    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(200, text="not json"),
            httpx.Response(200, json=["videoUrl"]),
            httpx.Response(200, json={"videoUrl": 123}),
        ],
    )
    def test_unexpected_shape_raises(self, request_model, response):
        with pytest.raises(ProviderError, match="Veo returned an unexpected response."):
            submit(make_client(lambda request: response), request_model)

    def test_transport_failure_raises(self, request_model):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ProviderError, match="Unable to reach the Veo API."):
            submit(make_client(handler), request_model)


def test_get_veo_client_uses_settings():
    client = get_veo_client()

    assert client is get_veo_client()
    assert client.api_key == settings.google_api_key
    assert client.endpoint == settings.veo_endpoint
    assert client.timeout == settings.veo_timeout_seconds
