import os
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent

# Settings are read at import time, so seed them before the app is imported
os.environ.setdefault("GOOGLE_API_KEY", "test-key")
os.environ.setdefault("VEO_API_URL", "https://veo.test/v1/models/{model}:generateVideo")
os.environ["FRONTEND_DIR"] = str(ROOT / "frontend")

from backend.models.schemas import GenerationResult  # noqa: E402


class FakeVeoClient:
    """Stands in for VeoClient; records submitted requests."""

    def __init__(self):
        self.calls = []
        self.result = GenerationResult(
            video_url="https://cdn.test/video.mp4",
            thumbnail_url="https://cdn.test/thumb.jpg",
            transcript="Aerial shot over a city",
            request_id="req-123",
        )
        self.error = None

    async def submit(self, request):
        self.calls.append(request)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def fake_veo():
    return FakeVeoClient()


@pytest.fixture
def api_client(fake_veo):
    from fastapi.testclient import TestClient

    from backend.app import app
    from backend.services.veo_client import get_veo_client

    app.dependency_overrides[get_veo_client] = lambda: fake_veo
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
