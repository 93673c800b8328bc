from backend.config import Settings
from backend.logging_config import build_logging_config


def make_settings(**env) -> Settings:
    return Settings(_env_file=None, GOOGLE_API_KEY="k", **env)


def test_defaults():
    settings = make_settings()

    assert settings.veo_model_id == "veo-3.1-generate-preview"
    assert settings.veo_timeout_seconds is None
    assert settings.log_level == "INFO"


def test_endpoint_substitutes_model():
    settings = make_settings(VEO_API_URL="https://veo.test/models/{model}:generateVideo", VEO_MODEL_ID="veo-x")

    assert settings.veo_endpoint == "https://veo.test/models/veo-x:generateVideo"


def test_blank_timeout_is_unbounded():
    assert make_settings(VEO_TIMEOUT_SECONDS="").veo_timeout_seconds is None
    assert make_settings(VEO_TIMEOUT_SECONDS="30").veo_timeout_seconds == 30.0


def test_origins_and_log_level_are_normalized():
    settings = make_settings(CORS_ALLOW_ORIGINS="https://a.test, ,https://b.test ", LOG_LEVEL=" debug ")

    assert settings.allowed_origins == ["https://a.test", "https://b.test"]
    assert settings.log_level == "DEBUG"


def test_logging_config_uses_requested_level():
    config = build_logging_config("warning")

    assert config["root"]["level"] == "WARNING"
    assert config["handlers"]["console"]["level"] == "WARNING"
