from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    google_api_key: str = Field(..., validation_alias="GOOGLE_API_KEY")
    veo_model_id: str = Field("veo-3.1-generate-preview", validation_alias="VEO_MODEL_ID")
    veo_api_url: str = Field(
        "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateVideo",
        validation_alias="VEO_API_URL",
    )
    veo_timeout_seconds: Optional[float] = Field(default=None, validation_alias="VEO_TIMEOUT_SECONDS")

    frontend_dir: str = Field("frontend", validation_alias="FRONTEND_DIR")

    app_host: str = Field("127.0.0.1", validation_alias="APP_HOST")
    app_port: int = Field(8000, validation_alias="APP_PORT")

    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")
    cors_allow_origins: str = Field(
        "http://localhost:8000,http://127.0.0.1:8000",
        validation_alias="CORS_ALLOW_ORIGINS",
    )

    @field_validator("veo_timeout_seconds", mode="before")
    @classmethod
    def blank_timeout_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        value = value or "INFO"
        return value.strip().upper()

    @property
    def veo_endpoint(self) -> str:
        return self.veo_api_url.format(model=self.veo_model_id)

    @property
    def allowed_origins(self) -> List[str]:
        return [origin.strip() for origin in self.cors_allow_origins.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    try:
        return Settings()
    except Exception as exc:
        raise RuntimeError("Failed to load application settings. Ensure your .env file is configured.") from exc


settings = get_settings()
