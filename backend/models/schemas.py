from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

AspectRatio = Literal["16:9", "9:16", "1:1", "2.39:1"]

ASPECT_RATIOS = ("16:9", "9:16", "1:1", "2.39:1")
DEFAULT_DURATION = 8
MIN_DURATION = 4
MAX_DURATION = 16
MIN_PROMPT_LENGTH = 8
MAX_NEGATIVE_PROMPT_LENGTH = 600
DEFAULT_CREATIVE_MODE = "CREATIVE_BALANCED"


class GenerationRequest(BaseModel):
    """Provider-ready generation request. Wire names are camelCase."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    prompt: str = Field(..., min_length=MIN_PROMPT_LENGTH, description="Text prompt for Veo")
    negative_prompt: Optional[str] = Field(
        default=None, max_length=MAX_NEGATIVE_PROMPT_LENGTH, alias="negativePrompt"
    )
    duration: int = Field(DEFAULT_DURATION, ge=MIN_DURATION, le=MAX_DURATION)
    aspect_ratio: Optional[AspectRatio] = Field(default=None, alias="aspectRatio")
    style_preset: Optional[str] = Field(default=None, alias="stylePreset")
    creative_mode: Optional[str] = Field(default=None, alias="creativeMode")
    guidance_scale: Optional[float] = Field(default=None, ge=0, le=1, alias="guidanceScale")
    seed: Optional[int] = Field(default=None, ge=0)

    @field_validator("negative_prompt", mode="before")
    @classmethod
    def blank_negative_prompt_is_absent(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def provider_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)

    def summary(self) -> str:
        parts = []
        if self.style_preset:
            parts.append(self.style_preset.replace("_", " "))
        if self.aspect_ratio:
            parts.append(self.aspect_ratio)
        parts.append(f"{self.duration}s")
        if self.creative_mode and self.creative_mode != DEFAULT_CREATIVE_MODE:
            parts.append(self.creative_mode)
        return " • ".join(parts)


class GenerationResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    video_url: Optional[str] = Field(default=None, alias="videoUrl")
    thumbnail_url: Optional[str] = Field(default=None, alias="thumbnailUrl")
    transcript: Optional[str] = None
    request_id: Optional[str] = Field(default=None, alias="requestId")


class ErrorResponse(BaseModel):
    error: str


class Choice(BaseModel):
    label: str
    value: str


class DurationChoice(BaseModel):
    label: str
    value: int


class OptionDefaults(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    duration: int = DEFAULT_DURATION
    aspect_ratio: str = Field("16:9", alias="aspectRatio")
    style_preset: str = Field("CINEMATIC_ULTRA_REAL", alias="stylePreset")
    creative_mode: str = Field(DEFAULT_CREATIVE_MODE, alias="creativeMode")
    guidance_scale: float = Field(0.5, alias="guidanceScale")


class OptionsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    durations: List[DurationChoice]
    aspect_ratios: List[Choice] = Field(..., alias="aspectRatios")
    style_presets: List[Choice] = Field(..., alias="stylePresets")
    creative_modes: List[Choice] = Field(..., alias="creativeModes")
    defaults: OptionDefaults = Field(default_factory=OptionDefaults)


DURATION_OPTIONS = [DurationChoice(label=f"{seconds} seconds", value=seconds) for seconds in (6, 8, 10, 12)]

ASPECT_OPTIONS = [
    Choice(label="16:9 (Landscape)", value="16:9"),
    Choice(label="9:16 (Portrait)", value="9:16"),
    Choice(label="1:1 (Square)", value="1:1"),
    Choice(label="2.39:1 (Cinematic)", value="2.39:1"),
]

STYLE_PRESETS = [
    Choice(label="Cinematic Ultra-Real", value="CINEMATIC_ULTRA_REAL"),
    Choice(label="Documentary", value="DOCUMENTARY"),
    Choice(label="Stylized Film", value="STYLIZED_FILM"),
    Choice(label="Hyper Real 8K", value="HYPER_REAL_8K"),
    Choice(label="Dreamlike", value="DREAMLIKE"),
]

CREATIVE_MODES = [
    Choice(label="Balanced", value=DEFAULT_CREATIVE_MODE),
    Choice(label="Creative", value="CREATIVE"),
    Choice(label="Literal", value="PRECISE"),
]
