import logging
import math
import re
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import ValidationError

from backend.models.schemas import (
    ASPECT_RATIOS,
    MAX_DURATION,
    MAX_NEGATIVE_PROMPT_LENGTH,
    MIN_DURATION,
    MIN_PROMPT_LENGTH,
    GenerationRequest,
)

logger = logging.getLogger(__name__)

WIRE_FIELDS = (
    "prompt",
    "negativePrompt",
    "duration",
    "aspectRatio",
    "stylePreset",
    "creativeMode",
    "guidanceScale",
    "seed",
)

# Fields that may arrive as numeric-looking text
NUMERIC_FIELDS = ("duration", "guidanceScale", "seed")

# Plain ASCII decimal or exponent notation only
NUMERIC_TEXT = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)

FIELD_MESSAGES: Dict[str, str] = {
    "prompt": f"Prompt must contain at least {MIN_PROMPT_LENGTH} characters",
    "negativePrompt": f"Negative prompt must be text of at most {MAX_NEGATIVE_PROMPT_LENGTH} characters",
    "duration": f"Duration must be a whole number of seconds between {MIN_DURATION} and {MAX_DURATION}",
    "aspectRatio": f"Aspect ratio must be one of {', '.join(ASPECT_RATIOS)}",
    "stylePreset": "Style preset must be text",
    "creativeMode": "Creative mode must be text",
    "guidanceScale": "Guidance scale must be a number between 0 and 1",
    "seed": "Seed must be a non-negative integer",
}


class GenerationValidationError(ValueError):
    """Raised when a generation request fails one or more field constraints."""

    def __init__(self, messages: List[str]):
        self.messages = list(messages)
        super().__init__(". ".join(self.messages))


def coerce_number(value: Any) -> Optional[Union[int, float]]:
    """Best-effort numeric coercion. Anything unusable becomes ``None``."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, str) and value.strip():
        text = value.strip()
        if not NUMERIC_TEXT.fullmatch(text):
            return None
        number = float(text)
        if not math.isfinite(number):
            return None
        return int(number) if number.is_integer() else number
    return None


def validate_generation_request(raw: Any) -> GenerationRequest:
    """Coerce, validate and normalize an untrusted generation request.

    Every violated field contributes one message; the raised
    :class:`GenerationValidationError` carries all of them in field order.
    Numeric fields that cannot be parsed are treated as absent, so
    ``duration`` falls back to its default.
    """
    source: Mapping = raw if isinstance(raw, Mapping) else {}
    data = {key: source[key] for key in WIRE_FIELDS if key in source}

    for key in NUMERIC_FIELDS:
        if key not in data:
            continue
        coerced = coerce_number(data[key])
        if coerced is None:
            del data[key]
        else:
            data[key] = coerced

    try:
        request = GenerationRequest.model_validate(data)
    except ValidationError as exc:
        messages = _collect_messages(exc.errors())
        logger.debug("Rejected generation request: %s", messages)
        raise GenerationValidationError(messages) from exc

    return request


def _wire_name(error: dict) -> str:
    loc = error.get("loc") or ()
    if not loc:
        return ""
    name = str(loc[0])
    field = GenerationRequest.model_fields.get(name)
    return (field.alias or name) if field else name


def _collect_messages(errors: List[dict]) -> List[str]:
    failed = {_wire_name(error) for error in errors}

    messages = [FIELD_MESSAGES[field] for field in WIRE_FIELDS if field in failed]
    # Model-level errors carry no field location
    for error in errors:
        if _wire_name(error) not in FIELD_MESSAGES:
            messages.append(error.get("msg", "Invalid request"))
    return messages
