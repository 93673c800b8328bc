"""
CLI: submit one generation request to Veo and print the resulting asset URLs.
Usage:
  veo-director "Slow cinematic aerial shot over a city"
  veo-director "Your prompt" --duration 10 --aspect-ratio 9:16 --seed 42
"""
import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from backend.services.session import SUCCEEDED, GenerationJob, GenerationSession
from backend.services.validation import GenerationValidationError, validate_generation_request
from backend.services.veo_client import GENERIC_GENERATION_ERROR, ProviderError, VeoClient, get_veo_client

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PROVIDER_ERROR = 1
EXIT_INVALID_REQUEST = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a video with Google Veo from a text prompt.")
    parser.add_argument("prompt", type=str, help="Text prompt describing the shot.")
    parser.add_argument("--negative-prompt", type=str, default=None, help="What the shot should avoid.")
    # Numeric options stay text so the server-side coercion rules apply unchanged
    parser.add_argument("--duration", "-d", type=str, default=None, help="Duration in seconds, 4-16 (default: 8).")
    parser.add_argument("--aspect-ratio", type=str, default=None, help="16:9, 9:16, 1:1 or 2.39:1.")
    parser.add_argument("--style-preset", type=str, default=None, help="e.g. CINEMATIC_ULTRA_REAL.")
    parser.add_argument("--creative-mode", type=str, default=None, help="e.g. CREATIVE_BALANCED.")
    parser.add_argument("--guidance-scale", type=str, default=None, help="Prompt adherence, 0-1.")
    parser.add_argument("--seed", type=str, default=None, help="Non-negative integer seed.")
    return parser


def raw_request_from_args(args: argparse.Namespace) -> dict:
    raw = {
        "prompt": args.prompt,
        "negativePrompt": args.negative_prompt,
        "duration": args.duration,
        "aspectRatio": args.aspect_ratio,
        "stylePreset": args.style_preset,
        "creativeMode": args.creative_mode,
        "guidanceScale": args.guidance_scale,
        "seed": args.seed,
    }
    return {key: value for key, value in raw.items() if value is not None}


async def run_generation(raw: dict, client: VeoClient, session: GenerationSession) -> GenerationJob:
    """Validate and submit one request, recording the outcome in ``session``.

    Validation errors propagate without touching the session, since nothing
    was submitted.
    """
    request = validate_generation_request(raw)
    job = session.start(request.prompt, request.summary())
    try:
        result = await client.submit(request)
    except ProviderError as exc:
        return session.fail(job, str(exc))
    except Exception:
        logger.exception("Unexpected failure while generating video")
        return session.fail(job, GENERIC_GENERATION_ERROR)
    return session.succeed(job, result)


def print_job(job: GenerationJob) -> None:
    print(f"[{job.status}] {job.request_summary}")
    if job.error:
        print(f"  error: {job.error}")
    for label, value in (
        ("video", job.video_url),
        ("thumbnail", job.thumbnail_url),
        ("transcript", job.transcript),
        ("request id", job.request_id),
    ):
        if value:
            print(f"  {label}: {value}")


def main(argv: Optional[List[str]] = None, client: Optional[VeoClient] = None) -> int:
    from backend.logging_config import configure_logging

    configure_logging()
    args = build_parser().parse_args(argv)
    session = GenerationSession()

    try:
        job = asyncio.run(run_generation(raw_request_from_args(args), client or get_veo_client(), session))
    except GenerationValidationError as exc:
        print(f"Invalid request: {exc}", file=sys.stderr)
        return EXIT_INVALID_REQUEST

    print_job(job)
    return EXIT_OK if job.status == SUCCEEDED else EXIT_PROVIDER_ERROR


if __name__ == "__main__":
    sys.exit(main())
