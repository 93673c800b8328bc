import time
import uuid
from dataclasses import dataclass, field, replace
from typing import List, Optional

from backend.models.schemas import GenerationResult

PROCESSING = "processing"
SUCCEEDED = "succeeded"
FAILED = "failed"


@dataclass(frozen=True)
class GenerationJob:
    prompt: str
    request_summary: str = ""
    job_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    status: str = PROCESSING
    created_at: float = field(default_factory=time.time)
    video_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    transcript: Optional[str] = None
    request_id: Optional[str] = None
    error: Optional[str] = None

    @property
    def finished(self) -> bool:
        return self.status in {SUCCEEDED, FAILED}


class GenerationSession:
    """Caller-owned record of one user's submissions.

    Tracks the most recent submission as ``active_job`` and keeps every
    finished attempt, newest first. Nothing here is shared between sessions.
    """

    def __init__(self) -> None:
        self.active_job: Optional[GenerationJob] = None
        self._history: List[GenerationJob] = []

    @property
    def history(self) -> List[GenerationJob]:
        return list(self._history)

    def start(self, prompt: str, request_summary: str = "") -> GenerationJob:
        job = GenerationJob(prompt=prompt, request_summary=request_summary)
        self.active_job = job
        return job

    def succeed(self, job: GenerationJob, result: GenerationResult) -> GenerationJob:
        finished = replace(
            job,
            status=SUCCEEDED,
            video_url=result.video_url,
            thumbnail_url=result.thumbnail_url,
            transcript=result.transcript,
            request_id=result.request_id,
        )
        return self._record(finished)

    def fail(self, job: GenerationJob, message: str) -> GenerationJob:
        return self._record(replace(job, status=FAILED, error=message))

    def visible_history(self) -> List[GenerationJob]:
        active_id = self.active_job.job_id if self.active_job else None
        return [job for job in self._history if job.job_id != active_id]

    def reset(self) -> None:
        self.active_job = None

    def _record(self, job: GenerationJob) -> GenerationJob:
        if self.active_job is not None and self.active_job.job_id == job.job_id:
            self.active_job = job
        self._history.insert(0, job)
        return job
