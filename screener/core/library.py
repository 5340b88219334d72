"""JSON persistence for job descriptions created at runtime.

The baseline jobs live in settings.yaml; anything a recruiter adds later is
kept here as a plain JSON list of JobDescription objects.
"""

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter

from screener.core.schemas import JobDescription

logger = logging.getLogger(__name__)

_JOBS_ADAPTER = TypeAdapter(list[JobDescription])


def load_job_library(path: str | Path) -> list[JobDescription]:
    """Load saved job descriptions. A missing file is an empty library."""
    path = Path(path)
    if not path.exists():
        logger.debug("No job library at %s", path)
        return []
    raw = json.loads(path.read_text() or "[]")
    return _JOBS_ADAPTER.validate_python(raw)


def save_job_library(jobs: list[JobDescription], path: str | Path) -> None:
    """Write job descriptions as a JSON list."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = [job.model_dump(mode="json") for job in jobs]
    path.write_text(json.dumps(payload, indent=2))
    logger.debug("Saved %d jobs to %s", len(jobs), path)


def upsert_job(jobs: list[JobDescription], job: JobDescription) -> list[JobDescription]:
    """Return a new list with ``job`` replacing any entry with the same id."""
    result = [j for j in jobs if j.id != job.id]
    result.append(job)
    return result
