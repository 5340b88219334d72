"""Candidate store: one pre-built pool per baseline job.

Built explicitly by whoever composes the application at startup::

    store = CandidateStore.build(settings.jobs, settings.role_profiles)
    pool = store.get("jd1")

Jobs created after startup are not added here; synthesize them on demand
with ``generate_candidates``.
"""

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from screener.core.schemas import Candidate, JobDescription
from screener.engine.profiles import DEFAULT_PROFILE
from screener.engine.synthesizer import generate_candidates

logger = logging.getLogger(__name__)


class CandidateStore:
    """Read-only mapping of job id to that job's candidate pool."""

    def __init__(self, pools: Mapping[str, list[Candidate]]) -> None:
        self._pools = MappingProxyType(dict(pools))

    @classmethod
    def build(
        cls,
        jobs: Iterable[JobDescription],
        profile_keys: Mapping[str, str] | None = None,
    ) -> "CandidateStore":
        """Synthesize every job with applications; zero-count jobs map to []."""
        profile_keys = profile_keys or {}
        pools: dict[str, list[Candidate]] = {}
        for job in jobs:
            if job.application_count > 0:
                profile_key = profile_keys.get(job.id, DEFAULT_PROFILE)
                pools[job.id] = generate_candidates(job, profile_key)
            else:
                pools[job.id] = []
        logger.info(
            "Candidate store built: %d jobs, %d candidates",
            len(pools), sum(len(p) for p in pools.values()),
        )
        return cls(pools)

    def get(self, job_id: str) -> list[Candidate]:
        """Return the pool for ``job_id``, or an empty list for unknown ids."""
        return self._pools.get(job_id, [])

    def job_ids(self) -> list[str]:
        return list(self._pools)

    def find_candidate(self, candidate_id: str) -> Candidate | None:
        """Locate a candidate by id across all pools."""
        job_id = candidate_id.rsplit("-c", 1)[0]
        for candidate in self.get(job_id):
            if candidate.id == candidate_id:
                return candidate
        return None

    def __contains__(self, job_id: object) -> bool:
        return job_id in self._pools

    def __len__(self) -> int:
        return len(self._pools)
