"""Dashboard views over a candidate pool: filters, stats, shortlist."""

import json
import logging

from pydantic import BaseModel

from screener.core.schemas import Bucket, Candidate

logger = logging.getLogger(__name__)


class PoolSummary(BaseModel):
    """Headline numbers for a pool, counted by active (possibly overridden) bucket."""

    total: int
    strong: int
    potential: int
    low: int
    shortlisted: int
    average_score: int
    pct_strong: int
    pct_potential: int


def filter_candidates(
    candidates: list[Candidate],
    search: str = "",
    min_score: int = 0,
    min_experience: int = 0,
    bucket: Bucket | None = None,
) -> list[Candidate]:
    """Return matching candidates ranked by composite score, best first.

    ``search`` matches name, current role or any skill, case-insensitive.
    ``bucket`` is compared against the active bucket.
    """
    needle = search.strip().lower()
    result = [
        c for c in candidates
        if (not needle or _matches_search(c, needle))
        and c.composite_score >= min_score
        and c.years_of_experience >= min_experience
        and (bucket is None or c.active_bucket == bucket)
    ]
    result.sort(key=lambda c: c.composite_score, reverse=True)
    return result


def _matches_search(candidate: Candidate, needle: str) -> bool:
    return (
        needle in candidate.name.lower()
        or needle in candidate.current_role.lower()
        or any(needle in skill.lower() for skill in candidate.skills)
    )


def summarize_pool(candidates: list[Candidate]) -> PoolSummary:
    total = len(candidates)
    counts = {"strong": 0, "potential": 0, "low": 0}
    for c in candidates:
        counts[c.active_bucket] += 1
    return PoolSummary(
        total=total,
        strong=counts["strong"],
        potential=counts["potential"],
        low=counts["low"],
        shortlisted=sum(1 for c in candidates if c.is_shortlisted),
        average_score=_percent(sum(c.composite_score for c in candidates), total, scale=1),
        pct_strong=_percent(counts["strong"], total),
        pct_potential=_percent(counts["potential"], total),
    )


def _percent(part: int, whole: int, scale: int = 100) -> int:
    if not whole:
        return 0
    return (2 * part * scale + whole) // (2 * whole)


def shortlist(candidates: list[Candidate], candidate_ids: set[str]) -> int:
    """Mark the given candidates as shortlisted. Returns how many were marked."""
    marked = 0
    for c in candidates:
        if c.id in candidate_ids and not c.is_shortlisted:
            c.is_shortlisted = True
            marked += 1
    logger.debug("Shortlisted %d candidates", marked)
    return marked


def remove_from_shortlist(candidates: list[Candidate], candidate_id: str) -> bool:
    for c in candidates:
        if c.id == candidate_id and c.is_shortlisted:
            c.is_shortlisted = False
            return True
    return False


def shortlisted(candidates: list[Candidate]) -> list[Candidate]:
    """Shortlisted candidates, best composite score first."""
    picked = [c for c in candidates if c.is_shortlisted]
    return sorted(picked, key=lambda c: c.composite_score, reverse=True)


def export_candidates_json(candidates: list[Candidate]) -> str:
    """Serialize candidates as a JSON list for external consumers."""
    return json.dumps([c.model_dump(mode="json") for c in candidates], indent=2)
