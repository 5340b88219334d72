"""Recruiter bucket overrides with an additive audit trail.

An override never rewrites ``bucket`` or ``composite_score``; it sets the
``override_*`` fields next to them so audit views can show
original -> overridden.
"""

import logging
from datetime import datetime

from screener.core.schemas import (
    BUCKET_RANK,
    Bucket,
    Candidate,
    OverrideDirection,
    OverrideRecord,
    OverrideRequest,
)

logger = logging.getLogger(__name__)


def override_direction(original: Bucket, target: Bucket) -> OverrideDirection:
    """``upgrade`` when the target ranks better (strong < potential < low)."""
    return "upgrade" if BUCKET_RANK[target] < BUCKET_RANK[original] else "downgrade"


def apply_override(
    candidate: Candidate,
    request: OverrideRequest,
    now: datetime | None = None,
) -> OverrideRecord | None:
    """Reclassify ``candidate`` and return the audit record.

    Overriding back to the original bucket clears the override instead and
    returns None.
    """
    if request.target_bucket == candidate.bucket:
        reset_override(candidate)
        return None

    now = now or datetime.now()
    candidate.overridden_bucket = request.target_bucket
    candidate.override_reason = request.reason
    candidate.override_justification = request.justification
    candidate.override_by = request.actor
    candidate.override_at = now

    record = _record_for(candidate)
    logger.info(
        "Override %s: %s -> %s (%s, by %s)",
        candidate.id, record.original_bucket, record.overridden_bucket,
        record.direction, record.actor,
    )
    return record


def reset_override(candidate: Candidate) -> None:
    """Drop any override, restoring the engine's bucket as active."""
    if candidate.overridden_bucket is not None:
        logger.info("Override reset for %s", candidate.id)
    candidate.overridden_bucket = None
    candidate.override_reason = None
    candidate.override_justification = None
    candidate.override_by = None
    candidate.override_at = None


def restore_overrides(candidates: list[Candidate], records: list[OverrideRecord]) -> int:
    """Re-apply logged overrides to a freshly synthesized pool.

    Records are read oldest first, so the latest override per candidate wins.
    Records for candidates outside the pool are ignored. Returns the number of
    candidates with an override after restoring.
    """
    latest = {record.candidate_id: record for record in records}
    restored = 0
    for candidate in candidates:
        record = latest.get(candidate.id)
        if record is None:
            continue
        candidate.overridden_bucket = record.overridden_bucket
        candidate.override_reason = record.reason
        candidate.override_justification = record.justification
        candidate.override_by = record.actor
        candidate.override_at = record.created_at
        restored += 1
    logger.debug("Restored %d overrides", restored)
    return restored


def audit_records(candidates: list[Candidate]) -> list[OverrideRecord]:
    """Audit rows for every overridden candidate, in pool order."""
    return [_record_for(c) for c in candidates if c.overridden_bucket is not None]


def _record_for(candidate: Candidate) -> OverrideRecord:
    target = candidate.overridden_bucket
    if target is None:
        msg = f"candidate {candidate.id} has no override"
        raise ValueError(msg)
    return OverrideRecord(
        candidate_id=candidate.id,
        candidate_name=candidate.name,
        original_bucket=candidate.bucket,
        original_score=candidate.composite_score,
        overridden_bucket=target,
        direction=override_direction(candidate.bucket, target),
        reason=candidate.override_reason or "",
        justification=candidate.override_justification or "",
        actor=candidate.override_by or "",
        created_at=candidate.override_at or datetime.now(),
    )
