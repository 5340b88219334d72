"""Tests for dashboard filters, pool stats and the shortlist."""

import json

from screener.core.schemas import Candidate
from screener.review.dashboard import (
    export_candidates_json,
    filter_candidates,
    remove_from_shortlist,
    shortlist,
    shortlisted,
    summarize_pool,
)


def _candidate(
    candidate_id: str,
    *,
    name: str = "Kavya Menon",
    role: str = "Backend Developer",
    score: int = 60,
    bucket: str = "potential",
    yoe: int = 5,
    skills: list[str] | None = None,
    **kw: object,
) -> Candidate:
    return Candidate(
        id=candidate_id,
        name=name,
        email=f"{candidate_id}@gmail.com",
        phone="+91 7000000002",
        current_role=role,
        current_company="Zoho",
        years_of_experience=yoe,
        location="Chennai",
        education="B.E. (CS)",
        composite_score=score,
        bucket=bucket,  # type: ignore[arg-type]
        skills=skills or ["Git"],
        **kw,  # type: ignore[arg-type]
    )


def _pool() -> list[Candidate]:
    return [
        _candidate("jd1-c1", name="Arjun Shah", score=55, skills=["Go", "Git"], yoe=3),
        _candidate("jd1-c2", name="Neha Rao", role="Staff Engineer", score=88, bucket="strong", yoe=9),
        _candidate("jd1-c3", name="Om Das", score=31, bucket="low", skills=["React", "Git"], yoe=1),
        _candidate("jd1-c4", name="Isha Jain", score=72, skills=["Golang", "Git"], yoe=6),
    ]


class TestFilterCandidates:
    def test_sorted_by_score_desc(self) -> None:
        result = filter_candidates(_pool())
        assert [c.composite_score for c in result] == [88, 72, 55, 31]

    def test_input_order_untouched(self) -> None:
        pool = _pool()
        filter_candidates(pool)
        assert [c.id for c in pool] == ["jd1-c1", "jd1-c2", "jd1-c3", "jd1-c4"]

    def test_search_by_name(self) -> None:
        assert [c.id for c in filter_candidates(_pool(), search="neha")] == ["jd1-c2"]

    def test_search_by_role(self) -> None:
        assert [c.id for c in filter_candidates(_pool(), search="STAFF")] == ["jd1-c2"]

    def test_search_by_skill_substring(self) -> None:
        assert [c.id for c in filter_candidates(_pool(), search="go")] == ["jd1-c4", "jd1-c1"]

    def test_blank_search_matches_all(self) -> None:
        assert len(filter_candidates(_pool(), search="   ")) == 4

    def test_min_score(self) -> None:
        assert [c.id for c in filter_candidates(_pool(), min_score=60)] == ["jd1-c2", "jd1-c4"]

    def test_min_experience(self) -> None:
        assert [c.id for c in filter_candidates(_pool(), min_experience=6)] == ["jd1-c2", "jd1-c4"]

    def test_bucket_uses_active_bucket(self) -> None:
        pool = _pool()
        pool[2].overridden_bucket = "strong"
        result = filter_candidates(pool, bucket="strong")
        assert [c.id for c in result] == ["jd1-c2", "jd1-c3"]

    def test_no_match(self) -> None:
        assert filter_candidates(_pool(), search="cobol") == []


class TestSummarizePool:
    def test_counts(self) -> None:
        summary = summarize_pool(_pool())
        assert summary.total == 4
        assert (summary.strong, summary.potential, summary.low) == (1, 2, 1)
        assert summary.average_score == 62  # 246 / 4 = 61.5
        assert summary.pct_strong == 25
        assert summary.pct_potential == 50

    def test_override_counts_toward_active_bucket(self) -> None:
        pool = _pool()
        pool[0].overridden_bucket = "low"
        summary = summarize_pool(pool)
        assert (summary.strong, summary.potential, summary.low) == (1, 1, 2)

    def test_empty_pool(self) -> None:
        summary = summarize_pool([])
        assert summary.total == 0
        assert summary.average_score == 0
        assert summary.pct_strong == 0


class TestShortlist:
    def test_shortlist_marks(self) -> None:
        pool = _pool()
        assert shortlist(pool, {"jd1-c2", "jd1-c4", "jd1-c99"}) == 2
        assert [c.id for c in shortlisted(pool)] == ["jd1-c2", "jd1-c4"]
        assert summarize_pool(pool).shortlisted == 2

    def test_shortlisted_best_score_first(self) -> None:
        pool = _pool()
        shortlist(pool, {"jd1-c1", "jd1-c3", "jd1-c4"})
        assert [c.id for c in shortlisted(pool)] == ["jd1-c4", "jd1-c1", "jd1-c3"]

    def test_shortlist_idempotent(self) -> None:
        pool = _pool()
        shortlist(pool, {"jd1-c2"})
        assert shortlist(pool, {"jd1-c2"}) == 0

    def test_remove(self) -> None:
        pool = _pool()
        shortlist(pool, {"jd1-c2"})
        assert remove_from_shortlist(pool, "jd1-c2") is True
        assert shortlisted(pool) == []

    def test_remove_not_shortlisted(self) -> None:
        assert remove_from_shortlist(_pool(), "jd1-c1") is False


class TestExport:
    def test_json_list(self) -> None:
        data = json.loads(export_candidates_json(_pool()[:2]))
        assert [d["id"] for d in data] == ["jd1-c1", "jd1-c2"]
        assert data[1]["bucket"] == "strong"
        assert data[1]["overridden_bucket"] is None

    def test_empty(self) -> None:
        assert json.loads(export_candidates_json([])) == []
