"""Tests for the pre-built candidate store."""

import pytest

from screener.core.schemas import JobDescription
from screener.engine.profiles import ROLE_PROFILES
from screener.engine.store import CandidateStore
from screener.engine.synthesizer import generate_candidates


def _jobs() -> list[JobDescription]:
    return [
        JobDescription(
            id="jd1",
            title="Senior Full-Stack Engineer",
            experience_min=4,
            experience_max=8,
            must_have_skills=["React", "Node.js", "TypeScript", "PostgreSQL"],
            application_count=40,
        ),
        JobDescription(
            id="jd2",
            title="Product Manager - Fintech",
            experience_min=5,
            experience_max=10,
            must_have_skills=["Product Strategy", "SQL"],
            application_count=25,
        ),
        JobDescription(
            id="jd4",
            title="Frontend Engineer (React)",
            must_have_skills=["React"],
            application_count=0,
        ),
    ]


@pytest.fixture()
def store() -> CandidateStore:
    return CandidateStore.build(_jobs(), {"jd2": "product"})


class TestBuild:
    def test_every_job_has_an_entry(self, store: CandidateStore) -> None:
        assert store.job_ids() == ["jd1", "jd2", "jd4"]
        assert len(store) == 3

    def test_pool_sizes(self, store: CandidateStore) -> None:
        assert len(store.get("jd1")) == 40
        assert len(store.get("jd2")) == 25

    def test_zero_count_maps_to_empty(self, store: CandidateStore) -> None:
        assert "jd4" in store
        assert store.get("jd4") == []

    def test_matches_direct_synthesis(self, store: CandidateStore) -> None:
        direct = generate_candidates(_jobs()[0], "fullstack")
        assert [c.model_dump() for c in store.get("jd1")] == [c.model_dump() for c in direct]

    def test_profile_mapping_used(self, store: CandidateStore) -> None:
        titles = set(ROLE_PROFILES["product"].titles)
        assert all(c.current_role in titles for c in store.get("jd2"))

    def test_unmapped_job_uses_default_profile(self, store: CandidateStore) -> None:
        titles = set(ROLE_PROFILES["fullstack"].titles)
        assert all(c.current_role in titles for c in store.get("jd1"))

    def test_rebuild_is_identical(self, store: CandidateStore) -> None:
        other = CandidateStore.build(_jobs(), {"jd2": "product"})
        for job_id in store.job_ids():
            assert [c.model_dump() for c in other.get(job_id)] == [
                c.model_dump() for c in store.get(job_id)
            ]

    def test_empty_job_list(self) -> None:
        assert len(CandidateStore.build([])) == 0


class TestLookup:
    def test_unknown_job_is_empty(self, store: CandidateStore) -> None:
        assert store.get("jd99") == []
        assert "jd99" not in store

    def test_repeated_reads_return_same_pool(self, store: CandidateStore) -> None:
        assert store.get("jd1") is store.get("jd1")

    def test_later_jobs_not_prebuilt(self, store: CandidateStore) -> None:
        """Jobs created after startup must be synthesized on demand."""
        late = JobDescription(id="jd7", title="SRE", application_count=5)
        assert store.get(late.id) == []
        assert len(generate_candidates(late, "devops")) == 5

    def test_find_candidate(self, store: CandidateStore) -> None:
        found = store.find_candidate("jd2-c3")
        assert found is not None
        assert found.id == "jd2-c3"

    def test_find_candidate_missing(self, store: CandidateStore) -> None:
        assert store.find_candidate("jd2-c999") is None
        assert store.find_candidate("nope") is None

    def test_mapping_read_only(self, store: CandidateStore) -> None:
        with pytest.raises(TypeError):
            store._pools["jd9"] = []  # type: ignore[index]
