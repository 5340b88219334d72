"""Configuration models and YAML loader for the screening engine."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from screener.core.schemas import JobDescription
from screener.engine.profiles import DEFAULT_PROFILE, ROLE_PROFILES


class DatabaseConfig(BaseModel):
    """SQLite location for the override audit log."""

    path: str = "data/screening.db"


class LibraryConfig(BaseModel):
    """JSON file holding job descriptions created after startup."""

    path: str = "data/job_library.json"


class Settings(BaseModel):
    """Top-level settings loaded from YAML."""

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    library: LibraryConfig = Field(default_factory=LibraryConfig)
    jobs: list[JobDescription] = Field(default_factory=list)
    role_profiles: dict[str, str] = Field(default_factory=dict)

    @field_validator("jobs")
    @classmethod
    def unique_job_ids(cls, v: list[JobDescription]) -> list[JobDescription]:
        ids = [job.id for job in v]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            msg = f"duplicate job ids: {duplicates}"
            raise ValueError(msg)
        return v

    @field_validator("role_profiles")
    @classmethod
    def known_profiles(cls, v: dict[str, str]) -> dict[str, str]:
        unknown = sorted({key for key in v.values() if key not in ROLE_PROFILES})
        if unknown:
            valid = ", ".join(sorted(ROLE_PROFILES))
            msg = f"unknown role profiles {unknown}. Available: {valid}"
            raise ValueError(msg)
        return v

    @model_validator(mode="after")
    def profiles_reference_jobs(self) -> "Settings":
        job_ids = {job.id for job in self.jobs}
        stray = sorted(set(self.role_profiles) - job_ids)
        if job_ids and stray:
            msg = f"role_profiles reference unknown jobs: {stray}"
            raise ValueError(msg)
        return self

    def profile_for(self, job_id: str) -> str:
        """Role profile key for a job, defaulting to the full-stack profile."""
        return self.role_profiles.get(job_id, DEFAULT_PROFILE)

    def find_job(self, job_id: str) -> JobDescription | None:
        for job in self.jobs:
            if job.id == job_id:
                return job
        return None

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """Load settings from a YAML file."""
        path = Path(path)
        if not path.exists():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)
        raw: dict[str, Any] = yaml.safe_load(path.read_text()) or {}
        return cls.model_validate(raw)
