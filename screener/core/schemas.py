"""Core data models for the screening engine."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

Bucket = Literal["strong", "potential", "low"]
OverrideDirection = Literal["upgrade", "downgrade"]

# Lower rank = better match.
BUCKET_RANK: dict[str, int] = {"strong": 0, "potential": 1, "low": 2}

BUCKET_LABELS: dict[str, str] = {
    "strong": "Strong Match",
    "potential": "Potential",
    "low": "Limited Alignment",
}

OVERRIDE_REASONS = (
    "Domain Expertise",
    "Culture Fit",
    "Seniority Mismatch",
    "Niche Skill Match",
    "Leadership Potential",
    "Portfolio Quality",
    "Communication Skills",
    "Referral Context",
)

MIN_JUSTIFICATION_LENGTH = 10


class JobDescription(BaseModel):
    """A job opening owned by the surrounding application.

    Frozen: the engine only reads it.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    department: str = ""
    location: str = ""
    experience_min: int = Field(default=0, ge=0)
    experience_max: int = Field(default=0, ge=0)
    description: str = ""
    must_have_skills: tuple[str, ...] = ()
    nice_to_have: tuple[str, ...] = ()
    status: Literal["Draft", "Open", "Closed"] = "Open"
    created_at: datetime | None = None
    application_count: int = 0

    @field_validator("id")
    @classmethod
    def id_not_empty(cls, v: str) -> str:
        if not v.strip():
            msg = "id must not be empty"
            raise ValueError(msg)
        return v.strip()

    @field_validator("must_have_skills")
    @classmethod
    def no_duplicate_skills(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        seen: set[str] = set()
        for skill in v:
            if skill in seen:
                msg = f"duplicate must-have skill: '{skill}'"
                raise ValueError(msg)
            seen.add(skill)
        return v

    @model_validator(mode="after")
    def experience_bounds_ordered(self) -> "JobDescription":
        if self.experience_max and self.experience_min > self.experience_max:
            msg = (
                f"experience_min ({self.experience_min}) must not exceed "
                f"experience_max ({self.experience_max})"
            )
            raise ValueError(msg)
        return self


class ScoreDimension(BaseModel):
    """One weighted slice of the composite score."""

    model_config = ConfigDict(frozen=True)

    label: str
    score: int = Field(ge=0)
    max_score: int = Field(gt=0)
    reasoning: str = ""


class ExperienceEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: str
    company: str
    duration: str
    summary: str = ""


class Candidate(BaseModel):
    """A synthesized applicant for one job.

    Generation fields are written once by the synthesizer. Review code may
    only touch the shortlist flags and the override_* fields; the original
    ``bucket`` and ``composite_score`` stay readable for audit.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str
    name: str
    email: str
    phone: str
    current_role: str
    current_company: str
    years_of_experience: int = Field(ge=0)
    location: str
    education: str
    education_institution: str = ""
    seniority: str = ""
    domain: str = ""
    is_referral: bool = False
    experience_history: list[ExperienceEntry] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)

    composite_score: int = Field(ge=0, le=100)
    bucket: Bucket
    dimensions: list[ScoreDimension] = Field(default_factory=list)
    must_have_skills: list[str] = Field(default_factory=list)
    must_have_violations: list[str] = Field(default_factory=list)
    summary: str = ""

    is_shortlisted: bool = False
    is_under_hm_review: bool = False
    resume_file_name: str = ""

    overridden_bucket: Bucket | None = None
    override_reason: str | None = None
    override_justification: str | None = None
    override_by: str | None = None
    override_at: datetime | None = None

    @property
    def active_bucket(self) -> Bucket:
        """Bucket shown to reviewers: the override if present, else the original."""
        return self.overridden_bucket or self.bucket


class OverrideRequest(BaseModel):
    """A recruiter's request to reclassify a candidate."""

    model_config = ConfigDict(frozen=True)

    target_bucket: Bucket
    reason: str
    justification: str
    actor: str = "recruiter"

    @field_validator("reason")
    @classmethod
    def reason_in_allowed(cls, v: str) -> str:
        if v not in OVERRIDE_REASONS:
            msg = f"reason must be one of {list(OVERRIDE_REASONS)}, got '{v}'"
            raise ValueError(msg)
        return v

    @field_validator("justification")
    @classmethod
    def justification_long_enough(cls, v: str) -> str:
        v = v.strip()
        if len(v) < MIN_JUSTIFICATION_LENGTH:
            msg = f"justification must be at least {MIN_JUSTIFICATION_LENGTH} characters"
            raise ValueError(msg)
        return v


class OverrideRecord(BaseModel):
    """Audit row: original classification next to the recruiter's override."""

    model_config = ConfigDict(frozen=True)

    candidate_id: str
    candidate_name: str
    original_bucket: Bucket
    original_score: int
    overridden_bucket: Bucket
    direction: OverrideDirection
    reason: str
    justification: str
    actor: str
    created_at: datetime = Field(default_factory=datetime.now)
