"""Candidate synthesizer: deterministic applicant pools per job description.

Every call builds a fresh generator from the job id, and the draw order
below is fixed, so the same (job, profile) always yields the same pool.
Changing the order of any ``rng()`` / ``pick`` call changes every pool.
"""

import logging

from screener.core.schemas import Candidate, ExperienceEntry, JobDescription, ScoreDimension
from screener.engine import reasoning
from screener.engine.pools import (
    DOMAINS,
    EDUCATION_LEVELS,
    FIRST_NAMES,
    INSTITUTIONS,
    LAST_NAMES,
    LOCATIONS,
    PREV_COMPANIES,
    SENIORITIES,
    TECH_COMPANIES,
    pick,
)
from screener.engine.profiles import RoleProfile, get_profile
from screener.engine.rng import Rng, seed_for, seeded_rng
from screener.engine.scoring import (
    classify_bucket,
    composite_score,
    dimension_scores,
    round_half_up,
)

logger = logging.getLogger(__name__)

NAME_RETRY_LIMIT = 20
MAX_YEARS = 12
SKILL_DROP_PROBABILITY = 0.3
EXTRA_SKILL_PROBABILITY = 0.5
MAX_EXTRA_SKILLS = 4
BASELINE_SKILL = "Git"
REFERRAL_PROBABILITY = 0.12
REFERENCE_YEAR = 2026
MAX_CURRENT_TENURE = 4

EXPERIENCE_SHORTFALL_PREFIX = "Experience below minimum"


def experience_shortfall(yoe: int, minimum: int) -> str:
    return f"{EXPERIENCE_SHORTFALL_PREFIX} ({yoe}y vs {minimum}y required)"


def generate_candidates(job: JobDescription, profile_key: str) -> list[Candidate]:
    """Synthesize ``job.application_count`` scored candidates for a job.

    Args:
        job: The job description to screen against.
        profile_key: Role family (fullstack, product, backend, dataanalyst,
            devops). Unknown keys use the full-stack profile.

    Returns:
        Candidates in sequence order 1..N. Empty when the count is <= 0.
    """
    profile = get_profile(profile_key)
    count = job.application_count
    if count <= 0:
        return []

    rng = seeded_rng(seed_for(job.id))
    used_names: set[str] = set()
    candidates = [
        _synthesize_one(job, profile, rng, index, used_names)
        for index in range(1, count + 1)
    ]
    logger.debug(
        "Synthesized %d candidates for '%s' (profile=%s)",
        len(candidates), job.id, profile.key,
    )
    return candidates


def _draw_name(rng: Rng, index: int, used_names: set[str]) -> tuple[str, str, str]:
    """Draw a pool-unique full name. Returns (full_name, first, last)."""
    first = last = name = ""
    # One initial draw plus NAME_RETRY_LIMIT retries.
    for _ in range(NAME_RETRY_LIMIT + 1):
        first = pick(FIRST_NAMES, rng)
        last = pick(LAST_NAMES, rng)
        name = f"{first} {last}"
        if name not in used_names:
            break
    else:
        logger.debug("Name '%s' exhausted retries - disambiguating with %d", name, index)
        name = f"{name} {index}"
    used_names.add(name)
    return name, first, last


def _experience_history(
    profile: RoleProfile,
    yoe: int,
    current_role: str,
    company: str,
    prev_role: str,
    prev_company: str,
    tech_stack: str,
) -> list[ExperienceEntry]:
    half = round_half_up(yoe, 2)
    current_tenure = min(MAX_CURRENT_TENURE, half) if yoe > 3 else yoe
    current_start = REFERENCE_YEAR - current_tenure
    history = [
        ExperienceEntry(
            role=current_role,
            company=company,
            duration=f"{current_start} - Present",
            summary=profile.summary_fn(company, tech_stack),
        ),
    ]
    if yoe > 2:
        prev_start = current_start - max(1, yoe - half)
        history.append(
            ExperienceEntry(
                role=prev_role,
                company=prev_company,
                duration=f"{prev_start} - {current_start}",
                summary=profile.prev_summary_fn(prev_company),
            )
        )
    return history


def _synthesize_one(
    job: JobDescription,
    profile: RoleProfile,
    rng: Rng,
    index: int,
    used_names: set[str],
) -> Candidate:
    name, first, last = _draw_name(rng, index, used_names)
    email = f"{first.lower()}.{last.lower()}{index}@gmail.com"
    yoe = max(1, int(rng() * MAX_YEARS) + 1)
    company = pick(TECH_COMPANIES, rng)
    prev_company = pick(PREV_COMPANIES, rng)
    current_role = pick(profile.titles, rng)
    prev_role = pick(profile.prev_titles, rng)
    tech_stack = pick(profile.tech_stacks, rng)

    # Independent coin flip per must-have, not sampling without replacement.
    must_haves = job.must_have_skills
    matched = [skill for skill in must_haves if rng() > SKILL_DROP_PROBABILITY]
    violations = [skill for skill in must_haves if skill not in matched]
    if yoe < job.experience_min:
        violations.append(experience_shortfall(yoe, job.experience_min))

    base_score = int(rng() * 55) + 35
    final_score = composite_score(base_score, len(violations))
    bucket = classify_bucket(final_score, len(violations))

    education = pick(EDUCATION_LEVELS, rng)
    institution = pick(INSTITUTIONS, rng)
    location = pick(LOCATIONS, rng)
    seniority = pick(SENIORITIES, rng)
    domain = pick(DOMAINS, rng)

    history = _experience_history(
        profile, yoe, current_role, company, prev_role, prev_company, tech_stack,
    )

    # Every pool skill not already matched gets a draw, even past the cap.
    extras = [
        skill for skill in profile.skill_pool
        if skill not in matched and rng() > EXTRA_SKILL_PROBABILITY
    ][:MAX_EXTRA_SKILLS]
    skills = list(dict.fromkeys([*matched, *extras, BASELINE_SKILL]))

    phone = f"+91 {int(7_000_000_000 + rng() * 2_999_999_999)}"
    is_referral = rng() < REFERRAL_PROBABILITY

    return Candidate(
        id=f"{job.id}-c{index}",
        name=name,
        email=email,
        phone=phone,
        current_role=current_role,
        current_company=company,
        years_of_experience=yoe,
        location=location,
        education=education,
        education_institution=institution,
        seniority=seniority,
        domain=domain,
        is_referral=is_referral,
        experience_history=history,
        skills=skills,
        composite_score=final_score,
        bucket=bucket,
        dimensions=_dimensions(final_score, len(matched), job, yoe, company),
        must_have_skills=list(must_haves),
        must_have_violations=violations,
        summary=reasoning.candidate_summary(
            name=name,
            job_title=job.title,
            composite=final_score,
            yoe=yoe,
            current_role=current_role,
            company=company,
            matched=len(matched),
            total=len(must_haves),
            violations=violations,
        ),
        resume_file_name=f"{first.lower()}_{last.lower()}_resume.pdf",
    )


def _dimensions(
    composite: int, matched: int, job: JobDescription, yoe: int, company: str,
) -> list[ScoreDimension]:
    scores = dimension_scores(composite)
    (_, skill, skill_max), (_, exp, exp_max), (_, ctx, ctx_max), (_, traj, traj_max) = scores
    texts = (
        reasoning.skill_reasoning(skill, skill_max, matched, len(job.must_have_skills), company),
        reasoning.experience_reasoning(exp, exp_max, yoe, job.experience_min, company),
        reasoning.role_context_reasoning(ctx, ctx_max, company),
        reasoning.trajectory_reasoning(traj, traj_max, yoe, company),
    )
    return [
        ScoreDimension(label=label, score=score, max_score=max_score, reasoning=text)
        for (label, score, max_score), text in zip(scores, texts)
    ]
