"""Explanatory text for scores.

Pure functions keyed on score-percentage bands. They never feed back into
the numbers, so score math can be tested without the prose.
"""

from screener.engine.scoring import POTENTIAL_THRESHOLD, STRONG_THRESHOLD, score_percent


def skill_reasoning(score: int, max_score: int, matched: int, total: int, company: str) -> str:
    pct = score_percent(score, max_score)
    if pct >= 85:
        return (
            f"Exceptional coverage of all {total} required skills with deep production "
            f"experience at {company}. Skill recency is excellent, indicating active use "
            "of the primary tech stack. Semantic match with JD requirements is "
            "near-perfect, showing both breadth and specialized depth."
        )
    if pct >= 60:
        return (
            f"Covers {matched} of {total} mandatory skills. Missing criteria are "
            "partially offset by adjacent technology experience. Recency is moderate; "
            "some skills haven't been utilized in the most recent role. Overall "
            "technical alignment is solid but requires minor upskilling."
        )
    return (
        f"Significant skill gap detected; only {matched} of {total} required skills are "
        "evidenced. Recency modifier is low, suggesting dated familiarity with the core "
        "stack. Technical alignment is below the threshold for immediate productivity "
        "in this specific role."
    )


def experience_reasoning(
    score: int, max_score: int, yoe: int, min_required: int, company: str,
) -> str:
    pct = score_percent(score, max_score)
    if pct >= 85:
        return (
            f"Strong {yoe}-year history with consistent domain advancement. Seniority "
            f"level perfectly matches JD expectations, with clear evidence of ownership "
            f"at {company}. Stability signal is high, showing consistent tenure and "
            "increasing responsibility across all prior engineering positions."
        )
    if pct >= 60:
        return (
            f"Meets the {min_required}-year threshold with {yoe} years of total "
            "experience. Seniority alignment is good, though depth in specific domain "
            "verticals is slightly thinner than ideal. Stability is acceptable, hampered "
            "only by one relatively short tenure early in the career."
        )
    gap = "below the mandatory minimum" if yoe < min_required else "short of the ideal range"
    return (
        f"{yoe} years of experience falls {gap}. Domain-aligned tenure is limited, and "
        "seniority level is slightly junior for the role context. Stability signals "
        "are mixed due to frequent role transitions."
    )


def role_context_reasoning(score: int, max_score: int, company: str) -> str:
    pct = score_percent(score, max_score)
    if pct >= 80:
        return (
            f"Clear ownership signals detected; architected revenue-critical systems at "
            f"{company}. Scale indicators are strong, including mentions of high-traffic "
            "user bases and system-level impact. Responsibilities align with a "
            "high-bandwidth senior individual contributor managing significant "
            "technical complexity."
        )
    if pct >= 55:
        return (
            "Moderate ownership signals with evidence of lead-level contributions in "
            "collaborative settings. Scale of systems handled is respectable but lacks "
            "the massive throughput required for top-tier scores. Role context shows a "
            "steady progression toward autonomous project ownership."
        )
    return (
        "Limited evidence of broad ownership or system-scale complexity. Work reflects "
        "execution of well-scoped tasks under close guidance. Scope of impact is "
        "primarily feature-level rather than architecture-level, suggesting a more "
        "junior responsibility profile relative to JD needs."
    )


def trajectory_reasoning(score: int, max_score: int, yoe: int, company: str) -> str:
    pct = score_percent(score, max_score)
    if pct >= 80:
        return (
            f"Excellent career trajectory over {yoe} years with rapid title progression. "
            "Consistent domain focus and increasing scope indicate high performance "
            f"recognition. Directional consistency is perfect, with each role at "
            f"{company} and earlier showing logical career growth."
        )
    if pct >= 55:
        return (
            "Healthy career trajectory with steady advancement. Title progression is "
            f"industry-standard for a {yoe}-year career. Some lateral domain shifts "
            "introduce minor noise, but overall growth remains positive toward "
            "senior-level contributions."
        )
    return (
        "Trajectory signals are below expectations for this tenure. Title progression "
        "has been slower than peer averages, and domain consistency is variable. "
        "Responsibility growth isn't clearly demonstrated across different company "
        "stages or role history."
    )


def alignment_label(composite: int) -> str:
    if composite >= STRONG_THRESHOLD:
        return "strong"
    if composite >= POTENTIAL_THRESHOLD:
        return "moderate"
    return "limited"


def candidate_summary(
    *,
    name: str,
    job_title: str,
    composite: int,
    yoe: int,
    current_role: str,
    company: str,
    matched: int,
    total: int,
    violations: list[str],
) -> str:
    """One-paragraph overall assessment shown on the candidate card."""
    if violations:
        gating = f" Note: {violations[0]} gap identified."
    else:
        gating = " No gating violations identified."
    return (
        f"{name} shows {alignment_label(composite)} alignment for {job_title}. "
        f"{yoe}y of experience, currently {current_role} at {company}. "
        f"Matched {matched}/{total} core skills.{gating}"
    )
