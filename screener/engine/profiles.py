"""Role profile registry: vocabulary bundles per role family.

Each profile supplies titles, a skill pool, tech-stack strings and the two
narrative functions used to write experience-history summaries. The registry
is read-only; look profiles up with ``get_profile``.
"""

import logging
from collections.abc import Callable
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

DEFAULT_PROFILE = "fullstack"


class RoleProfile(BaseModel):
    """Static vocabulary for one role family."""

    model_config = ConfigDict(frozen=True)

    key: str
    titles: tuple[str, ...]
    prev_titles: tuple[str, ...]
    skill_pool: tuple[str, ...]
    tech_stacks: tuple[str, ...]
    summary_fn: Callable[[str, str], str]
    prev_summary_fn: Callable[[str], str]


# ---------------------------------------------------------------------------
# Narrative functions
# ---------------------------------------------------------------------------


def _fullstack_summary(company: str, tech: str) -> str:
    return (
        f"Leading full-stack feature development on {company}'s core product. "
        "Architected a microservice layer that reduced API response times by 38%. "
        "Mentors a team of 3 junior engineers and drives sprint planning alongside "
        f"the product team. Tech stack: {tech}."
    )


def _fullstack_prev_summary(company: str) -> str:
    return (
        f"Contributed to {company}'s core platform team. Built RESTful APIs consumed "
        "by over 200k daily active users. Reduced database query latency by 40% "
        "through indexing strategy improvements."
    )


def _product_summary(company: str, tech: str) -> str:
    return (
        f"Driving the product roadmap at {company} for the core payments platform. "
        "Partnered with engineering and design to ship 6 major features impacting "
        f"3M+ active users. Uses {tech} to track KPIs and inform product decisions. "
        "Led a pricing revamp that increased ARPU by 18%."
    )


def _product_prev_summary(company: str) -> str:
    return (
        f"Built the initial product analytics framework at {company}. Wrote detailed "
        "PRDs and user stories for a 12-engineer team. Launched 2 beta features that "
        "each gained 30k+ users in the first 30 days."
    )


def _backend_summary(company: str, tech: str) -> str:
    return (
        f"Architecting and operating {company}'s backend infrastructure at scale. "
        "Designed a distributed event-driven system processing 5M events/day using "
        f"{tech}. Leads a team of 6 backend engineers, drives system design reviews, "
        "and owns the reliability roadmap. Reduced P99 latency from 800ms to 120ms "
        "across core APIs."
    )


def _backend_prev_summary(company: str) -> str:
    return (
        f"Built RESTful and gRPC services at {company}, serving high-traffic consumer "
        "applications. Contributed to the migration of a monolithic system to "
        "microservices. Introduced connection pooling strategies that reduced "
        "database load by 55%."
    )


def _dataanalyst_summary(company: str, tech: str) -> str:
    return (
        f"Leading analytics for {company}'s growth and retention team. Uses {tech} to "
        "build automated dashboards and run weekly product experiments. Designed an "
        "attribution model that improved marketing ROI measurement by 45%. Partnered "
        "with product on a feature adoption analysis that drove a 12% improvement "
        "in D30 retention."
    )


def _dataanalyst_prev_summary(company: str) -> str:
    return (
        f"Developed self-serve reporting infrastructure at {company} using SQL and "
        "Tableau. Ran 10+ A/B tests quarterly with rigorous statistical significance "
        "checks. Documented data dictionaries adopted company-wide."
    )


def _devops_summary(company: str, tech: str) -> str:
    return (
        f"Managing {company}'s entire cloud infrastructure across 3 regions using "
        f"{tech}. Achieved 99.97% uptime SLA over 12 consecutive months. Reduced "
        "infrastructure costs by 34% through right-sizing and spot-instance adoption. "
        "Owns the complete CI/CD pipeline used by 80+ engineers daily."
    )


def _devops_prev_summary(company: str) -> str:
    return (
        f"Managed containerized workloads and CI/CD at {company}. Automated routine "
        "infrastructure tasks, saving the team 20+ engineering hours per month. "
        "Introduced centralized observability using ELK stack and PagerDuty "
        "integrations."
    )


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

ROLE_PROFILES: MappingProxyType[str, RoleProfile] = MappingProxyType({
    "fullstack": RoleProfile(
        key="fullstack",
        titles=(
            "Senior Full-Stack Engineer", "Software Development Engineer II",
            "Full-Stack Engineer", "Senior Software Engineer", "Staff Engineer",
            "Technology Lead", "Principal Engineer",
        ),
        prev_titles=(
            "Software Development Engineer", "Full-Stack Developer",
            "Junior Software Engineer", "Associate Engineer", "Software Engineer I",
        ),
        skill_pool=(
            "React", "Node.js", "TypeScript", "PostgreSQL", "GraphQL", "AWS", "Redis",
            "Docker", "MongoDB", "Express.js", "Next.js", "Git", "CSS", "HTML",
            "JavaScript",
        ),
        tech_stacks=(
            "React, Node.js, TypeScript, PostgreSQL",
            "Next.js, Express.js, MongoDB, Redis",
            "React, Python (FastAPI), PostgreSQL, Docker",
            "Vue.js, Node.js, TypeScript, MySQL",
            "React, Node.js, GraphQL, AWS",
        ),
        summary_fn=_fullstack_summary,
        prev_summary_fn=_fullstack_prev_summary,
    ),
    "product": RoleProfile(
        key="product",
        titles=(
            "Senior Product Manager", "Product Manager", "Group Product Manager",
            "Associate Director - Product", "VP of Product", "Director of Product",
        ),
        prev_titles=(
            "Associate Product Manager", "Business Analyst", "Product Analyst",
            "Junior PM", "Strategy Consultant",
        ),
        skill_pool=(
            "Product Strategy", "User Research", "SQL", "Fintech Experience",
            "Analytics", "Agile", "Roadmapping", "A/B Testing", "OKRs",
            "Stakeholder Management", "Data Analysis", "Jira", "Figma",
        ),
        tech_stacks=(
            "Mixpanel, SQL, Jira, Figma",
            "Amplitude, Tableau, Confluence, Looker",
            "Google Analytics, SQL, Power BI",
        ),
        summary_fn=_product_summary,
        prev_summary_fn=_product_prev_summary,
    ),
    "backend": RoleProfile(
        key="backend",
        titles=(
            "Backend Lead", "Senior Backend Engineer", "Staff Backend Engineer",
            "Platform Engineer", "Node.js Lead", "Tech Lead (Backend)",
            "Principal Backend Engineer", "Cloud Architect",
        ),
        prev_titles=(
            "Backend Developer", "Software Engineer (Node.js)",
            "Server-Side Engineer", "API Engineer",
        ),
        skill_pool=(
            "Node.js", "PostgreSQL", "Redis", "System Design", "Cloud Architecture",
            "Kubernetes", "Go", "Python", "Microservices", "AWS", "Docker", "Kafka",
            "gRPC", "TypeScript", "MongoDB",
        ),
        tech_stacks=(
            "Node.js, PostgreSQL, Redis, AWS",
            "Node.js, TypeScript, Kafka, Kubernetes",
            "Go, PostgreSQL, Redis, Docker",
            "Node.js, MongoDB, RabbitMQ, GCP",
        ),
        summary_fn=_backend_summary,
        prev_summary_fn=_backend_prev_summary,
    ),
    "dataanalyst": RoleProfile(
        key="dataanalyst",
        titles=(
            "Senior Data Analyst", "Data Analyst", "Growth Analyst",
            "Business Intelligence Analyst", "Analytics Lead", "Product Analyst",
        ),
        prev_titles=(
            "Junior Data Analyst", "Analyst Trainee", "BI Developer",
            "Data Associate", "Research Analyst",
        ),
        skill_pool=(
            "SQL", "Python", "Tableau", "Statistics", "dbt", "BigQuery", "Looker",
            "Excel", "Power BI", "Pandas", "Numpy", "A/B Testing", "Data Modeling",
            "Airflow",
        ),
        tech_stacks=(
            "SQL, Python (Pandas), Tableau, Airflow",
            "BigQuery, dbt, Looker, Python",
            "SQL, Power BI, Excel, Python",
            "Redshift, SQL, Tableau, dbt",
        ),
        summary_fn=_dataanalyst_summary,
        prev_summary_fn=_dataanalyst_prev_summary,
    ),
    "devops": RoleProfile(
        key="devops",
        titles=(
            "Senior DevOps Engineer", "DevOps Lead", "Platform Engineer",
            "Site Reliability Engineer", "Infrastructure Lead", "Cloud DevOps Engineer",
        ),
        prev_titles=(
            "DevOps Engineer", "Systems Engineer", "Linux Administrator",
            "CI/CD Engineer", "Cloud Engineer",
        ),
        skill_pool=(
            "Kubernetes", "Terraform", "AWS", "CI/CD", "Go", "Prometheus", "Grafana",
            "Docker", "Helm", "GitHub Actions", "Ansible", "GCP", "Linux", "Bash",
            "Python",
        ),
        tech_stacks=(
            "Kubernetes, Terraform, AWS, Prometheus",
            "Docker, Helm, GCP, ArgoCD",
            "Terraform, AWS EKS, Grafana, GitHub Actions",
            "Ansible, Jenkins, AWS, Datadog",
        ),
        summary_fn=_devops_summary,
        prev_summary_fn=_devops_prev_summary,
    ),
})


def get_profile(key: str) -> RoleProfile:
    """Return the profile for ``key``, falling back to the full-stack profile."""
    profile = ROLE_PROFILES.get(key)
    if profile is None:
        logger.debug("Unknown role profile '%s' - using '%s'", key, DEFAULT_PROFILE)
        return ROLE_PROFILES[DEFAULT_PROFILE]
    return profile


def available_profiles() -> list[str]:
    """Return sorted list of registered profile keys."""
    return sorted(ROLE_PROFILES)
