"""CLI entry point for the candidate screening engine."""

import argparse
import logging
import sys

from screener.core.config import Settings
from screener.core.db import delete_overrides, init_db, insert_override, list_overrides
from screener.core.library import load_job_library, save_job_library, upsert_job
from screener.core.schemas import (
    BUCKET_LABELS,
    OVERRIDE_REASONS,
    Candidate,
    JobDescription,
    OverrideRequest,
)
from screener.engine.profiles import available_profiles
from screener.engine.store import CandidateStore
from screener.engine.synthesizer import generate_candidates
from screener.review.dashboard import export_candidates_json, filter_candidates, summarize_pool
from screener.review.overrides import apply_override, restore_overrides

_BUCKETS = ["strong", "potential", "low"]


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        default="config/settings.yaml",
        help="Path to settings YAML file (default: config/settings.yaml)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Candidate screening engine - synthesize, score and review applicant pools",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # --- pool subcommand ---
    pool_parser = subparsers.add_parser("pool", help="Show the ranked candidate pool for a job")
    _add_common(pool_parser)
    pool_parser.add_argument("--job", required=True, help="Job description id")
    pool_parser.add_argument(
        "--profile",
        default=None,
        choices=available_profiles(),
        help="Role profile for jobs outside the baseline config (default: fullstack)",
    )
    pool_parser.add_argument("--search", default="", help="Match name, role or skill")
    pool_parser.add_argument("--min-score", type=int, default=0, help="Minimum composite score")
    pool_parser.add_argument("--min-exp", type=int, default=0, help="Minimum years of experience")
    pool_parser.add_argument("--bucket", choices=_BUCKETS, help="Only show one bucket")
    pool_parser.add_argument("--limit", type=int, default=20, help="Rows to print (default: 20)")
    pool_parser.add_argument("--export", choices=["json"], help="Export results to format (json)")

    # --- store subcommand ---
    store_parser = subparsers.add_parser("store", help="Build the baseline store and summarize it")
    _add_common(store_parser)

    # --- override subcommand ---
    override_parser = subparsers.add_parser("override", help="Reclassify a candidate's bucket")
    _add_common(override_parser)
    override_parser.add_argument("--job", required=True, help="Job description id")
    override_parser.add_argument("--candidate", required=True, help="Candidate id, e.g. jd1-c7")
    override_parser.add_argument("--bucket", required=True, choices=_BUCKETS, help="Target bucket")
    override_parser.add_argument(
        "--reason", required=True, choices=list(OVERRIDE_REASONS), help="Primary reason",
    )
    override_parser.add_argument(
        "--justification", required=True, help="Free-text justification (min 10 chars)",
    )
    override_parser.add_argument("--actor", default="recruiter", help="Who made the override")
    override_parser.add_argument("--profile", default=None, choices=available_profiles())

    # --- audit subcommand ---
    audit_parser = subparsers.add_parser("audit", help="Print the override audit log")
    _add_common(audit_parser)
    audit_parser.add_argument("--candidate", default=None, help="Only one candidate")

    # --- add-job subcommand ---
    add_parser = subparsers.add_parser("add-job", help="Save a job description to the library")
    _add_common(add_parser)
    add_parser.add_argument("--id", required=True, dest="job_id")
    add_parser.add_argument("--title", required=True)
    add_parser.add_argument("--skills", required=True, help="Comma-separated must-have skills")
    add_parser.add_argument("--exp-min", type=int, default=0)
    add_parser.add_argument("--exp-max", type=int, default=0)
    add_parser.add_argument("--applications", type=int, default=0)

    return parser.parse_args(argv)


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def load_pool(settings: Settings, job_id: str, profile: str | None) -> list[Candidate]:
    """Return the pool for a baseline job, or synthesize one for a library job."""
    job = settings.find_job(job_id)
    if job is not None:
        return generate_candidates(job, settings.profile_for(job_id))

    for job in load_job_library(settings.library.path):
        if job.id == job_id:
            return generate_candidates(job, profile or settings.profile_for(job_id))

    msg = f"Unknown job id: {job_id}"
    raise ValueError(msg)


def load_reviewed_pool(settings: Settings, job_id: str, profile: str | None) -> list[Candidate]:
    """Return the pool for a job with logged overrides re-applied."""
    pool = load_pool(settings, job_id, profile)
    conn = init_db(settings.database.path)
    records = list_overrides(conn)
    conn.close()
    restore_overrides(pool, records)
    return pool


def cmd_pool(settings: Settings, args: argparse.Namespace) -> None:
    """Handle pool subcommand."""
    pool = load_reviewed_pool(settings, args.job, args.profile)
    ranked = filter_candidates(
        pool,
        search=args.search,
        min_score=args.min_score,
        min_experience=args.min_exp,
        bucket=args.bucket,
    )

    if args.export == "json":
        print(export_candidates_json(ranked))
        return

    summary = summarize_pool(pool)
    print(f"Job '{args.job}': {summary.total} applications, avg score {summary.average_score}")
    print(f"  Strong: {summary.strong} ({summary.pct_strong}%)  "
          f"Potential: {summary.potential} ({summary.pct_potential}%)  Low: {summary.low}")
    print(f"Showing {min(args.limit, len(ranked))} of {len(ranked)} matching candidates:")
    for rank, c in enumerate(ranked[: args.limit], start=1):
        gate = f"  [{len(c.must_have_violations)} violations]" if c.must_have_violations else ""
        print(f"  {rank:>3}. {c.id:<10} {c.name:<24} {c.composite_score:>3}  "
              f"{BUCKET_LABELS[c.active_bucket]:<17} {c.years_of_experience}y{gate}")


def cmd_store(settings: Settings) -> None:
    """Handle store subcommand."""
    store = CandidateStore.build(settings.jobs, settings.role_profiles)
    print(f"Candidate store: {len(store)} jobs")
    for job in settings.jobs:
        summary = summarize_pool(store.get(job.id))
        print(f"  {job.id:<6} {job.title:<32} {summary.total:>4} candidates  "
              f"strong={summary.strong} potential={summary.potential} low={summary.low}")


def cmd_override(settings: Settings, args: argparse.Namespace) -> None:
    """Handle override subcommand."""
    pool = load_reviewed_pool(settings, args.job, args.profile)
    candidate = next((c for c in pool if c.id == args.candidate), None)
    if candidate is None:
        msg = f"Unknown candidate id for job '{args.job}': {args.candidate}"
        raise ValueError(msg)

    request = OverrideRequest(
        target_bucket=args.bucket,
        reason=args.reason,
        justification=args.justification,
        actor=args.actor,
    )
    record = apply_override(candidate, request)
    conn = init_db(settings.database.path)
    if record is None:
        delete_overrides(conn, candidate.id)
        conn.close()
        print(f"{candidate.id} is already '{candidate.bucket}' - override cleared.")
        return

    insert_override(conn, record)
    conn.close()
    print(f"{record.candidate_name} ({record.candidate_id}): "
          f"{BUCKET_LABELS[record.original_bucket]} -> {BUCKET_LABELS[record.overridden_bucket]} "
          f"({record.direction})")


def cmd_audit(settings: Settings, args: argparse.Namespace) -> None:
    """Handle audit subcommand."""
    conn = init_db(settings.database.path)
    records = list_overrides(conn, args.candidate)
    conn.close()

    print(f"{len(records)} overrides logged")
    for r in records:
        print(f"  {r.created_at:%Y-%m-%d %H:%M}  {r.candidate_id:<10} {r.candidate_name:<24} "
              f"{r.original_bucket} -> {r.overridden_bucket} ({r.direction})  "
              f"{r.reason}: {r.justification}  [{r.actor}]")


def cmd_add_job(settings: Settings, args: argparse.Namespace) -> None:
    """Handle add-job subcommand."""
    if settings.find_job(args.job_id) is not None:
        msg = f"Job id '{args.job_id}' is part of the baseline config"
        raise ValueError(msg)
    job = JobDescription(
        id=args.job_id,
        title=args.title,
        must_have_skills=[s.strip() for s in args.skills.split(",") if s.strip()],
        experience_min=args.exp_min,
        experience_max=args.exp_max,
        application_count=args.applications,
    )
    jobs = upsert_job(load_job_library(settings.library.path), job)
    save_job_library(jobs, settings.library.path)
    print(f"Saved '{job.id}' to {settings.library.path} ({len(jobs)} jobs in library)")


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        settings = Settings.from_yaml(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        if args.command == "pool":
            cmd_pool(settings, args)
        elif args.command == "store":
            cmd_store(settings)
        elif args.command == "override":
            cmd_override(settings, args)
        elif args.command == "audit":
            cmd_audit(settings, args)
        elif args.command == "add-job":
            cmd_add_job(settings, args)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
