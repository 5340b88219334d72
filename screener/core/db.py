"""SQLite persistence for the recruiter override audit log."""

import sqlite3
from datetime import datetime
from pathlib import Path

from screener.core.schemas import OverrideRecord

_OVERRIDES_TABLE = """
CREATE TABLE IF NOT EXISTS overrides (
    id                INTEGER PRIMARY KEY AUTOINCREMENT,
    candidate_id      TEXT    NOT NULL,
    candidate_name    TEXT    NOT NULL,
    original_bucket   TEXT    NOT NULL,
    original_score    INTEGER NOT NULL,
    overridden_bucket TEXT    NOT NULL,
    direction         TEXT    NOT NULL,
    reason            TEXT    NOT NULL,
    justification     TEXT    NOT NULL,
    actor             TEXT    NOT NULL,
    created_at        TEXT    NOT NULL
);
"""

_OVERRIDES_INDEX = """
CREATE INDEX IF NOT EXISTS idx_overrides_candidate ON overrides (candidate_id);
"""


def init_db(path: str | Path) -> sqlite3.Connection:
    """Create the database and tables, returning a connection."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    conn.execute(_OVERRIDES_TABLE)
    conn.execute(_OVERRIDES_INDEX)
    conn.commit()
    return conn


def insert_override(conn: sqlite3.Connection, record: OverrideRecord) -> int:
    """Append an override to the audit log. Returns the new row id."""
    cursor = conn.execute(
        """
        INSERT INTO overrides
            (candidate_id, candidate_name, original_bucket, original_score,
             overridden_bucket, direction, reason, justification, actor, created_at)
        VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
        """,
        (
            record.candidate_id,
            record.candidate_name,
            record.original_bucket,
            record.original_score,
            record.overridden_bucket,
            record.direction,
            record.reason,
            record.justification,
            record.actor,
            record.created_at.isoformat(),
        ),
    )
    conn.commit()
    return int(cursor.lastrowid or 0)


def list_overrides(
    conn: sqlite3.Connection,
    candidate_id: str | None = None,
) -> list[OverrideRecord]:
    """Return logged overrides, oldest first, optionally for one candidate."""
    query = "SELECT * FROM overrides"
    params: tuple[str, ...] = ()
    if candidate_id is not None:
        query += " WHERE candidate_id = ?"
        params = (candidate_id,)
    query += " ORDER BY id"
    rows = conn.execute(query, params).fetchall()
    return [
        OverrideRecord(
            candidate_id=row["candidate_id"],
            candidate_name=row["candidate_name"],
            original_bucket=row["original_bucket"],
            original_score=row["original_score"],
            overridden_bucket=row["overridden_bucket"],
            direction=row["direction"],
            reason=row["reason"],
            justification=row["justification"],
            actor=row["actor"],
            created_at=datetime.fromisoformat(row["created_at"]),
        )
        for row in rows
    ]


def delete_overrides(conn: sqlite3.Connection, candidate_id: str) -> int:
    """Remove every logged override for a candidate. Returns rows deleted."""
    cursor = conn.execute("DELETE FROM overrides WHERE candidate_id = ?", (candidate_id,))
    conn.commit()
    return cursor.rowcount
