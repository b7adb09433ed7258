"""SQLite cache for API responses."""

import hashlib
import logging
import sqlite3
from datetime import datetime, timezone
from pathlib import Path


logger = logging.getLogger(__name__)


def url_hash(url: str) -> str:
    """SHA-256 hex digest of the full URL."""
    return hashlib.sha256(url.encode("utf-8")).hexdigest()


class ResponseCache:
    """SQLite-based cache for raw HTTP response bodies."""

    def __init__(self, db_path: Path) -> None:
        self.db_path = db_path
        self._init_db()

    def _get_connection(self) -> sqlite3.Connection:
        """Get database connection with row factory."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_db(self) -> None:
        """Initialize database schema."""
        with self._get_connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS responses (
                    url_hash TEXT PRIMARY KEY,
                    url TEXT NOT NULL,
                    body TEXT NOT NULL,
                    fetched_at TEXT NOT NULL
                )
            """)

    def get_fresh(
        self, url: str, ttl_seconds: float, now: datetime | None = None
    ) -> str | None:
        """
        Return the cached body for a URL if it is younger than the TTL.

        Args:
            url: Full request URL, query string included
            ttl_seconds: Maximum age of a usable entry
            now: Reference time (defaults to the current UTC time)

        Returns:
            Response body, or None when missing or expired
        """
        with self._get_connection() as conn:
            row = conn.execute(
                "SELECT body, fetched_at FROM responses WHERE url_hash = ?",
                (url_hash(url),),
            ).fetchone()

        if row is None:
            return None

        now = now or datetime.now(timezone.utc)
        age = (now - datetime.fromisoformat(row["fetched_at"])).total_seconds()
        if age < ttl_seconds:
            return row["body"]

        logger.debug(f"Cached response expired for {url}")
        return None

    def store(self, url: str, body: str, fetched_at: datetime) -> None:
        """Store or replace the body for a URL."""
        with self._get_connection() as conn:
            conn.execute(
                """
                INSERT OR REPLACE INTO responses (url_hash, url, body, fetched_at)
                VALUES (?, ?, ?, ?)
                """,
                (url_hash(url), url, body, fetched_at.isoformat()),
            )

    def get_cache_status(self) -> dict:
        """Get entry count and fetch time range of the cache."""
        with self._get_connection() as conn:
            row = conn.execute("""
                SELECT
                    COUNT(*) as entry_count,
                    MIN(fetched_at) as oldest,
                    MAX(fetched_at) as newest
                FROM responses
            """).fetchone()

        return {
            "entry_count": row["entry_count"],
            "oldest": row["oldest"],
            "newest": row["newest"],
        }
