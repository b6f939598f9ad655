"""SQLite database for storing day records and company holidays."""

import logging
import sqlite3
from collections.abc import Callable
from pathlib import Path

from kintai.calendar_math import date_key, days_in_month, normalize_date_key
from kintai.models import DayRecord
from kintai.records import sanitize

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path.home() / ".config" / "kintai" / "attendance.db"


class RecordDatabase:
    """Database for storing and retrieving day records and company holidays."""

    def __init__(self, db_path: Path = DEFAULT_DB_PATH) -> None:
        self.db_path = db_path
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _init_db(self) -> None:
        """Initialize database schema."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS day_records (
                    date TEXT PRIMARY KEY,
                    kind TEXT NOT NULL,
                    start TEXT,
                    "end" TEXT,
                    note TEXT,
                    judged INTEGER NOT NULL
                )
            """)
            conn.execute("""
                CREATE TABLE IF NOT EXISTS company_holidays (
                    date TEXT PRIMARY KEY
                )
            """)
            conn.commit()

    def get_record(self, key: str) -> DayRecord:
        """Get the sanitized record for a date; a missing row is the default record."""
        with sqlite3.connect(self.db_path) as conn:
            conn.row_factory = sqlite3.Row
            row = conn.execute(
                'SELECT kind, start, "end", note, judged FROM day_records WHERE date = ?',
                (normalize_date_key(key),),
            ).fetchone()
        return sanitize(dict(row) if row else None)

    def save_record(self, key: str, record: DayRecord) -> None:
        """Save or update a record; default records are deleted instead."""
        key = normalize_date_key(key)
        if record.is_default:
            self.delete_record(key)
            return

        data = record.to_dict()
        with sqlite3.connect(self.db_path) as conn:
            conn.execute(
                """
                INSERT OR REPLACE INTO day_records
                (date, kind, start, "end", note, judged)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    key,
                    data["kind"],
                    data["start"],
                    data["end"],
                    data["note"],
                    1 if record.judged else 0,
                ),
            )
            conn.commit()
        logger.debug("Saved record %s: %s", key, data)

    def update_record(self, key: str, mutator: Callable[[DayRecord], DayRecord]) -> DayRecord:
        """Apply an edit to the stored record and save the result."""
        record = mutator(self.get_record(key))
        self.save_record(key, record)
        return record

    def delete_record(self, key: str) -> None:
        """Delete a record."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("DELETE FROM day_records WHERE date = ?", (normalize_date_key(key),))
            conn.commit()
        logger.debug("Deleted record %s", key)

    def get_records_for_month(self, year: int, month: int) -> dict[str, DayRecord]:
        """Get all stored records of a month, keyed by date."""
        start_key = date_key(year, month, 1)
        end_key = date_key(year, month, days_in_month(year, month))

        with sqlite3.connect(self.db_path) as conn:
            conn.row_factory = sqlite3.Row
            cursor = conn.execute(
                'SELECT date, kind, start, "end", note, judged FROM day_records '
                "WHERE date >= ? AND date <= ? ORDER BY date",
                (start_key, end_key),
            )
            return {row["date"]: sanitize(dict(row)) for row in cursor}

    def company_holidays(self) -> frozenset[str]:
        """Snapshot of all company holidays."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute("SELECT date FROM company_holidays ORDER BY date")
            return frozenset(row[0] for row in cursor)

    def add_company_holiday(self, key: str) -> str:
        """Register a company holiday; returns the normalized date key."""
        key = normalize_date_key(key)
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("INSERT OR IGNORE INTO company_holidays (date) VALUES (?)", (key,))
            conn.commit()
        logger.info("Added company holiday %s", key)
        return key

    def remove_company_holiday(self, key: str) -> None:
        """Remove a company holiday."""
        key = normalize_date_key(key)
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("DELETE FROM company_holidays WHERE date = ?", (key,))
            conn.commit()
        logger.info("Removed company holiday %s", key)

    def clear_all(self) -> None:
        """Delete every record and company holiday."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("DELETE FROM day_records")
            conn.execute("DELETE FROM company_holidays")
            conn.commit()
        logger.info("Cleared all records and company holidays")
