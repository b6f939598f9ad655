"""Tests for database operations."""

import sqlite3
import tempfile
from pathlib import Path

import pytest

from kintai.classifier import classify_day
from kintai.database import RecordDatabase
from kintai.duration import Duration
from kintai.errors import InvalidDateError
from kintai.models import DayRecord, WorkKind
from kintai.records import punch_in, set_kind


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    db = RecordDatabase(db_path)
    yield db

    # Cleanup
    db_path.unlink(missing_ok=True)


def test_missing_record_is_default(temp_db):
    """Dates without a row read as the default record."""
    assert temp_db.get_record("2025-09-15") == DayRecord()


def test_save_and_get_record(temp_db):
    """Test saving and retrieving a record."""
    record = DayRecord(
        kind=WorkKind.NORMAL,
        start=Duration.parse("09:45"),
        end=Duration.parse("19:00"),
        note="release",
        judged=True,
    )

    temp_db.save_record("2025-09-15", record)

    assert temp_db.get_record("2025-09-15") == record


def test_keys_are_normalized(temp_db):
    """Loose date input hits the same row."""
    temp_db.save_record("2025-9-1", DayRecord(note="first"))

    assert temp_db.get_record("2025-09-01").note == "first"
    with pytest.raises(InvalidDateError):
        temp_db.get_record("2025-02-30")


def test_default_record_is_deleted(temp_db):
    """Saving a record back to defaults removes the row."""
    temp_db.save_record("2025-09-15", DayRecord(note="x"))
    temp_db.save_record("2025-09-15", DayRecord())

    assert temp_db.get_records_for_month(2025, 9) == {}


def test_update_record(temp_db):
    """Edits are applied to the stored record."""
    weekday = classify_day(2025, 9, 1)

    record = temp_db.update_record("2025-09-01", lambda r: punch_in(r, weekday))
    assert record.start == Duration.parse("09:30")
    assert record.judged is True

    temp_db.update_record("2025-09-01", lambda r: set_kind(r, WorkKind.PAID, weekday))
    assert temp_db.get_record("2025-09-01") == DayRecord(kind=WorkKind.PAID)


def test_rows_are_sanitized_on_read(temp_db):
    """Odd stored values are cleaned up when read."""
    with sqlite3.connect(temp_db.db_path) as conn:
        conn.execute(
            'INSERT INTO day_records (date, kind, start, "end", note, judged) '
            "VALUES (?, ?, ?, ?, ?, ?)",
            ("2025-09-02", "weird", "25:00", "18:30", None, 1),
        )
        conn.execute(
            'INSERT INTO day_records (date, kind, start, "end", note, judged) '
            "VALUES (?, ?, ?, ?, ?, ?)",
            ("2025-09-03", "paid", "09:30", "18:30", "", 1),
        )
        conn.commit()

    weird = temp_db.get_record("2025-09-02")
    assert weird.kind == WorkKind.NORMAL
    assert weird.start is None
    assert weird.end == Duration.parse("18:30")
    assert weird.note == ""

    assert temp_db.get_record("2025-09-03") == DayRecord(kind=WorkKind.PAID)


def test_get_records_for_month(temp_db):
    """Only records of the requested month are returned."""
    temp_db.save_record("2025-08-31", DayRecord(note="august"))
    temp_db.save_record("2025-09-01", DayRecord(note="first"))
    temp_db.save_record("2025-09-30", DayRecord(note="last"))
    temp_db.save_record("2025-10-01", DayRecord(note="october"))

    records = temp_db.get_records_for_month(2025, 9)

    assert list(records) == ["2025-09-01", "2025-09-30"]
    assert records["2025-09-30"].note == "last"


def test_company_holidays(temp_db):
    """Company holidays can be added, listed and removed."""
    assert temp_db.company_holidays() == frozenset()

    assert temp_db.add_company_holiday("2025-12-29") == "2025-12-29"
    temp_db.add_company_holiday("2025-12-30")
    temp_db.add_company_holiday("2025-12-29")
    assert temp_db.company_holidays() == {"2025-12-29", "2025-12-30"}

    temp_db.remove_company_holiday("2025-12-29")
    assert temp_db.company_holidays() == {"2025-12-30"}


def test_clear_all(temp_db):
    """Reset removes records and company holidays."""
    temp_db.save_record("2025-09-01", DayRecord(note="x"))
    temp_db.add_company_holiday("2025-12-29")

    temp_db.clear_all()

    assert temp_db.get_record("2025-09-01") == DayRecord()
    assert temp_db.company_holidays() == frozenset()
