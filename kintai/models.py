"""Data models for attendance records, day metadata and payroll."""

from dataclasses import dataclass
from enum import Enum

from kintai.duration import Duration


class WorkKind(str, Enum):
    """Attendance classification of a day."""

    NORMAL = "normal"
    PAID = "paid"
    HOLIDAY_WORK = "holidayWork"

    @classmethod
    def coerce(cls, value: object) -> "WorkKind":
        """Read a stored kind; anything unknown is treated as NORMAL."""
        try:
            return cls(value)
        except ValueError:
            return cls.NORMAL


@dataclass(frozen=True)
class DayRecord:
    """Attendance record for a single day."""

    kind: WorkKind = WorkKind.NORMAL
    start: Duration | None = None
    end: Duration | None = None
    note: str = ""
    judged: bool = False

    @property
    def has_clock_times(self) -> bool:
        """Both clock-in and clock-out are present."""
        return self.start is not None and self.end is not None

    @property
    def is_default(self) -> bool:
        """All fields are default, i.e. equivalent to having no record."""
        return self == DayRecord()

    def to_dict(self) -> dict[str, object]:
        """Serialize to the stored shape."""
        return {
            "kind": self.kind.value,
            "start": str(self.start) if self.start is not None else None,
            "end": str(self.end) if self.end is not None else None,
            "note": self.note,
            "judged": self.judged,
        }


@dataclass(frozen=True)
class DayMeta:
    """Derived calendar information for a day."""

    date_key: str
    weekday: int
    weekday_label: str
    is_holiday: bool
    holiday_name: str
    is_company_holiday: bool
    is_weekend: bool
    badge_text: str

    @property
    def is_day_off(self) -> bool:
        """Weekend, public holiday or company holiday."""
        return self.is_weekend or self.is_holiday or self.is_company_holiday


@dataclass(frozen=True)
class PayrollResult:
    """Minutes and (unrounded) pay for a single day."""

    work_min: int = 0
    regular_min: int = 0
    overtime_min: int = 0
    regular_pay: float = 0.0
    overtime_pay: float = 0.0


@dataclass
class MonthlySummary:
    """Aggregated figures for a month."""

    year: int
    month: int
    planned_working_days: int
    actual_working_days: int
    total_work_min: int
    regular_min: int
    overtime_min: int
    regular_pay: int
    overtime_pay: int
    total_pay: int

    @property
    def total_work_hours(self) -> str:
        """Total worked time formatted as H:MM."""
        return Duration(self.total_work_min).to_hours()
