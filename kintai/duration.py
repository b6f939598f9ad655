"""Clock time and duration handling utilities."""

import re

from kintai.errors import MalformedTimeError

_TIME_PATTERN = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")


class Duration:
    """Represents a duration (or a clock time as minutes since midnight)."""

    @classmethod
    def parse(cls, value: str) -> "Duration":
        """Parse a time string like '09:30' into a Duration object."""
        duration = cls.try_parse(value)
        if duration is None:
            msg = f"Not a valid HH:MM time: {value!r}"
            raise MalformedTimeError(msg)
        return duration

    @classmethod
    def try_parse(cls, value: object) -> "Duration | None":
        """Parse a time string, returning None for anything that is not HH:MM."""
        if not isinstance(value, str):
            return None
        match = _TIME_PATTERN.match(value)
        if not match:
            return None
        hours, minutes = int(match.group(1)), int(match.group(2))
        if hours > 23 or minutes > 59:
            return None
        return cls(60 * hours + minutes)

    def __init__(self, minutes: int = 0) -> None:
        self.minutes: int = minutes

    def __repr__(self) -> str:
        sign = "-" if self.minutes < 0 else ""
        abs_minutes = abs(self.minutes)
        return f"{sign}{abs_minutes // 60:02}:{abs_minutes % 60:02}"

    __str__ = __repr__

    def to_hours(self) -> str:
        """Format as 'H:MM' without padding the hours, e.g. '160:30'."""
        return f"{self.minutes // 60}:{self.minutes % 60:02}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.minutes == other.minutes

    def __hash__(self) -> int:
        return hash(self.minutes)

    def __add__(self, other: "Duration") -> "Duration":
        return Duration(self.minutes + other.minutes)

    def __sub__(self, other: "Duration") -> "Duration":
        return Duration(self.minutes - other.minutes)

    def __lt__(self, other: "Duration") -> bool:
        return self.minutes < other.minutes

    def __gt__(self, other: "Duration") -> bool:
        return self.minutes > other.minutes

    def __le__(self, other: "Duration") -> bool:
        return self.minutes <= other.minutes

    def __ge__(self, other: "Duration") -> bool:
        return self.minutes >= other.minutes
