"""Calendar dates that carry their own validation state."""

from __future__ import annotations

import datetime
import re
from enum import IntEnum

MIN_YEAR = 1500

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

_test_date: tuple[int, int, int] | None = None


class DateStatus(IntEnum):
    """Validation state of a :class:`Date`."""

    NO_ERROR = 0
    CIN_FAILED = 1
    YEAR_ERROR = 2
    MON_ERROR = 3
    DAY_ERROR = 4

    @property
    def message(self) -> str:
        """Human readable description of the state."""
        return _MESSAGES[self]


_MESSAGES = {
    DateStatus.NO_ERROR: "No Error",
    DateStatus.CIN_FAILED: "cin Failed",
    DateStatus.YEAR_ERROR: "Bad Year Value",
    DateStatus.MON_ERROR: "Bad Month Value",
    DateStatus.DAY_ERROR: "Bad Day Value",
}


def set_test_date(year: int, month: int, day: int) -> None:
    """Pin "today" to a fixed date, for reproducible runs."""
    global _test_date
    _test_date = (year, month, day)


def clear_test_date() -> None:
    """Return to using the system clock for "today"."""
    global _test_date
    _test_date = None


def system_today() -> tuple[int, int, int]:
    """Return today's (year, month, day), honouring a pinned test date."""
    if _test_date is not None:
        return _test_date
    now = datetime.date.today()
    return now.year, now.month, now.day


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _is_leap(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def _scan_int(text: str, pos: int) -> tuple[int, int]:
    match = _INTEGER.match(text, pos)
    if match is None:
        raise ValueError("integer expected")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError("integer out of range")
    return value, match.end()


def _skip_one(text: str, pos: int) -> int:
    if pos >= len(text):
        raise ValueError("unexpected end of input")
    return pos + 1


class Date:
    """A year/month/day triple with a validation status."""

    def __init__(self, year: int, month: int, day: int) -> None:
        self.current_year = system_today()[0]
        self.year = year
        self.month = month
        self.day = day
        self._status = DateStatus.NO_ERROR
        self._validate()

    @classmethod
    def today(cls) -> Date:
        """Create a date holding the current (or pinned) date."""
        year, month, day = system_today()
        date = cls(year, month, day)
        date._status = DateStatus.NO_ERROR
        return date

    @classmethod
    def parse(cls, text: str) -> Date:
        """Read a date from text; starts from today, as :meth:`read` may fail."""
        date = cls.today()
        date.read(text)
        return date

    def read(self, text: str) -> str:
        """Read ``year?month?day`` from text, any single separator allowed.

        On success the fields are replaced and validated; on failure the
        fields are kept and the status becomes ``CIN_FAILED``. Returns the
        text after the date, or an empty string when reading failed.
        """
        self._status = DateStatus.NO_ERROR
        try:
            year, pos = _scan_int(text, 0)
            month, pos = _scan_int(text, _skip_one(text, pos))
            day, pos = _scan_int(text, _skip_one(text, pos))
        except ValueError:
            self._status = DateStatus.CIN_FAILED
            return ""
        self.year, self.month, self.day = year, month, day
        self._validate()
        return text[pos:]

    def _validate(self) -> bool:
        self._status = DateStatus.NO_ERROR
        if self.year < MIN_YEAR or self.year > self.current_year + 1:
            self._status = DateStatus.YEAR_ERROR
        elif not 1 <= self.month <= 12:
            self._status = DateStatus.MON_ERROR
        elif not 1 <= self.day <= self.days_in_month():
            self._status = DateStatus.DAY_ERROR
        return bool(self)

    def days_in_month(self) -> int:
        """Days in this date's month, or -1 when the month is out of range."""
        if not 1 <= self.month <= 12:
            return -1
        extra = 1 if self.month == 2 and _is_leap(self.year) else 0
        return _MONTH_DAYS[self.month - 1] + extra

    def status(self) -> DateStatus:
        """The current validation status."""
        return self._status

    def _ordinal(self) -> int:
        year, month = self.year, self.month
        if month < 3:
            year -= 1
            month += 12
        return (
            365 * year
            + _tdiv(year, 4)
            - _tdiv(year, 100)
            + _tdiv(year, 400)
            + _tdiv(153 * month - 457, 5)
            + self.day
            - 306
        )

    def _key(self) -> tuple[int, int, int]:
        return self.year, self.month, self.day

    def __str__(self) -> str:
        if not self:
            return self._status.message
        return f"{self.year}/{self.month:02d}/{self.day:02d}"

    def __repr__(self) -> str:
        return f"Date({self.year}, {self.month}, {self.day})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: Date) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: Date) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: Date) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: Date) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() >= other._key()

    def __sub__(self, other: Date) -> int:
        if not isinstance(other, Date):
            return NotImplemented
        return self._ordinal() - other._ordinal()

    def __bool__(self) -> bool:
        return self._status is DateStatus.NO_ERROR

    __hash__ = None  # type: ignore[assignment]