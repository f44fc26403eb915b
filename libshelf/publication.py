"""Library publications and the interface for reading and writing them."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TextIO

from .date import Date

MAX_LOAN_DAYS = 15
TITLE_WIDTH = 30
AUTHOR_WIDTH = 15
SHELF_ID_LEN = 4
LIBRARY_CAPACITY = 5000

_MAX_TEXT = 255


def _line_text(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


def _next_nonblank(stream: TextIO) -> str | None:
    """Next line holding something other than whitespace, or None at EOF."""
    while True:
        line = stream.readline()
        if not line:
            return None
        if line.strip():
            return line


def _parse_int(text: str) -> int:
    value = int(text.strip())
    return value


class Streamable(ABC):
    """Something that can be shown on the console and stored as a record."""

    @abstractmethod
    def to_console(self) -> str:
        """The one-line form shown to a user."""

    @abstractmethod
    def to_record(self) -> str:
        """The tab separated form stored in a data file."""

    @abstractmethod
    def read_record(self, line: str) -> None:
        """Fill the object from a data-file record; raise ValueError if bad."""

    @abstractmethod
    def read_console(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        """Fill the object by prompting a user; raise ValueError if bad."""

    @abstractmethod
    def __bool__(self) -> bool:
        """Whether the object holds valid data."""

    def __str__(self) -> str:
        return self.to_console() if self else ""


class Publication(Streamable):
    """A periodical on a library shelf, possibly on loan to a member."""

    def __init__(self) -> None:
        self.title: str | None = None
        self.shelf_id = ""
        self.membership = 0
        self.lib_ref = -1
        self.date = Date.today()

    def _reset(self) -> None:
        self.title = None
        self.shelf_id = ""
        self.membership = 0
        self.lib_ref = -1
        self.reset_date()

    def set_membership(self, member_id: int) -> None:
        """Lend to a five-character member id, or return with 0; others are ignored."""
        if len(str(member_id)) == 5 or member_id == 0:
            self.membership = member_id

    def set_ref(self, value: int) -> None:
        """Set the library reference number."""
        self.lib_ref = value

    def reset_date(self) -> None:
        """Set the date to today."""
        self.date = Date.today()

    def kind(self) -> str:
        """The record type letter."""
        return "P"

    def on_loan(self) -> bool:
        """True when checked out to a member."""
        return self.membership != 0

    def checkout_date(self) -> Date:
        """The publication's date."""
        return self.date

    def __contains__(self, text: str) -> bool:
        return self.title is not None and text in self.title

    def to_console(self) -> str:
        title = (self.title or "")[:TITLE_WIDTH].ljust(TITLE_WIDTH, ".")
        member = " N/A " if self.membership == 0 else str(self.membership)
        return f"| {self.shelf_id} | {title} | {member} | {self.date} |"

    def to_record(self) -> str:
        fields = (
            self.kind(),
            str(self.lib_ref),
            self.shelf_id,
            self.title or "",
            str(self.membership),
            str(self.date),
        )
        return "\t".join(fields)

    def _read_record_fields(self, line: str) -> str:
        """Read the publication fields; return the text after the date."""
        self._reset()
        parts = _line_text(line).rstrip("\r").split("\t", 5)
        if len(parts) < 6:
            raise ValueError("record has too few fields")
        kind, ref_text, shelf, title, member_text, rest = parts
        if kind.strip() != self.kind():
            raise ValueError(f"record type {kind!r} is not {self.kind()!r}")
        lib_ref = _parse_int(ref_text)
        if len(shelf) > SHELF_ID_LEN:
            raise ValueError("shelf id too long")
        if len(title) > _MAX_TEXT:
            raise ValueError("title too long")
        membership = _parse_int(member_text)
        date = Date.today()
        remainder = date.read(rest)
        if not date:
            raise ValueError(f"invalid date: {date.status().message}")
        self.title = title
        self.shelf_id = shelf
        self.membership = membership
        self.date = date
        self.lib_ref = lib_ref
        return remainder

    def read_record(self, line: str) -> None:
        self._read_record_fields(line)

    def read_console(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        source = sys.stdin if stdin is None else stdin
        out = sys.stdout if stdout is None else stdout
        self._reset()

        out.write("Shelf No: ")
        line = _next_nonblank(source)
        shelf = line.split()[0] if line is not None else ""
        ok = len(shelf) == SHELF_ID_LEN

        out.write("Title: ")
        title = ""
        if ok:
            raw = source.readline()
            title = _line_text(raw)
            ok = bool(raw) and len(title) <= _MAX_TEXT

        out.write("Date: ")
        date = Date.today()
        if ok:
            date_line = _next_nonblank(source)
            ok = date_line is not None
            if ok:
                date.read(date_line)
                ok = bool(date)

        if not ok:
            raise ValueError("invalid publication entry")
        self.title = title
        self.shelf_id = shelf
        self.membership = 0
        self.date = date
        self.lib_ref = 0

    def __bool__(self) -> bool:
        return self.title is not None and self.shelf_id != ""