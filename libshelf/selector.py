"""Paged, interactive selection among publications."""

from __future__ import annotations

import re
import sys
from typing import TextIO

from .publication import Publication

_TITLE_LIMIT = 80
_HEADER = (
    " Row  |LocID | Title                          |Mem ID | Date       | Author          |\n"
    "------+------+--------------------------------+-------+------------+-----------------|\n"
)
_ROW_NUMBER = re.compile(r"[ \t\v\f\r]*([+-]?\d+)\n")

_NEXT = "next"
_PREVIOUS = "previous"


class PublicationSelector:
    """Show publications page by page and let a user pick one."""

    def __init__(self, title: str = "Select a publication: ", page_size: int = 15) -> None:
        if page_size < 1:
            raise ValueError("page size must be positive")
        self.title = title[:_TITLE_LIMIT]
        self.page_size = page_size
        self.current_page = 1
        self._publications: list[Publication] = []

    def add(self, publication: Publication) -> PublicationSelector:
        """Append a publication to the choices."""
        self._publications.append(publication)
        return self

    def __lshift__(self, publication: Publication) -> PublicationSelector:
        return self.add(publication)

    def __len__(self) -> int:
        return len(self._publications)

    def __bool__(self) -> bool:
        return bool(self._publications)

    def reset(self) -> None:
        """Remove every choice so the selector can be refilled."""
        self._publications = []

    def sort(self) -> None:
        """Order the choices by title, and by date among equal titles."""
        self._publications.sort(key=lambda pub: pub.checkout_date())
        self._publications.sort(key=lambda pub: pub.title or "")

    def _display(self, page: int, out: TextIO) -> None:
        out.write(f"{self.title}\n{_HEADER}")
        first = (page - 1) * self.page_size
        rows = self._publications[max(first, 0):page * self.page_size]
        for number, pub in enumerate(rows, start=first + 1):
            out.write(f"{number:>4}- {pub}\n")

    def _has_next(self) -> bool:
        return self.current_page * self.page_size < len(self._publications)

    def _choose(self, source: TextIO, out: TextIO) -> int | str:
        if len(self._publications) > self.page_size:
            if self.current_page > 1:
                out.write("> P (Previous Page)\n")
            if self._has_next():
                out.write("> N (Next page)\n")
        out.write("> X (to Exit)\n> Row Number(select publication)\n> ")
        while True:
            line = source.readline()
            if not line:
                raise EOFError("no selection entered")
            first = line[0].lower()
            if first == "p" and self.current_page > 1:
                return _PREVIOUS
            if first == "n" and self._has_next():
                return _NEXT
            if first == "x":
                return 0
            if first not in "pn":
                if not line.strip():
                    continue
                match = _ROW_NUMBER.fullmatch(line)
                if match is not None:
                    row = int(match.group(1))
                    if 1 <= row <= len(self._publications):
                        return self._publications[row - 1].lib_ref
            out.write("Invalid selection, retry\n> ")

    def run(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
        """Let the user page through and pick; return its reference, or 0 to exit."""
        source = sys.stdin if stdin is None else stdin
        out = sys.stdout if stdout is None else stdout
        while True:
            self._display(self.current_page, out)
            choice = self._choose(source, out)
            if choice == _NEXT:
                self.current_page += 1
            elif choice == _PREVIOUS:
                self.current_page -= 1
            else:
                return choice