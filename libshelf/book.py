"""Books: publications that also carry an author."""

from __future__ import annotations

import sys
from typing import TextIO

from .publication import AUTHOR_WIDTH, Publication, _line_text

_MAX_AUTHOR = 255


class Book(Publication):
    """A publication with an author."""

    def __init__(self) -> None:
        super().__init__()
        self.author: str | None = None

    def kind(self) -> str:
        return "B"

    def set_membership(self, member_id: int) -> None:
        """Set the member and restart the loan date at today."""
        super().set_membership(member_id)
        self.reset_date()

    def to_console(self) -> str:
        author = (self.author or "")[:AUTHOR_WIDTH].ljust(AUTHOR_WIDTH)
        return f"{super().to_console()} {author} |"

    def to_record(self) -> str:
        return f"{super().to_record()}\t{self.author or ''}"

    def read_record(self, line: str) -> None:
        self.author = None
        remainder = self._read_record_fields(line)
        tab = remainder.find("\t")
        if tab < 0:
            raise ValueError("record has no author")
        author = remainder[tab + 1:].rstrip("\r")[:_MAX_AUTHOR]
        if not author:
            raise ValueError("author is empty")
        self.author = author

    def read_console(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        source = sys.stdin if stdin is None else stdin
        out = sys.stdout if stdout is None else stdout
        self.author = None
        try:
            super().read_console(source, out)
        except ValueError:
            out.write("Author: ")
            raise
        out.write("Author: ")
        author = _line_text(source.readline())[:_MAX_AUTHOR]
        if not author:
            raise ValueError("author is empty")
        self.author = author

    def __bool__(self) -> bool:
        return bool(self.author) and super().__bool__()


def publication_from_record(line: str) -> Publication:
    """Build a Publication or Book from a data-file record by its type letter."""
    text = line.lstrip()
    if not text:
        raise ValueError("empty record")
    kinds = {"P": Publication, "B": Book}
    factory = kinds.get(text[0])
    if factory is None:
        raise ValueError(f"unknown record type {text[0]!r}")
    item = factory()
    item.read_record(text)
    return item