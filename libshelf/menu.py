"""Numbered console menus that read a selection from a text stream."""

from __future__ import annotations

import re
import sys
from typing import Iterable, Iterator, TextIO

MAX_MENU_ITEMS = 20

_LEADING_INT = re.compile(r"[+-]?\d+")


class Menu:
    """A titled list of up to ``MAX_MENU_ITEMS`` numbered choices plus "Exit"."""

    def __init__(self, title: str | None = None, items: Iterable[str] = ()) -> None:
        self.title = title
        self._items: list[str] = []
        for item in items:
            self.add(item)

    def add(self, item: str | None) -> Menu:
        """Append an item; ``None`` and items beyond the limit are ignored."""
        if item is not None and len(self._items) < MAX_MENU_ITEMS:
            self._items.append(item)
        return self

    def __lshift__(self, item: str | None) -> Menu:
        return self.add(item)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __bool__(self) -> bool:
        return self.title is not None

    def __getitem__(self, index: int) -> str:
        """Item at ``index``, wrapping around the number of items."""
        if not self._items:
            raise IndexError("menu has no items")
        return self._items[index % len(self._items)]

    def __str__(self) -> str:
        return self.title or ""

    def display(self, output: TextIO | None = None) -> None:
        """Write the title, the numbered items, the Exit line and the prompt."""
        out = sys.stdout if output is None else output
        if self.title is not None:
            out.write(f"{self.title}:\n")
        for number, item in enumerate(self._items, start=1):
            out.write(f" {number}- {item}\n")
        out.write(" 0- Exit\n")
        out.write("> ")

    def _parse(self, line: str) -> int | None:
        match = _LEADING_INT.match(line.lstrip())
        if match is None:
            return None
        value = int(match.group())
        if value < 0 or value > len(self._items):
            return None
        return value

    def run(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
        """Show the menu and read until a valid selection (0 to len) is entered.

        Raises :class:`EOFError` if the input runs out before a valid choice.
        """
        source = sys.stdin if stdin is None else stdin
        out = sys.stdout if stdout is None else stdout
        self.display(out)
        while True:
            line = source.readline()
            if not line:
                raise EOFError("no selection entered")
            if not line.strip():
                continue
            selection = self._parse(line)
            if selection is not None:
                return selection
            out.write("Invalid Selection, try again: ")

    def __invert__(self) -> int:
        return self.run()