"""The interactive library application: lending, returning and cataloguing."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from .book import Book, publication_from_record
from .date import Date
from .menu import Menu
from .publication import LIBRARY_CAPACITY, MAX_LOAN_DAYS, Publication
from .selector import PublicationSelector
from .textutils import get_int

_MAX_TITLE = 255
_SEARCH_ALL = 1
_SEARCH_ON_LOAN = 2
_SEARCH_AVAILABLE = 3


class LibApp:
    """A menu driven library kept in a tab separated data file."""

    def __init__(
        self,
        filename: str | Path,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.filename = Path(filename)
        self._in = sys.stdin if stdin is None else stdin
        self._out = sys.stdout if stdout is None else stdout
        self.publications: list[Publication] = []
        self.last_ref = 0
        self.changed = False
        self._public_type = Menu("Choose the type of publication:", ["Book", "Publication"])
        self._main_menu = Menu(
            "Seneca Library Application",
            [
                "Add New Publication",
                "Remove Publication",
                "Checkout publication from library",
                "Return publication to library",
            ],
        )
        self._exit_menu = Menu(
            "Changes have been made to the data, what would you like to do?",
            ["Save changes and exit", "Cancel and go back to the main menu"],
        )
        self.load()

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _confirm(self, message: str) -> bool:
        return Menu(message, ["Yes"]).run(self._in, self._out) == 1

    def load(self) -> None:
        """Read every record of the data file; reading stops at the first bad one."""
        self._write("Loading Data\n")
        self.publications = []
        try:
            with self.filename.open(encoding="utf-8") as data:
                for line in data:
                    if not line.strip():
                        continue
                    if len(self.publications) >= LIBRARY_CAPACITY:
                        break
                    try:
                        self.publications.append(publication_from_record(line))
                    except ValueError:
                        break
        except FileNotFoundError:
            pass
        self.last_ref = self.publications[-1].lib_ref if self.publications else 0

    def save(self) -> None:
        """Write every publication that has not been removed back to the data file."""
        self._write("Saving Data\n\n")
        with self.filename.open("w", encoding="utf-8") as data:
            for pub in self.publications:
                if pub.lib_ref != 0:
                    data.write(pub.to_record() + "\n")

    @staticmethod
    def _mode_matches(pub: Publication, mode: int) -> bool:
        if mode == _SEARCH_ON_LOAN:
            return pub.on_loan()
        if mode == _SEARCH_AVAILABLE:
            return not pub.on_loan()
        return True

    def search(self, mode: int) -> int:
        """Ask for a type and title, let the user pick a match; return its reference or 0.

        ``mode`` is 1 for all publications, 2 for those on loan and 3 for
        those available.
        """
        if mode not in (_SEARCH_ALL, _SEARCH_ON_LOAN, _SEARCH_AVAILABLE):
            raise ValueError(f"unknown search mode {mode!r}")
        selector = PublicationSelector("Select one of the following found matches:", 15)
        kind: str | None = None
        title = ""
        choice = self._public_type.run(self._in, self._out)
        if choice > 0:
            kind = "B" if choice == 1 else "P"
            self._write("Publication Title: ")
            line = self._in.readline()
            if not line:
                raise EOFError("no title entered")
            title = line.rstrip("\n")[:_MAX_TITLE]
        else:
            self._write("Aborted!\n\n")

        for pub in self.publications:
            if pub.lib_ref and title in pub and pub.kind() == kind and self._mode_matches(pub, mode):
                selector.add(pub)

        ref = 0
        if selector:
            selector.sort()
            ref = selector.run(self._in, self._out)
            if ref == 0:
                self._write("Aborted!\n\n")
        else:
            self._write("No matches found!\n\n")
        return ref

    def get_publication(self, ref: int) -> Publication | None:
        """The publication with library reference ``ref``, or None."""
        return next((pub for pub in self.publications if pub.lib_ref == ref), None)

    def _selected(self, mode: int) -> Publication | None:
        ref = self.search(mode)
        return self.get_publication(ref) if ref > 0 else None

    def new_publication(self) -> None:
        """Prompt for a new publication and add it with the next reference number."""
        if len(self.publications) >= LIBRARY_CAPACITY:
            self._write("Library is at its maximum capacity!\n\n")
            return
        self._write("Adding new publication to the library\n")
        choice = self._public_type.run(self._in, self._out)
        if choice == 0:
            self._write("Aborted!\n\n")
            return
        pub: Publication = Book() if choice == 1 else Publication()
        try:
            pub.read_console(self._in, self._out)
        except ValueError:
            self._write("Aborted!\n\n")
            return
        if not self._confirm("Add this publication to the library?"):
            self._write("Aborted!\n\n")
            return
        if not pub:
            self._write("Failed to add publication!\n")
            return
        self.last_ref += 1
        pub.set_ref(self.last_ref)
        self.publications.append(pub)
        self.changed = True
        self._write("Publication added\n\n")

    def remove_publication(self) -> None:
        """Search all publications and mark the chosen one as removed."""
        self._write("Removing publication from the library\n")
        pub = self._selected(_SEARCH_ALL)
        if pub is None:
            return
        self._write(f"{pub}\n")
        if self._confirm("Remove this publication from the library?"):
            pub.set_ref(0)
            self.changed = True
            self._write("Publication removed\n\n")

    def checkout_publication(self) -> None:
        """Search available publications and lend the chosen one to a member."""
        self._write("Checkout publication from the library\n")
        pub = self._selected(_SEARCH_AVAILABLE)
        if pub is None:
            return
        self._write(f"{pub}\n")
        if not self._confirm("Check out publication?"):
            return
        self._write("Enter Membership number: ")
        while True:
            try:
                member_id = get_int(self._in)
            except ValueError:
                member_id = None
            if member_id is not None and len(str(member_id)) == 5:
                break
            self._write("Invalid membership number, try again: ")
        pub.set_membership(member_id)
        self.changed = True
        self._write("Publication checked out\n\n")

    def return_publication(self) -> None:
        """Search publications on loan, charge any late penalty and take it back."""
        self._write("Return publication to the library\n")
        pub = self._selected(_SEARCH_ON_LOAN)
        if pub is None:
            return
        self._write(f"{pub}\n")
        if not self._confirm("Return Publication?"):
            return
        late = Date.today() - pub.checkout_date()
        if late > MAX_LOAN_DAYS:
            days = late - MAX_LOAN_DAYS
            self._write(f"Please pay ${days * 0.5:.2f} penalty for being {days} days late!\n")
        pub.set_membership(0)
        self._write("Publication returned\n\n")
        self.changed = True

    def run(self) -> None:
        """Show the main menu until the user leaves."""
        actions = {
            1: self.new_publication,
            2: self.remove_publication,
            3: self.checkout_publication,
            4: self.return_publication,
        }
        while True:
            selection = self._main_menu.run(self._in, self._out)
            action = actions.get(selection)
            if action is not None:
                action()
                continue
            if not self.changed:
                break
            leave = self._exit_menu.run(self._in, self._out)
            if leave == 1:
                self.save()
                break
            if leave == 0 and self._confirm("This will discard all the changes are you sure?"):
                break
        self._write("-------------------------------------------\n")
        self._write("Thanks for using Seneca Library Application\n")