"""Command line entry: run the library on a fresh copy of a data file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .app import LibApp
from .book import publication_from_record
from .date import set_test_date
from .menu import Menu
from .publication import Publication
from .selector import PublicationSelector

_DATA_FILES = ("LibRecsSmall.txt", "LibRecs.txt")
_PRINT_LIMIT = 100


def prepare_data_file(filename: str | Path) -> Path:
    """Overwrite ``filename`` with its pristine "orig" copy (empty if none)."""
    target = Path(filename)
    original = target.with_name("orig" + target.name)
    try:
        content = original.read_text(encoding="utf-8")
    except FileNotFoundError:
        content = ""
    target.write_text(content, encoding="utf-8")
    return target


def _run_app(filename: str) -> None:
    path = prepare_data_file(filename)
    set_test_date(2023, 8, 10)
    LibApp(path).run()
    out = sys.stdout
    out.write(f"Content of {filename}\n=========>\n")
    out.write(path.read_text(encoding="utf-8"))
    out.write("<=========\n")


def _load(path: Path) -> list[Publication]:
    publications: list[Publication] = []
    with path.open(encoding="utf-8") as data:
        for line in data:
            if not line.strip():
                continue
            try:
                publications.append(publication_from_record(line))
            except ValueError:
                break
    return publications


def _find(path: Path) -> None:
    out = sys.stdout
    publications = _load(path)
    selector = PublicationSelector("Publications with Harry and MoneySencse", 5)
    for pub in publications:
        if "Harry" in pub or "MoneySense" in pub:
            selector.add(pub)
    if not selector:
        out.write('No matches to "Harry" and "MoneySense" found\n')
        return
    selector.sort()
    ref = selector.run()
    if not ref:
        out.write("Aborted by user!")
        return
    out.write(f"Selected Library Reference Number: {ref}\n")
    match = next((p for p in publications[:_PRINT_LIMIT] if p.lib_ref == ref), None)
    if match is not None:
        out.write(f"{match}\n")


def main(argv: list[str] | None = None) -> int:
    """Pick a data file and run the library, or browse matches with --find."""
    parser = argparse.ArgumentParser(prog="libshelf")
    parser.add_argument("--find", metavar="FILE", help="browse Harry and MoneySense titles in FILE")
    args = parser.parse_args(argv)
    if args.find:
        _find(Path(args.find))
        return 0

    choice = Menu("Select Data File", _DATA_FILES).run()
    if choice == 1:
        sys.stdout.write("Test started using small data: \n")
        _run_app(_DATA_FILES[0])
    elif choice == 2:
        sys.stdout.write("Test started using big data: \n")
        _run_app(_DATA_FILES[1])
    else:
        sys.stdout.write("Aborted by user! \n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())