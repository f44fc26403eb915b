# libshelf

A console application for running a small lending library. It keeps a
catalogue of publications (periodicals and books) in a tab-separated data
file and lets a librarian:

- add a new book or publication,
- remove a publication from the catalogue,
- check a publication out to a five-digit membership number,
- return a publication, reporting a penalty of $0.50 per day once a loan
  runs past 15 days.

Searches ask for a type (Book or Publication) and a piece of the title
(an empty title matches everything of that type), list the matches sorted
by title and then by date, and page through them fifteen rows at a time.
On a page, enter a row number to pick a publication, `N` or `P` for the
next or previous page, or `X` to leave.

## Installing

```
pip install .
```

## Running

```
libshelf
```

The command first asks which data file to use, `LibRecsSmall.txt` or
`LibRecs.txt`, in the current directory. Before starting it **overwrites
the chosen file** with the contents of `origLibRecsSmall.txt` or
`origLibRecs.txt` (an empty file if that copy does not exist), so each
run starts from the same data. It also pins "today" to 2023/08/10, which
is the date used for new entries, loans and late penalties. Then it shows
the main menu:

```
Seneca Library Application:
 1- Add New Publication
 2- Remove Publication
 3- Checkout publication from library
 4- Return publication to library
 0- Exit
>
```

When leaving with unsaved changes you can save and exit, go back to the
menu, or discard the changes after confirming. After the session the
command prints the contents of the data file.

To browse the titles of a data file that contain "Harry" or
"MoneySense", five rows per page, and print the one you pick:

```
libshelf --find LibRecs.txt
```

## Data file format

One record per line, fields separated by tabs:

```
P	<ref>	<shelf>	<title>	<member>	<YYYY/MM/DD>
B	<ref>	<shelf>	<title>	<member>	<YYYY/MM/DD>	<author>
```

`P` is a periodical publication and `B` a book. The shelf id is four
characters, the membership number is `0` when the item is not on loan,
and the date is the checkout date (or publication date when not on loan).
Blank lines are skipped; loading stops at the first record that cannot be
read. Records whose reference number is `0` have been removed and are
dropped when the file is saved.

## Using the library from Python

```python
from libshelf.date import Date
from libshelf.book import publication_from_record

pub = publication_from_record("B\t1\tAB12\tSome Title\t0\t2023/06/26\tJane Doe")
print(pub.to_console())
print(Date(2023, 8, 10) - pub.checkout_date())
```

- `libshelf.date`: `Date` (validated dates with comparison and day
  differences), `DateStatus`, and `set_test_date`, `clear_test_date`,
  `system_today` for controlling "today".
- `libshelf.menu`: `Menu`, a numbered console menu whose `run(stdin,
  stdout)` returns the chosen number.
- `libshelf.publication`: `Publication` and the `Streamable` interface.
- `libshelf.book`: `Book` and `publication_from_record`.
- `libshelf.selector`: `PublicationSelector`, the paged chooser.
- `libshelf.textutils`: `trim`, `truncate`, `read_field`, `read_line`,
  `get_int`.
- `libshelf.app`: `LibApp(filename, stdin, stdout)`, the whole
  application, which can be driven from any text streams.
- `libshelf.cli`: `main` and `prepare_data_file`.

## What it does not do

The catalogue lives only in the plain text file described above; there
is no database, no multi-user access and no record of past loans. The
command works only with the two fixed data file names and always resets
the chosen file from its `orig` copy before running.

## Tests

```
pip install .[test]
pytest
```