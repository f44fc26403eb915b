import io

import pytest

from libshelf.cli import main, prepare_data_file
from libshelf.date import clear_test_date, set_test_date

SAMPLE = (
    "P\t1\tP001\tThe Toronto Star\t0\t2023/06/01\n"
    "B\t2\tB001\tHarry Potter\t12345\t2023/07/01\tJ. K. Rowling\n"
    "B\t3\tB002\tHarry Hole\t0\t2023/05/01\tJo Nesbo\n"
)


@pytest.fixture(autouse=True)
def pinned_date():
    set_test_date(2023, 8, 10)
    yield
    clear_test_date()


def test_prepare_copies_original(tmp_path):
    (tmp_path / "origdata.txt").write_text(SAMPLE, encoding="utf-8")
    target = tmp_path / "data.txt"
    target.write_text("stale\n", encoding="utf-8")
    result = prepare_data_file(target)
    assert result == target
    assert target.read_text(encoding="utf-8") == SAMPLE


def test_prepare_without_original_gives_empty(tmp_path):
    target = tmp_path / "data.txt"
    prepare_data_file(target)
    assert target.read_text(encoding="utf-8") == ""


@pytest.mark.parametrize(
    "choice, name, banner",
    [
        ("1", "LibRecsSmall.txt", "Test started using small data: "),
        ("2", "LibRecs.txt", "Test started using big data: "),
    ],
)
def test_main_runs_app(tmp_path, monkeypatch, capsys, choice, name, banner):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ("orig" + name)).write_text(SAMPLE, encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO(f"{choice}\n0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert banner in out
    assert f"Content of {name}\n=========>\n{SAMPLE}<=========\n" in out
    assert "Thanks for using Seneca Library Application" in out


def test_main_aborted(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.endswith("Aborted by user! \n")


def test_find_selects_match(tmp_path, monkeypatch, capsys):
    data = tmp_path / "LibRecs.txt"
    data.write_text(SAMPLE, encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n"))
    assert main(["--find", str(data)]) == 0
    out = capsys.readouterr().out
    assert "Selected Library Reference Number: 3" in out
    assert "Harry Hole" in out
    assert "Toronto" not in out


def test_find_exit(tmp_path, monkeypatch, capsys):
    data = tmp_path / "LibRecs.txt"
    data.write_text(SAMPLE, encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("x\n"))
    main(["--find", str(data)])
    assert capsys.readouterr().out.endswith("Aborted by user!")


def test_find_no_matches(tmp_path, capsys):
    data = tmp_path / "LibRecs.txt"
    data.write_text(SAMPLE.splitlines(keepends=True)[0], encoding="utf-8")
    main(["--find", str(data)])
    assert 'No matches to "Harry" and "MoneySense" found' in capsys.readouterr().out