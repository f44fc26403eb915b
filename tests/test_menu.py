import io

import pytest

from libshelf.menu import MAX_MENU_ITEMS, Menu


def lunch_menu():
    return Menu("Lunch Menu", ["Omelet", "Tuna Sandwich", "California Roll"])


def run_with(menu, text):
    out = io.StringIO()
    result = menu.run(io.StringIO(text), out)
    return result, out.getvalue()


def test_untitled_menu_is_false():
    assert not Menu()
    assert str(Menu()) == ""


def test_titled_menu_is_true_and_counts_items():
    menu = lunch_menu()
    assert bool(menu) is True
    assert len(menu) == 3
    assert str(menu) == "Lunch Menu"


def test_add_chains_and_ignores_none():
    menu = Menu("T")
    menu.add("a").add(None) << "b"
    assert list(menu) == ["a", "b"]


def test_add_stops_at_maximum():
    menu = Menu("T", (f"item{n}" for n in range(MAX_MENU_ITEMS + 5)))
    assert len(menu) == MAX_MENU_ITEMS
    assert menu[MAX_MENU_ITEMS - 1] == f"item{MAX_MENU_ITEMS - 1}"


def test_getitem_wraps_around():
    menu = lunch_menu()
    assert menu[0] == "Omelet"
    assert menu[3] == "Omelet"
    assert menu[5] == "California Roll"


def test_getitem_on_empty_menu_raises():
    with pytest.raises(IndexError):
        Menu("Empty")[0]


def test_display_format():
    out = io.StringIO()
    lunch_menu().display(out)
    assert out.getvalue() == (
        "Lunch Menu:\n"
        " 1- Omelet\n"
        " 2- Tuna Sandwich\n"
        " 3- California Roll\n"
        " 0- Exit\n"
        "> "
    )


def test_display_without_title():
    out = io.StringIO()
    Menu(None, ["Order more"]).display(out)
    assert out.getvalue() == " 1- Order more\n 0- Exit\n> "


@pytest.mark.parametrize("text, expected", [("1\n", 1), ("2\n", 2), ("3\n", 3), ("0\n", 0)])
def test_run_returns_valid_choice(text, expected):
    result, output = run_with(lunch_menu(), text)
    assert result == expected
    assert "Invalid Selection" not in output


@pytest.mark.parametrize("text", ["4\n3\n", "-1\n3\n", "abc\n3\n"])
def test_run_rejects_invalid_then_accepts(text):
    result, output = run_with(lunch_menu(), text)
    assert result == 3
    assert output.count("Invalid Selection, try again: ") == 1


def test_run_skips_blank_lines():
    result, _ = run_with(lunch_menu(), "\n   \n2\n")
    assert result == 2


def test_run_raises_on_end_of_input():
    with pytest.raises(EOFError):
        run_with(lunch_menu(), "9\n")


def test_empty_menu_only_accepts_exit():
    result, output = run_with(Menu("Nothing"), "1\n0\n")
    assert result == 0
    assert "Invalid Selection" in output