import pytest

from d2shared.data_dictionary import DataDictionary

TABLE = "Name\tLevel\r\nZombie\t3\r\n\r\nBroken\r\nBoar\t-2\r\nImp\tmany"


@pytest.fixture
def table():
    return DataDictionary.from_text(TABLE)


def test_header_lookup(table):
    assert table.field_name_lookup == {"Name": 0, "Level": 1}


def test_one_slot_per_line_after_header(table):
    assert len(table.data) == len(TABLE.split("\r\n")) - 1


def test_get_string(table):
    assert table.get_string("Name", 0) == "Zombie"
    assert table.get_string("Name", 3) == "Boar"


def test_get_number(table):
    assert table.get_number("Level", 0) == 3
    assert table.get_number("Level", 3) == -2


def test_blank_and_short_rows_are_empty(table):
    assert table.data[1] is None
    assert table.data[2] is None
    with pytest.raises(IndexError):
        table.get_string("Name", 1)


def test_non_numeric_value_raises(table):
    with pytest.raises(ValueError):
        table.get_number("Level", 4)


def test_unknown_field_raises(table):
    with pytest.raises(KeyError):
        table.get_string("Missing", 0)


def test_whitespace_is_not_a_number():
    table = DataDictionary.from_text("A\r\n 5 ")
    with pytest.raises(ValueError):
        table.get_number("A", 0)


def test_header_only():
    table = DataDictionary.from_text("X\tY")
    assert table.data == []