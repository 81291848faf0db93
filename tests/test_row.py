from __future__ import annotations
from datetime import date, datetime
from decimal import Decimal

import pytest

from sheet_reader import NoValueError, ParseError, RowData
from sheet_reader.models import ErrorCode


@pytest.fixture()
def typed_view(make_view):
    return make_view([
        ["Qty", "Price", "Active", "When", "Name", "Code"],
        ["42", 0.25, True, datetime(2024, 1, 5), "Bolt", "0012"],
        ["abc", "1,5", "yes", "not a date", None, ""],
    ])


def test_row_number_is_source_row(typed_view):
    rows = list(typed_view.iter_rows())
    assert [row.number for row in rows] == [2, 3]
    assert rows[0].row_number == 2


def test_get_returns_string(typed_view):
    row = RowData(typed_view, 2)
    assert row.get("Name") == "Bolt"
    assert row.get("Code") == "0012"
    assert row.get_optional("Missing") is None


def test_get_unknown_column_raises_no_value(typed_view):
    row = RowData(typed_view, 3)
    with pytest.raises(NoValueError) as exc_info:
        row.get("Colour")
    assert exc_info.value.column == "Colour"
    assert exc_info.value.row_number == 3
    assert exc_info.value.code == ErrorCode.NO_VALUE
    assert "Colour" in str(exc_info.value)


def test_get_blank_cell_inside_table_is_empty_string(typed_view):
    row = RowData(typed_view, 3)
    assert row.get("Name") == ""
    assert row.get_optional("Name") == ""
    with pytest.raises(NoValueError):
        row.get("Unknown column")


def test_get_empty_string_is_a_value(typed_view):
    assert RowData(typed_view, 3).get("Code") == ""


def test_handle_outside_bounds_never_fails_to_construct(typed_view):
    row = RowData(typed_view, 999)
    assert row.get_optional("Qty") is None
    assert row.is_empty()
    with pytest.raises(NoValueError):
        row.get("Qty")


def test_parse_int(typed_view):
    assert RowData(typed_view, 2).parse("Qty", int) == 42


def test_parse_failure_names_column_and_value(typed_view):
    with pytest.raises(ParseError) as exc_info:
        RowData(typed_view, 3).parse("Qty", int)
    err = exc_info.value
    assert err.column == "Qty"
    assert err.value == "abc"
    assert err.target is int
    assert err.code == ErrorCode.PARSE
    assert "'abc'" in str(err)


def test_parse_missing_value_is_no_value_error(typed_view):
    with pytest.raises(NoValueError):
        RowData(typed_view, 3).parse("Colour", str)


def test_parse_float_and_decimal(typed_view):
    row = RowData(typed_view, 2)
    assert row.parse("Price", float) == 0.25
    assert row.parse("Price", Decimal) == Decimal("0.25")
    # 不处理本地化数字格式
    with pytest.raises(ParseError):
        RowData(typed_view, 3).parse("Price", float)
    with pytest.raises(ParseError):
        RowData(typed_view, 3).parse("Price", Decimal)


def test_parse_bool(typed_view):
    assert RowData(typed_view, 2).parse("Active", bool) is True
    with pytest.raises(ParseError):
        RowData(typed_view, 3).parse("Active", bool)


def test_parse_dates(typed_view):
    row = RowData(typed_view, 2)
    assert row.parse("When", datetime) == datetime(2024, 1, 5)
    assert row.parse("When", date) == date(2024, 1, 5)
    with pytest.raises(ParseError):
        RowData(typed_view, 3).parse("When", date)


def test_parse_default_is_str(typed_view):
    assert RowData(typed_view, 2).parse("Code") == "0012"


def test_parse_with_callable(typed_view):
    row = RowData(typed_view, 2)
    assert row.parse("Code", lambda s: int(s, 8)) == 10
    with pytest.raises(ParseError):
        RowData(typed_view, 3).parse("When", lambda s: int(s, 16))


def test_parse_unsupported_target(typed_view):
    with pytest.raises(TypeError):
        RowData(typed_view, 2).parse("Qty", 5)


def test_to_dict(typed_view):
    assert RowData(typed_view, 3).to_dict() == {
        "Qty": "abc",
        "Price": "1,5",
        "Active": "yes",
        "When": "not a date",
        "Name": "",
        "Code": "",
    }


def test_row_equality(typed_view):
    assert RowData(typed_view, 2) == RowData(typed_view, 2)
    assert RowData(typed_view, 2) != RowData(typed_view, 3)
    assert len({RowData(typed_view, 2), RowData(typed_view, 2)}) == 1
