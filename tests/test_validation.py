import pytest

from flet_pagination.validation import (
    PaginationError,
    ParseError,
    ValidationError,
    parse_int,
    validate_page,
    validate_page_size,
    validate_total_rows,
)


@pytest.mark.parametrize("text, expected", [
    ("1", 1),
    ("  42 ", 42),
    ("+7", 7),
    ("-3", -3),
    ("007", 7),
    (12, 12),
])
def test_parse_int_accepts(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize("bad", ["", " ", "1.0", "1_000", "0x10", "ten", "1 2", 1.5, False, [], None])
def test_parse_int_rejects(bad):
    with pytest.raises(ParseError) as exc:
        parse_int(bad)
    assert exc.value.value == bad


def test_error_hierarchy():
    assert issubclass(ParseError, PaginationError)
    assert issubclass(ValidationError, PaginationError)
    assert issubclass(PaginationError, ValueError)


def test_validate_page_messages():
    with pytest.raises(ValidationError, match="smaller than 1"):
        validate_page(0, 5)
    with pytest.raises(ValidationError, match="bigger than total pages"):
        validate_page(6, 5)
    assert validate_page(5, 5) == 5
    assert validate_page(99, 0) == 99


def test_validate_page_size_and_rows():
    assert validate_page_size(1) == 1
    with pytest.raises(ValidationError, match="at least 1"):
        validate_page_size(0)
    assert validate_total_rows(0) == 0
    with pytest.raises(ValidationError) as exc:
        validate_total_rows(-1)
    assert exc.value.field == "total_rows"
