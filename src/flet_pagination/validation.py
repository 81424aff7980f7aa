from __future__ import annotations
import re
import typing as t

_INT_RE = re.compile(r"^[+-]?[0-9]+$")


class PaginationError(ValueError):
    pass


class ParseError(PaginationError):
    """Input could not be read as an integer."""

    def __init__(self, value: t.Any, message: str | None = None):
        self.value = value
        super().__init__(message or f"not an integer: {value!r}")


class ValidationError(PaginationError):
    """Integer input outside the allowed range for `field`."""

    def __init__(self, field: str, value: int, message: str):
        self.field = field
        self.value = value
        super().__init__(message)


def parse_int(value: t.Any) -> int:
    # bool is an int subclass; True is not a page number
    if isinstance(value, bool):
        raise ParseError(value)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        s = value.strip()
        if _INT_RE.match(s):
            return int(s)
    raise ParseError(value)


def validate_page(target: int, total_pages: int) -> int:
    if target < 1:
        raise ValidationError("page", target, "page should not be smaller than 1")
    # with no rows yet any positive page is accepted
    if total_pages > 0 and target > total_pages:
        raise ValidationError("page", target, "page should not be bigger than total pages")
    return target


def validate_page_size(size: int) -> int:
    if size < 1:
        raise ValidationError("page_size", size, "page size should be at least 1")
    return size


def validate_total_rows(total: int) -> int:
    if total < 0:
        raise ValidationError("total_rows", total, "total rows should not be negative")
    return total
