from .state import FIRST_PAGE, DEFAULT_PAGE_SIZE, PaginationState, compute_total_pages
from .validation import PaginationError, ParseError, ValidationError, parse_int

__all__ = [
    "FIRST_PAGE",
    "DEFAULT_PAGE_SIZE",
    "PaginationState",
    "compute_total_pages",
    "PaginationError",
    "ParseError",
    "ValidationError",
    "parse_int",
]
