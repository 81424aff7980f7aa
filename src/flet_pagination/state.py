# state.py
from __future__ import annotations
import logging
import typing as t

from .validation import (
    PaginationError,
    parse_int,
    validate_page,
    validate_page_size,
    validate_total_rows,
)

if t.TYPE_CHECKING:
    from .config import PagerConfig

logger = logging.getLogger(__name__)

FIRST_PAGE = 1
DEFAULT_PAGE_SIZE = 10

OnChange = t.Callable[[int, int], None]


def compute_total_pages(total_rows: int, page_size: int) -> int:
    """ceil(total_rows / page_size) without going through floats."""
    return (total_rows + page_size - 1) // page_size


class PaginationState:
    """Page / page size / row count bookkeeping for a pager control.

    Mutated only through the transition methods. Every successful transition
    that moves the page or changes the page size calls `on_change(page, page_size)`;
    failed validation and no-op moves never do.
    """

    def __init__(self, default_page_size: int = DEFAULT_PAGE_SIZE, on_change: OnChange | None = None):
        self._default_page_size = validate_page_size(parse_int(default_page_size))
        self.on_change = on_change
        self._page = FIRST_PAGE
        self._page_size = self._default_page_size
        self._total_rows = 0
        self._total_pages = 0

    @classmethod
    def from_config(cls, config: "PagerConfig", on_change: OnChange | None = None) -> "PaginationState":
        return cls(default_page_size=config.default_page_size, on_change=on_change)

    def __repr__(self) -> str:
        return (f"PaginationState(page={self._page}, page_size={self._page_size}, "
                f"total_rows={self._total_rows}, total_pages={self._total_pages})")

    # --- accessors ---
    @property
    def page(self) -> int:
        return self._page

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def total_rows(self) -> int:
        return self._total_rows

    @property
    def total_pages(self) -> int:
        return self._total_pages

    @property
    def default_page_size(self) -> int:
        return self._default_page_size

    @property
    def has_previous(self) -> bool:
        return self._page > FIRST_PAGE

    @property
    def has_next(self) -> bool:
        return self._page < self._total_pages

    def row_range(self) -> tuple[int, int]:
        """0-based [start, end) offsets of the rows on the current page."""
        start = min((self._page - 1) * self._page_size, self._total_rows)
        end = min(start + self._page_size, self._total_rows)
        return start, end

    # --- host-driven configuration ---
    def reset(self) -> None:
        self._page = FIRST_PAGE
        self._page_size = self._default_page_size
        self._recompute()

    def set_default_page_size(self, size: int | str) -> None:
        size = validate_page_size(parse_int(size))
        self._default_page_size = size
        self._page_size = size
        self._recompute()
        self._page = min(self._page, max(self._total_pages, FIRST_PAGE))
        logger.debug("Default page size set to %d", size)

    def set_total_rows(self, total: int | str) -> None:
        total = validate_total_rows(parse_int(total))
        self.reset()
        self._total_rows = total
        self._recompute()
        logger.debug("Total rows set to %d (%d pages)", total, self._total_pages)
        self._notify()

    # --- user-driven transitions ---
    def previous_page(self) -> bool:
        if self._page <= FIRST_PAGE:
            return False
        self._page -= 1
        self._notify()
        return True

    def next_page(self) -> bool:
        if self._page >= self._total_pages:
            return False
        self._page += 1
        self._notify()
        return True

    def first_page(self) -> bool:
        if self._page == FIRST_PAGE:
            return False
        self._page = FIRST_PAGE
        self._notify()
        return True

    def last_page(self) -> bool:
        if self._total_pages == 0 or self._page == self._total_pages:
            return False
        self._page = self._total_pages
        self._notify()
        return True

    def jump_to_page(self, target: int | str) -> None:
        target = validate_page(parse_int(target), self._total_pages)
        self._page = target
        self._notify()

    def set_page_size(self, size: int | str) -> None:
        size = validate_page_size(parse_int(size))
        self._page_size = size
        self._recompute()
        self._page = FIRST_PAGE
        self._notify()

    def submit_page_text(self, text: str) -> None:
        try:
            self.jump_to_page(parse_int(text))
        except PaginationError as e:
            logger.debug("Rejected page input %r: %s", text, e)
            raise

    def submit_page_size_text(self, text: str) -> None:
        try:
            self.set_page_size(parse_int(text))
        except PaginationError as e:
            logger.debug("Rejected page size input %r: %s", text, e)
            raise

    # --- internals ---
    def _recompute(self) -> None:
        self._total_pages = compute_total_pages(self._total_rows, self._page_size)

    def _notify(self) -> None:
        logger.debug("Page %d/%d (size %d)", self._page, self._total_pages, self._page_size)
        if self.on_change is not None:
            self.on_change(self._page, self._page_size)
