from __future__ import annotations
import typing as t

import flet as ft

from ..config import PagerConfig
from ..state import OnChange, PaginationState
from ..validation import PaginationError


class Pagination(ft.Row):
    """Flet rendering of a PaginationState.

    [<] [page] [>]  Size [n]  TotalPages n  TotalRows n

    Text fields are validated on submit; a bad value is shown as the field's
    error text and leaves the state untouched.
    """

    def __init__(self, state: PaginationState | None = None, config: PagerConfig | None = None,
                 on_change: OnChange | None = None, show_edges: bool = False):
        self.pager_state = state or PaginationState.from_config(config or PagerConfig())
        if on_change is not None:
            self.pager_state.on_change = on_change

        self.first_btn = ft.IconButton(icon=ft.Icons.SKIP_PREVIOUS, tooltip="First page",
                                       on_click=self._on_first)
        self.prev_btn = ft.IconButton(icon=ft.Icons.NAVIGATE_BEFORE, tooltip="Previous page",
                                      on_click=self._on_prev)
        self.next_btn = ft.IconButton(icon=ft.Icons.NAVIGATE_NEXT, tooltip="Next page",
                                      on_click=self._on_next)
        self.last_btn = ft.IconButton(icon=ft.Icons.SKIP_NEXT, tooltip="Last page",
                                      on_click=self._on_last)
        self.page_field = ft.TextField(width=70, dense=True, text_align=ft.TextAlign.CENTER,
                                       keyboard_type=ft.KeyboardType.NUMBER,
                                       on_submit=self._on_page_submit)
        self.size_field = ft.TextField(width=70, dense=True, text_align=ft.TextAlign.CENTER,
                                       keyboard_type=ft.KeyboardType.NUMBER,
                                       on_submit=self._on_size_submit)
        self.total_pages_value = ft.Text()
        self.total_rows_value = ft.Text()

        nav = [self.prev_btn, self.page_field, self.next_btn]
        if show_edges:
            nav = [self.first_btn, *nav, self.last_btn]
        super().__init__(
            controls=[
                *nav,
                ft.Text("Size"), self.size_field,
                ft.Text("TotalPages"), self.total_pages_value,
                ft.Text("TotalRows"), self.total_rows_value,
            ],
            spacing=8,
            alignment=ft.MainAxisAlignment.START,
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        )
        self._sync()

    # --- host API ---
    @property
    def on_change(self) -> OnChange | None:
        return self.pager_state.on_change

    @on_change.setter
    def on_change(self, handler: OnChange | None) -> None:
        self.pager_state.on_change = handler

    @property
    def current_page(self) -> int:
        return self.pager_state.page

    @property
    def page_size(self) -> int:
        return self.pager_state.page_size

    @property
    def total_pages(self) -> int:
        return self.pager_state.total_pages

    @property
    def total_rows(self) -> int:
        return self.pager_state.total_rows

    def set_total_rows(self, total: int) -> None:
        self._run(lambda: self.pager_state.set_total_rows(total))

    def set_default_page_size(self, size: int) -> None:
        self._run(lambda: self.pager_state.set_default_page_size(size))

    def reset(self) -> None:
        self._run(self.pager_state.reset)

    # --- handlers ---
    def _on_first(self, e) -> None:
        self._run(self.pager_state.first_page)

    def _on_prev(self, e) -> None:
        self._run(self.pager_state.previous_page)

    def _on_next(self, e) -> None:
        self._run(self.pager_state.next_page)

    def _on_last(self, e) -> None:
        self._run(self.pager_state.last_page)

    def _on_page_submit(self, e) -> None:
        self._submit(self.page_field, self.pager_state.submit_page_text)

    def _on_size_submit(self, e) -> None:
        self._submit(self.size_field, self.pager_state.submit_page_size_text)

    def _submit(self, field: ft.TextField, apply: t.Callable[[str], None]) -> None:
        try:
            apply(field.value or "")
        except PaginationError as ex:
            field.error_text = str(ex)
            self._refresh()
            return
        self._sync()
        self._refresh()

    def _run(self, transition: t.Callable[[], t.Any]) -> None:
        transition()
        self._sync()
        self._refresh()

    def _sync(self) -> None:
        s = self.pager_state
        self.page_field.value = str(s.page)
        self.page_field.error_text = None
        self.size_field.value = str(s.page_size)
        self.size_field.error_text = None
        self.total_pages_value.value = str(s.total_pages)
        self.total_rows_value.value = str(s.total_rows)
        self.first_btn.disabled = self.prev_btn.disabled = not s.has_previous
        self.next_btn.disabled = self.last_btn.disabled = not s.has_next

    def _refresh(self) -> None:
        if self.page:           # only update when mounted
            self.update()
