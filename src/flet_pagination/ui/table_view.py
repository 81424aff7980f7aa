# ui/table_view.py
from __future__ import annotations
import flet as ft
import pandas as pd

from ..config import PagerConfig
from ..data_io import page_frame
from ..state import OnChange
from .pager import Pagination

def _placeholder_cols() -> list[ft.DataColumn]:
    return [ft.DataColumn(ft.Text("No data yet"))]


def _fmt(v) -> str:
    return "" if pd.api.types.is_scalar(v) and pd.isna(v) else str(v)


class TableView(ft.Column):
    """A DataFrame shown one page at a time, pager on top, table scrolls."""

    def __init__(self, config: PagerConfig | None = None, on_change: OnChange | None = None):
        super().__init__(expand=True)
        self.df = pd.DataFrame()
        self.on_page_change = on_change
        self.pager = Pagination(config=config, on_change=self._on_page_change, show_edges=True)
        self.table = ft.DataTable(columns=_placeholder_cols(), rows=[], expand=True)
        self.scroller = ft.ListView(expand=True, controls=[self.table])
        self.controls = [self.pager, self.scroller]

    def set_df(self, df: pd.DataFrame | None) -> None:
        self.df = df if df is not None else pd.DataFrame()
        # set_total_rows notifies, which renders the first page
        self.pager.set_total_rows(len(self.df))

    def _on_page_change(self, page: int, page_size: int) -> None:
        self._render()
        if self.on_page_change is not None:
            self.on_page_change(page, page_size)

    def _render(self) -> None:
        if self.df.empty:
            self.table.columns, self.table.rows = _placeholder_cols(), []
        else:
            dfp = page_frame(self.df, self.pager.pager_state)
            self.table.columns = [ft.DataColumn(ft.Text(str(c))) for c in self.df.columns]
            self.table.rows = [
                ft.DataRow(cells=[ft.DataCell(ft.Text(_fmt(v))) for v in row])
                for row in dfp.itertuples(index=False, name=None)
            ]
        if self.page:
            self.update()
