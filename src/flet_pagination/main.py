# main.py
from __future__ import annotations
import logging
import typing as t

import flet as ft
import pandas as pd

from .config import PagerConfig
from .ui.log_view import LogView
from .ui.table_view import TableView

logger = logging.getLogger(__name__)


def build_app(df: pd.DataFrame, config: PagerConfig, title: str = "Pagination demo") -> t.Callable[[ft.Page], None]:
    def main(page: ft.Page):
        page.title = title
        page.padding = 10

        log = LogView()

        def on_change(p: int, size: int):
            logger.info("Page changed: page=%d size=%d", p, size)
            log.log_change(p, size)

        table = TableView(config=config, on_change=on_change)
        counts = ft.Text(f"{len(df)} rows • {len(df.columns)} columns")
        reset_btn = ft.IconButton(icon=ft.Icons.RESTART_ALT, tooltip="Back to first page and default size",
                                  on_click=lambda e: table.pager.set_total_rows(len(table.df)))

        page.add(
            ft.Row([counts, reset_btn], alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
            ft.Divider(),
            ft.Container(content=table, expand=3),
            ft.Divider(),
            ft.Container(content=log, expand=1),
        )
        # mount first so the table can update itself
        table.set_df(df)

    return main


def run(df: pd.DataFrame, config: PagerConfig | None = None, title: str = "Pagination demo") -> None:
    ft.app(target=build_app(df, config or PagerConfig.from_env(), title=title))
