from __future__ import annotations
import argparse
import logging
import sys

from .config import PagerConfig, configure_logging
from .state import PaginationState
from .validation import PaginationError

logger = logging.getLogger("flet_pagination")

DEFAULT_SAMPLE_ROWS = 250


def cmd_demo(args, config: PagerConfig):
    # pandas/flet are only needed once a window is opened
    from .data_io import read_table, sample_frame
    from .main import run

    if args.page_size is not None:
        config = config.with_page_size(args.page_size)
    if args.path:
        df = read_table(args.path)
        title = args.path
    else:
        df = sample_frame(args.rows)
        title = f"{args.rows} sample rows"
    logger.info("Opening demo: %s (%d rows, page size %d)", title, len(df), config.default_page_size)
    run(df, config, title=title)


def cmd_plan(args, config: PagerConfig):
    state = PaginationState.from_config(config)
    if args.page_size is not None:
        state.set_default_page_size(args.page_size)
    state.set_total_rows(args.rows)
    if args.page is not None:
        state.jump_to_page(args.page)
    start, end = state.row_range()
    print(f"Total rows:  {state.total_rows}")
    print(f"Page size:   {state.page_size}")
    print(f"Total pages: {state.total_pages}")
    print(f"Page:        {state.page}")
    if end > start:
        print(f"Rows:        {start + 1}-{end}")
    else:
        print("Rows:        none")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="flet-pagination", description="Pagination control for Flet")
    sp = p.add_subparsers(dest="cmd", required=True)

    sp_demo = sp.add_parser("demo", help="Open a paged table of a CSV/XLSX file (or sample rows)")
    sp_demo.add_argument("path", nargs="?", help="CSV or XLSX file; omit for generated rows")
    sp_demo.add_argument("--rows", type=int, default=DEFAULT_SAMPLE_ROWS, help="Sample rows when no file is given")
    sp_demo.add_argument("--page-size", type=int, help="Default page size (overrides PAGER_DEFAULT_PAGE_SIZE)")
    sp_demo.set_defaults(func=cmd_demo)

    sp_plan = sp.add_parser("plan", help="Print page totals and the row range of a page")
    sp_plan.add_argument("--rows", type=int, required=True, help="Total rows")
    sp_plan.add_argument("--page-size", type=int, help="Rows per page")
    sp_plan.add_argument("--page", type=int, help="Page to select (1-based)")
    sp_plan.set_defaults(func=cmd_plan)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = PagerConfig.from_env()
        configure_logging(config)
        args.func(args, config)
    except PaginationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
