from __future__ import annotations

import argparse
import sys
from pathlib import Path

from linesheet.config.loader import ConfigError, Settings, load_config
from linesheet.logging.init import log_summary, setup_logging
from linesheet.models.field_schema import get_schema
from linesheet.models.view_state import ViewMode
from linesheet.services.display import render_grid, render_page_line, render_range_line, render_summary_line, render_table
from linesheet.services.view_model import LineSheetViewModel

"""CLI entrypoint.

Loads one CSV into a line sheet view-model, applies the search / filter /
page options in the order a user would (filters first, then paging) and
prints the resulting page to stdout.
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1
EXIT_PARSE_FAILED = 2


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="linesheet", description="Line sheet CSV viewer")
    p.add_argument("file", type=Path, help="CSV file to load")
    p.add_argument("--variant", choices=["client", "internal"], default="client")
    p.add_argument("--search", default="", help="Case-insensitive name search")
    p.add_argument("--category", default=None, help="Exact category filter")
    p.add_argument("--status", default=None, help="Exact status filter")
    p.add_argument("--page", type=int, default=1, help="1-based page number")
    p.add_argument("--view", choices=[m.value for m in ViewMode], default=ViewMode.GRID.value,
                   help="Layout for the client variant")
    p.add_argument("--config", type=Path, default=None, help="YAML settings file")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def _print_options(vm: LineSheetViewModel, settings: Settings) -> None:
    view = vm.view()
    print(f"Categories: {', '.join([settings.all_sentinel, *view.categories])}")
    print(f"Statuses: {', '.join([settings.all_sentinel, *view.statuses])}")


def main(argv: list[str] | None = None) -> int:
    # None only: an explicit [] from tests must not pick up pytest's argv
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    logger = setup_logging(debug=args.debug)
    if args.debug:
        logger.debug("debug mode enabled")

    try:
        settings = load_config(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    schema = get_schema(args.variant)
    vm = LineSheetViewModel(schema, settings)
    try:
        view = vm.upload_file(args.file)
    except OSError as e:
        logger.error(f"cannot read {args.file}: {e}")
        return EXIT_FATAL
    if view.error:
        logger.error(view.error)
        return EXIT_PARSE_FAILED

    if args.search:
        vm.set_search(args.search)
    if args.category is not None:
        vm.set_category(args.category)
    if args.status is not None:
        vm.set_status(args.status)
    if schema.has_view_mode:
        vm.set_view_mode(ViewMode(args.view))
    for _ in range(args.page - 1):
        vm.next_page()
    view = vm.view()

    _print_options(vm, settings)
    if view.is_empty:
        print("No items match the current filters.")
    elif view.view_mode is ViewMode.GRID:
        for line in render_grid(view, settings.emphasized_status):
            print(line)
    else:
        for line in render_table(view, settings.emphasized_status):
            print(line)
    if view.show_pagination:
        print(render_range_line(view))
        print(render_page_line(view))

    log_summary(render_summary_line(view))
    return EXIT_SUCCESS


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
