"""Command-line entry points.

date-to-bytes [ISO8601_DATE]
  Print the epoch-millisecond timestamp and its little-endian bytes.
  With no argument, print usage and exit 0. Only the first argument is
  used. Unparseable input is not caught: the ParseError traceback goes to
  stderr and the exit status is 1.

date-table
  Print a table of first-of-month timestamps for 2012.
"""

from __future__ import annotations

import argparse

from .encoding import encode, format_encoded
from .table import render_table

TABLE_YEAR = 2012


def date_main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(prog="date-to-bytes", usage="%(prog)s [ISO8601_DATE]")
    ap.add_argument("date", nargs="*", help="ISO 8601 date, e.g. 2012-03-01T00:00:00Z (extra args are ignored)")
    args = ap.parse_args(argv)

    if not args.date:
        print(ap.format_usage())
        return

    print(format_encoded(encode(args.date[0])))
    print()


def table_main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(prog="date-table", description="First-of-month timestamps for 2012.")
    ap.parse_args(argv)

    print(render_table(TABLE_YEAR))
    print()
