from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .encoding import encode
from .types import TableRow

HEADER = "DATE                 | DECIMAL              | HEX"
RULE = "-" * 62


def month_start(year: int, month: int) -> str:
    """First day of the month at midnight UTC, e.g. 2012-03-01T00:00:00Z."""
    return f"{year:04d}-{month:02d}-01T00:00:00Z"


@dataclass(frozen=True)
class MonthlyTable:
    """Twelve rows, one per month of `year`.

    Rows are computed on iteration, so the table can be walked more than once.
    """

    year: int

    def __iter__(self) -> Iterator[TableRow]:
        for month in range(1, 13):
            s = month_start(self.year, month)
            enc = encode(s)
            yield TableRow(date_str=s, timestamp=enc.timestamp, hex_bytes=enc.hex_bytes)

    def __len__(self) -> int:
        return 12


def format_row(row: TableRow) -> str:
    return "%s | %-20d | %s" % (row.date_str, row.timestamp, row.hex_bytes)


def render_table(year: int) -> str:
    lines = [HEADER, RULE]
    lines.extend(format_row(r) for r in MonthlyTable(year))
    return "\n".join(lines)
