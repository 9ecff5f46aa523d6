from __future__ import annotations

import re

from timestamp_encoder.encoding import unpack_le_hex
from timestamp_encoder.table import HEADER, RULE, MonthlyTable, format_row, month_start, render_table


def test_month_start_zero_pads() -> None:
    assert month_start(2012, 3) == "2012-03-01T00:00:00Z"
    assert month_start(2012, 12) == "2012-12-01T00:00:00Z"


def test_monthly_table_rows() -> None:
    rows = list(MonthlyTable(2012))
    assert len(rows) == 12
    assert [r.date_str for r in rows] == [f"2012-{m:02d}-01T00:00:00Z" for m in range(1, 13)]
    assert rows[0].timestamp == 1325376000000
    for a, b in zip(rows, rows[1:]):
        assert a.timestamp < b.timestamp
    for r in rows:
        assert unpack_le_hex(r.hex_bytes) == r.timestamp


def test_monthly_table_is_restartable() -> None:
    t = MonthlyTable(2012)
    assert list(t) == list(t)
    assert len(t) == 12


def test_format_row_pads_decimal() -> None:
    row = next(iter(MonthlyTable(2012)))
    assert format_row(row) == "2012-01-01T00:00:00Z | 1325376000000        | 00d0909634010000"


def test_render_table_layout() -> None:
    lines = render_table(2012).splitlines()
    assert lines[0] == HEADER
    assert lines[1] == RULE
    assert len(RULE) == 62
    assert len(lines) == 14
    row_re = re.compile(r"^2012-(\d{2})-01T00:00:00Z \| [-\d ]{20} \| [0-9a-f]{16}$")
    months = [int(row_re.match(ln).group(1)) for ln in lines[2:]]
    assert months == list(range(1, 13))
