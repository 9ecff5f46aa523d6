#!/usr/bin/env python3
"""Print first-of-month timestamps (ISO, decimal, little-endian hex) for 2012.

Usage:
  PYTHONPATH=. python3 scripts/date_table.py
"""

from __future__ import annotations

from timestamp_encoder.cli import table_main

if __name__ == "__main__":
    table_main()
