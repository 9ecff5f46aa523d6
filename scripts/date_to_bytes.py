#!/usr/bin/env python3
"""Convert an ISO 8601 date to its epoch-millisecond timestamp and little-endian bytes.

Usage:
  PYTHONPATH=. python3 scripts/date_to_bytes.py 2012-03-01T00:00:00Z
"""

from __future__ import annotations

from timestamp_encoder.cli import date_main

if __name__ == "__main__":
    date_main()
