from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EncodedTimestamp:
    """Epoch milliseconds plus the same value as little-endian hex."""

    timestamp: int
    hex_bytes: str  # 16 lowercase hex chars, least-significant byte first


@dataclass(frozen=True)
class TableRow:
    date_str: str
    timestamp: int
    hex_bytes: str
