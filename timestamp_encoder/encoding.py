from __future__ import annotations

from datetime import datetime, timedelta, timezone

from .types import EncodedTimestamp

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_MS = timedelta(milliseconds=1)

TIMESTAMP_SIZE = 8  # bytes, signed


class ParseError(ValueError):
    """Raised when a string is not a recognised ISO 8601 date/time."""


def parse_iso8601(s: str) -> datetime:
    """Parse an ISO 8601 date/time into an aware datetime.

    Strings without an offset (including bare dates) are taken as UTC.
    """
    try:
        dt = datetime.fromisoformat(s.strip())
    except (TypeError, ValueError, AttributeError) as exc:
        raise ParseError(f"Unable to parse timestamp: {s!r}") from exc

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def to_epoch_ms(dt: datetime) -> int:
    # Floor division keeps pre-epoch values exact (no float rounding).
    return (dt - EPOCH) // ONE_MS


def pack_le_hex(ts: int) -> str:
    """Raises OverflowError if ts does not fit in a signed 64-bit int."""
    return ts.to_bytes(TIMESTAMP_SIZE, "little", signed=True).hex()


def unpack_le_hex(hex_str: str) -> int:
    h = hex_str.strip()
    if len(h) != TIMESTAMP_SIZE * 2:
        raise ValueError(f"Expected {TIMESTAMP_SIZE * 2} hex chars, got {len(h)}: {hex_str!r}")
    return int.from_bytes(bytes.fromhex(h), "little", signed=True)


def encode(s: str) -> EncodedTimestamp:
    ts = to_epoch_ms(parse_iso8601(s))
    return EncodedTimestamp(timestamp=ts, hex_bytes=pack_le_hex(ts))


def format_encoded(enc: EncodedTimestamp) -> str:
    return f"TIMESTAMP: {enc.timestamp}\nBYTES:     {enc.hex_bytes}"
