"""ISO 8601 dates to epoch milliseconds and their little-endian byte encoding.

Timestamps are signed 64-bit integers counting milliseconds since the epoch
(midnight, Jan 1 1970 UTC). The byte form is what ends up on disk/on the wire,
so the tools here print both.
"""

from .types import EncodedTimestamp, TableRow
from .encoding import ParseError, encode, pack_le_hex, parse_iso8601, to_epoch_ms, unpack_le_hex
from .table import MonthlyTable, render_table
