# ============================================================================
# STATUS ROW NORMALIZER
# ============================================================================
# STATUS: Core - Raw status record to typed StatusRow
# PURPOSE: Type every column of SHOW REPLICA STATUS as integer or text
# CREATED: 19 OCT 2026
# ============================================================================
"""
Status Row Normalizer

A value becomes an IntegerValue when its text is a strict base-10 signed
64-bit integer (optional sign, digits only). Everything else is kept
verbatim as a TextValue, so numeric fields like Seconds_Behind_Source are
comparable while state fields like Replica_IO_Running stay readable.

Columns are never dropped or renamed. No I/O, never raises on data.
"""

import re
from typing import Optional, Sequence, Union

from core.models import ColumnValue, IntegerValue, StatusRow, TextValue

RawValue = Union[str, bytes, None]

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1


def parse_int64(text: str) -> Optional[int]:
    """Parse text as a signed 64-bit integer, or return None."""
    if not _INT_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if value < _INT64_MIN or value > _INT64_MAX:
        return None
    return value


def _as_text(raw: RawValue) -> str:
    # NULL scans as an empty value
    if raw is None:
        return ""
    if isinstance(raw, (bytes, bytearray, memoryview)):
        return bytes(raw).decode("utf-8", errors="replace")
    return str(raw)


def normalize_value(raw: RawValue) -> ColumnValue:
    """Type a single raw column value."""
    text = _as_text(raw)
    parsed = parse_int64(text)
    if parsed is None:
        return TextValue(text)
    return IntegerValue(parsed)


def normalize(columns: Sequence[str], raw_values: Sequence[RawValue]) -> StatusRow:
    """
    Build a StatusRow from column names and one row of raw values.

    Args:
        columns: Column names in query order
        raw_values: Raw values, same length and order as columns

    Returns:
        StatusRow preserving column order
    """
    if len(columns) != len(raw_values):
        raise ValueError(
            f"column count {len(columns)} does not match value count {len(raw_values)}"
        )
    return StatusRow(
        (name, normalize_value(raw)) for name, raw in zip(columns, raw_values)
    )


__all__ = [
    "RawValue",
    "parse_int64",
    "normalize_value",
    "normalize",
]
