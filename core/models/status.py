# ============================================================================
# STATUS ROW MODEL
# ============================================================================
# STATUS: Core - Typed replication status and verdicts
# PURPOSE: Tagged column values, ordered status rows, health verdicts
# CREATED: 19 OCT 2026
# ============================================================================
"""
Status Row Model

A replication status row is an ordered mapping from column name to a
ColumnValue. Each value is exactly one of:

- IntegerValue: the raw text parsed as a signed 64-bit base-10 integer
- TextValue: anything else, kept verbatim

Policy code checks the variant with isinstance() instead of guessing types.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Union


@dataclass(frozen=True)
class IntegerValue:
    """Column value that parsed as an integer."""
    value: int

    def to_json(self) -> int:
        return self.value


@dataclass(frozen=True)
class TextValue:
    """Column value kept as text."""
    value: str

    def to_json(self) -> str:
        return self.value


ColumnValue = Union[IntegerValue, TextValue]


class StatusRow:
    """
    Ordered, read-only mapping of column name to ColumnValue.

    Built fresh for every probe and never shared between requests.
    """

    __slots__ = ("_columns",)

    def __init__(self, items: Iterable[Tuple[str, ColumnValue]] = ()):
        self._columns: Dict[str, ColumnValue] = dict(items)

    def get(self, column: str) -> Optional[ColumnValue]:
        return self._columns.get(column)

    def __getitem__(self, column: str) -> ColumnValue:
        return self._columns[column]

    def __contains__(self, column: object) -> bool:
        return column in self._columns

    def __iter__(self) -> Iterator[str]:
        return iter(self._columns)

    def __len__(self) -> int:
        return len(self._columns)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StatusRow):
            return NotImplemented
        return list(self._columns.items()) == list(other._columns.items())

    def __repr__(self) -> str:
        return f"StatusRow({self.to_dict()!r})"

    @property
    def columns(self) -> List[str]:
        return list(self._columns)

    def to_dict(self) -> Dict[str, Any]:
        """Plain values in column order, for JSON responses."""
        return {name: value.to_json() for name, value in self._columns.items()}


@dataclass(frozen=True)
class HealthVerdict:
    """Outcome of evaluating one status row against replica policy."""
    healthy: bool
    row: StatusRow = field(default_factory=StatusRow)
    reason: Optional[str] = None

    @classmethod
    def ok(cls, row: StatusRow) -> "HealthVerdict":
        """Create healthy verdict."""
        return cls(healthy=True, row=row)

    @classmethod
    def failed(cls, reason: str, row: StatusRow) -> "HealthVerdict":
        """Create unhealthy verdict."""
        return cls(healthy=False, row=row, reason=reason)


@dataclass(frozen=True)
class StatusResult:
    """
    Raw output of one status query.

    row is None when the query returned zero rows.
    """
    columns: List[str]
    row: Optional[Sequence[Union[str, bytes, None]]] = None

    @property
    def empty(self) -> bool:
        return self.row is None
