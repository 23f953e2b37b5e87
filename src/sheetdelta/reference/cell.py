"""
Cell references.

A CellReference pairs a column and a row coordinate. Each axis keeps its own
ReferenceKind, so ``$A1`` (column absolute, row relative) is a valid
reference distinct from ``A1`` and ``$A$1``.

Two comparisons are provided and they are deliberately different:
- ``==`` / ``hash``: column and row including their kinds
- compare_to() / ``<``: column value, then row value, kinds ignored

Sorted containers keyed on the ordering may therefore coalesce references
that a set or dict keeps apart.
"""

import functools
import re
from dataclasses import dataclass
from typing import Optional, Tuple

from sheetdelta.exceptions import NullArgumentError
from sheetdelta.reference.coordinate import ColumnReference, RowReference
from sheetdelta.reference.kind import ReferenceKind

_CELL_PATTERN = re.compile(r"^(\$?[A-Z]+)(\$?[0-9]+)$")


@dataclass(frozen=True, repr=False)
class CellReference:
    """Reference to a single cell.

    Attributes:
        column: The column coordinate
        row: The row coordinate

    Raises:
        NullArgumentError: If column or row is None
        TypeError: If column or row is on the wrong axis
    """

    column: ColumnReference
    row: RowReference

    def __post_init__(self) -> None:
        _check_column(self.column)
        _check_row(self.row)

    @classmethod
    def with_(cls, column: ColumnReference, row: RowReference) -> "CellReference":
        """Factory equivalent to the constructor."""
        return cls(column, row)

    @classmethod
    def parse(cls, notation: str, check_limits: bool = True) -> "CellReference":
        """Parse A1 notation, with optional ``$`` markers on either axis.

        Examples: ``A1``, ``$B$21``, ``$C7``, ``aa$10``.

        Args:
            notation: Text to parse
            check_limits: Reject coordinates past ``XFD1048576`` when True

        Raises:
            ValueError: If notation is invalid
        """
        if notation is None:
            raise NullArgumentError("notation")
        text = notation.strip().upper()
        if not text:
            raise ValueError("Empty cell notation")
        match = _CELL_PATTERN.match(text)
        if not match:
            raise ValueError(f"Invalid cell notation: {notation}")
        column_text, row_text = match.groups()
        return cls(
            ColumnReference.parse(column_text, check_limits),
            RowReference.parse(row_text, check_limits),
        )

    # transforms

    def set_column(self, column: ColumnReference) -> "CellReference":
        """Return a reference with the given column and the same row."""
        column = _check_column(column)
        if column == self.column:
            return self
        return CellReference(column, self.row)

    def set_row(self, row: RowReference) -> "CellReference":
        """Return a reference with the given row and the same column."""
        row = _check_row(row)
        if row == self.row:
            return self
        return CellReference(self.column, row)

    def add_column(self, delta: int) -> "CellReference":
        return self.set_column(self.column.add(delta))

    def add_row(self, delta: int) -> "CellReference":
        return self.set_row(self.row.add(delta))

    def add(self, columns: int, rows: int) -> "CellReference":
        """Move the reference by columns and rows.

        Raises:
            RangeError: If either coordinate would become negative
        """
        return self.add_column(columns).add_row(rows)

    def add_saturated(self, columns: int, rows: int) -> "CellReference":
        return self.set_column(self.column.add_saturated(columns)).set_row(
            self.row.add_saturated(rows)
        )

    def set_kind(self, kind: ReferenceKind) -> "CellReference":
        """Return a reference with both axes tagged with kind."""
        return self.set_column(self.column.set_kind(kind)).set_row(self.row.set_kind(kind))

    def to_absolute(self) -> "CellReference":
        return self.set_kind(ReferenceKind.ABSOLUTE)

    def to_relative(self) -> "CellReference":
        return self.set_kind(ReferenceKind.RELATIVE)

    def cell_range(self, other: "CellReference") -> "CellRange":
        """Bounding range spanning this reference and other."""
        from sheetdelta.reference.range import CellRange

        return CellRange(self, other)

    # comparison

    def compare_to(self, other: "CellReference") -> int:
        """Order by column value then row value, ignoring reference kinds.

        Returns:
            Negative, zero or positive like a classic comparator
        """
        if not isinstance(other, CellReference):
            raise TypeError(f"Cannot compare CellReference with {type(other).__name__}")
        result = self.column.compare_to(other.column)
        if result != 0:
            return result
        return self.row.compare_to(other.row)

    def sort_key(self) -> Tuple[int, int]:
        return (self.column.value, self.row.value)

    def equals_ignore_reference_kind(self, other: object) -> bool:
        return (
            isinstance(other, CellReference)
            and self.column.equals_ignore_reference_kind(other.column)
            and self.row.equals_ignore_reference_kind(other.row)
        )

    def __lt__(self, other: "CellReference") -> bool:
        return self.compare_to(other) < 0

    def __le__(self, other: "CellReference") -> bool:
        return self.compare_to(other) <= 0

    def __gt__(self, other: "CellReference") -> bool:
        return self.compare_to(other) > 0

    def __ge__(self, other: "CellReference") -> bool:
        return self.compare_to(other) >= 0

    def __str__(self) -> str:
        return f"{self.column}{self.row}"

    def __repr__(self) -> str:
        return f"CellReference({str(self)!r})"


def _check_column(column: Optional[ColumnReference]) -> ColumnReference:
    if column is None:
        raise NullArgumentError("column")
    if not isinstance(column, ColumnReference):
        raise TypeError(f"column must be a ColumnReference, got {type(column).__name__}")
    return column


def _check_row(row: Optional[RowReference]) -> RowReference:
    if row is None:
        raise NullArgumentError("row")
    if not isinstance(row, RowReference):
        raise TypeError(f"row must be a RowReference, got {type(row).__name__}")
    return row


def _compare(left: CellReference, right: CellReference) -> int:
    return left.compare_to(right)


# Key for sorted() that orders by position only
IGNORES_REFERENCE_KIND = functools.cmp_to_key(_compare)
