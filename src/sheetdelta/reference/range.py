"""
Rectangular cell ranges.

A CellRange is an inclusive rectangle between two cell references, for
example ``A1:C10``. The corners are normalised on construction so that
``begin`` is always the top-left and ``end`` the bottom-right reference,
keeping the kinds of the coordinates they were taken from.
"""

from dataclasses import dataclass
from typing import Optional

from sheetdelta.exceptions import NullArgumentError
from sheetdelta.reference.cell import CellReference


@dataclass(frozen=True, repr=False)
class CellRange:
    """Inclusive rectangle of cells.

    The corners given to the constructor may be any two opposite corners;
    they are stored normalised.

    Attributes:
        begin: Top-left reference
        end: Bottom-right reference, defaults to begin for a single cell

    Raises:
        NullArgumentError: If begin is None
        TypeError: If either corner is not a CellReference
    """

    begin: CellReference
    end: Optional[CellReference] = None

    def __post_init__(self) -> None:
        begin = self.begin
        end = self.end
        if begin is None:
            raise NullArgumentError("begin")
        if end is None:
            end = begin
        for corner in (begin, end):
            if not isinstance(corner, CellReference):
                raise TypeError(f"Expected CellReference, got {type(corner).__name__}")

        left = begin.column.min(end.column)
        right = begin.column.max(end.column)
        top = begin.row.min(end.row)
        bottom = begin.row.max(end.row)

        object.__setattr__(self, "begin", CellReference(left, top))
        object.__setattr__(self, "end", CellReference(right, bottom))

    @classmethod
    def parse(cls, notation: str, check_limits: bool = True) -> "CellRange":
        """Parse ``A1:B10`` or a single cell ``A1``.

        Args:
            notation: Text to parse
            check_limits: Passed on to CellReference.parse

        Raises:
            ValueError: If notation is invalid
        """
        if notation is None:
            raise NullArgumentError("notation")
        notation = notation.strip()
        if not notation:
            raise ValueError("Empty range notation")

        if ":" in notation:
            parts = notation.split(":")
            if len(parts) != 2:
                raise ValueError(f"Invalid range notation: {notation}")
            return cls(
                CellReference.parse(parts[0], check_limits),
                CellReference.parse(parts[1], check_limits),
            )
        return cls(CellReference.parse(notation, check_limits))

    @property
    def columns(self) -> int:
        """Number of columns spanned."""
        return self.end.column.value - self.begin.column.value + 1

    @property
    def rows(self) -> int:
        """Number of rows spanned."""
        return self.end.row.value - self.begin.row.value + 1

    def count(self) -> int:
        """Number of cells in the range."""
        return self.columns * self.rows

    def is_single_cell(self) -> bool:
        return self.begin.equals_ignore_reference_kind(self.end)

    def test(self, reference: CellReference) -> bool:
        """Check if reference lies inside the range, ignoring reference kinds.

        Raises:
            NullArgumentError: If reference is None
        """
        if reference is None:
            raise NullArgumentError("reference")
        return (
            self.begin.column.value <= reference.column.value <= self.end.column.value
            and self.begin.row.value <= reference.row.value <= self.end.row.value
        )

    def intersect(self, other: "CellRange") -> Optional["CellRange"]:
        """Compute the intersection of two ranges.

        Args:
            other: Another CellRange

        Returns:
            New CellRange for the overlap, or None if the ranges are disjoint
        """
        left = self.begin.column.max(other.begin.column)
        top = self.begin.row.max(other.begin.row)
        right = self.end.column.min(other.end.column)
        bottom = self.end.row.min(other.end.row)

        if left > right or top > bottom:
            return None

        return CellRange(CellReference(left, top), CellReference(right, bottom))

    def union(self, other: "CellRange") -> "CellRange":
        """Compute the bounding box of two ranges."""
        left = self.begin.column.min(other.begin.column)
        top = self.begin.row.min(other.begin.row)
        right = self.end.column.max(other.end.column)
        bottom = self.end.row.max(other.end.row)

        return CellRange(CellReference(left, top), CellReference(right, bottom))

    def __str__(self) -> str:
        if self.begin == self.end:
            return str(self.begin)
        return f"{self.begin}:{self.end}"

    def __repr__(self) -> str:
        return f"CellRange({str(self)!r})"
