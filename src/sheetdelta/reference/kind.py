"""
Reference kinds.

A column or row coordinate is either ABSOLUTE (rendered with a leading ``$``)
or RELATIVE (rendered without a marker). The kind is a tag only: it never
changes which cell a coordinate points at.
"""

from enum import Enum


class ReferenceKind(Enum):
    """Addressing mode of a column or row coordinate."""
    ABSOLUTE = "absolute"
    RELATIVE = "relative"

    @property
    def prefix(self) -> str:
        """Marker written before a coordinate of this kind."""
        return "$" if self is ReferenceKind.ABSOLUTE else ""

    def flip(self) -> "ReferenceKind":
        """Return the other kind."""
        if self is ReferenceKind.ABSOLUTE:
            return ReferenceKind.RELATIVE
        return ReferenceKind.ABSOLUTE

    def column(self, value: int) -> "ColumnReference":
        """Create a column coordinate tagged with this kind.

        Args:
            value: Column number (0-indexed, non-negative)

        Returns:
            ColumnReference with this kind

        Raises:
            NullArgumentError: If value is None
            TypeError: If value is not an integer
            RangeError: If value is negative
        """
        from sheetdelta.reference.coordinate import ColumnReference

        return ColumnReference(value, self)

    def row(self, value: int) -> "RowReference":
        """Create a row coordinate tagged with this kind.

        Args:
            value: Row number (0-indexed, non-negative)

        Returns:
            RowReference with this kind
        """
        from sheetdelta.reference.coordinate import RowReference

        return RowReference(value, self)

    def __repr__(self) -> str:
        return f"ReferenceKind.{self.name}"
