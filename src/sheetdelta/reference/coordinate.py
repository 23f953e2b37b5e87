"""
Column and row coordinates.

A coordinate is a single-axis position tagged with a ReferenceKind:
- ColumnReference: rendered as letters (0 = A, 25 = Z, 26 = AA)
- RowReference: rendered as 1-indexed digits (0 = 1)

Values are 0-indexed internally, following the usual Python convention,
and converted to spreadsheet notation only when rendered or parsed.

Equality includes the kind, ordering does not: ``$A`` and ``A`` compare
equal with compare_to() but are not ``==``.
"""

import re
from dataclasses import dataclass
from typing import Optional

from sheetdelta.exceptions import NullArgumentError, RangeError
from sheetdelta.reference.kind import ReferenceKind

# Largest values expressible in A1 notation (XFD and 1048576)
MAX_COLUMN_VALUE = 16383
MAX_ROW_VALUE = 1048575

_COLUMN_PATTERN = re.compile(r"^(\$?)([A-Z]+)$")
_ROW_PATTERN = re.compile(r"^(\$?)([0-9]+)$")


def check_value(value: Optional[int], name: str) -> int:
    """Validate a column or row value.

    Args:
        value: The candidate value
        name: Argument name used in error messages

    Returns:
        The value unchanged

    Raises:
        NullArgumentError: If value is None
        TypeError: If value is not an int (bools are rejected)
        RangeError: If value is negative
    """
    if value is None:
        raise NullArgumentError(name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise RangeError(f"Invalid {name} {value} < 0")
    return value


def check_kind(kind: Optional[ReferenceKind]) -> ReferenceKind:
    if kind is None:
        raise NullArgumentError("kind")
    if not isinstance(kind, ReferenceKind):
        raise TypeError(f"kind must be a ReferenceKind, got {type(kind).__name__}")
    return kind


def column_to_letters(value: int) -> str:
    """Convert a column number (0-indexed) to letters.

    Args:
        value: Column number (0 = A, 25 = Z, 26 = AA, etc.)

    Returns:
        Column letter(s) in A1 notation
    """
    number = value + 1
    result = ""
    while number > 0:
        number -= 1
        result = chr(65 + (number % 26)) + result
        number //= 26
    return result


def letters_to_column(letters: str) -> int:
    """Convert column letters to a number (0-indexed).

    Args:
        letters: Column letter(s) (A, Z, AA, etc.), any case

    Returns:
        Column number (A = 0, Z = 25, AA = 26, etc.)
    """
    number = 0
    for char in letters.upper():
        number = number * 26 + (ord(char) - 64)
    return number - 1


@dataclass(frozen=True)
class ColumnOrRowReference:
    """Base for column and row coordinates.

    Subclasses define the axis; a column is never equal to a row, even with
    the same value and kind.

    Attributes:
        value: Position along the axis (0-indexed, non-negative)
        kind: ABSOLUTE or RELATIVE
    """
    value: int
    kind: ReferenceKind

    MAX_VALUE = 0
    axis = ""

    def __post_init__(self) -> None:
        check_value(self.value, "value")
        check_kind(self.kind)

    def _replace(self, value: int, kind: ReferenceKind) -> "ColumnOrRowReference":
        if value == self.value and kind is self.kind:
            return self
        return type(self)(value, kind)

    def set_value(self, value: int) -> "ColumnOrRowReference":
        """Return a coordinate with the same kind and the given value."""
        return self._replace(check_value(value, "value"), self.kind)

    def set_kind(self, kind: ReferenceKind) -> "ColumnOrRowReference":
        """Return a coordinate with the same value and the given kind."""
        return self._replace(self.value, check_kind(kind))

    def add(self, delta: int) -> "ColumnOrRowReference":
        """Move the coordinate by delta.

        Raises:
            RangeError: If the result would be negative
        """
        if delta == 0:
            return self
        value = self.value + delta
        if value < 0:
            raise RangeError(f"Invalid {self.axis} {value} < 0")
        return self._replace(value, self.kind)

    def add_saturated(self, delta: int) -> "ColumnOrRowReference":
        """Move the coordinate by delta, stopping at 0 or MAX_VALUE.

        Only the bound in the direction of travel applies, so a coordinate
        already past MAX_VALUE is never pulled back by a move towards 0.
        """
        if delta == 0:
            return self
        value = self.value + delta
        if delta > 0:
            value = min(value, max(self.MAX_VALUE, self.value))
        else:
            value = max(value, 0)
        return self._replace(value, self.kind)

    def to_absolute(self) -> "ColumnOrRowReference":
        return self.set_kind(ReferenceKind.ABSOLUTE)

    def to_relative(self) -> "ColumnOrRowReference":
        return self.set_kind(ReferenceKind.RELATIVE)

    def compare_to(self, other: "ColumnOrRowReference") -> int:
        """Compare by value only; the kind is ignored.

        Returns:
            Negative, zero or positive like a classic comparator

        Raises:
            TypeError: If other is on a different axis
        """
        if type(other) is not type(self):
            raise TypeError(
                f"Cannot compare {type(self).__name__} with {type(other).__name__}"
            )
        return self.value - other.value

    def equals_ignore_reference_kind(self, other: object) -> bool:
        return type(other) is type(self) and self.value == other.value

    def min(self, other: "ColumnOrRowReference") -> "ColumnOrRowReference":
        """Return the lesser coordinate, self when both are order-equal."""
        return other if self.compare_to(other) > 0 else self

    def max(self, other: "ColumnOrRowReference") -> "ColumnOrRowReference":
        """Return the greater coordinate, self when both are order-equal."""
        return other if self.compare_to(other) < 0 else self

    def __lt__(self, other: "ColumnOrRowReference") -> bool:
        return self.compare_to(other) < 0

    def __le__(self, other: "ColumnOrRowReference") -> bool:
        return self.compare_to(other) <= 0

    def __gt__(self, other: "ColumnOrRowReference") -> bool:
        return self.compare_to(other) > 0

    def __ge__(self, other: "ColumnOrRowReference") -> bool:
        return self.compare_to(other) >= 0

    def text(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.kind.prefix + self.text()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"


@dataclass(frozen=True, repr=False)
class ColumnReference(ColumnOrRowReference):
    """A column coordinate, rendered as letters."""

    MAX_VALUE = MAX_COLUMN_VALUE
    axis = "column"

    def text(self) -> str:
        return column_to_letters(self.value)

    def set_row(self, row: "RowReference") -> "CellReference":
        """Combine this column with a row into a CellReference."""
        from sheetdelta.reference.cell import CellReference

        return CellReference(self, row)

    @classmethod
    def parse(cls, text: str, check_limits: bool = True) -> "ColumnReference":
        """Parse column notation such as ``B`` or ``$AA``.

        Args:
            text: Column letters with an optional ``$``
            check_limits: Reject columns past ``XFD`` when True

        Raises:
            ValueError: If the text is not a column, or is past MAX_COLUMN_VALUE
                while check_limits is set
        """
        if text is None:
            raise NullArgumentError("text")
        match = _COLUMN_PATTERN.match(text.strip().upper())
        if not match:
            raise ValueError(f"Invalid column notation: {text!r}")
        dollar, letters = match.groups()
        value = letters_to_column(letters)
        if check_limits and value > MAX_COLUMN_VALUE:
            raise ValueError(f"Invalid column {text!r} > {column_to_letters(MAX_COLUMN_VALUE)}")
        kind = ReferenceKind.ABSOLUTE if dollar else ReferenceKind.RELATIVE
        return cls(value, kind)


@dataclass(frozen=True, repr=False)
class RowReference(ColumnOrRowReference):
    """A row coordinate, rendered as 1-indexed digits."""

    MAX_VALUE = MAX_ROW_VALUE
    axis = "row"

    def text(self) -> str:
        return str(self.value + 1)

    def set_column(self, column: ColumnReference) -> "CellReference":
        """Combine this row with a column into a CellReference."""
        from sheetdelta.reference.cell import CellReference

        return CellReference(column, self)

    @classmethod
    def parse(cls, text: str, check_limits: bool = True) -> "RowReference":
        """Parse row notation such as ``12`` or ``$3``.

        Raises:
            ValueError: If the text is not a row, or is past MAX_ROW_VALUE
                while check_limits is set
        """
        if text is None:
            raise NullArgumentError("text")
        match = _ROW_PATTERN.match(text.strip())
        if not match:
            raise ValueError(f"Invalid row notation: {text!r}")
        dollar, digits = match.groups()
        value = int(digits) - 1
        if value < 0:
            raise ValueError(f"Invalid row {text!r}, rows start at 1")
        if check_limits and value > MAX_ROW_VALUE:
            raise ValueError(f"Invalid row {text!r}, expected 1 to {MAX_ROW_VALUE + 1}")
        kind = ReferenceKind.ABSOLUTE if dollar else ReferenceKind.RELATIVE
        return cls(value, kind)
