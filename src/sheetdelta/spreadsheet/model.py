"""
Spreadsheet model classes.

This module provides the values a delta is built from:
- SpreadsheetId: Numeric identity of a spreadsheet
- Formula: Opaque formula text attached to a cell
- SpreadsheetMetadata: Row and column counts, the bounds for references
- Cell: A cell reference bound to a formula
"""

from dataclasses import dataclass
from typing import Iterable, Union

from sheetdelta.exceptions import NullArgumentError, RangeError
from sheetdelta.reference import CellReference, MAX_COLUMN_VALUE, MAX_ROW_VALUE


@dataclass(frozen=True, order=True, repr=False)
class SpreadsheetId:
    """Identifies a spreadsheet.

    Renders as its bare number, so ``str(SpreadsheetId(123)) == "123"``.
    Ids order by their numeric value.

    Attributes:
        value: The numeric id

    Raises:
        NullArgumentError: If value is None
        TypeError: If value is not an int
    """

    value: int

    def __post_init__(self) -> None:
        if self.value is None:
            raise NullArgumentError("value")
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Spreadsheet id must be an int, got {type(self.value).__name__}")

    @classmethod
    def with_(cls, value: int) -> "SpreadsheetId":
        return cls(value)

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"SpreadsheetId({self.value})"


@dataclass(frozen=True, repr=False)
class Formula:
    """Opaque formula text.

    The text is stored exactly as given: no whitespace trimming and no
    leading ``=`` is added. Parsing and evaluation happen elsewhere.

    Attributes:
        text: The formula text
    """

    text: str

    def __post_init__(self) -> None:
        if self.text is None:
            raise NullArgumentError("text")
        if not isinstance(self.text, str):
            raise TypeError("Formula text must be a string")

    @classmethod
    def with_(cls, text: str) -> "Formula":
        return cls(text)

    def is_empty(self) -> bool:
        return not self.text

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"Formula({self.text!r})"


@dataclass(frozen=True)
class SpreadsheetMetadata:
    """Row and column counts of a spreadsheet.

    Coordinates only reject negative values; the upper bounds live here and
    are enforced with check_reference().

    Attributes:
        rows: Number of rows (positive)
        columns: Number of columns (positive)

    Raises:
        ValueError: If a count is not positive
    """

    DEFAULT_ROWS = MAX_ROW_VALUE + 1
    DEFAULT_COLUMNS = MAX_COLUMN_VALUE + 1

    rows: int = DEFAULT_ROWS
    columns: int = DEFAULT_COLUMNS

    def __post_init__(self) -> None:
        for name, count in (("rows", self.rows), ("columns", self.columns)):
            if count is None:
                raise NullArgumentError(name)
            if isinstance(count, bool) or not isinstance(count, int):
                raise TypeError(f"{name} must be an int, got {type(count).__name__}")
            if count <= 0:
                raise ValueError("Spreadsheet dimensions must be positive integers")

    def check_reference(self, reference: CellReference) -> CellReference:
        """Verify that reference lies inside the spreadsheet.

        Returns:
            The reference unchanged

        Raises:
            NullArgumentError: If reference is None
            RangeError: If the column or row is beyond the counts
        """
        if reference is None:
            raise NullArgumentError("reference")
        if reference.column.value >= self.columns:
            raise RangeError(
                f"Column {reference.column} of {reference} beyond {self.columns} columns"
            )
        if reference.row.value >= self.rows:
            raise RangeError(
                f"Row {reference.row} of {reference} beyond {self.rows} rows"
            )
        return reference

    def check_cells(self, cells: Iterable["Cell"]) -> None:
        """Verify every cell reference lies inside the spreadsheet.

        Raises:
            RangeError: For the first cell outside the bounds
        """
        if cells is None:
            raise NullArgumentError("cells")
        for cell in cells:
            self.check_reference(cell.reference)


@dataclass(frozen=True, repr=False)
class Cell:
    """A cell reference bound to formula text.

    Equality considers the reference and the formula. Ordering considers the
    reference only: two cells at the same position with different formulas
    compare equal with compare_to() but are not ``==``.

    Attributes:
        reference: Where the cell lives
        formula: The cell's formula; plain text is wrapped in a Formula

    Raises:
        NullArgumentError: If reference or formula is None
    """

    reference: CellReference
    formula: Formula

    def __post_init__(self) -> None:
        _check_reference(self.reference)
        object.__setattr__(self, "formula", _check_formula(self.formula))

    @classmethod
    def with_(cls, reference: CellReference, formula: Union[Formula, str]) -> "Cell":
        return cls(reference, formula)

    def set_reference(self, reference: CellReference) -> "Cell":
        reference = _check_reference(reference)
        if reference == self.reference:
            return self
        return Cell(reference, self.formula)

    def set_formula(self, formula: Union[Formula, str]) -> "Cell":
        formula = _check_formula(formula)
        if formula == self.formula:
            return self
        return Cell(self.reference, formula)

    def compare_to(self, other: "Cell") -> int:
        """Order by reference position; the formula is ignored."""
        if not isinstance(other, Cell):
            raise TypeError(f"Cannot compare Cell with {type(other).__name__}")
        return self.reference.compare_to(other.reference)

    def sort_key(self):
        return self.reference.sort_key()

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        return {"reference": str(self.reference), "formula": self.formula.text}

    @classmethod
    def from_dict(cls, data: dict) -> "Cell":
        """Create from dictionary representation."""
        return cls(CellReference.parse(data["reference"], check_limits=False), data["formula"])

    def __lt__(self, other: "Cell") -> bool:
        return self.compare_to(other) < 0

    def __le__(self, other: "Cell") -> bool:
        return self.compare_to(other) <= 0

    def __gt__(self, other: "Cell") -> bool:
        return self.compare_to(other) > 0

    def __ge__(self, other: "Cell") -> bool:
        return self.compare_to(other) >= 0

    def __str__(self) -> str:
        return f"{self.reference} {self.formula.text}"

    def __repr__(self) -> str:
        return f"Cell({str(self.reference)!r}, {self.formula.text!r})"


def _check_reference(reference: CellReference) -> CellReference:
    if reference is None:
        raise NullArgumentError("reference")
    if not isinstance(reference, CellReference):
        raise TypeError(f"reference must be a CellReference, got {type(reference).__name__}")
    return reference


def _check_formula(formula: Union[Formula, str]) -> Formula:
    if formula is None:
        raise NullArgumentError("formula")
    if isinstance(formula, Formula):
        return formula
    return Formula(formula)
