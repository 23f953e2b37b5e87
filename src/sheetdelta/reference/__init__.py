"""
Spreadsheet references.

This module provides the addressing vocabulary of a spreadsheet: reference
kinds, column and row coordinates, cell references, ranges and labels.
"""

from sheetdelta.reference.kind import ReferenceKind
from sheetdelta.reference.coordinate import (
    ColumnOrRowReference,
    ColumnReference,
    RowReference,
    MAX_COLUMN_VALUE,
    MAX_ROW_VALUE,
)
from sheetdelta.reference.cell import CellReference, IGNORES_REFERENCE_KIND
from sheetdelta.reference.range import CellRange
from sheetdelta.reference.label import LabelName, LabelMapping, resolve

__all__ = [
    "ReferenceKind",
    "ColumnOrRowReference",
    "ColumnReference",
    "RowReference",
    "MAX_COLUMN_VALUE",
    "MAX_ROW_VALUE",
    "CellReference",
    "IGNORES_REFERENCE_KIND",
    "CellRange",
    "LabelName",
    "LabelMapping",
    "resolve",
]
