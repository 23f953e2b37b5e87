"""
sheetdelta - The addressable surface of a spreadsheet.

This package models cell coordinates, labels that alias them, and deltas:
immutable batches of cell changes scoped to one spreadsheet.

Usage:
    >>> from sheetdelta import ReferenceKind, CellReference, Cell, Delta, SpreadsheetId
    >>> ref = CellReference(ReferenceKind.ABSOLUTE.column(1), ReferenceKind.ABSOLUTE.row(20))
    >>> str(ref)
    '$B$21'
    >>> delta = Delta(SpreadsheetId(123), {Cell(ref, "3+4")})

Key components:
- ReferenceKind: ABSOLUTE or RELATIVE, and the factory for coordinates
- CellReference: A column and row coordinate pair with a position ordering
- LabelName / LabelMapping: Symbolic aliases for cell references
- Cell: A cell reference bound to formula text
- Delta: An immutable batch of cells for one spreadsheet
"""

import logging

from .reference import (
    ReferenceKind,
    ColumnOrRowReference,
    ColumnReference,
    RowReference,
    CellReference,
    CellRange,
    LabelName,
    LabelMapping,
    resolve,
    IGNORES_REFERENCE_KIND,
    MAX_COLUMN_VALUE,
    MAX_ROW_VALUE,
)
from .spreadsheet import SpreadsheetId, Formula, SpreadsheetMetadata, Cell, Delta
from .exceptions import *

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Version
__version__ = "0.1.0"

__all__ = [
    'ReferenceKind',
    'ColumnOrRowReference',
    'ColumnReference',
    'RowReference',
    'CellReference',
    'CellRange',
    'LabelName',
    'LabelMapping',
    'resolve',
    'IGNORES_REFERENCE_KIND',
    'MAX_COLUMN_VALUE',
    'MAX_ROW_VALUE',
    'SpreadsheetId',
    'Formula',
    'SpreadsheetMetadata',
    'Cell',
    'Delta',
    'NullArgumentError',
    'RangeError',
    'ConflictError',
    'LabelNotFoundError',
]
