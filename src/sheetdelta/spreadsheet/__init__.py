"""
Spreadsheet values and deltas.

This module provides the cells of a spreadsheet and the immutable batches
of changes (deltas) that carry them.
"""

from sheetdelta.spreadsheet.model import (
    SpreadsheetId,
    Formula,
    SpreadsheetMetadata,
    Cell,
)
from sheetdelta.spreadsheet.delta import Delta

__all__ = [
    "SpreadsheetId",
    "Formula",
    "SpreadsheetMetadata",
    "Cell",
    "Delta",
]
