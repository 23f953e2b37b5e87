"""
DataFrame views of cells and deltas.

Provides conversion between cells and pandas DataFrames. A frame has one row
per cell, sorted by position, which makes deltas easy to inspect and to
build in bulk.
"""

from typing import Iterable, List

import pandas as pd

from ..exceptions import NullArgumentError
from ..reference import CellReference
from ..spreadsheet.delta import Delta
from ..spreadsheet.model import Cell


# Column layout of frames produced by cells_to_frame()
FRAME_COLUMNS = ["reference", "column", "row", "formula"]


def cells_to_frame(cells: Iterable[Cell]) -> pd.DataFrame:
    """Convert cells to a DataFrame.

    Columns:
    - reference: the reference in A1 notation, e.g. "$B$21"
    - column: 0-indexed column value
    - row: 0-indexed row value
    - formula: the formula text

    Args:
        cells: Cells to convert

    Returns:
        DataFrame with FRAME_COLUMNS, one row per cell, sorted by position

    Example:
        >>> cell = Cell(CellReference.parse("B2"), "1+2")
        >>> cells_to_frame([cell])["reference"].tolist()
        ['B2']
    """
    if cells is None:
        raise NullArgumentError("cells")

    ordered = sorted(cells, key=lambda c: (c.sort_key(), str(c.reference)))
    records = [
        {
            "reference": str(cell.reference),
            "column": cell.reference.column.value,
            "row": cell.reference.row.value,
            "formula": cell.formula.text,
        }
        for cell in ordered
    ]
    return pd.DataFrame.from_records(records, columns=FRAME_COLUMNS)


def delta_to_frame(delta: Delta) -> pd.DataFrame:
    """Convert the cells of a delta to a DataFrame.

    Raises:
        TypeError: If delta is not a Delta instance
    """
    if not isinstance(delta, Delta):
        raise TypeError(f"Expected Delta, got {type(delta)}")
    return cells_to_frame(delta.cells)


def cells_from_frame(frame: pd.DataFrame) -> List[Cell]:
    """Build cells from a DataFrame with "reference" and "formula" columns.

    Missing formulas (NaN/None) become empty formula text. Other columns are
    ignored.

    Args:
        frame: Source DataFrame

    Returns:
        Cells in frame row order

    Raises:
        TypeError: If frame is not a DataFrame
        ValueError: If a required column is missing or a reference is invalid
    """
    if not isinstance(frame, pd.DataFrame):
        raise TypeError(f"Expected DataFrame, got {type(frame)}")

    missing = [name for name in ("reference", "formula") if name not in frame.columns]
    if missing:
        raise ValueError(f"Frame is missing required columns: {missing}")

    cells = []
    for reference, formula in frame[["reference", "formula"]].itertuples(index=False, name=None):
        text = "" if pd.isna(formula) else str(formula)
        cells.append(Cell(CellReference.parse(str(reference)), text))
    return cells
