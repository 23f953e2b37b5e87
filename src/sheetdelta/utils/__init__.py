"""
Utility functions for sheetdelta.

This module provides tabular views of cells and deltas:
- frame: pandas DataFrame conversion
"""

from .frame import (
    cells_to_frame,
    delta_to_frame,
    cells_from_frame,
    FRAME_COLUMNS,
)

__all__ = [
    'cells_to_frame',
    'delta_to_frame',
    'cells_from_frame',
    'FRAME_COLUMNS',
]
