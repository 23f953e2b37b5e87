"""Shared pytest configuration and fixtures for sheetdelta tests."""

import pytest

from sheetdelta import (
    Cell,
    CellReference,
    LabelMapping,
    LabelName,
    ReferenceKind,
    SpreadsheetId,
)

ABSOLUTE = ReferenceKind.ABSOLUTE
RELATIVE = ReferenceKind.RELATIVE


@pytest.fixture
def spreadsheet_id() -> SpreadsheetId:
    return SpreadsheetId(123)


@pytest.fixture
def reference() -> CellReference:
    """$B$21"""
    return CellReference(ABSOLUTE.column(1), ABSOLUTE.row(20))


@pytest.fixture
def cell(reference) -> Cell:
    return Cell(reference, "3+4")


@pytest.fixture
def cells() -> list:
    return [
        Cell(CellReference.parse("A1"), "1"),
        Cell(CellReference.parse("B2"), "=A1+1"),
        Cell(CellReference.parse("$C$3"), "=SUM(A1:B2)"),
    ]


@pytest.fixture
def label_mapping() -> LabelMapping:
    return LabelMapping(LabelName("Total"), CellReference.parse("$C$3"))
