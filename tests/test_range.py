"""
Unit tests for CellRange.

Tests cover:
- construction and corner normalisation
- A1 notation parsing and formatting
- membership, intersection and union
"""

import pytest

from sheetdelta import CellRange, CellReference, NullArgumentError


class TestCellRange:
    """Test Suite for CellRange."""

    def test_single_cell(self):
        r = CellRange(CellReference.parse("B2"))
        assert r.begin == r.end == CellReference.parse("B2")
        assert r.is_single_cell()
        assert r.count() == 1
        assert str(r) == "B2"

    def test_corners_normalised(self):
        r = CellRange(CellReference.parse("C10"), CellReference.parse("A1"))
        assert r.begin == CellReference.parse("A1")
        assert r.end == CellReference.parse("C10")

        crossed = CellRange(CellReference.parse("A10"), CellReference.parse("C1"))
        assert str(crossed) == "A1:C10"

    def test_kinds_kept(self):
        r = CellRange.parse("$A$1:B2")
        assert str(r) == "$A$1:B2"

    def test_null_begin_fails(self):
        with pytest.raises(NullArgumentError, match="begin"):
            CellRange(None)  # type: ignore

    def test_non_reference_fails(self):
        with pytest.raises(TypeError, match="CellReference"):
            CellRange("A1")  # type: ignore

    def test_parse(self):
        r = CellRange.parse("A2:C100")
        assert r.begin == CellReference.parse("A2")
        assert r.end == CellReference.parse("C100")
        assert r.columns == 3
        assert r.rows == 99
        assert r.count() == 297

    def test_parse_single_cell_range_collapses(self):
        assert str(CellRange.parse("B5:B5")) == "B5"

    def test_parse_invalid(self):
        with pytest.raises(ValueError, match="Empty"):
            CellRange.parse("  ")

        with pytest.raises(ValueError, match="Invalid"):
            CellRange.parse("A1:B2:C3")

        with pytest.raises(ValueError, match="Invalid"):
            CellRange.parse("ABC")

    def test_parse_without_limits(self):
        r = CellRange.parse("XFE1:A2", check_limits=False)
        assert str(r) == "A1:XFE2"
        assert r.columns == 16385

        with pytest.raises(ValueError, match="Invalid column"):
            CellRange.parse("XFE1:A2")

    def test_normalised_corners_are_fields(self):
        r = CellRange(CellReference.parse("C3"), CellReference.parse("A1"))
        assert (r.begin, r.end) == (CellReference.parse("A1"), CellReference.parse("C3"))
        assert r == CellRange.parse("A1:C3")
        assert hash(r) == hash(CellRange.parse("A1:C3"))

    def test_test_membership_ignores_kind(self):
        r = CellRange.parse("A1:C10")
        assert r.test(CellReference.parse("B5"))
        assert r.test(CellReference.parse("$C$10"))
        assert not r.test(CellReference.parse("D1"))
        assert not r.test(CellReference.parse("A11"))

    def test_test_none_fails(self):
        with pytest.raises(NullArgumentError):
            CellRange.parse("A1").test(None)  # type: ignore

    def test_intersection_overlapping(self):
        intersection = CellRange.parse("A1:C10").intersect(CellRange.parse("B5:D15"))
        assert intersection is not None
        assert str(intersection) == "B5:C10"

    def test_intersection_no_overlap(self):
        assert CellRange.parse("A1:B10").intersect(CellRange.parse("D1:E10")) is None

    def test_intersection_contained(self):
        inner = CellRange.parse("B5:C15")
        assert CellRange.parse("A1:D20").intersect(inner) == inner

    def test_union(self):
        union = CellRange.parse("A1:B10").union(CellRange.parse("C5:D15"))
        assert str(union) == "A1:D15"

    def test_equality(self):
        assert CellRange.parse("A1:B10") == CellRange.parse("B10:A1")
        assert CellRange.parse("A1:B10") != CellRange.parse("A1:C10")
        assert CellRange.parse("A1:B10") != CellRange.parse("$A$1:B10")
        assert hash(CellRange.parse("A1:B10")) == hash(CellRange.parse("A1:B10"))

    def test_repr(self):
        assert repr(CellRange.parse("A1:B10")) == "CellRange('A1:B10')"
