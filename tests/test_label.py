"""
Unit tests for labels.

Tests cover:
- LabelName: validation rules, literal equality
- LabelMapping: construction, structural equality, transforms
- resolve(): label and reference resolution
"""

import pytest

from sheetdelta import (
    CellReference,
    LabelMapping,
    LabelName,
    LabelNotFoundError,
    MAX_ROW_VALUE,
    NullArgumentError,
    resolve,
)


class TestLabelName:
    """Test Suite for LabelName."""

    @pytest.mark.parametrize(
        "text",
        ["Label123", "ZZZ1", "A123Hello", "A1B2C2", "ĀZZZ1", "\\Label", "_Label", "A", "ABC", "A.", "A_"],
    )
    def test_valid(self, text):
        assert LabelName(text).text == text
        assert LabelName.is_valid(text)

    def test_none_fails(self):
        with pytest.raises(NullArgumentError, match="text"):
            LabelName(None)  # type: ignore

    def test_empty_fails(self):
        with pytest.raises(ValueError, match="Empty"):
            LabelName("")

    def test_too_long_fails(self):
        with pytest.raises(ValueError, match="length"):
            LabelName("A" * (LabelName.MAX_LENGTH + 1))

    def test_invalid_initial_fails(self):
        with pytest.raises(ValueError, match="Invalid character '1' at 0"):
            LabelName("1abc")

    def test_invalid_part_fails(self):
        with pytest.raises(ValueError, match=r"Invalid character '\$' at 3"):
            LabelName("abc$def")

    def test_backslash_after_start_fails(self):
        with pytest.raises(ValueError, match="at 5"):
            LabelName("Label\\")

    @pytest.mark.parametrize("text", ["true", "TRue", "false", "FALSE"])
    def test_boolean_words_fail(self, text):
        with pytest.raises(ValueError, match="Invalid label"):
            LabelName(text)

    @pytest.mark.parametrize("text", ["A1", "AB12", "xfd1048576"])
    def test_cell_reference_fails(self, text):
        with pytest.raises(ValueError, match="cell reference"):
            LabelName(text)

    def test_beyond_notation_limits_is_a_label(self):
        assert LabelName("A1048577").text == "A1048577"

    def test_is_valid_false(self):
        assert not LabelName.is_valid("A1")
        assert not LabelName.is_valid(None)  # type: ignore

    def test_equality_is_case_sensitive(self):
        assert LabelName("label") == LabelName("label")
        assert LabelName("label") != LabelName("LABEL")
        assert hash(LabelName("label")) == hash(LabelName("label"))

    def test_ordering(self):
        assert sorted([LabelName("b"), LabelName("a")]) == [LabelName("a"), LabelName("b")]

    def test_str_and_repr(self):
        assert str(LabelName("Total")) == "Total"
        assert repr(LabelName("Total")) == "LabelName('Total')"


class TestLabelMapping:
    """Test Suite for LabelMapping."""

    def test_with(self):
        label = LabelName("label")
        target = CellReference.parse("A1")
        mapping = LabelMapping.with_(label, target)
        assert mapping.label is label
        assert mapping.target is target

    def test_label_mapping_shortcut(self):
        target = CellReference.parse("A1")
        assert LabelName("label").mapping(target) == LabelMapping(LabelName("label"), target)

    def test_null_label_fails(self):
        with pytest.raises(NullArgumentError, match="label"):
            LabelMapping(None, CellReference.parse("A1"))  # type: ignore

    def test_null_target_fails(self):
        with pytest.raises(NullArgumentError, match="target"):
            LabelMapping(LabelName("label"), None)  # type: ignore

    def test_wrong_types_fail(self):
        with pytest.raises(TypeError, match="LabelName"):
            LabelMapping("label", CellReference.parse("A1"))  # type: ignore

        with pytest.raises(TypeError, match="CellReference"):
            LabelMapping(LabelName("label"), "A1")  # type: ignore

    def test_equality(self):
        cell_a = CellReference.parse("A1")
        cell_b = CellReference.parse("B2")
        mapping = LabelMapping(LabelName("label"), cell_a)

        assert mapping == LabelMapping(LabelName("label"), cell_a)
        assert mapping != LabelMapping(LabelName("different"), cell_a)
        assert mapping != LabelMapping(LabelName("label"), cell_b)
        assert mapping != LabelMapping(LabelName("LABEL"), cell_a)
        assert mapping != LabelMapping(LabelName("label"), CellReference.parse("$A$1"))

    def test_set_target(self, label_mapping):
        updated = label_mapping.set_target(CellReference.parse("D4"))
        assert updated.label == label_mapping.label
        assert updated.target == CellReference.parse("D4")
        assert label_mapping.target == CellReference.parse("$C$3")
        assert label_mapping.set_target(CellReference.parse("$C$3")) is label_mapping

    def test_set_label(self, label_mapping):
        updated = label_mapping.set_label(LabelName("Sum"))
        assert updated == LabelMapping(LabelName("Sum"), label_mapping.target)

    def test_immutable(self, label_mapping):
        with pytest.raises(AttributeError):
            label_mapping.target = CellReference.parse("A1")  # type: ignore

    def test_str(self, label_mapping):
        assert str(label_mapping) == "Total=$C$3"

    def test_dict_form(self, label_mapping):
        assert label_mapping.to_dict() == {"label": "Total", "target": "$C$3"}
        assert LabelMapping.from_dict(label_mapping.to_dict()) == label_mapping

    def test_dict_form_beyond_notation_limits(self):
        mapping = LabelMapping(LabelName("Far"), CellReference.parse("A1").add_row(MAX_ROW_VALUE + 1))
        assert mapping.to_dict() == {"label": "Far", "target": "A1048577"}
        assert LabelMapping.from_dict(mapping.to_dict()) == mapping


class TestResolve:
    """Test Suite for resolve()."""

    def test_reference_resolves_to_itself(self, label_mapping):
        reference = CellReference.parse("A1")
        assert resolve(reference, [label_mapping]) is reference

    def test_label_resolves_to_target(self, label_mapping):
        assert resolve(LabelName("Total"), [label_mapping]) == CellReference.parse("$C$3")

    def test_unknown_label_fails(self, label_mapping):
        with pytest.raises(LabelNotFoundError, match='Label not found: "Hello"'):
            resolve(LabelName("Hello"), [label_mapping])

    def test_label_lookup_is_case_sensitive(self, label_mapping):
        with pytest.raises(LabelNotFoundError):
            resolve(LabelName("TOTAL"), [label_mapping])

    def test_null_arguments_fail(self, label_mapping):
        with pytest.raises(NullArgumentError, match="selection"):
            resolve(None, [label_mapping])  # type: ignore

        with pytest.raises(NullArgumentError, match="mappings"):
            resolve(LabelName("Total"), None)  # type: ignore

    def test_wrong_selection_type_fails(self):
        with pytest.raises(TypeError):
            resolve("Total", [])  # type: ignore
