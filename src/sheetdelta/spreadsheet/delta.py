"""
Spreadsheet deltas.

A Delta is an immutable batch of changes to one spreadsheet:
- cells: cells whose formula changed or was created
- labels: label mappings created or updated
- deleted_cells: references whose cells were removed
- window: optional range; cells, deleted cells and label mappings whose
  target lies outside it are dropped

All collections are copied into frozensets on construction, so later changes
to the caller's collections are never visible through the delta.

Duplicates are rejected: two different cells with the same reference, a
label mapped to two targets, or a reference that is both a cell and a
deleted cell raise ConflictError. Repeating an identical cell or mapping is
not a conflict.
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Union

from sheetdelta.exceptions import ConflictError, NullArgumentError
from sheetdelta.reference import CellRange, CellReference, LabelMapping, LabelName, resolve
from sheetdelta.spreadsheet.model import Cell, SpreadsheetId

logger = logging.getLogger(__name__)


@dataclass(frozen=True, repr=False)
class Delta:
    """Immutable batch of cell changes scoped to one spreadsheet.

    Equality is structural: two deltas are equal when their ids, windows and
    the memberships of their cells, labels and deleted cells are equal.
    Insertion order never matters.

    Attributes:
        id: Spreadsheet the changes belong to (required)
        cells: Changed cells (required, may be empty); any iterable is accepted
            and stored as a frozenset
        labels: Changed label mappings
        deleted_cells: References of removed cells
        window: If given, entries outside it are dropped

    Raises:
        NullArgumentError: If id, cells, labels or deleted_cells is None
        TypeError: If an entry has the wrong type
        ConflictError: If the entries contradict each other
    """

    id: SpreadsheetId
    cells: FrozenSet[Cell]
    labels: FrozenSet[LabelMapping] = frozenset()
    deleted_cells: FrozenSet[CellReference] = frozenset()
    window: Optional[CellRange] = None

    def __post_init__(self) -> None:
        if self.id is None:
            raise NullArgumentError("id")
        if not isinstance(self.id, SpreadsheetId):
            raise TypeError(f"id must be a SpreadsheetId, got {type(self.id).__name__}")
        window = self.window
        if window is not None and not isinstance(window, CellRange):
            raise TypeError(f"window must be a CellRange, got {type(window).__name__}")

        cell_set = _copy(self.cells, Cell, "cells")
        label_set = _copy(self.labels, LabelMapping, "labels")
        deleted_set = _copy(self.deleted_cells, CellReference, "deleted_cells")

        if window is not None:
            cell_set, label_set, deleted_set = _filter_window(
                window, cell_set, label_set, deleted_set
            )

        _check_cells(cell_set)
        _check_labels(label_set)
        _check_deleted(cell_set, deleted_set)

        object.__setattr__(self, "cells", cell_set)
        object.__setattr__(self, "labels", label_set)
        object.__setattr__(self, "deleted_cells", deleted_set)

        logger.debug(
            "Delta %s: %d cells, %d labels, %d deleted cells",
            self.id,
            len(cell_set),
            len(label_set),
            len(deleted_set),
        )

    @classmethod
    def with_(cls, id: SpreadsheetId, cells: Iterable[Cell]) -> "Delta":
        """Create a delta holding only cells."""
        return cls(id, cells)

    def sorted_cells(self) -> List[Cell]:
        """Cells sorted by position (column, then row)."""
        return sorted(self.cells, key=_cell_key)

    def cell(self, reference: CellReference) -> Optional[Cell]:
        """Find the cell at reference, ignoring reference kinds.

        A cell whose reference is ``==`` to reference wins. Otherwise the
        first kind-blind match in sorted_cells() order is returned, so
        ``$A$1`` is preferred over ``A1`` when only ``$A1`` is asked for.

        Returns:
            The matching Cell, or None when the delta has no such cell
        """
        if reference is None:
            raise NullArgumentError("reference")
        matches = [
            cell
            for cell in self.sorted_cells()
            if cell.reference.equals_ignore_reference_kind(reference)
        ]
        for cell in matches:
            if cell.reference == reference:
                return cell
        return matches[0] if matches else None

    def resolve(self, selection: Union[LabelName, CellReference]) -> CellReference:
        """Resolve a label or reference using the labels in this delta.

        Raises:
            LabelNotFoundError: If the label is not part of this delta
        """
        return resolve(selection, self.labels)

    # transforms

    def _replace(self, **changes: Any) -> "Delta":
        delta = replace(self, **changes)
        return self if delta == self else delta

    def set_id(self, id: SpreadsheetId) -> "Delta":
        return self._replace(id=id)

    def set_cells(self, cells: Iterable[Cell]) -> "Delta":
        return self._replace(cells=cells)

    def set_labels(self, labels: Iterable[LabelMapping]) -> "Delta":
        return self._replace(labels=labels)

    def set_deleted_cells(self, deleted_cells: Iterable[CellReference]) -> "Delta":
        return self._replace(deleted_cells=deleted_cells)

    def set_window(self, window: Optional[CellRange]) -> "Delta":
        """Return a delta limited to window; None removes the window.

        Entries dropped by an earlier window are not restored.
        """
        return self._replace(window=window)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation.

        Entries are sorted so the result is deterministic.
        """
        return {
            "id": self.id.value,
            "cells": [cell.to_dict() for cell in self.sorted_cells()],
            "labels": [
                mapping.to_dict()
                for mapping in sorted(self.labels, key=lambda m: m.label)
            ],
            "deleted_cells": [
                str(reference)
                for reference in sorted(self.deleted_cells, key=_reference_key)
            ],
            "window": str(self.window) if self.window is not None else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Delta":
        """Create from dictionary representation."""
        window = data.get("window")
        return cls(
            SpreadsheetId(data["id"]),
            [Cell.from_dict(cell) for cell in data["cells"]],
            [LabelMapping.from_dict(mapping) for mapping in data.get("labels", [])],
            [
                CellReference.parse(text, check_limits=False)
                for text in data.get("deleted_cells", [])
            ],
            CellRange.parse(window, check_limits=False) if window else None,
        )

    def __repr__(self) -> str:
        parts = [f"id={self.id}", f"cells={[str(c) for c in self.sorted_cells()]!r}"]
        if self.labels:
            parts.append(f"labels={sorted(str(m) for m in self.labels)!r}")
        if self.deleted_cells:
            deleted = sorted(self.deleted_cells, key=_reference_key)
            parts.append(f"deleted_cells={[str(r) for r in deleted]!r}")
        if self.window is not None:
            parts.append(f"window={str(self.window)!r}")
        return f"Delta({', '.join(parts)})"


def _reference_key(reference: CellReference):
    return (reference.sort_key(), str(reference))


def _cell_key(cell: Cell):
    return (cell.sort_key(), str(cell.reference), cell.formula.text)


def _copy(items: Iterable[Any], expected: type, name: str) -> FrozenSet[Any]:
    if items is None:
        raise NullArgumentError(name)
    if isinstance(items, (str, bytes)):
        raise TypeError(f"{name} must be a collection, got {type(items).__name__}")
    copy = frozenset(items)
    for item in copy:
        if item is None:
            raise NullArgumentError(name)
        if not isinstance(item, expected):
            raise TypeError(
                f"{name} must contain {expected.__name__}, got {type(item).__name__}"
            )
    return copy


def _filter_window(window, cells, labels, deleted_cells):
    kept_cells = frozenset(c for c in cells if window.test(c.reference))
    kept_labels = frozenset(m for m in labels if window.test(m.target))
    kept_deleted = frozenset(r for r in deleted_cells if window.test(r))
    dropped = (
        len(cells) - len(kept_cells)
        + len(labels) - len(kept_labels)
        + len(deleted_cells) - len(kept_deleted)
    )
    if dropped:
        logger.debug("Window %s dropped %d entries", window, dropped)
    return kept_cells, kept_labels, kept_deleted


def _check_cells(cells: FrozenSet[Cell]) -> None:
    seen: Dict[CellReference, Cell] = {}
    for cell in sorted(cells, key=_cell_key):
        previous = seen.get(cell.reference)
        if previous is not None:
            raise ConflictError(
                f"Duplicate cell {cell.reference}: {previous.formula.text!r} and {cell.formula.text!r}"
            )
        seen[cell.reference] = cell


def _check_labels(labels: FrozenSet[LabelMapping]) -> None:
    seen: Dict[LabelName, LabelMapping] = {}
    for mapping in sorted(labels, key=lambda m: (m.label, m.target.sort_key(), str(m.target))):
        previous = seen.get(mapping.label)
        if previous is not None:
            raise ConflictError(
                f"Label {mapping.label} mapped to {previous.target} and {mapping.target}"
            )
        seen[mapping.label] = mapping


def _check_deleted(cells: FrozenSet[Cell], deleted_cells: FrozenSet[CellReference]) -> None:
    for cell in sorted(cells, key=_cell_key):
        if cell.reference in deleted_cells:
            raise ConflictError(f"Cell {cell.reference} is both updated and deleted")
