"""
Labels: symbolic names for cell references.

- LabelName: a validated name such as ``Total`` or ``tax_rate``
- LabelMapping: associates one LabelName with one CellReference
- resolve(): turns a label or a reference into a concrete CellReference

Label names are compared literally, so ``Total`` and ``TOTAL`` are two
different labels.
"""

import re
from dataclasses import dataclass
from typing import Dict, Iterable, Union

from sheetdelta.exceptions import LabelNotFoundError, NullArgumentError
from sheetdelta.reference.cell import CellReference

_CELL_LIKE = re.compile(r"^[A-Za-z]+[0-9]+$")


def _is_cell_reference(text: str) -> bool:
    if not _CELL_LIKE.match(text):
        return False
    try:
        CellReference.parse(text)
    except ValueError:
        return False
    return True


@dataclass(frozen=True, order=True)
class LabelName:
    """A label name.

    Rules:
    - 1 to MAX_LENGTH characters
    - starts with a letter, ``_`` or ``\\``
    - continues with letters, digits, ``_`` or ``.``
    - is not ``true`` or ``false`` in any case
    - is not itself a cell reference such as ``A1`` or ``AB12``

    Attributes:
        text: The name
    """
    text: str

    MAX_LENGTH = 255

    def __post_init__(self) -> None:
        text = self.text
        if text is None:
            raise NullArgumentError("text")
        if not isinstance(text, str):
            raise TypeError(f"Label must be a string, got {type(text).__name__}")
        if not text:
            raise ValueError("Empty label")
        if len(text) > self.MAX_LENGTH:
            raise ValueError(
                f"Invalid label length {len(text)} > {self.MAX_LENGTH}"
            )

        for i, char in enumerate(text):
            if i == 0:
                valid = char.isalpha() or char in "_\\"
            else:
                valid = char.isalnum() or char in "_."
            if not valid:
                raise ValueError(f"Invalid character {char!r} at {i}")

        if text.lower() in ("true", "false"):
            raise ValueError(f'Invalid label with "{text}"')
        if _is_cell_reference(text):
            raise ValueError(f'Label cannot be a valid cell reference="{text}"')

    @classmethod
    def with_(cls, text: str) -> "LabelName":
        return cls(text)

    @classmethod
    def is_valid(cls, text: str) -> bool:
        """Check text against the label rules without raising."""
        try:
            cls(text)
        except (TypeError, ValueError):
            return False
        return True

    def mapping(self, target: CellReference) -> "LabelMapping":
        """Create a LabelMapping from this label to target."""
        return LabelMapping(self, target)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"LabelName({self.text!r})"


@dataclass(frozen=True)
class LabelMapping:
    """Associates a label with exactly one cell reference.

    A mapping is never updated in place; set_label() and set_target() return
    a new mapping.

    Attributes:
        label: The label name
        target: The cell reference the label stands for
    """
    label: LabelName
    target: CellReference

    def __post_init__(self) -> None:
        if self.label is None:
            raise NullArgumentError("label")
        if self.target is None:
            raise NullArgumentError("target")
        if not isinstance(self.label, LabelName):
            raise TypeError(f"label must be a LabelName, got {type(self.label).__name__}")
        if not isinstance(self.target, CellReference):
            raise TypeError(f"target must be a CellReference, got {type(self.target).__name__}")

    @classmethod
    def with_(cls, label: LabelName, target: CellReference) -> "LabelMapping":
        return cls(label, target)

    def set_label(self, label: LabelName) -> "LabelMapping":
        if label == self.label:
            return self
        return LabelMapping(label, self.target)

    def set_target(self, target: CellReference) -> "LabelMapping":
        if target == self.target:
            return self
        return LabelMapping(self.label, target)

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary representation."""
        return {"label": self.label.text, "target": str(self.target)}

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> "LabelMapping":
        """Create from dictionary representation."""
        return cls(
            LabelName(data["label"]),
            CellReference.parse(data["target"], check_limits=False),
        )

    def __str__(self) -> str:
        return f"{self.label}={self.target}"

    def __repr__(self) -> str:
        return f"LabelMapping({self.label.text!r}, {str(self.target)!r})"


def resolve(
    selection: Union[LabelName, CellReference],
    mappings: Iterable[LabelMapping],
) -> CellReference:
    """Resolve a label or cell reference to a cell reference.

    Args:
        selection: A CellReference (returned unchanged) or a LabelName
        mappings: Known label mappings

    Returns:
        The resolved CellReference

    Raises:
        NullArgumentError: If selection or mappings is None
        LabelNotFoundError: If the label has no mapping
        TypeError: If selection is neither a LabelName nor a CellReference
    """
    if selection is None:
        raise NullArgumentError("selection")
    if mappings is None:
        raise NullArgumentError("mappings")
    if isinstance(selection, CellReference):
        return selection
    if not isinstance(selection, LabelName):
        raise TypeError(
            f"Expected LabelName or CellReference, got {type(selection).__name__}"
        )

    for mapping in mappings:
        if mapping.label == selection:
            return mapping.target
    raise LabelNotFoundError(f'Label not found: "{selection}"')
