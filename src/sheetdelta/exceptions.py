"""
Exception classes for sheetdelta.

These exceptions are raised while constructing references, labels, cells and
deltas. Every error is raised at the point of construction, so a partially
built value is never returned.
"""


class NullArgumentError(TypeError):
    """Raised when a required argument is None.

    The message is the name of the missing argument, for example ``"id"``,
    ``"cells"``, ``"reference"`` or ``"label"``.
    """
    pass


class RangeError(ValueError):
    """Raised when a column or row value lies outside the addressable range.

    Coordinates reject negative values themselves. Upper bounds depend on the
    spreadsheet and are checked by SpreadsheetMetadata. Examples:
        - ReferenceKind.ABSOLUTE.column(-1)
        - Moving a reference above row 1 with add()
        - A cell in column Z of a sheet with only 10 columns
    """
    pass


class ConflictError(ValueError):
    """Raised when a delta would contain contradictory entries.

    Examples:
        - Two different cells with the same reference
        - A label mapped to two different targets
        - A reference listed both as a cell and as a deleted cell
    """
    pass


class LabelNotFoundError(KeyError):
    """Raised when a label name cannot be resolved to a cell reference."""

    def __str__(self) -> str:
        # KeyError quotes its argument, keep the message readable
        return str(self.args[0]) if self.args else ""
