"""Errors raised while normalizing address and polling place tables.

Every error is local to a single table-normalization call. None of them are
recoverable inside the pipeline; the caller re-runs with corrected input.
"""

from collections.abc import Hashable, Sequence


class NormalizationError(Exception):
    """Base class for all table normalization failures."""


class SchemaMismatchError(NormalizationError):
    """Raised when a table's header row does not match its declared schema.

    Args:
        table: Name of the table kind (e.g. "address", "polling").
        expected: Declared header sequence.
        actual: Header sequence found in the file.
    """

    def __init__(self, table: str, expected: Sequence[str], actual: Sequence[str]) -> None:
        self.table = table
        self.expected = list(expected)
        self.actual = list(actual)
        super().__init__(
            f"{table} file does not have the expected column headers. "
            f"Expected: {', '.join(self.expected)}. Found: {', '.join(self.actual)}"
        )


class UnparseableRowError(NormalizationError):
    """Raised when a misaligned row cannot be rebuilt from its tokens.

    Args:
        row: Label of the offending row in its source table.
        reason: Which anchor was missing or why the layout is invalid.
        text: The flattened row text that was tokenized.
    """

    def __init__(self, row: Hashable | None, reason: str, text: str = "") -> None:
        self.row = row
        self.reason = reason
        self.text = text
        where = f"row {row}" if row is not None else "row"
        message = f"Cannot repair {where}: {reason}"
        if text:
            message = f"{message} ({text!r})"
        super().__init__(message)


class ValidationError(NormalizationError, ValueError):
    """Raised when inputs to a normalization step are inconsistent."""


class MalformedPrecinctIdError(NormalizationError):
    """Raised when a precinct id has no separable numeric suffix.

    Args:
        precinct_id: The raw precinct id.
        row: Position or label of the offending row, when known.
        reason: Human-readable description of the problem.
    """

    def __init__(
        self,
        precinct_id: str | None,
        row: Hashable | None = None,
        reason: str = "no numeric suffix after '-'",
    ) -> None:
        self.precinct_id = precinct_id
        self.row = row
        self.reason = reason
        where = f" at row {row}" if row is not None else ""
        super().__init__(f"Malformed precinct id {precinct_id!r}{where}: {reason}")
