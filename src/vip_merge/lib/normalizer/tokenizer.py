"""Row flattening, tokenization, and anchor location for misaligned rows.

A misaligned row is flattened into one uppercase string and split into
tokens. Two anchors are then located: the last postal-code-like token and
the last known street-suffix token. Their positions bound the street, city,
and state segments of the row.
"""

import re
from collections.abc import Callable, Hashable, Iterable, Sequence
from dataclasses import dataclass

from vip_merge.lib.normalizer.errors import UnparseableRowError
from vip_merge.lib.normalizer.suffixes import is_street_suffix

# Five-digit ZIP, optionally followed by "-" or " " and a ZIP+4 extension
ZIPCODE_PATTERN = re.compile(r"[0-9]{5}(?:[- ][0-9]{4})?")

_WHITESPACE = re.compile(r"\s+")
_TRAILING_PUNCTUATION = ",;."


@dataclass(frozen=True)
class RowAnchors:
    """Token sequence of a row and the positions of its anchors."""

    tokens: tuple[str, ...]
    suffix_index: int
    zip_index: int


def flatten_row(values: Iterable[str | None]) -> str:
    """Collapse a row's field values into one normalized string.

    Missing and blank values are omitted entirely rather than rendered as
    placeholders.

    Args:
        values: Field values in schema order.

    Returns:
        Uppercase, single-spaced text of all present values.
    """
    present = [v.strip() for v in values if v is not None and v.strip()]
    return _WHITESPACE.sub(" ", " ".join(present)).strip().upper()


def tokenize(text: str) -> list[str]:
    """Split flattened row text into tokens on single spaces.

    Trailing commas, semicolons, and periods are stripped from each token, so
    "BOSTON, MA 02108," yields BOSTON, MA and 02108. Tokens left empty are
    dropped.
    """
    if not text:
        return []
    tokens = [token.rstrip(_TRAILING_PUNCTUATION) for token in text.split(" ")]
    return [token for token in tokens if token]


def _last_index(tokens: Sequence[str], predicate: Callable[[str], object]) -> int | None:
    for i in range(len(tokens) - 1, -1, -1):
        if predicate(tokens[i]):
            return i
    return None


def locate_anchors(tokens: Sequence[str], row: Hashable | None = None) -> RowAnchors:
    """Locate the ZIP and street-suffix anchors in a token sequence.

    The suffix is the last suffix token anywhere in the row. State codes that
    are also street suffixes (CT, KY, MT, PR, WY) therefore land on the state
    slot, and shifted rows from those states are rejected as having no room
    for a city and state.

    Args:
        tokens: Tokens of one flattened row.
        row: Label of the row, used in error messages.

    Returns:
        RowAnchors with the tokens and both anchor positions.

    Raises:
        UnparseableRowError: If either anchor is missing, or the suffix sits
            too close to the ZIP to leave room for a city and state.
    """
    text = " ".join(tokens)

    zip_index = _last_index(tokens, ZIPCODE_PATTERN.fullmatch)
    if zip_index is None:
        raise UnparseableRowError(row, "no token looks like a ZIP code", text)

    suffix_index = _last_index(tokens, is_street_suffix)
    if suffix_index is None:
        raise UnparseableRowError(row, "no token looks like a street suffix", text)

    # Minimum layout: <street ... suffix> <city ...> <state> <zip>
    if suffix_index >= zip_index - 1:
        raise UnparseableRowError(
            row,
            f"street suffix {tokens[suffix_index]!r} leaves no room for city and state before ZIP",
            text,
        )

    return RowAnchors(tokens=tuple(tokens), suffix_index=suffix_index, zip_index=zip_index)


def anchor_row(values: Iterable[str | None], row: Hashable | None = None) -> RowAnchors:
    """Flatten, tokenize, and locate anchors for one row.

    Args:
        values: Field values in schema order.
        row: Label of the row, used in error messages.

    Returns:
        RowAnchors for the row.

    Raises:
        UnparseableRowError: If the row cannot be anchored.
    """
    return locate_anchors(tokenize(flatten_row(values)), row=row)
