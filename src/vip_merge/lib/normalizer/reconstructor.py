"""Positional reconstruction of a misaligned row from its anchors.

Given the ZIP and street-suffix positions, the token sequence is sliced
into street, city, state, and ZIP. The trailing tokens supply the precinct
(last) and country (second-to-last).
"""

from dataclasses import dataclass

from vip_merge.lib.normalizer.schemas import (
    AddressRecord,
    PollingRecord,
    RawRecord,
    TableSchema,
)
from vip_merge.lib.normalizer.tokenizer import RowAnchors


@dataclass(frozen=True)
class RowFields:
    """Field values recovered from an anchored token sequence."""

    street: str
    city: str
    state: str
    zip: str
    country: str
    precinct: str


def slice_fields(anchors: RowAnchors) -> RowFields:
    """Slice an anchored token sequence into address fields.

    City is everything between the street suffix and the state token; it is
    an empty string when the suffix directly precedes the state.

    Args:
        anchors: Tokens and anchor positions from ``locate_anchors``.

    Returns:
        RowFields with every slot filled (possibly with an empty city).
    """
    tokens = anchors.tokens
    suffix, zip_idx = anchors.suffix_index, anchors.zip_index

    return RowFields(
        street=" ".join(tokens[: suffix + 1]),
        city=" ".join(tokens[suffix + 1 : zip_idx - 1]),
        state=tokens[zip_idx - 1],
        zip=tokens[zip_idx],
        country=tokens[-2] if len(tokens) >= 2 else "",
        precinct=tokens[-1],
    )


def reconstruct_row(anchors: RowAnchors, schema: TableSchema) -> RawRecord:
    """Rebuild a typed record for ``schema`` from an anchored row.

    The address layout keeps state and ZIP apart and has no country or
    apartment slot. The polling layout joins state and ZIP into one field.

    Args:
        anchors: Tokens and anchor positions from ``locate_anchors``.
        schema: Target input schema.

    Returns:
        AddressRecord or PollingRecord with the recovered values.
    """
    parts = slice_fields(anchors)
    city = parts.city or None

    if schema.record_type is AddressRecord:
        return AddressRecord(
            street=parts.street,
            apt=None,
            city=city,
            state=parts.state,
            zip=parts.zip,
            precinct_id=parts.precinct,
        )

    return PollingRecord(
        street=parts.street,
        city=city,
        state_zip=f"{parts.state} {parts.zip}",
        country=parts.country,
        precinct=parts.precinct,
    )
