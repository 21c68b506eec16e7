"""Precinct identifier normalization to the canonical ``STATE-NNN`` form."""

import re
from collections.abc import Sequence

from vip_merge.lib.normalizer.errors import MalformedPrecinctIdError, ValidationError

PRECINCT_NUMBER_WIDTH = 3

_DASH_RUN = re.compile(r"-{2,}")


def precinct_number(raw: str | None) -> str:
    """Extract the zero-padded numeric suffix of a raw precinct id.

    Args:
        raw: Raw precinct id (e.g. "MAS-6", "WA--042").

    Returns:
        The suffix left-padded with zeros to three digits. Longer suffixes
        are returned unchanged.

    Raises:
        MalformedPrecinctIdError: If there is no numeric segment after the
            first dash.
    """
    if raw is None or not raw.strip():
        raise MalformedPrecinctIdError(raw, reason="precinct id is missing")

    segments = _DASH_RUN.sub("-", raw.strip()).split("-")
    if len(segments) < 2:
        raise MalformedPrecinctIdError(raw, reason="no '-' separating state and number")

    number = segments[1].strip()
    if not number.isdigit():
        raise MalformedPrecinctIdError(raw, reason=f"suffix {number!r} is not numeric")

    return number.zfill(PRECINCT_NUMBER_WIDTH)


def normalize_precinct_id(raw: str | None, state: str | None) -> str:
    """Normalize one precinct id using the record's own state code.

    The raw prefix is discarded in favor of ``state``, so a wrong or
    longer prefix ("MAS-006") still yields a consistent id ("MA-006").

    Args:
        raw: Raw precinct id.
        state: Two-letter state code of the record.

    Returns:
        Canonical precinct id.

    Raises:
        MalformedPrecinctIdError: If the id has no numeric suffix or the
            state is missing.
    """
    number = precinct_number(raw)
    if state is None or not state.strip():
        raise MalformedPrecinctIdError(raw, reason="record has no state code")
    return f"{state.strip().upper()}-{number}"


def normalize_precinct_ids(precincts: Sequence[str | None], states: Sequence[str | None]) -> list[str]:
    """Normalize parallel sequences of precinct ids and state codes.

    Args:
        precincts: Raw precinct ids.
        states: State codes, one per precinct id.

    Returns:
        Canonical precinct ids in input order.

    Raises:
        ValidationError: If the sequences differ in length. Raised before
            any id is processed.
        MalformedPrecinctIdError: If any id cannot be normalized; ``row`` is
            the position of the id in ``precincts``.
    """
    if len(precincts) != len(states):
        msg = f"precincts and states must be the same length (got {len(precincts)} and {len(states)})"
        raise ValidationError(msg)

    normalized: list[str] = []
    for position, (raw, state) in enumerate(zip(precincts, states, strict=True)):
        try:
            normalized.append(normalize_precinct_id(raw, state))
        except MalformedPrecinctIdError as exc:
            raise MalformedPrecinctIdError(exc.precinct_id, row=position, reason=exc.reason) from exc
    return normalized
