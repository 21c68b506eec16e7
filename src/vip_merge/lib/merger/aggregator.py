"""Per-precinct VIP 3.0 export tables derived from the merged table.

Each table has exactly one row per distinct precinct id, sorted ascending.
Where a precinct has several merged rows, the first one encountered wins.
"""

from dataclasses import dataclass

import pandas as pd

from vip_merge.lib.merger.joiner import JOIN_KEY, POLLING_PREFIX
from vip_merge.lib.normalizer.precinct import precinct_number

PRECINCT_COLUMNS: list[str] = [
    "name",
    "number",
    "locality_id",
    "ward",
    "mail_only",
    "ballot_style_image_url",
    "id",
]

POLLING_LOCATION_COLUMNS: list[str] = [
    "address_location_name",
    "address_line1",
    "address_line2",
    "address_line3",
    "address_city",
    "address_state",
    "address_zip",
    "directions",
    "polling_hours",
    "photo_url",
    "id",
]

PRECINCT_POLLING_COLUMNS: list[str] = ["precinct_id", "polling_location_id"]


@dataclass
class ExportTables:
    """The three denormalized per-precinct export tables."""

    precincts: pd.DataFrame
    polling_locations: pd.DataFrame
    precinct_polling_locations: pd.DataFrame


def first_per_precinct(merged: pd.DataFrame) -> pd.DataFrame:
    """Keep the first merged row of each precinct id, sorted by precinct id.

    Args:
        merged: Merged address/polling table.

    Returns:
        One row per distinct precinct id with a fresh 0-based index.
    """
    firsts = merged.drop_duplicates(subset=JOIN_KEY, keep="first")
    return firsts.sort_values(JOIN_KEY, kind="stable").reset_index(drop=True)


def _synthetic_ids(count: int, start: int) -> list[int]:
    return list(range(start, start + count))


def build_precinct_roster(merged: pd.DataFrame, *, start: int = 1, locality_id: str = "") -> pd.DataFrame:
    """Build the precinct table.

    The first address city seen for a precinct becomes its display name.

    Args:
        merged: Merged address/polling table.
        start: First synthetic precinct id.
        locality_id: Value for the ``locality_id`` column.

    Returns:
        Table with ``PRECINCT_COLUMNS``.
    """
    firsts = first_per_precinct(merged)
    return pd.DataFrame(
        {
            "name": firsts["address_city"].tolist(),
            "number": [precinct_number(p) for p in firsts[JOIN_KEY]],
            "locality_id": locality_id,
            "ward": "",
            "mail_only": "",
            "ballot_style_image_url": "",
            "id": _synthetic_ids(len(firsts), start),
        },
        columns=PRECINCT_COLUMNS,
    )


def build_polling_location_roster(merged: pd.DataFrame) -> pd.DataFrame:
    """Build the polling location table, keyed by precinct id.

    Args:
        merged: Merged address/polling table.

    Returns:
        Table with ``POLLING_LOCATION_COLUMNS``.
    """
    firsts = first_per_precinct(merged)

    def polling(column: str) -> list[str]:
        return firsts[f"{POLLING_PREFIX}{column}"].tolist()

    return pd.DataFrame(
        {
            "address_location_name": polling("address_location_name"),
            "address_line1": polling("address_line"),
            "address_line2": polling("address_line2"),
            "address_line3": polling("address_line3"),
            "address_city": polling("address_city"),
            "address_state": polling("address_state"),
            "address_zip": polling("address_zip"),
            "directions": "",
            "polling_hours": "",
            "photo_url": "",
            "id": firsts[JOIN_KEY].tolist(),
        },
        columns=POLLING_LOCATION_COLUMNS,
    )


def build_precinct_polling_links(merged: pd.DataFrame, *, start: int = 1) -> pd.DataFrame:
    """Map each synthetic precinct id to its polling location id.

    Args:
        merged: Merged address/polling table.
        start: First synthetic precinct id; must match the precinct roster.

    Returns:
        Table with ``PRECINCT_POLLING_COLUMNS``.
    """
    firsts = first_per_precinct(merged)
    return pd.DataFrame(
        {
            "precinct_id": _synthetic_ids(len(firsts), start),
            "polling_location_id": firsts[JOIN_KEY].tolist(),
        },
        columns=PRECINCT_POLLING_COLUMNS,
    )


def build_export_tables(merged: pd.DataFrame, *, start: int = 1, locality_id: str = "") -> ExportTables:
    """Build all three export tables from one merged table.

    Args:
        merged: Merged address/polling table.
        start: First synthetic precinct id.
        locality_id: Value for the precinct ``locality_id`` column.

    Returns:
        ExportTables with matching row counts.
    """
    return ExportTables(
        precincts=build_precinct_roster(merged, start=start, locality_id=locality_id),
        polling_locations=build_polling_location_roster(merged),
        precinct_polling_locations=build_precinct_polling_links(merged, start=start),
    )
