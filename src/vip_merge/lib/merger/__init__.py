"""Merger library public API.

Joins normalized address and polling place tables and derives the
per-precinct VIP 3.0 export tables.
"""

from vip_merge.lib.merger.aggregator import (
    POLLING_LOCATION_COLUMNS,
    PRECINCT_COLUMNS,
    PRECINCT_POLLING_COLUMNS,
    ExportTables,
    build_export_tables,
    build_polling_location_roster,
    build_precinct_polling_links,
    build_precinct_roster,
)
from vip_merge.lib.merger.joiner import MERGED_COLUMNS, merge_tables

__all__ = [
    "MERGED_COLUMNS",
    "POLLING_LOCATION_COLUMNS",
    "PRECINCT_COLUMNS",
    "PRECINCT_POLLING_COLUMNS",
    "ExportTables",
    "build_export_tables",
    "build_polling_location_roster",
    "build_precinct_polling_links",
    "build_precinct_roster",
    "merge_tables",
]
