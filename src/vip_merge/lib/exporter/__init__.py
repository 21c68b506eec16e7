"""Exporter library public API.

Writes the merged address/polling table and the three VIP 3.0 per-precinct
tables as CSV files.
"""

from dataclasses import dataclass
from pathlib import Path

import pandas as pd
from loguru import logger

from vip_merge.lib.exporter.csv_writer import write_csv
from vip_merge.lib.merger import (
    MERGED_COLUMNS,
    POLLING_LOCATION_COLUMNS,
    PRECINCT_COLUMNS,
    PRECINCT_POLLING_COLUMNS,
    ExportTables,
)

# Default output file names, keyed by table name
DEFAULT_FILENAMES: dict[str, str] = {
    "merged": "VIP_Data_Associate_Merged_Address_Polling.csv",
    "precinct": "precinct.csv",
    "polling_location": "polling_location.csv",
    "precinct_polling_location": "precinct_polling_location.csv",
}


@dataclass
class ExportResult:
    """Result of writing one export table."""

    table: str
    record_count: int
    output_path: Path
    file_size_bytes: int


def export_frame(frame: pd.DataFrame, output_path: Path, *, columns: list[str], table: str = "") -> ExportResult:
    """Write one DataFrame as CSV.

    Args:
        frame: Table to write.
        output_path: Path to write the CSV file.
        columns: Column layout of the file.
        table: Table name recorded on the result.

    Returns:
        ExportResult with record count and file info.
    """
    count = write_csv(output_path, frame.to_dict(orient="records"), columns=columns)
    return ExportResult(
        table=table,
        record_count=count,
        output_path=output_path,
        file_size_bytes=output_path.stat().st_size,
    )


def export_tables(
    merged: pd.DataFrame,
    tables: ExportTables,
    output_dir: Path,
    *,
    filenames: dict[str, str] | None = None,
) -> list[ExportResult]:
    """Write the merged table and all three export tables.

    Args:
        merged: Merged address/polling table.
        tables: Per-precinct export tables.
        output_dir: Directory to write into; created if missing.
        filenames: Overrides for ``DEFAULT_FILENAMES``.

    Returns:
        One ExportResult per file, in write order.
    """
    names = {**DEFAULT_FILENAMES, **(filenames or {})}
    output_dir.mkdir(parents=True, exist_ok=True)

    plan = [
        ("merged", merged, MERGED_COLUMNS),
        ("precinct", tables.precincts, PRECINCT_COLUMNS),
        ("polling_location", tables.polling_locations, POLLING_LOCATION_COLUMNS),
        ("precinct_polling_location", tables.precinct_polling_locations, PRECINCT_POLLING_COLUMNS),
    ]

    results = []
    for table, frame, columns in plan:
        result = export_frame(frame, output_dir / names[table], columns=columns, table=table)
        logger.info(f"Wrote {result.record_count} rows to {result.output_path}")
        results.append(result)
    return results


__all__ = [
    "DEFAULT_FILENAMES",
    "ExportResult",
    "export_frame",
    "export_tables",
    "write_csv",
]
