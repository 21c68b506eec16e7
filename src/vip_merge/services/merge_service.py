"""Merge service: orchestrates the normalize, join, and export pipeline."""

from collections.abc import Hashable
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from vip_merge.core.config import Settings, get_settings
from vip_merge.lib.exporter import ExportResult, export_tables
from vip_merge.lib.importer import read_table
from vip_merge.lib.merger import build_export_tables, merge_tables
from vip_merge.lib.normalizer import (
    ADDRESS_SCHEMA,
    POLLING_SCHEMA,
    NormalizationError,
    NormalizedTable,
    TableSchema,
    normalize_table,
)


@dataclass
class MergeResult:
    """Summary of one merge run."""

    address_rows: int
    polling_rows: int
    merged_rows: int
    precinct_count: int
    repaired_address_rows: list[Hashable] = field(default_factory=list)
    repaired_polling_rows: list[Hashable] = field(default_factory=list)
    empty_city_rows: list[Hashable] = field(default_factory=list)
    exports: list[ExportResult] = field(default_factory=list)


def _normalize_file(path: Path, schema: TableSchema) -> NormalizedTable:
    try:
        return normalize_table(read_table(path), schema)
    except NormalizationError as e:
        logger.error(f"Normalization of {path} failed, no files written (rows are file line numbers): {e}")
        raise


def run_merge(
    address_path: Path,
    polling_path: Path,
    output_dir: Path | None = None,
    settings: Settings | None = None,
) -> MergeResult:
    """Normalize both input files, join them, and write the export tables.

    Both tables are fully normalized before anything is written, so a
    failure in either leaves the output directory untouched.

    Args:
        address_path: Voter address CSV file.
        polling_path: Polling place CSV file.
        output_dir: Directory for output files. Defaults to
            ``settings.export_dir``.
        settings: Application settings. Loaded from the environment if
            omitted.

    Returns:
        MergeResult with row counts and per-file export results.

    Raises:
        NormalizationError: If either table fails normalization.
        ValueError: If either file cannot be read.
    """
    settings = settings or get_settings()
    export_dir = output_dir or Path(settings.export_dir)

    addresses = _normalize_file(address_path, ADDRESS_SCHEMA)
    polling = _normalize_file(polling_path, POLLING_SCHEMA)

    merged = merge_tables(addresses.frame, polling.frame)
    tables = build_export_tables(
        merged,
        start=settings.precinct_id_start,
        locality_id=settings.locality_id,
    )
    exports = export_tables(merged, tables, export_dir, filenames=settings.export_filenames)

    result = MergeResult(
        address_rows=len(addresses),
        polling_rows=len(polling),
        merged_rows=len(merged),
        precinct_count=len(tables.precincts),
        repaired_address_rows=addresses.repaired_rows,
        repaired_polling_rows=polling.repaired_rows,
        empty_city_rows=addresses.empty_city_rows + polling.empty_city_rows,
        exports=exports,
    )
    logger.info(
        f"Merge complete: {result.merged_rows} merged rows across {result.precinct_count} precincts "
        f"written to {export_dir}"
    )
    return result
