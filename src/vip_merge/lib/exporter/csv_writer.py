"""CSV writer for merged and VIP 3.0 export tables."""

import csv
from collections.abc import Iterable
from pathlib import Path
from typing import Any

# Characters that trigger formula execution in spreadsheet applications
_FORMULA_PREFIXES = ("=", "+", "-", "@", "\t", "\r")


def _sanitize_cell(value: object) -> object:
    """Sanitize a cell value to prevent CSV formula injection.

    Prefixes values starting with formula-triggering characters with
    a single quote to prevent execution in spreadsheet applications.

    Args:
        value: The cell value to sanitize.

    Returns:
        The sanitized value.
    """
    if isinstance(value, str) and value and value[0] in _FORMULA_PREFIXES:
        return f"'{value}"
    return value


def write_csv(
    output_path: Path,
    records: Iterable[dict[str, Any]],
    *,
    columns: list[str],
) -> int:
    """Write records to a CSV file with a fixed column layout.

    Args:
        output_path: Path to write the CSV file.
        records: Iterable of row dicts.
        columns: Column names, in output order. Extra keys are ignored and
            missing keys are written as empty cells.

    Returns:
        Number of records written.
    """
    count = 0

    with output_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=columns, extrasaction="ignore")
        writer.writeheader()

        for record in records:
            sanitized = {k: _sanitize_cell(v) for k, v in record.items()}
            writer.writerow(sanitized)
            count += 1

    return count
