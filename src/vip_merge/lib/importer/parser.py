"""CSV reader with automatic delimiter/encoding detection.

Reads address and polling place files as all-string tables. Headers are
kept as written (whitespace and byte-order mark stripped); checking them
against the declared schema is the normalizer's job.
"""

from pathlib import Path

import pandas as pd
from loguru import logger

_ENCODINGS = ("utf-8", "latin-1")
_FIRST_DATA_LINE = 2


def detect_delimiter(file_path: Path) -> str:
    """Detect the CSV delimiter by reading the first line.

    Args:
        file_path: Path to the CSV file.

    Returns:
        The detected delimiter character.

    Raises:
        ValueError: If the delimiter cannot be detected.
    """
    for encoding in _ENCODINGS:
        try:
            with file_path.open("r", encoding=encoding) as f:
                first_line = f.readline()
            break
        except UnicodeDecodeError:
            continue
    else:
        msg = f"Cannot detect encoding for {file_path}"
        raise ValueError(msg)

    counts = {
        ",": first_line.count(","),
        "|": first_line.count("|"),
        "\t": first_line.count("\t"),
    }
    delimiter = max(counts, key=counts.get)  # type: ignore[arg-type]
    if counts[delimiter] == 0:
        msg = f"Cannot detect delimiter in {file_path}"
        raise ValueError(msg)

    logger.debug(f"Detected delimiter: {delimiter!r} for {file_path}")
    return delimiter


def detect_encoding(file_path: Path) -> str:
    """Detect file encoding by attempting to read with common encodings.

    Args:
        file_path: Path to the CSV file.

    Returns:
        The detected encoding string.

    Raises:
        ValueError: If encoding cannot be detected.
    """
    for encoding in _ENCODINGS:
        try:
            with file_path.open("r", encoding=encoding) as f:
                f.read()
            return encoding
        except UnicodeDecodeError:
            continue
    msg = f"Cannot detect encoding for {file_path}"
    raise ValueError(msg)


def read_table(file_path: Path) -> pd.DataFrame:
    """Read an input CSV file into a string-typed DataFrame.

    Empty cells become missing values, never a placeholder string such as
    "NA". Short rows are padded with missing values. Rows are labelled with
    their line number in the file, the header being line 1, so errors that
    name a row point at the line to fix. Blank lines are dropped.

    Args:
        file_path: Path to the CSV file.

    Returns:
        DataFrame with the file's headers as columns.

    Raises:
        ValueError: If the file cannot be decoded or split into columns.
    """
    delimiter = detect_delimiter(file_path)
    encoding = detect_encoding(file_path)

    logger.info(f"Reading {file_path} with delimiter={delimiter!r}, encoding={encoding}")

    frame = pd.read_csv(
        file_path,
        sep=delimiter,
        encoding="utf-8-sig" if encoding == "utf-8" else encoding,
        dtype=str,
        keep_default_na=False,
        skipinitialspace=True,
        skip_blank_lines=False,
    )
    frame.columns = frame.columns.str.replace("\ufeff", "", regex=False).str.strip()

    frame.index = pd.RangeIndex(_FIRST_DATA_LINE, _FIRST_DATA_LINE + len(frame), name="line")

    # Empty strings become missing values
    frame = frame.replace("", None).dropna(how="all")

    logger.debug(f"Read {len(frame)} rows with columns {list(frame.columns)}")
    return frame
