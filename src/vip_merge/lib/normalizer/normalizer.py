"""Per-file normalization of address and polling place tables.

Validates the declared headers, uppercases every declared text field,
repairs rows whose trailing precinct value is missing (the sign that the
row's columns shifted left), and projects the result into the shared
normalized layout with canonical precinct ids.
"""

from collections.abc import Hashable
from dataclasses import astuple, dataclass, field

import pandas as pd
from loguru import logger

from vip_merge.lib.normalizer.errors import MalformedPrecinctIdError, SchemaMismatchError
from vip_merge.lib.normalizer.precinct import normalize_precinct_ids
from vip_merge.lib.normalizer.reconstructor import reconstruct_row
from vip_merge.lib.normalizer.schemas import (
    ADDRESS_SCHEMA,
    NORMALIZED_COLUMNS,
    POLLING_SCHEMA,
    AddressRecord,
    NormalizedRecord,
    RawRecord,
    TableSchema,
)
from vip_merge.lib.normalizer.tokenizer import anchor_row


@dataclass
class NormalizedTable:
    """Result of normalizing one input table.

    Attributes:
        frame: Normalized rows, columns per ``NORMALIZED_COLUMNS``, indexed
            like the input frame.
        repaired_rows: Labels of rows rebuilt from their tokens.
        empty_city_rows: Labels of repaired rows whose city came out empty.
    """

    frame: pd.DataFrame
    repaired_rows: list[Hashable] = field(default_factory=list)
    empty_city_rows: list[Hashable] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.frame)


def validate_headers(columns: list[str], schema: TableSchema) -> None:
    """Check a header row against the schema's accepted spellings.

    Args:
        columns: Header names in file order.
        schema: Declared schema for the file.

    Raises:
        SchemaMismatchError: If the headers match no accepted variant.
    """
    if not schema.accepts(columns):
        logger.error(f"{schema.name} file headers {columns} do not match {list(schema.headers)}")
        raise SchemaMismatchError(schema.name, schema.headers, columns)


def _clean_cell(value: object) -> str | None:
    """Uppercase and trim a cell; missing or blank cells become None."""
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return None
    text = str(value).strip().upper()
    return text or None


def read_records(frame: pd.DataFrame, schema: TableSchema) -> list[tuple[Hashable, RawRecord]]:
    """Build uppercased typed records from a frame's rows, positionally.

    Args:
        frame: Input table whose headers already passed validation.
        schema: Declared schema for the table.

    Returns:
        List of (row label, record) pairs in frame order.
    """
    return [
        (label, schema.record_type(*(_clean_cell(v) for v in values)))
        for label, *values in frame.itertuples(index=True, name=None)
    ]


def is_incomplete(record: RawRecord) -> bool:
    """A row missing its right-most precinct value has shifted columns."""
    return record.precinct is None


def repair_record(record: RawRecord, schema: TableSchema, row: Hashable | None = None) -> RawRecord:
    """Rebuild a misaligned record from its tokens.

    Args:
        record: The incomplete record.
        schema: Schema the record belongs to.
        row: Row label, reported if the row cannot be repaired.

    Returns:
        A new record of the same type.

    Raises:
        UnparseableRowError: If the row has no usable anchors.
    """
    anchors = anchor_row(astuple(record), row=row)
    repaired = reconstruct_row(anchors, schema)
    logger.debug(f"Repaired {schema.name} row {row}: {' '.join(anchors.tokens)!r} -> {repaired}")
    return repaired


def _project(record: RawRecord) -> tuple[NormalizedRecord, str | None, str]:
    """Map a typed record into the normalized layout.

    Returns:
        The normalized record (precinct id still raw), the raw precinct id,
        and the state used to canonicalize it.
    """
    if isinstance(record, AddressRecord):
        state = record.state or ""
        normalized = NormalizedRecord(
            line1=record.street or "",
            line2=record.apt or "",
            city=record.city or "",
            state=state,
            zip=record.zip or "",
        )
        return normalized, record.precinct_id, state

    state, zipcode = record.split_state_zip()
    normalized = NormalizedRecord(
        line1=record.street or "",
        city=record.city or "",
        state=state,
        zip=zipcode,
    )
    return normalized, record.precinct, state


def normalize_table(frame: pd.DataFrame, schema: TableSchema) -> NormalizedTable:
    """Normalize one input table into the shared layout.

    Args:
        frame: Raw table with the file's header row as columns.
        schema: Declared schema for the file.

    Returns:
        NormalizedTable with one output row per input row.

    Raises:
        SchemaMismatchError: If the headers do not match the schema.
        UnparseableRowError: If a misaligned row cannot be repaired.
        MalformedPrecinctIdError: If a precinct id has no numeric suffix.
    """
    validate_headers([str(c) for c in frame.columns], schema)
    logger.info(f"Normalizing {schema.name} table ({len(frame)} rows)")

    records: list[RawRecord] = []
    labels: list[Hashable] = []
    repaired_rows: list[Hashable] = []
    empty_city_rows: list[Hashable] = []

    for label, record in read_records(frame, schema):
        if is_incomplete(record):
            record = repair_record(record, schema, row=label)
            repaired_rows.append(label)
            if record.city is None:
                logger.warning(f"Repaired {schema.name} row {label} has no city between street and state")
                empty_city_rows.append(label)
        labels.append(label)
        records.append(record)

    if repaired_rows:
        logger.info(f"Repaired {len(repaired_rows)} misaligned {schema.name} rows")

    projected = [_project(r) for r in records]
    try:
        precinct_ids = normalize_precinct_ids([p[1] for p in projected], [p[2] for p in projected])
    except MalformedPrecinctIdError as exc:
        raise MalformedPrecinctIdError(exc.precinct_id, row=labels[exc.row], reason=exc.reason) from exc  # type: ignore[index]

    rows = [
        {**normalized.to_dict(), "precinct_id": precinct_id}
        for (normalized, _, _), precinct_id in zip(projected, precinct_ids, strict=True)
    ]
    output = pd.DataFrame(rows, columns=NORMALIZED_COLUMNS, index=frame.index)

    return NormalizedTable(frame=output, repaired_rows=repaired_rows, empty_city_rows=empty_city_rows)


def normalize_address_table(frame: pd.DataFrame) -> pd.DataFrame:
    """Normalize a voter address table. See ``normalize_table``."""
    return normalize_table(frame, ADDRESS_SCHEMA).frame


def normalize_polling_table(frame: pd.DataFrame) -> pd.DataFrame:
    """Normalize a polling place table. See ``normalize_table``."""
    return normalize_table(frame, POLLING_SCHEMA).frame
