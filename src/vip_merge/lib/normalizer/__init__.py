"""Normalizer library public API.

Provides header validation, misaligned-row repair, and precinct id
normalization for address and polling place tables.
"""

from vip_merge.lib.normalizer.errors import (
    MalformedPrecinctIdError,
    NormalizationError,
    SchemaMismatchError,
    UnparseableRowError,
    ValidationError,
)
from vip_merge.lib.normalizer.normalizer import (
    NormalizedTable,
    normalize_address_table,
    normalize_polling_table,
    normalize_table,
)
from vip_merge.lib.normalizer.precinct import normalize_precinct_id, normalize_precinct_ids
from vip_merge.lib.normalizer.reconstructor import RowFields, reconstruct_row, slice_fields
from vip_merge.lib.normalizer.schemas import (
    ADDRESS_SCHEMA,
    NORMALIZED_COLUMNS,
    POLLING_SCHEMA,
    AddressRecord,
    NormalizedRecord,
    PollingRecord,
    TableSchema,
)
from vip_merge.lib.normalizer.tokenizer import RowAnchors, anchor_row, flatten_row, locate_anchors, tokenize

__all__ = [
    "ADDRESS_SCHEMA",
    "NORMALIZED_COLUMNS",
    "POLLING_SCHEMA",
    "AddressRecord",
    "MalformedPrecinctIdError",
    "NormalizationError",
    "NormalizedRecord",
    "NormalizedTable",
    "PollingRecord",
    "RowAnchors",
    "RowFields",
    "SchemaMismatchError",
    "TableSchema",
    "UnparseableRowError",
    "ValidationError",
    "anchor_row",
    "flatten_row",
    "locate_anchors",
    "normalize_address_table",
    "normalize_polling_table",
    "normalize_precinct_id",
    "normalize_precinct_ids",
    "normalize_table",
    "reconstruct_row",
    "slice_fields",
    "tokenize",
]
