"""Inner join of normalized address and polling place tables on precinct id."""

import pandas as pd
from loguru import logger

from vip_merge.lib.normalizer.schemas import NORMALIZED_COLUMNS

JOIN_KEY = "precinct_id"

POLLING_PREFIX = "polling_"

# Merged table layout: address side, shared key, then prefixed polling side
MERGED_COLUMNS: list[str] = NORMALIZED_COLUMNS + [
    f"{POLLING_PREFIX}{c}" for c in NORMALIZED_COLUMNS if c != JOIN_KEY
]


def merge_tables(addresses: pd.DataFrame, polling: pd.DataFrame) -> pd.DataFrame:
    """Join every address to every polling place sharing its precinct id.

    Standard inner-join semantics: a key with ``a`` addresses and ``b``
    polling places yields ``a * b`` rows, and keys present on only one
    side are dropped. Row order follows the address table.

    Args:
        addresses: Normalized address table.
        polling: Normalized polling place table.

    Returns:
        Merged table with columns per ``MERGED_COLUMNS`` and a fresh index.
    """
    polling_side = polling[NORMALIZED_COLUMNS].rename(
        columns={c: f"{POLLING_PREFIX}{c}" for c in NORMALIZED_COLUMNS if c != JOIN_KEY}
    )
    merged = pd.merge(
        addresses[NORMALIZED_COLUMNS],
        polling_side,
        on=JOIN_KEY,
        how="inner",
        sort=False,
    )

    dropped = len(set(addresses[JOIN_KEY]) ^ set(polling[JOIN_KEY]))
    logger.info(f"Merged {len(addresses)} addresses with {len(polling)} polling places into {len(merged)} rows")
    if dropped:
        logger.info(f"{dropped} precinct ids appear on only one side and were dropped")

    return merged[MERGED_COLUMNS].reset_index(drop=True)
