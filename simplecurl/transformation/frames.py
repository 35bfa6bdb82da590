"""
DataFrame Export

Turns transformed collections into polars DataFrames for tabular work.
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional

import polars as pl

from simplecurl.models.base import ApiModel

logger = logging.getLogger(__name__)


def to_row(item: Any) -> Dict[str, Any]:
    """One DataFrame row from a model, mapping or scalar"""
    if isinstance(item, ApiModel):
        return item.attributes
    if isinstance(item, Mapping):
        return dict(item)
    return {"value": item}


def collection_to_frame(
    items: Iterable[Any], schema: Optional[pl.Schema] = None
) -> pl.DataFrame:
    """
    Build a DataFrame from a transformed collection

    Args:
        items: Models, decoded mappings or scalars
        schema: Optional Polars schema for the result

    Returns:
        pl.DataFrame: One row per item; relations are not flattened
    """
    rows: List[Dict[str, Any]] = [to_row(item) for item in items]

    if not rows:
        return pl.DataFrame(schema=schema)

    df = pl.from_dicts(rows, schema=schema, infer_schema_length=None)
    logger.debug(f"Built DataFrame with {df.height} rows and columns {df.columns}")
    return df
