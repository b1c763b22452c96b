"""
API Columns - header-driven value extraction

A header row marks API-fed columns with "api:<path>", e.g.
"api:daily.0.weather.id". These functions resolve each marked path
against a weather response and place the values into rows or frames.
"""

import polars as pl
from typing import Any, Dict, List, Mapping, Sequence
from src.coreutils.utils import (
    API_HEADER_PREFIX,
    PathNotFoundError,
    get_api_headers,
    get_value_from_json,
)
import logging

logger = logging.getLogger(__name__)


def resolve_api_values(
    headers: Sequence[str], document: Any, strict: bool = True
) -> Dict[str, Any]:
    """
    Resolve every "api:" column of a header row against one document

    Args:
        headers: Header row cells
        document: Parsed API response
        strict: If False, unresolved paths map to None instead of raising

    Returns:
        Dict: path -> resolved value, in header order

    Raises:
        PathNotFoundError: If a path is unresolved and strict is True
    """
    values = {}

    for path in get_api_headers(headers):
        try:
            values[path] = get_value_from_json(path, document)
        except PathNotFoundError as e:
            if strict:
                logger.error(f"❌ {e}")
                raise
            logger.warning(f"Unresolved API column '{path}': {e}")
            values[path] = None

    return values


def fill_api_row(
    row: Sequence[Any],
    headers: Sequence[str],
    document: Any,
    strict: bool = True,
) -> List[Any]:
    """
    Write resolved API values into a copy of a data row

    Values land at the index of every "api:" header, repeated markers included; other cells keep their
    content. Rows shorter than the header are padded with None.

    Args:
        row: Existing row cells
        headers: Header row cells
        document: Parsed API response
        strict: Passed to resolve_api_values

    Returns:
        List: The filled row
    """
    filled = list(row)
    if len(filled) < len(headers):
        filled.extend([None] * (len(headers) - len(filled)))

    values = resolve_api_values(headers, document, strict=strict)

    # every marked cell is written, including repeated markers
    for index, header in enumerate(headers):
        if isinstance(header, str) and header.startswith(API_HEADER_PREFIX):
            filled[index] = values[header[len(API_HEADER_PREFIX) :]]

    return filled


def build_api_frame(
    headers: Sequence[str],
    documents: Sequence[Mapping[str, Any]],
    strict: bool = False,
) -> pl.DataFrame:
    """
    Build a DataFrame with one row per document and one column per "api:" header

    Args:
        headers: Header row cells
        documents: Parsed API responses, one per location
        strict: Passed to resolve_api_values

    Returns:
        pl.DataFrame: Resolved values, columns in header order
    """
    columns = list(get_api_headers(headers))
    logger.info(f"Resolving {len(columns)} API columns for {len(documents)} documents")

    if not columns:
        return pl.DataFrame()

    rows = [resolve_api_values(headers, document, strict=strict) for document in documents]
    if not rows:
        return pl.DataFrame(schema={column: pl.Null() for column in columns})

    df = pl.DataFrame(rows, strict=False, infer_schema_length=None)
    logger.info(f"Built API frame: {df.height} rows, {df.width} columns")
    return df
