"""
Data Validation Module
Resolves flexible field names and validates DataFrame schemas.

Source files name the same field in different ways (app_id vs appid). Each
logical field has an ordered tuple of recognized names; the first one present
wins.
"""

import logging
from typing import Any, List, Mapping, Optional, Sequence, Tuple

import pandas as pd

logger = logging.getLogger(__name__)

# Recognized names per logical field, in priority order
GAME_ID_FIELDS: Tuple[str, ...] = ('appid', 'app_id')
GAME_NAME_FIELDS: Tuple[str, ...] = ('name',)
REVIEW_GAME_ID_FIELDS: Tuple[str, ...] = ('app_id', 'appid')
REVIEW_CONTENT_FIELDS: Tuple[str, ...] = ('content', 'review', 'text')
REVIEW_ID_FIELDS: Tuple[str, ...] = ('id', 'review_id')


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    try:
        if pd.isna(value):
            return True
    except (TypeError, ValueError):
        pass
    return isinstance(value, str) and value == ''


def resolve_column(df: pd.DataFrame, synonyms: Sequence[str]) -> Optional[str]:
    """Return the first synonym that is a column of the DataFrame, or None."""
    for name in synonyms:
        if name in df.columns:
            return name
    return None


def resolve_field(record: Mapping[str, Any], synonyms: Sequence[str], default: Any = None) -> Any:
    """Return the value of the first synonym present and non-blank in a record.

    Args:
        record: Row mapping (dict or pandas Series)
        synonyms: Field names in priority order
        default: Value returned when no synonym has a value

    Returns:
        The first non-blank value, or default
    """
    for name in synonyms:
        if name in record:
            value = record[name]
            if not _is_blank(value):
                return value
    return default


def validate_dataframe_schema(
    df: pd.DataFrame,
    required_fields: Mapping[str, Sequence[str]]
) -> Tuple[bool, List[str]]:
    """Validate that every logical field is available under one of its names.
    
    Args:
        df: DataFrame to validate
        required_fields: Mapping of logical field label to accepted column names
        
    Returns:
        Tuple[bool, List[str]]: (is_valid, list of validation errors)
    """
    errors = []
    for label, synonyms in required_fields.items():
        if resolve_column(df, synonyms) is None:
            errors.append(f"Missing column for '{label}' (expected one of: {', '.join(synonyms)})")
    
    return len(errors) == 0, errors
