"""
Data Ingestion Utilities Package
Contains utility functions for file operations and data validation.
"""

from .file_utils import ensure_directory, image_to_base64
from .validation import resolve_column, resolve_field, validate_dataframe_schema

__all__ = [
    'ensure_directory',
    'image_to_base64',
    'resolve_column',
    'resolve_field',
    'validate_dataframe_schema'
]
