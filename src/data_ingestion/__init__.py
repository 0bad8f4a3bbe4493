"""
Data Ingestion Package
Handles reading review tables and discovering image files.
"""

from .core.reader import FileReader
from .utils import ensure_directory, image_to_base64, resolve_field

__all__ = [
    'FileReader',
    'ensure_directory',
    'image_to_base64',
    'resolve_field'
]
