"""
File Utilities Module
Provides directory and image file helpers.
"""

import base64
import logging
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)


def ensure_directory(directory_path: Union[str, Path]) -> Path:
    """Ensure directory exists, creating it if necessary.
    
    Args:
        directory_path: Path to the directory
        
    Returns:
        Path: Path object for the directory
    """
    directory_path = Path(directory_path) if isinstance(directory_path, str) else directory_path
    directory_path.mkdir(parents=True, exist_ok=True)
    return directory_path


def image_to_base64(image_path: Union[str, Path]) -> Optional[str]:
    """Read an image file and encode it as base64 text.

    Returns:
        Optional[str]: Encoded content, or None if the file cannot be read
    """
    image_path = Path(image_path) if isinstance(image_path, str) else image_path
    try:
        return base64.b64encode(image_path.read_bytes()).decode("ascii")
    except OSError as e:
        logger.error(f"Error reading image {image_path}: {e}")
        return None
