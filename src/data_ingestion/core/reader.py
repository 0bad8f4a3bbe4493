"""
File Reader Module
Centralized service for reading tabular review data and discovering image files.
"""

import logging
from pathlib import Path
from typing import FrozenSet, Iterator, List, Tuple, Union

import pandas as pd

logger = logging.getLogger(__name__)


class FileReader:
    """
    Centralized file reading service.

    Reads CSV files into string-typed DataFrames, so identifiers such as
    app ids compare as text regardless of how they look, and walks category
    directories of images one level deep.
    """
    
    SUPPORTED_EXTENSIONS: FrozenSet[str] = frozenset({'.csv'})
    IMAGE_EXTENSIONS: FrozenSet[str] = frozenset({'.jpg', '.jpeg', '.png', '.gif'})
    DEFAULT_ENCODING: str = 'utf-8'
    FALLBACK_ENCODING: str = 'latin-1'
    
    def read_file(self, file_path: Union[str, Path], **kwargs) -> pd.DataFrame:
        """Read a single tabular file.
        
        Args:
            file_path: Path to the file
            **kwargs: Additional parameters to pass to pd.read_csv
            
        Returns:
            pd.DataFrame: DataFrame containing file contents
            
        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If file format is not supported
        """
        file_path = Path(file_path) if isinstance(file_path, str) else file_path
        
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")
        
        logger.info(f"Reading file: {file_path.name}")
        ext = file_path.suffix.lower()
        
        if ext == '.csv':
            return self.read_csv(file_path, **kwargs)
        else:
            raise ValueError(f"Unsupported file format: {ext}")
    
    def read_csv(self, file_path: Union[str, Path], **kwargs) -> pd.DataFrame:
        """Read CSV file with encoding fallback.
        
        All columns are read as strings and empty cells stay empty strings.
        """
        file_path = Path(file_path) if isinstance(file_path, str) else file_path
        
        params = {
            'encoding': self.DEFAULT_ENCODING,
            'dtype': str,
            'keep_default_na': False,
            'on_bad_lines': 'warn',
        }
        params.update(kwargs)
        
        try:
            return pd.read_csv(file_path, **params)
        except UnicodeDecodeError:
            logger.warning(f"UTF-8 decoding failed for {file_path.name}, trying Latin-1")
            params['encoding'] = self.FALLBACK_ENCODING
            return pd.read_csv(file_path, **params)
        except Exception as e:
            logger.error(f"Error reading CSV {file_path.name}: {str(e)}")
            raise
    
    def list_category_directories(self, root: Union[str, Path]) -> List[Path]:
        """List the category directories directly under root.

        Non-directory entries are logged and skipped.

        Raises:
            FileNotFoundError: If root does not exist or is not a directory
        """
        root = Path(root) if isinstance(root, str) else root
        if not root.is_dir():
            raise FileNotFoundError(f"Image directory does not exist: {root}")

        directories = []
        for entry in sorted(root.iterdir()):
            try:
                if not entry.is_dir():
                    logger.info(f"Skipping non-directory entry: {entry}")
                    continue
            except OSError as e:
                logger.error(f"Could not inspect {entry}: {e}")
                continue
            directories.append(entry)
        return directories

    def list_images(self, directory: Union[str, Path]) -> List[Path]:
        """List image files in a directory, filtered by extension (case-insensitive)."""
        directory = Path(directory) if isinstance(directory, str) else directory
        images = []
        for entry in sorted(directory.iterdir()):
            if entry.suffix.lower() not in self.IMAGE_EXTENSIONS:
                logger.info(f"Skipping non-image file: {entry}")
                continue
            if not entry.is_file():
                logger.info(f"Skipping non-file entry: {entry}")
                continue
            images.append(entry)
        return images

    def iter_category_images(self, root: Union[str, Path],
                             max_categories: int = 0) -> Iterator[Tuple[str, Path]]:
        """Yield (category, image path) pairs from a two-level image tree.

        Args:
            root: Directory containing one sub-directory per category
            max_categories: Stop after this many categories (0 means all)
        """
        directories = self.list_category_directories(root)
        if max_categories:
            directories = directories[:max_categories]
        for directory in directories:
            logger.info(f"Processing category directory: {directory.name}")
            for image_path in self.list_images(directory):
                yield directory.name, image_path
