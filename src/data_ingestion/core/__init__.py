"""
Data Ingestion Core Package
Contains core modules for data ingestion operations.
"""

from .reader import FileReader

__all__ = ['FileReader']
