"""
Output Generation Package
Handles writing output files.
"""

from .file_writer import FileWriter

__all__ = ['FileWriter']
