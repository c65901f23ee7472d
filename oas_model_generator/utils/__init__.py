"""
Utilities Module for Model Generation

This module provides utility functions for file operations and string case
conversions used when naming declarations and writing model files.
"""

from .file_utils import ensure_directory, write_files_to_disk
from .string_case import normalize_identifier, pascalcase, snakecase

__all__ = [
    "ensure_directory",
    "normalize_identifier",
    "pascalcase",
    "snakecase",
    "write_files_to_disk",
]
