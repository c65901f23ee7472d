"""
File utilities for the model generator.

This module provides the file and directory operations used by the CLI
when writing model files.
"""

from pathlib import Path


def write_files_to_disk(files: dict[Path, str]) -> None:
    """Write generated files to disk.

    Args:
        files: Dictionary mapping file paths to their content.
    """
    for path, content in files.items():
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


def ensure_directory(directory: Path) -> None:
    """Ensure that a directory exists.

    Args:
        directory: Path to the directory to create.
    """
    directory.mkdir(parents=True, exist_ok=True)
