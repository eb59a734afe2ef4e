"""
Path utilities for validating directories entered at the prompts.

This module provides:
- normalize_path(): Normalize a user-entered path to absolute form
- is_existing_directory(): Check that a string names an existing directory
- resolve_in_directory(): Join a filename onto a directory
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)


def normalize_path(path: Union[str, Path]) -> Optional[str]:
    """
    Normalize a path to absolute form.

    This function:
    - Converts Path objects to strings
    - Expands a leading ~ to the user's home directory
    - Resolves relative paths against the current working directory
    - Returns None for paths that cannot be represented (e.g. embedded NUL)

    Args:
        path: A file path as string or Path object

    Returns:
        Normalized absolute path as string, or None if the path is malformed

    Examples:
        >>> normalize_path("/tmp/../tmp/data")
        '/tmp/data'
    """
    path_str = str(path)

    if "\x00" in path_str:
        return None

    try:
        expanded = os.path.expanduser(path_str)
        return os.path.abspath(os.path.normpath(expanded))
    except (OSError, ValueError):
        return None


def is_existing_directory(path: Union[str, Path]) -> bool:
    """
    Check whether a path names an existing directory.

    Empty input, malformed paths, missing paths and paths to regular files
    all return False.

    Args:
        path: Path to check, as typed by the user

    Returns:
        True only if the path exists and is a directory
    """
    if not str(path).strip():
        return False

    normalized = normalize_path(path)
    if normalized is None:
        logger.debug(f"Malformed path rejected: {path!r}")
        return False

    try:
        return Path(normalized).is_dir()
    except (OSError, ValueError) as e:
        logger.debug(f"Could not stat {normalized}: {e}")
        return False


def resolve_in_directory(directory: Union[str, Path], filename: Union[str, Path]) -> Path:
    """
    Resolve a filename against a directory.

    An absolute filename is returned unchanged, as with Path joining.

    Args:
        directory: The directory to resolve against
        filename: The filename (or relative path) of the file

    Returns:
        The combined path
    """
    return Path(directory) / filename
