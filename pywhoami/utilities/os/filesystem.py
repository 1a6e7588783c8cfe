"""
filesystem.py - Filesystem utility helpers.

Thin wrappers around the standard library used by the CLI to prepare the optional
log directory. Both string paths and ``pathlib.Path`` objects are accepted, and
``Path`` objects are returned.

Error handling:
- Filesystem errors are surfaced as ``OSError`` with additional context.
- Exceptions are not silently swallowed.
"""

import os

from pathlib import Path
from typing import Union


def create_directory(path: Union[str, Path], exist_ok: bool = True) -> Path:
    """
    Create a directory (and any missing parents) at the given path.

    Args:
        path: Path of the directory to create.
        exist_ok: If True, no exception is raised if the directory already exists.

    Returns:
        The path to the created directory.

    Raises:
        OSError: If the directory cannot be created.
    """
    try:
        p = Path(path)
        os.makedirs(p, exist_ok=exist_ok)
        return p
    except OSError as exc:
        raise OSError(f"Failed to create directory '{path}': {exc}") from exc


def get_absolute_path(path: Union[str, Path]) -> Path:
    """
    Convert a relative, absolute or ``~`` path to an absolute Path object.

    The path does not need to exist.
    """
    return Path(path).expanduser().resolve()
