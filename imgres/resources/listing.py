"""Directory listing shared by the sanitizer and the collector."""

from __future__ import annotations

import os
from pathlib import Path


def list_directory(directory: Path) -> list[os.DirEntry[str]]:
    """Return the children of a directory in filesystem enumeration order.

    The listing is read completely before returning, so callers may
    rename children while iterating over the result.

    Parameters
    ----------
    directory : Path
        Directory to list.

    Returns
    -------
    list[os.DirEntry[str]]
        Directory entries, unsorted.

    Raises
    ------
    OSError
        If the directory cannot be read.
    """
    with os.scandir(directory) as it:
        return list(it)


def is_directory(entry: os.DirEntry[str]) -> bool:
    """Check whether an entry is a real directory (symlinks are not followed)."""
    return entry.is_dir(follow_symlinks=False)
