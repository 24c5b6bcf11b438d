"""Filename sanitation for image assets.

Renames files in place so that every filename consists only of ASCII
letters, digits, ``_``, ``@`` and ``.``. Directories are never renamed.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from unidecode import unidecode

from imgres.errors import SanitationError
from imgres.resources.listing import is_directory, list_directory
from imgres.resources.models import FileRename

logger = logging.getLogger(__name__)

_ILLEGAL_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9_@.]")


def sanitize_filename(name: str) -> str:
    """Compute the sanitized form of a filename.

    Non-Latin characters are transliterated, surrounding whitespace is
    trimmed, commas become periods and any other character outside
    ``[A-Za-z0-9_@.]`` becomes an underscore. Sanitized names are fixed
    points of this function.

    Parameters
    ----------
    name : str
        Original filename.

    Returns
    -------
    str
        Sanitized filename.

    Examples
    --------
    >>> sanitize_filename("фото.png")
    'foto.png'
    >>> sanitize_filename("  my icon,large@2x.png ")
    'my_icon.large@2x.png'
    >>> sanitize_filename("café-menu.jpg")
    'cafe_menu.jpg'
    """
    ascii_name = unidecode(name).strip()
    return _ILLEGAL_FILENAME_CHARS.sub("_", ascii_name.replace(",", "."))


def sanitize_tree(root: Path) -> list[FileRename]:
    """Sanitize every filename under a directory, depth-first.

    Parameters
    ----------
    root : Path
        Directory to process.

    Returns
    -------
    list[FileRename]
        Renames performed, in the order they happened.

    Raises
    ------
    SanitationError
        If a filename sanitizes to nothing usable.
    FileExistsError
        If a sanitized name is already taken by another file.
    OSError
        If a directory cannot be listed or a file cannot be renamed.
    """
    renames: list[FileRename] = []

    for child in list_directory(root):
        if is_directory(child):
            renames.extend(sanitize_tree(Path(child.path)))
            continue

        sanitized = sanitize_filename(child.name)
        if sanitized == child.name:
            continue

        source = root / child.name
        if not sanitized.strip("."):
            raise SanitationError(str(source))

        target = root / sanitized
        if target.exists():
            raise FileExistsError(
                f"Cannot rename {source} to {target}: target already exists"
            )

        source.rename(target)
        logger.info("Renamed %s -> %s", source, target.name)
        renames.append(FileRename(source=source, target=target))

    return renames
