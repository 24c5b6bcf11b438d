"""Identifier construction for generated classes and members.

Class names upper-case only the first character of a directory name and
pass the rest through unchanged, so existing consumers keep resolving the
same names. Member names are derived from sanitized filenames.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

ROOT_COLLECTION_NAME = "ImageResources"
COLLECTION_SUFFIX = "Resources"

_NON_IDENTIFIER_CHARS = re.compile(r"[^A-Za-z0-9_$]")
_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

# static class fields may not use or shadow these names
_FORBIDDEN_STATIC_MEMBERS = frozenset(
    {"prototype", "constructor", "name", "length", "caller", "arguments"}
)


def upper_first(text: str) -> str:
    """Upper-case the first character of a string.

    Examples
    --------
    >>> upper_first("icons")
    'Icons'
    >>> upper_first("tabBar")
    'TabBar'
    >>> upper_first("")
    ''
    """
    return text[:1].upper() + text[1:]


def is_identifier(name: str) -> bool:
    """Check whether a name is a valid identifier in generated code."""
    return _IDENTIFIER.match(name) is not None


def collection_name(directory: Path, is_root: bool) -> str:
    """Build the class name for a directory.

    Parameters
    ----------
    directory : Path
        Directory the collection represents.
    is_root : bool
        Whether the directory is the scan root.

    Returns
    -------
    str
        ``ImageResources`` for the root, otherwise the basename with its
        first character upper-cased followed by ``Resources``.

    Examples
    --------
    >>> collection_name(Path("assets"), is_root=True)
    'ImageResources'
    >>> collection_name(Path("assets/icons"), is_root=False)
    'IconsResources'
    >>> collection_name(Path("assets/tab_bar"), is_root=False)
    'Tab_barResources'
    """
    if is_root:
        return ROOT_COLLECTION_NAME
    return upper_first(directory.name) + COLLECTION_SUFFIX


def variable_name(filename: str) -> str:
    """Build the static member name for a file.

    The extension is dropped and every character that cannot appear in an
    identifier becomes an underscore.

    Parameters
    ----------
    filename : str
        Sanitized filename.

    Returns
    -------
    str
        A valid static member name.

    Examples
    --------
    >>> variable_name("photo.png")
    'photo'
    >>> variable_name("icon.home.png")
    'icon_home'
    >>> variable_name("1st_place.png")
    '_1st_place'
    >>> variable_name("prototype.png")
    'prototype_'
    >>> variable_name("name.png")
    'name_'
    """
    stem, _ = os.path.splitext(filename)
    name = _NON_IDENTIFIER_CHARS.sub("_", stem)
    if not name or name[0].isdigit():
        name = f"_{name}"
    if name in _FORBIDDEN_STATIC_MEMBERS:
        name = f"{name}_"
    return name


def relative_resource_path(directory: Path, filename: str, base: Path) -> str:
    """Build the module path used to load a file from the generated module.

    Parameters
    ----------
    directory : Path
        Directory containing the file.
    filename : str
        Filename.
    base : Path
        Directory the generated module resolves paths against.

    Returns
    -------
    str
        Relative path with ``/`` separators, starting with ``./`` or ``../``.

    Examples
    --------
    >>> relative_resource_path(Path("/app/assets"), "photo.png", Path("/app/assets"))
    './photo.png'
    >>> relative_resource_path(Path("/app/assets/icons"), "home.png", Path("/app/src"))
    '../assets/icons/home.png'
    """
    relative = Path(os.path.relpath(directory, base)) / filename
    path = relative.as_posix()
    if not path.startswith(("./", "../")):
        path = f"./{path}"
    return path
