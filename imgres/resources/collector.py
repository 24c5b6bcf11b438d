"""Resource collection over a sanitized directory tree.

Builds one ResourceCollection per directory. Collections are returned in
post-order: every subdirectory's collections come before the collection
of the directory containing it.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from pathlib import Path

from imgres.config.options import GeneratorOptions
from imgres.errors import NameCollisionError
from imgres.resources.listing import is_directory, list_directory
from imgres.resources.models import ResourceCollection, ResourceEntry
from imgres.resources.naming import collection_name, is_identifier

logger = logging.getLogger(__name__)

# density variants such as icon@2x.png are resolved by the image loader
DENSITY_MARKER = "@"


def collect_collections(
    directory: Path, output_dir: Path, is_root: bool = True
) -> list[ResourceCollection]:
    """Collect resource entries under a directory.

    Subdirectories are visited one at a time in enumeration order. Each
    subdirectory contributes a collection even when it holds no files.

    Parameters
    ----------
    directory : Path
        Directory to collect.
    output_dir : Path
        Directory generated resource paths are relative to.
    is_root : bool
        Whether ``directory`` is the scan root.

    Returns
    -------
    list[ResourceCollection]
        Collections in post-order, ending with ``directory``'s own.

    Raises
    ------
    OSError
        If a directory cannot be listed.
    """
    result: list[ResourceCollection] = []
    entries: list[ResourceEntry] = []

    for child in list_directory(directory):
        if is_directory(child):
            result.extend(
                collect_collections(Path(child.path), output_dir, is_root=False)
            )
        elif DENSITY_MARKER not in child.name:
            entries.append(
                ResourceEntry(
                    directory=directory, output_dir=output_dir, filename=child.name
                )
            )

    name = collection_name(directory, is_root)
    if not is_identifier(name):
        logger.warning(
            "Class name %r from %r is not a valid identifier", name, str(directory)
        )
    logger.debug("Collected %d entries into %s", len(entries), name)

    result.append(ResourceCollection(name=name, directory=directory, entries=entries))
    return result


def collect_resources(options: GeneratorOptions) -> list[ResourceCollection]:
    """Collect resources for a generation run.

    Parameters
    ----------
    options : GeneratorOptions
        Options of the run.

    Returns
    -------
    list[ResourceCollection]
        Collections in post-order, the root collection last.
    """
    return collect_collections(
        options.dir.absolute(), options.resource_base.absolute(), is_root=True
    )


def check_name_collisions(collections: list[ResourceCollection]) -> None:
    """Fail when generated class or member names would clash.

    Parameters
    ----------
    collections : list[ResourceCollection]
        Collections to check.

    Raises
    ------
    NameCollisionError
        If two collections share a class name, or two entries of one
        collection share a member name.
    """
    class_sources: dict[str, list[str]] = defaultdict(list)
    for collection in collections:
        class_sources[collection.name].append(str(collection.directory))

        member_sources: dict[str, list[str]] = defaultdict(list)
        for entry in collection.entries:
            member_sources[entry.variable_name].append(str(entry.path))
        for member, sources in member_sources.items():
            if len(sources) > 1:
                raise NameCollisionError(member, sources, scope=collection.name)

    for name, sources in class_sources.items():
        if len(sources) > 1:
            raise NameCollisionError(name, sources)
