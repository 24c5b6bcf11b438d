"""Image resource discovery.

Sanitizes asset filenames and collects them into one resource collection
per directory.
"""

from __future__ import annotations

from imgres.resources.collector import (
    DENSITY_MARKER,
    check_name_collisions,
    collect_collections,
    collect_resources,
)
from imgres.resources.models import FileRename, ResourceCollection, ResourceEntry
from imgres.resources.naming import (
    ROOT_COLLECTION_NAME,
    collection_name,
    relative_resource_path,
    variable_name,
)
from imgres.resources.sanitizer import sanitize_filename, sanitize_tree

__all__ = [
    # Models
    "ResourceEntry",
    "ResourceCollection",
    "FileRename",
    # Naming
    "ROOT_COLLECTION_NAME",
    "collection_name",
    "variable_name",
    "relative_resource_path",
    # Sanitation
    "sanitize_filename",
    "sanitize_tree",
    # Collection
    "DENSITY_MARKER",
    "collect_collections",
    "collect_resources",
    "check_name_collisions",
]
