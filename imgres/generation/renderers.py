"""Resource module renderers.

This module provides the base renderer interface and the two output
dialects: untyped declarations (``JavaScriptRenderer``) and declarations
typed as ``ImageURISource`` (``TypeScriptRenderer``).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from imgres.errors import OutputEncodingError

if TYPE_CHECKING:
    from imgres.resources.models import ResourceCollection, ResourceEntry

LINTER_HEADER = ("/* eslint:disable */", "/* tslint:disable */")
IMAGE_SOURCE_TYPE = "ImageURISource"
TYPE_IMPORT = f'import {{{IMAGE_SOURCE_TYPE}}} from "react-native";'


class ResourceRenderer(ABC):
    """Base class for resource module renderers.

    Subclasses decide the header lines and the form of each member
    declaration; class layout is shared.

    Examples
    --------
    >>> from imgres.generation.renderers import ResourceRenderer
    >>> class FlowRenderer(ResourceRenderer):
    ...     def render_entry(self, entry):
    ...         return f'  static {entry.variable_name} = require("...");'
    """

    def header(self) -> list[str]:
        """Lines placed at the top of the document."""
        return list(LINTER_HEADER)

    @abstractmethod
    def render_entry(self, entry: ResourceEntry) -> str:
        """Render one static member declaration.

        Parameters
        ----------
        entry : ResourceEntry
            Entry to declare.

        Returns
        -------
        str
            Indented declaration line.
        """
        ...

    def render_collection(self, collection: ResourceCollection) -> str:
        """Render one class declaration.

        Parameters
        ----------
        collection : ResourceCollection
            Collection to declare.

        Returns
        -------
        str
            Class declaration, members in entry order.
        """
        members = "\n".join(self.render_entry(entry) for entry in collection.entries)
        return f"export class {collection.name} {{\n{members}\n}}"

    def render(self, collections: Sequence[ResourceCollection]) -> str:
        """Render the complete module.

        Parameters
        ----------
        collections : Sequence[ResourceCollection]
            Collections in output order.

        Returns
        -------
        str
            Header followed by one class per collection, each separated
            by a blank line.
        """
        content = "\n".join(self.header())
        for collection in collections:
            content += "\n\n" + self.render_collection(collection)
        return content


class JavaScriptRenderer(ResourceRenderer):
    """Renderer emitting untyped static members.

    Examples
    --------
    >>> from pathlib import Path
    >>> from imgres.resources.models import ResourceEntry
    >>> entry = ResourceEntry(
    ...     directory=Path("/a"), output_dir=Path("/a"), filename="photo.png"
    ... )
    >>> JavaScriptRenderer().render_entry(entry)
    '  static photo = require("./photo.png");'
    """

    def render_entry(self, entry: ResourceEntry) -> str:
        """Render an untyped static member."""
        return (
            f"  static {entry.variable_name} = "
            f'require("{entry.relative_resource_path}");'
        )


class TypeScriptRenderer(ResourceRenderer):
    """Renderer emitting readonly members typed as ``ImageURISource``.

    Examples
    --------
    >>> from pathlib import Path
    >>> from imgres.resources.models import ResourceEntry
    >>> entry = ResourceEntry(
    ...     directory=Path("/a"), output_dir=Path("/a"), filename="photo.png"
    ... )
    >>> TypeScriptRenderer().render_entry(entry)
    '  static readonly photo: ImageURISource = require("./photo.png");'
    """

    def header(self) -> list[str]:
        """Linter header plus the type import."""
        return [*super().header(), TYPE_IMPORT]

    def render_entry(self, entry: ResourceEntry) -> str:
        """Render a typed readonly static member."""
        return (
            f"  static readonly {entry.variable_name}: {IMAGE_SOURCE_TYPE} = "
            f'require("{entry.relative_resource_path}");'
        )


def get_renderer(ts: bool) -> ResourceRenderer:
    """Select the renderer for the output dialect.

    Parameters
    ----------
    ts : bool
        Whether typed declarations were requested.

    Returns
    -------
    ResourceRenderer
        ``TypeScriptRenderer`` when ``ts`` is set, else ``JavaScriptRenderer``.
    """
    return TypeScriptRenderer() if ts else JavaScriptRenderer()


def write_document(path: Path, content: str) -> None:
    """Write the generated module, replacing any existing file.

    The content is encoded before the file is opened, so an existing
    file is left untouched when encoding fails.

    Raises
    ------
    OutputEncodingError
        If the content holds characters from undecodable directory names.
    """
    try:
        data = content.encode("utf-8")
    except UnicodeEncodeError as e:
        bad = e.object[e.start : e.end].encode("utf-8", "surrogateescape")
        raise OutputEncodingError(
            f"Generated code contains bytes {bad!r} that are not valid UTF-8; "
            "rename the directory containing them"
        ) from e
    path.write_bytes(data)
