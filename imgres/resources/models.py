"""Data models for image resources.

A ResourceEntry is one image file; a ResourceCollection is the set of
entries directly inside one directory and becomes one generated class.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from imgres.resources.naming import relative_resource_path, variable_name


class ResourceEntry(BaseModel):
    """A single image file referenced from generated code.

    Attributes
    ----------
    directory : Path
        Absolute path of the directory containing the file.
    output_dir : Path
        Directory the generated module resolves resource paths against.
    filename : str
        Filename inside ``directory``.

    Examples
    --------
    >>> entry = ResourceEntry(
    ...     directory=Path("/app/assets/icons"),
    ...     output_dir=Path("/app/assets"),
    ...     filename="home.png",
    ... )
    >>> entry.variable_name
    'home'
    >>> entry.relative_resource_path
    './icons/home.png'
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    directory: Path
    output_dir: Path
    filename: str

    @property
    def path(self) -> Path:
        """Full path of the file."""
        return self.directory / self.filename

    @property
    def variable_name(self) -> str:
        """Static member name for the file."""
        return variable_name(self.filename)

    @property
    def relative_resource_path(self) -> str:
        """Module path passed to ``require``."""
        return relative_resource_path(self.directory, self.filename, self.output_dir)


class ResourceCollection(BaseModel):
    """Entries of one directory, rendered as one class.

    Attributes
    ----------
    name : str
        Generated class name.
    directory : Path
        Directory the collection was built from.
    entries : list[ResourceEntry]
        Entries in filesystem enumeration order.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    directory: Path
    entries: list[ResourceEntry] = Field(default_factory=list)


class FileRename(BaseModel):
    """A rename performed by the filename sanitizer."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    source: Path
    target: Path
