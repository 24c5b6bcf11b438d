"""Generator options model for imgres."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from imgres.errors import ConfigurationError

REQUIRED_OPTIONS = ("dir", "out")

USAGE = """\
  --dir <path>     Root directory to scan for images (required)
  --out <path>     Output file to write (required)
  --read <path>    Prefix for resource paths, relative to the output file's directory
  --ts             Emit TypeScript declarations typed as ImageURISource
  --config <file>  YAML file providing any of the options above
  --verbose        Log debug output"""


class GeneratorOptions(BaseModel):
    """Options for one generation run.

    Built once at startup and passed explicitly to every step that needs
    it. Instances are immutable.

    Parameters
    ----------
    dir : Path
        Root directory to scan.
    out : Path
        Output file path.
    read : Path | None
        Optional prefix, relative to the output file's directory, used as
        the base when computing resource paths.
    ts : bool
        Whether to emit typed declarations.

    Examples
    --------
    >>> options = GeneratorOptions(dir="assets", out="src/images.ts")
    >>> options.ts
    False
    >>> options.resource_base
    PosixPath('src')
    >>> GeneratorOptions(dir="assets", out="src/images.ts", read="..").resource_base
    PosixPath('src/..')
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    dir: Path = Field(description="Root directory to scan")
    out: Path = Field(description="Output file path")
    read: Path | None = Field(default=None, description="Resource path prefix")
    ts: bool = Field(default=False, description="Emit typed declarations")

    @property
    def resource_base(self) -> Path:
        """Directory that generated resource paths are relative to."""
        base = self.out.parent
        if self.read is not None:
            base = base / self.read
        return base


def build_options(values: Mapping[str, Any]) -> GeneratorOptions:
    """Validate raw option values and build a GeneratorOptions.

    Parameters
    ----------
    values : Mapping[str, Any]
        Option values keyed by option name. ``None`` counts as missing.

    Returns
    -------
    GeneratorOptions
        Validated options.

    Raises
    ------
    ConfigurationError
        If ``dir`` or ``out`` is missing, or any value is invalid. The
        message includes the usage text.
    """
    present = {key: value for key, value in values.items() if value is not None}
    missing = [key for key in REQUIRED_OPTIONS if key not in present]
    if missing:
        names = ", ".join(f"--{key}" for key in missing)
        raise ConfigurationError(f"Missing non-optional options: {names}", USAGE)

    try:
        return GeneratorOptions(**present)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid options: {e}", USAGE) from e
