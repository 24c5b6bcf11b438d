"""Configuration file loading."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from imgres.errors import ConfigurationError

# read stays relative to the output directory, so it is not rebased here
_PATH_KEYS = ("dir", "out")


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Load generator options from a YAML file.

    Relative ``dir`` and ``out`` values are resolved against the
    directory containing the file.

    Parameters
    ----------
    path : Path
        Path to the YAML file.

    Returns
    -------
    dict[str, Any]
        Option values found in the file.

    Raises
    ------
    ConfigurationError
        If the file is not valid YAML or its top level is not a mapping.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file {path} must contain a mapping, got {type(data).__name__}"
        )

    for key in _PATH_KEYS:
        value = data.get(key)
        if value is not None and not Path(value).is_absolute():
            data[key] = path.parent / value

    return data


def merge_options(
    file_values: Mapping[str, Any], cli_values: Mapping[str, Any]
) -> dict[str, Any]:
    """Overlay command-line values on config file values.

    Parameters
    ----------
    file_values : Mapping[str, Any]
        Values loaded from a config file.
    cli_values : Mapping[str, Any]
        Values given on the command line; ``None`` means not given.

    Returns
    -------
    dict[str, Any]
        Merged option values.

    Examples
    --------
    >>> merge_options({"dir": "a", "ts": True}, {"dir": "b", "ts": None})
    {'dir': 'b', 'ts': True}
    """
    merged = dict(file_values)
    for key, value in cli_values.items():
        if value is not None:
            merged[key] = value
    return merged
