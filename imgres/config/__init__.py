"""Configuration system for imgres.

Provides the generator options model, YAML config file loading and
logging configuration.
"""

from __future__ import annotations

from imgres.config.loader import load_yaml_file, merge_options
from imgres.config.logging import LoggingConfig, configure_logging
from imgres.config.options import USAGE, GeneratorOptions, build_options

__all__ = [
    # Options
    "GeneratorOptions",
    "build_options",
    "USAGE",
    # Loading
    "load_yaml_file",
    "merge_options",
    # Logging
    "LoggingConfig",
    "configure_logging",
]
