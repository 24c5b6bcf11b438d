"""Command-line interface.

Provides the resource generation command.
"""

from __future__ import annotations

from imgres.cli.main import cli

__all__ = ["cli"]
