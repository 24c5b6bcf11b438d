"""CLI entry point for imgres package.

Allows running via: python -m imgres
"""

from __future__ import annotations

from imgres.cli.main import cli

if __name__ == "__main__":
    cli()
