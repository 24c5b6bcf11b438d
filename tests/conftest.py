"""Root pytest configuration for imgres tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create Click test runner."""
    return CliRunner()


@pytest.fixture
def image_tree(tmp_path: Path) -> Path:
    """Create a small image directory tree.

    Layout::

        images/
            photo.png
            photo@2x.png
            icons/
                home.png
                tabs/
                    feed.png
            empty/

    Parameters
    ----------
    tmp_path : Path
        Pytest's tmp_path fixture

    Returns
    -------
    Path
        Path to the images directory
    """
    root = tmp_path / "images"
    (root / "icons" / "tabs").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "photo.png").write_bytes(b"png")
    (root / "photo@2x.png").write_bytes(b"png")
    (root / "icons" / "home.png").write_bytes(b"png")
    (root / "icons" / "tabs" / "feed.png").write_bytes(b"png")
    return root
