"""imgres - Typed image resource accessors for React Native projects.

Scans a directory of image assets, sanitizes their filenames and generates
a module exporting one class per directory with a static member per image.
"""

from __future__ import annotations

__version__ = "0.1.0"
