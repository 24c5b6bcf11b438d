"""Code generation for image resource modules."""

from __future__ import annotations

from imgres.generation.pipeline import GenerationResult, generate
from imgres.generation.renderers import (
    JavaScriptRenderer,
    ResourceRenderer,
    TypeScriptRenderer,
    get_renderer,
    write_document,
)

__all__ = [
    "GenerationResult",
    "generate",
    "ResourceRenderer",
    "JavaScriptRenderer",
    "TypeScriptRenderer",
    "get_renderer",
    "write_document",
]
