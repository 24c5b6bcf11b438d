"""End-to-end resource module generation."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

from imgres.config.options import GeneratorOptions
from imgres.generation.renderers import get_renderer, write_document
from imgres.resources.collector import check_name_collisions, collect_resources
from imgres.resources.models import FileRename, ResourceCollection
from imgres.resources.sanitizer import sanitize_tree

logger = logging.getLogger(__name__)


class GenerationResult(BaseModel):
    """Outcome of one generation run.

    Attributes
    ----------
    renames : list[FileRename]
        Files renamed by the sanitizer.
    collections : list[ResourceCollection]
        Collections rendered, in output order.
    content : str
        Generated module text.
    """

    model_config = ConfigDict(frozen=True)

    renames: list[FileRename]
    collections: list[ResourceCollection]
    content: str


def generate(options: GeneratorOptions) -> GenerationResult:
    """Sanitize, collect, render and write the resource module.

    Steps run strictly in order and the first failure aborts the run.
    Files renamed before a failure stay renamed.

    Parameters
    ----------
    options : GeneratorOptions
        Options of the run.

    Returns
    -------
    GenerationResult
        Renames, collections and the written content.

    Raises
    ------
    NameCollisionError
        If generated names clash; nothing is written.
    OSError
        If any filesystem operation fails.
    """
    renames = sanitize_tree(options.dir)
    logger.debug("Sanitized %d filename(s) under %s", len(renames), options.dir)

    collections = collect_resources(options)
    check_name_collisions(collections)

    content = get_renderer(options.ts).render(collections)
    write_document(options.out, content)
    logger.debug("Wrote %d class(es) to %s", len(collections), options.out)

    return GenerationResult(renames=renames, collections=collections, content=content)
