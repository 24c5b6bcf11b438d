"""Exception classes for imgres."""

from __future__ import annotations


class ImgresError(Exception):
    """Base exception for all imgres errors."""


class ConfigurationError(ImgresError):
    """Raised when generator options are missing or invalid.

    Parameters
    ----------
    message : str
        Error message.
    usage : str | None
        Usage text appended to the message so the user can see the
        accepted options.
    """

    def __init__(self, message: str, usage: str | None = None) -> None:
        self.message = message
        self.usage = usage
        if usage:
            message = f"{message}\nList of options:\n{usage}"
        super().__init__(message)


class NameCollisionError(ImgresError):
    """Raised when two generated identifiers would share a name.

    Parameters
    ----------
    name : str
        The colliding identifier.
    sources : list[str]
        Paths that produced the identifier.
    scope : str | None
        Enclosing class name for member collisions, None for class
        name collisions.
    """

    def __init__(
        self, name: str, sources: list[str], scope: str | None = None
    ) -> None:
        self.name = name
        self.sources = sources
        self.scope = scope
        where = f"member '{name}' in class {scope}" if scope else f"class {name}"
        super().__init__(
            f"Duplicate {where} generated from: {', '.join(sources)}"
        )


class SanitationError(ImgresError):
    """Raised when a filename has no usable sanitized form.

    Parameters
    ----------
    path : str
        File that could not be sanitized.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(
            f"Cannot sanitize {path}: no character of its name can be "
            "transliterated, rename it manually"
        )


class OutputEncodingError(ImgresError):
    """Raised when generated code cannot be encoded as UTF-8.

    This happens when a directory name is not valid UTF-8 on disk, since
    directory names flow into class names and module paths unchanged.
    """
