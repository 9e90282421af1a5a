"""Exception taxonomy for docforge builds.

Every failure a build can hit is fatal: the tool is a batch generator, so
errors propagate to :func:`docforge.cli.main`, which prints the message and
exits non-zero. Lookup failures carry the names that were available so the
message tells the author what to pick instead.
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc


def _format_names(names: cabc.Iterable[str]) -> str:
    listed = ", ".join(sorted(names, key=str.casefold))
    return listed or "(none)"


class DocForgeError(RuntimeError):
    """Base class for every error raised by a docforge build."""


class UsageError(DocForgeError):
    """Raised when command-line options contradict each other."""


class ConfigurationError(DocForgeError):
    """Raised when the site configuration file cannot be loaded."""


class WorkbookError(DocForgeError):
    """Raised when a source workbook cannot be read."""


class NoPublishableSourcesError(DocForgeError):
    """Raised when discovery finds no publishable source at all."""


class SourceNotFoundError(DocForgeError):
    """Raised when a named source is not among the publishable sources."""

    def __init__(self, name: str, available: cabc.Iterable[str]) -> None:
        self.name = name
        self.available = sorted(available, key=str.casefold)
        msg = f"Unknown source '{name}'. Available sources: {_format_names(self.available)}"
        super().__init__(msg)


class NoDefaultSourceError(DocForgeError):
    """Raised when no source was named and the configured default is missing."""

    def __init__(self, default: str | None, available: cabc.Iterable[str]) -> None:
        self.default = default
        self.available = sorted(available, key=str.casefold)
        if default:
            reason = f"Default source '{default}' is not publishable."
        else:
            reason = "No default source is configured."
        msg = f"{reason} Available sources: {_format_names(self.available)}"
        super().__init__(msg)


class EmptySourceError(DocForgeError):
    """Raised when a source contains no data rows."""


class EmptyContentError(DocForgeError):
    """Raised when no row of a source survives normalization."""


class InvalidImageReferenceError(DocForgeError):
    """Raised when an image item names a path or a file that does not exist."""


__all__ = [
    "ConfigurationError",
    "DocForgeError",
    "EmptyContentError",
    "EmptySourceError",
    "InvalidImageReferenceError",
    "NoDefaultSourceError",
    "NoPublishableSourcesError",
    "SourceNotFoundError",
    "UsageError",
    "WorkbookError",
]
