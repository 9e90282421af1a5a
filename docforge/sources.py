"""Discover publishable source workbooks and pick the ones to build.

A source is publishable when it is an ``.xlsx`` file in the source directory,
its name does not contain the work-in-progress marker, and it is not a lock
file left behind by a spreadsheet editor (``~$`` prefix).

Examples
--------
>>> is_publishable("handbook.xlsx", wip_marker="_wip")
True
>>> is_publishable("handbook_WIP.xlsx", wip_marker="_wip")
False
>>> is_publishable("~$handbook.xlsx", wip_marker="_wip")
False
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from ._constants import DEFAULT_WIP_MARKER, LOCK_FILE_PREFIX, SOURCE_SUFFIX
from .errors import (
    NoDefaultSourceError,
    NoPublishableSourcesError,
    SourceNotFoundError,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class Source:
    """A publishable workbook and the name its output is published under."""

    name: str
    path: Path


def is_publishable(filename: str, *, wip_marker: str = DEFAULT_WIP_MARKER) -> bool:
    """Return True when ``filename`` names a workbook that may be published."""
    if filename.startswith(LOCK_FILE_PREFIX):
        return False
    if not filename.lower().endswith(SOURCE_SUFFIX):
        return False
    return not (wip_marker and wip_marker.lower() in filename.lower())


def discover_sources(
    source_dir: Path, *, wip_marker: str = DEFAULT_WIP_MARKER
) -> list[Source]:
    """Return the publishable sources in ``source_dir`` sorted by name.

    Raises
    ------
    NoPublishableSourcesError
        If the directory is missing or holds no publishable workbook.
    """
    if not source_dir.is_dir():
        msg = f"Source directory '{source_dir}' does not exist."
        raise NoPublishableSourcesError(msg)

    sources: list[Source] = []
    for path in source_dir.iterdir():
        if not path.is_file():
            continue
        if not is_publishable(path.name, wip_marker=wip_marker):
            logger.debug("skipping unpublishable file %s", path.name)
            continue
        sources.append(Source(name=path.stem, path=path))

    if not sources:
        msg = f"No publishable {SOURCE_SUFFIX} sources found in '{source_dir}'."
        raise NoPublishableSourcesError(msg)
    return sorted(sources, key=lambda source: (source.name.casefold(), source.name))


def find_source(sources: cabc.Sequence[Source], name: str) -> Source:
    """Return the source called ``name``; a trailing ``.xlsx`` is accepted."""
    wanted = name.strip()
    if wanted.lower().endswith(SOURCE_SUFFIX):
        wanted = wanted[: -len(SOURCE_SUFFIX)]
    for source in sources:
        if source.name == wanted:
            return source
    raise SourceNotFoundError(name, [source.name for source in sources])


def select_sources(
    sources: cabc.Sequence[Source],
    *,
    name: str | None = None,
    build_all: bool = False,
    default_source: str | None = None,
) -> list[Source]:
    """Apply the selection rules: a named source, every source, or the default.

    Raises
    ------
    SourceNotFoundError
        If ``name`` is given but not publishable.
    NoDefaultSourceError
        If neither ``name`` nor ``build_all`` is given and ``default_source``
        is unset or not publishable.
    """
    if build_all:
        return list(sources)
    if name:
        return [find_source(sources, name)]
    if default_source:
        for source in sources:
            if source.name == default_source:
                return [source]
    raise NoDefaultSourceError(default_source, [source.name for source in sources])


__all__ = [
    "Source",
    "discover_sources",
    "find_source",
    "is_publishable",
    "select_sources",
]
