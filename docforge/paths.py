"""Relative link rules for pages written at different output depths.

Every page references the shared ``assets`` and ``images`` directories that sit
at the output root. A page at the root (the landing page) links them with
``./``; a page inside ``<out>/<source>/`` links them with ``../``. Archives rely
on the same convention, so the prefixes must never be made absolute. File and
source names are percent-encoded so characters such as ``#`` or ``?`` stay
part of the path.

Examples
--------
>>> OutputLayout(depth=1).asset_href("docforge.css")
'../assets/docforge.css'
>>> OutputLayout(depth=0).asset_href("docforge.css")
'./assets/docforge.css'
>>> OutputLayout(depth=1).image_href("pic.png")
'../images/pic.png'
>>> OutputLayout(depth=1).image_href("diagram #1.png")
'../images/diagram%20%231.png'
"""

from __future__ import annotations

import dataclasses as dc
from urllib.parse import quote

from ._constants import ASSETS_DIRNAME, IMAGES_DIRNAME

ROOT_DEPTH = 0
SOURCE_PAGE_DEPTH = 1


def relative_root(depth: int) -> str:
    """Return the prefix that leads from a page at ``depth`` to the output root."""
    if depth < 0:
        msg = f"Output depth must be non-negative, got {depth}"
        raise ValueError(msg)
    if depth == 0:
        return "./"
    return "../" * depth


@dc.dataclass(frozen=True, slots=True)
class OutputLayout:
    """Resolve shared asset and image links for a page at a given depth."""

    depth: int = SOURCE_PAGE_DEPTH

    @property
    def root(self) -> str:
        return relative_root(self.depth)

    @property
    def assets_prefix(self) -> str:
        return f"{self.root}{ASSETS_DIRNAME}/"

    @property
    def images_prefix(self) -> str:
        return f"{self.root}{IMAGES_DIRNAME}/"

    def asset_href(self, name: str) -> str:
        return f"{self.assets_prefix}{name}"

    def image_href(self, filename: str) -> str:
        return f"{self.images_prefix}{quote(filename)}"

    def source_href(self, name: str) -> str:
        """Return the link to the page directory of source ``name``."""
        return f"{self.root}{quote(name)}/"


__all__ = ["ROOT_DEPTH", "SOURCE_PAGE_DEPTH", "OutputLayout", "relative_root"]
