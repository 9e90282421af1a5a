"""Shared dataclasses used by the document generation pipeline."""

from __future__ import annotations

import dataclasses as dc
import enum


class ContentKind(enum.StrEnum):
    """Closed set of content block kinds a row can describe."""

    TEXT = "text"
    CODE = "code"
    NOTE = "note"
    IMAGE = "image"

    @classmethod
    def from_label(cls, label: str) -> ContentKind:
        """Return the kind named by ``label``.

        Unmapped labels resolve to :attr:`TEXT`, so a mistyped ``Type`` cell
        still renders as readable prose instead of failing the build.

        Examples
        --------
        >>> ContentKind.from_label(" Code ")
        <ContentKind.CODE: 'code'>
        >>> ContentKind.from_label("warning")
        <ContentKind.TEXT: 'text'>
        """
        try:
            return cls(label.strip().lower())
        except ValueError:
            return cls.TEXT


@dc.dataclass(frozen=True, slots=True)
class ContentItem:
    """One normalized content row.

    Attributes
    ----------
    chapter : str
        Trimmed chapter name.
    section : str
        Trimmed section name.
    order : int
        Position within the section; ``0`` when the cell was empty or invalid.
    kind : ContentKind
        Rendering rule for ``body``.
    type_label : str
        Lowercased ``Type`` cell as written by the author.
    language : str
        Lowercased highlighting language; only meaningful for code items.
    body : str
        Prose, source code, or a bare image filename depending on ``kind``.
    collapsed : bool
        Whether the enclosing section should render as a closed disclosure.
    row_index : int
        Zero-based position of the row in the source, used to break ties.
    """

    chapter: str
    section: str
    order: int
    kind: ContentKind
    type_label: str
    language: str
    body: str
    collapsed: bool
    row_index: int


@dc.dataclass(slots=True)
class Section:
    """A named group of items inside a chapter."""

    name: str
    anchor: str
    collapsed: bool
    items: list[ContentItem]


@dc.dataclass(slots=True)
class Chapter:
    """A top-level group of sections."""

    name: str
    anchor: str
    sections: list[Section]


@dc.dataclass(slots=True)
class Document:
    """Every chapter of one source, in reading order."""

    chapters: list[Chapter]

    def items(self) -> list[ContentItem]:
        """Return every item in document order."""
        return [
            item
            for chapter in self.chapters
            for section in chapter.sections
            for item in section.items
        ]

    @property
    def section_count(self) -> int:
        return sum(len(chapter.sections) for chapter in self.chapters)


@dc.dataclass(frozen=True, slots=True)
class TocSection:
    """Sidebar entry for a section."""

    name: str
    anchor: str
    collapsed: bool


@dc.dataclass(frozen=True, slots=True)
class TocChapter:
    """Sidebar entry for a chapter and its sections."""

    name: str
    anchor: str
    sections: tuple[TocSection, ...]


@dc.dataclass(slots=True)
class DocumentModel:
    """A document together with the table of contents built alongside it."""

    document: Document
    toc: list[TocChapter]


__all__ = [
    "Chapter",
    "ContentItem",
    "ContentKind",
    "Document",
    "DocumentModel",
    "Section",
    "TocChapter",
    "TocSection",
]
