"""Group normalized items into chapters and sections.

Chapters and sections are ordered by different rules, and both rules are part
of the output contract:

* chapters follow the order in which they first appear in the source rows;
* sections within a chapter are sorted alphabetically (case-insensitive);
* items within a section are sorted by ``order``, ties keeping row order.

Anchor ids are allocated while the document is assembled, and the same ids are
written into the table of contents, so sidebar links and in-page anchors can
never disagree.

Example
-------
>>> from docforge.generator.normalizer import normalize_rows
>>> items = normalize_rows([
...     {"Chapter": "Zeta", "Section": "Zulu", "Type": "text", "Body": "z"},
...     {"Chapter": "Alpha", "Section": "One", "Type": "text", "Body": "a"},
...     {"Chapter": "Zeta", "Section": "Beta", "Type": "text", "Body": "b"},
... ])
>>> model = build_document(items)
>>> [chapter.name for chapter in model.document.chapters]
['Zeta', 'Alpha']
>>> [section.name for section in model.document.chapters[0].sections]
['Beta', 'Zulu']
"""

from __future__ import annotations

import typing as typ

from .identifiers import IdentifierRegistry
from .models import (
    Chapter,
    ContentItem,
    Document,
    DocumentModel,
    Section,
    TocChapter,
    TocSection,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc


def item_sort_key(item: ContentItem) -> tuple[int, int]:
    """Order items inside a section by ``order``, then by source row."""
    return (item.order, item.row_index)


def section_sort_key(name: str) -> tuple[str, str]:
    """Order sections inside a chapter alphabetically, ignoring case."""
    return (name.casefold(), name)


def chapters_in_appearance_order(
    items: cabc.Iterable[ContentItem],
) -> dict[str, dict[str, list[ContentItem]]]:
    """Group items by chapter and section, keeping first-seen chapter order."""
    grouped: dict[str, dict[str, list[ContentItem]]] = {}
    for item in sorted(items, key=lambda entry: entry.row_index):
        sections = grouped.setdefault(item.chapter, {})
        sections.setdefault(item.section, []).append(item)
    return grouped


def build_document(
    items: cabc.Iterable[ContentItem],
    registry: IdentifierRegistry | None = None,
) -> DocumentModel:
    """Build the document and its table of contents from ``items``.

    Parameters
    ----------
    items : Iterable[ContentItem]
        Normalized items; ``row_index`` provides the source order.
    registry : IdentifierRegistry, optional
        Registry used to allocate anchor ids. A fresh registry is created when
        omitted so ids never leak between builds.

    Returns
    -------
    DocumentModel
        The ordered document and a table of contents sharing its anchor ids.
    """
    registry = registry if registry is not None else IdentifierRegistry()
    chapters: list[Chapter] = []
    toc: list[TocChapter] = []

    for chapter_name, sections_by_name in chapters_in_appearance_order(items).items():
        chapter_anchor = registry.chapter_id(chapter_name)
        sections: list[Section] = []
        toc_sections: list[TocSection] = []
        for section_name in sorted(sections_by_name, key=section_sort_key):
            section_items = sorted(sections_by_name[section_name], key=item_sort_key)
            # The first item by order decides; conflicting flags are not reported.
            collapsed = section_items[0].collapsed
            anchor = registry.section_id(chapter_name, section_name)
            sections.append(
                Section(
                    name=section_name,
                    anchor=anchor,
                    collapsed=collapsed,
                    items=section_items,
                )
            )
            toc_sections.append(
                TocSection(name=section_name, anchor=anchor, collapsed=collapsed)
            )
        chapters.append(
            Chapter(name=chapter_name, anchor=chapter_anchor, sections=sections)
        )
        toc.append(
            TocChapter(
                name=chapter_name, anchor=chapter_anchor, sections=tuple(toc_sections)
            )
        )

    return DocumentModel(document=Document(chapters=chapters), toc=toc)


__all__ = [
    "build_document",
    "chapters_in_appearance_order",
    "item_sort_key",
    "section_sort_key",
]
