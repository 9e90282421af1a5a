r"""Turn raw workbook rows into validated content items.

Rows missing a chapter, section, or type are dropped; every other cell is
coerced leniently (``Order`` defaults to ``0``, ``Collapsed`` is false unless
it holds one of the truthy tokens).

Example
-------
>>> items = normalize_rows([
...     {"Chapter": " Git ", "Section": "Setup", "Order": "2", "Type": "CODE",
...      "Lang": "Bash", "Body": "git init", "Collapsed": "Ja"},
... ])
>>> items[0].chapter, items[0].order, items[0].language, items[0].collapsed
('Git', 2, 'bash', True)
"""

from __future__ import annotations

import typing as typ

from docforge._constants import TRUTHY_TOKENS
from docforge.errors import EmptyContentError, EmptySourceError

from .models import ContentItem, ContentKind

if typ.TYPE_CHECKING:
    import collections.abc as cabc

DEFAULT_LANGUAGE = "text"


def _cell_text(value: object) -> str:
    """Return a cell as trimmed text; integral floats lose their ``.0``."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def _body_text(value: object) -> str:
    """Return text bodies verbatim; other cell values are converted like headers."""
    if isinstance(value, str):
        return value
    return _cell_text(value)


def parse_order(value: object) -> int:
    """Return ``value`` as an integer order, or ``0`` when it is not numeric.

    Examples
    --------
    >>> parse_order(3.0), parse_order(" 7 "), parse_order("later"), parse_order(None)
    (3, 7, 0, 0)
    """
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else 0
    try:
        return int(_cell_text(value))
    except ValueError:
        return 0


def parse_collapsed(value: object) -> bool:
    """Return True when ``value`` is one of the truthy tokens (or a true bool)."""
    if isinstance(value, bool):
        return value
    return _cell_text(value).lower() in TRUTHY_TOKENS


def normalize_row(row: cabc.Mapping[str, object], row_index: int) -> ContentItem | None:
    """Return the content item for ``row`` or None when a required cell is empty."""
    chapter = _cell_text(row.get("Chapter"))
    section = _cell_text(row.get("Section"))
    type_label = _cell_text(row.get("Type")).lower()
    if not (chapter and section and type_label):
        return None
    return ContentItem(
        chapter=chapter,
        section=section,
        order=parse_order(row.get("Order")),
        kind=ContentKind.from_label(type_label),
        type_label=type_label,
        language=_cell_text(row.get("Lang")).lower() or DEFAULT_LANGUAGE,
        body=_body_text(row.get("Body")),
        collapsed=parse_collapsed(row.get("Collapsed")),
        row_index=row_index,
    )


def normalize_rows(rows: cabc.Sequence[cabc.Mapping[str, object]]) -> list[ContentItem]:
    """Normalize ``rows`` into content items, preserving their order.

    Raises
    ------
    EmptySourceError
        If ``rows`` is empty.
    EmptyContentError
        If no row carries a chapter, section, and type.
    """
    if not rows:
        msg = "The source contains no data rows."
        raise EmptySourceError(msg)

    items: list[ContentItem] = []
    for index, row in enumerate(rows):
        item = normalize_row(row, index)
        if item is not None:
            items.append(item)

    if not items:
        msg = (
            f"None of the {len(rows)} row(s) has a Chapter, Section, and Type; "
            "nothing to render."
        )
        raise EmptyContentError(msg)
    return items


__all__ = [
    "DEFAULT_LANGUAGE",
    "normalize_row",
    "normalize_rows",
    "parse_collapsed",
    "parse_order",
]
