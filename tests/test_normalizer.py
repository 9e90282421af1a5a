"""Unit tests for row normalization.

These tests cover the required-field drop rule, lenient parsing of ``Order``
and ``Collapsed``, the text fallback for unknown types, and the distinction
between an empty source and a source whose rows are all unusable.
"""

from __future__ import annotations

import pytest

from docforge.errors import EmptyContentError, EmptySourceError
from docforge.generator.models import ContentKind
from docforge.generator.normalizer import normalize_rows, parse_collapsed, parse_order


def _row(**overrides: object) -> dict[str, object]:
    row: dict[str, object] = {
        "Chapter": "Git",
        "Section": "Setup",
        "Order": 1,
        "Type": "text",
        "Lang": None,
        "Body": "Body",
        "Collapsed": None,
    }
    row.update(overrides)
    return row


@pytest.mark.parametrize("field", ["Chapter", "Section", "Type"])
@pytest.mark.parametrize("value", [None, "", "   "])
def test_rows_missing_required_fields_are_dropped(field: str, value: object) -> None:
    """Rows with an empty chapter, section, or type are skipped silently."""
    items = normalize_rows([_row(**{field: value}), _row(Body="kept")])
    assert [item.body for item in items] == ["kept"]


def test_values_are_trimmed_and_lowercased() -> None:
    """Names are trimmed; type and language are trimmed and lowercased."""
    (item,) = normalize_rows(
        [_row(Chapter="  Git ", Section=" Setup\t", Type=" CODE ", Lang=" Bash ")]
    )
    assert (item.chapter, item.section) == ("Git", "Setup")
    assert item.kind is ContentKind.CODE
    assert item.language == "bash"


def test_language_defaults_to_text() -> None:
    (item,) = normalize_rows([_row(Type="code", Lang=None)])
    assert item.language == "text"


def test_unknown_type_falls_back_to_text() -> None:
    """A mistyped type renders as prose but keeps the author's label."""
    (item,) = normalize_rows([_row(Type="Warnung")])
    assert item.kind is ContentKind.TEXT
    assert item.type_label == "warnung"


@pytest.mark.parametrize(
    ("value", "expected"),
    [(3, 3), (2.0, 2), ("7", 7), (" 4 ", 4), (None, 0), ("", 0), ("soon", 0), (1.5, 0)],
)
def test_parse_order(value: object, expected: int) -> None:
    assert parse_order(value) == expected


@pytest.mark.parametrize("value", ["1", "true", "TRUE", "yes", "Y", "ja", " Ja ", True, 1])
def test_truthy_collapsed_tokens(value: object) -> None:
    assert parse_collapsed(value) is True


@pytest.mark.parametrize("value", [None, "", "0", "no", "false", "nein", "x", False, 0])
def test_other_collapsed_values_are_false(value: object) -> None:
    assert parse_collapsed(value) is False


def test_row_order_is_recorded() -> None:
    """Surviving items keep their original row position for tie-breaking."""
    items = normalize_rows([_row(Body="a"), _row(Chapter=None), _row(Body="c")])
    assert [(item.body, item.row_index) for item in items] == [("a", 0), ("c", 2)]


def test_body_is_kept_verbatim() -> None:
    (item,) = normalize_rows([_row(Body="  indented\nline  ")])
    assert item.body == "  indented\nline  "


def test_zero_rows_raise_empty_source() -> None:
    with pytest.raises(EmptySourceError):
        normalize_rows([])


def test_rows_without_required_fields_raise_empty_content() -> None:
    """A source whose rows all lack required fields is not an empty page."""
    rows = [_row(Chapter=None), _row(Section=""), _row(Type="  ")]
    with pytest.raises(EmptyContentError):
        normalize_rows(rows)
