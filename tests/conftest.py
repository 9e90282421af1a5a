"""Shared fixtures for docforge tests.

Workbooks are written with openpyxl into ``tmp_path`` so every test reads real
``.xlsx`` files through the same ingestion path the CLI uses.
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ
from pathlib import Path

import openpyxl
import pytest

from docforge.config import SiteConfig, ThemeConfig

HEADER = ("Chapter", "Section", "Order", "Type", "Lang", "Body", "Collapsed")

WorkbookWriter = cabc.Callable[..., Path]


def write_workbook(
    path: Path,
    rows: cabc.Iterable[cabc.Sequence[object]],
    *,
    header: cabc.Sequence[str] = HEADER,
    sheet_title: str = "Content",
) -> Path:
    """Write ``rows`` below ``header`` into a new workbook at ``path``."""
    workbook = openpyxl.Workbook()
    sheet = workbook.active
    sheet.title = sheet_title
    sheet.append(list(header))
    for row in rows:
        sheet.append(list(row))
    path.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(path)
    return path


@pytest.fixture
def git_rows() -> list[tuple[object, ...]]:
    """Return the rows of the small Git guide used across tests."""
    return [
        ("Git", "Setup", 1, "text", "", "Install git first.", False),
        ("Git", "Setup", 2, "code", "bash", "git init", False),
        ("Git", "Branching", 1, "note", "", "Careful with force-push.", True),
    ]


@pytest.fixture
def site_config(tmp_path: Path) -> SiteConfig:
    """Build a site configuration rooted in a per-test directory."""
    source_dir = tmp_path / "sources"
    image_dir = tmp_path / "images"
    source_dir.mkdir()
    image_dir.mkdir()
    return SiteConfig(
        source_dir=source_dir,
        image_dir=image_dir,
        output_dir=tmp_path / "out",
        default_source="git-guide",
        pygments_style="monokai",
        theme=ThemeConfig(site_name="Fixture", doc_label="Docs"),
    )


@pytest.fixture
def workbook_writer(site_config: SiteConfig) -> WorkbookWriter:
    """Return a helper writing ``<name>.xlsx`` into the source directory."""

    def _write(name: str, rows: cabc.Iterable[cabc.Sequence[object]], **kwargs: typ.Any) -> Path:
        return write_workbook(site_config.source_dir / f"{name}.xlsx", rows, **kwargs)

    return _write
