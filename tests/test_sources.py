"""Tests for source discovery and selection."""

from __future__ import annotations

import typing as typ

import pytest

from docforge.errors import (
    NoDefaultSourceError,
    NoPublishableSourcesError,
    SourceNotFoundError,
)
from docforge.sources import Source, discover_sources, is_publishable, select_sources

if typ.TYPE_CHECKING:
    from pathlib import Path


def _touch(directory: Path, *names: str) -> None:
    for name in names:
        (directory / name).write_bytes(b"")


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("handbook.xlsx", True),
        ("Handbook.XLSX", True),
        ("handbook_wip.xlsx", False),
        ("handbook_WIP_v2.xlsx", False),
        ("~$handbook.xlsx", False),
        ("handbook.csv", False),
        ("notes.txt", False),
    ],
)
def test_is_publishable(filename: str, expected: bool) -> None:
    assert is_publishable(filename, wip_marker="_wip") is expected


def test_custom_wip_marker() -> None:
    assert is_publishable("draft-guide.xlsx", wip_marker="draft") is False
    assert is_publishable("guide_wip.xlsx", wip_marker="draft") is True


def test_discovery_filters_and_sorts(tmp_path: Path) -> None:
    _touch(
        tmp_path,
        "zeta.xlsx",
        "Alpha.xlsx",
        "beta_wip.xlsx",
        "~$zeta.xlsx",
        "readme.md",
    )
    (tmp_path / "nested.xlsx").mkdir()
    sources = discover_sources(tmp_path)
    assert [source.name for source in sources] == ["Alpha", "zeta"]
    assert sources[0].path == tmp_path / "Alpha.xlsx"


def test_discovery_without_candidates_raises(tmp_path: Path) -> None:
    _touch(tmp_path, "draft_wip.xlsx", "~$lock.xlsx")
    with pytest.raises(NoPublishableSourcesError):
        discover_sources(tmp_path)


def test_discovery_of_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(NoPublishableSourcesError, match="does not exist"):
        discover_sources(tmp_path / "missing")


@pytest.fixture
def sources(tmp_path: Path) -> list[Source]:
    return [Source(name, tmp_path / f"{name}.xlsx") for name in ("alpha", "beta", "gamma")]


def test_select_named_source(sources: list[Source]) -> None:
    assert select_sources(sources, name="beta") == [sources[1]]
    assert select_sources(sources, name="beta.xlsx") == [sources[1]]


def test_select_unknown_source_lists_available(sources: list[Source]) -> None:
    with pytest.raises(SourceNotFoundError) as excinfo:
        select_sources(sources, name="delta")
    assert excinfo.value.available == ["alpha", "beta", "gamma"]
    assert "alpha, beta, gamma" in str(excinfo.value)


def test_select_all(sources: list[Source]) -> None:
    assert select_sources(sources, build_all=True) == sources


def test_select_default(sources: list[Source]) -> None:
    assert select_sources(sources, default_source="gamma") == [sources[2]]


@pytest.mark.parametrize("default", [None, "delta"])
def test_missing_default_lists_available(sources: list[Source], default: str | None) -> None:
    with pytest.raises(NoDefaultSourceError) as excinfo:
        select_sources(sources, default_source=default)
    assert "alpha, beta, gamma" in str(excinfo.value)
