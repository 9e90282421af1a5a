"""Behaviour tests for how workbook rows become a navigable page.

The scenarios in ``features/document_structure.feature`` write real workbooks
into a temporary source directory, build a single page with
:class:`~docforge.generator.DocumentPageGenerator`, and inspect the published
HTML with BeautifulSoup. They cover the reading order (chapters by first
appearance, sections alphabetically, items by order with ties kept in row
order), the disclosure rendering of collapsed sections, and the uniqueness of
anchors when section names collide after slugification.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, scenarios, then, when

from docforge.generator import DocumentPageGenerator
from docforge.sources import Source

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from docforge.config import SiteConfig

    WorkbookWriter = cabc.Callable[..., Path]

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "document_structure.feature"
)
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _build(site_config: SiteConfig, scenario_state: dict[str, object]) -> None:
    """Build the workbook stored in ``scenario_state`` and parse the page."""
    path: Path = scenario_state["workbook"]  # type: ignore[assignment]
    result = DocumentPageGenerator(Source(path.stem, path), site_config).run()
    scenario_state["soup"] = BeautifulSoup(
        result.page_path.read_text(encoding="utf-8"), "html.parser"
    )


def _soup(scenario_state: dict[str, object]) -> BeautifulSoup:
    return scenario_state["soup"]  # type: ignore[return-value]


@given("a Git guide workbook with a collapsed Branching section")
def given_git_guide(
    workbook_writer: WorkbookWriter,
    git_rows: list[tuple[object, ...]],
    scenario_state: dict[str, object],
) -> None:
    """Write the three-row Git guide into the source directory."""
    scenario_state["workbook"] = workbook_writer("git-guide", git_rows)


@given("a workbook whose chapters appear as Zeta then Alpha")
def given_ordering_workbook(
    workbook_writer: WorkbookWriter, scenario_state: dict[str, object]
) -> None:
    """Write rows whose chapter, section, and order values are deliberately shuffled.

    Parameters
    ----------
    workbook_writer : Callable[..., Path]
        Fixture writing ``<name>.xlsx`` into the configured source directory.
    scenario_state : dict[str, object]
        Mutable state dictionary shared across BDD steps; receives the
        workbook path under ``"workbook"``.

    Returns
    -------
    None
        This step mutates ``scenario_state`` in place.
    """
    scenario_state["workbook"] = workbook_writer(
        "ordering",
        [
            ("Zeta", "beta", 1, "text", None, "beta body", None),
            ("Alpha", "Intro", 1, "text", None, "alpha body", None),
            ("Zeta", "Alpha rules", 5, "text", None, "late", None),
            ("Zeta", "Alpha rules", 1, "text", None, "tie one", None),
            ("Zeta", "Alpha rules", 1, "text", None, "tie two", None),
        ],
    )


@given("a workbook with sections named Setup and setup in one chapter")
def given_colliding_sections(
    workbook_writer: WorkbookWriter, scenario_state: dict[str, object]
) -> None:
    """Write two sections whose names slugify to the same anchor."""
    scenario_state["workbook"] = workbook_writer(
        "collision",
        [
            ("Git", "Setup", 1, "text", None, "upper", None),
            ("Git", "setup", 1, "text", None, "lower", "yes"),
        ],
    )


@when("the Git guide page is built")
@when("the ordering page is built")
@when("the collision page is built")
def when_page_built(site_config: SiteConfig, scenario_state: dict[str, object]) -> None:
    """Build the scenario workbook into its page."""
    _build(site_config, scenario_state)


@then("the sidebar lists Git, Branching, and Setup in that order")
def then_sidebar_order(scenario_state: dict[str, object]) -> None:
    """Verify the sidebar lists the chapter followed by its sorted sections."""
    soup = _soup(scenario_state)
    labels = [a.get_text() for a in soup.select(".df-toc-list a")]
    assert labels == ["Git", "Branching", "Setup"], f"unexpected sidebar {labels!r}"


@then("the Branching section is a closed disclosure holding the note")
def then_branching_disclosure(scenario_state: dict[str, object]) -> None:
    """Verify the collapsed section renders as a closed ``details`` element."""
    branching = _soup(scenario_state).find(id="sec-git-branching")
    assert branching is not None, "expected an element with id sec-git-branching"
    assert branching.name == "details"
    assert not branching.has_attr("open")
    note = branching.select_one("aside.df-note")
    assert note is not None, "expected the note callout inside Branching"
    assert note.get_text() == "Careful with force-push."


@then("the Setup section shows the text before the highlighted code")
def then_setup_content(scenario_state: dict[str, object]) -> None:
    """Verify Setup renders as a heading with prose then a code block."""
    setup = _soup(scenario_state).find(id="sec-git-setup")
    assert setup is not None, "expected an element with id sec-git-setup"
    assert setup.name == "section"
    assert setup.h3.get_text() == "Setup"
    body = setup.select_one(".df-section-body")
    blocks = [child for child in body.children if getattr(child, "name", None)]
    assert [block.name for block in blocks] == ["p", "div"]
    text, code = blocks
    assert text.get_text() == "Install git first."
    assert code["data-language"] == "bash"
    assert "git init" in code.get_text()


@then("the chapters appear as Zeta then Alpha")
def then_chapter_order(scenario_state: dict[str, object]) -> None:
    """Verify chapters keep the order in which they first appear."""
    headings = [h2.get_text() for h2 in _soup(scenario_state).select(".df-chapter h2")]
    assert headings == ["Zeta", "Alpha"]


@then("the sections of Zeta appear alphabetically")
def then_section_order(scenario_state: dict[str, object]) -> None:
    """Verify sections sort case-insensitively within their chapter."""
    zeta = _soup(scenario_state).find(id="ch-zeta")
    names = [h3.get_text() for h3 in zeta.select(".df-section h3")]
    assert names == ["Alpha rules", "beta"]


@then("items with equal order keep their row order")
def then_item_order(scenario_state: dict[str, object]) -> None:
    """Verify items sort by order and fall back to row order on ties."""
    section = _soup(scenario_state).find(id="sec-zeta-alpha-rules")
    bodies = [p.get_text() for p in section.select("p.df-text")]
    assert bodies == ["tie one", "tie two", "late"]


@then("every section anchor on the page is unique")
def then_unique_anchors(scenario_state: dict[str, object]) -> None:
    """Verify colliding section names receive distinct ids."""
    ids = [tag["id"] for tag in _soup(scenario_state).select("[id^='sec-']")]
    assert ids == ["sec-git-setup", "sec-git-setup-2"]
    assert len(set(ids)) == len(ids)


@then("every sidebar link resolves to an anchor on the page")
def then_links_resolve(scenario_state: dict[str, object]) -> None:
    """Verify each TOC href targets an existing element id."""
    soup = _soup(scenario_state)
    for link in soup.select(".df-toc-list a"):
        target = link["href"].removeprefix("#")
        assert soup.find(id=target) is not None, f"dangling sidebar link {target!r}"
