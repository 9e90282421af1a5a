"""Build and render the landing page that links every built source.

This module takes the results of a multi-source build and produces
``<out>/index.html`` listing each published page with its label, optional
Markdown description, and chapter/section counts. The landing page sits at the
output root, so it links shared assets with ``./assets/`` and each source with
``./<name>/``.

>>> from docforge.config import SiteConfig
>>> from docforge.landing_page import LandingPageBuilder
>>> builder = LandingPageBuilder(SiteConfig(), results)  # doctest: +SKIP
>>> builder.run()  # doctest: +SKIP
PosixPath('docs/out/index.html')
"""

from __future__ import annotations

import datetime as dt
import typing as typ
from urllib.parse import quote

from markdown import markdown

from ._constants import INDEX_FILENAME, PACKAGES_DIRNAME, THEME_STORAGE_KEY
from .fs import write_text_atomic
from .generator.page_generator import (
    SCRIPT_NAME,
    STYLESHEET_NAME,
    build_environment,
    generation_time,
)
from .paths import ROOT_DEPTH, OutputLayout

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from .config import SiteConfig
    from .generator.page_generator import PageBuildResult


class LandingPageBuilder:
    """Render a landing page enumerating the built documentation pages."""

    def __init__(
        self,
        site_config: SiteConfig,
        results: cabc.Sequence[PageBuildResult],
        *,
        packaged: bool = False,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the landing page builder.

        Parameters
        ----------
        site_config : SiteConfig
            Site configuration supplying the output directory, theme, and
            per-source descriptions.
        results : Sequence[PageBuildResult]
            Pages built in this run, listed in the given order.
        packaged : bool, optional
            When True each entry links its archive under ``./packages/``.
        templates_dir : Path, optional
            Directory containing the Jinja templates. Defaults to the
            ``docforge/templates`` directory when ``None``.
        """
        self.site_config = site_config
        self.results = list(results)
        self.packaged = packaged
        self.layout = OutputLayout(depth=ROOT_DEPTH)
        self.env = build_environment(templates_dir)
        self.template = self.env.get_template("landing_page.jinja")
        self._markdown_extensions = ["sane_lists", "tables", "fenced_code"]

    @property
    def output_path(self) -> Path:
        return self.site_config.output_dir / INDEX_FILENAME

    def run(self, *, generated_at: dt.datetime | None = None) -> Path:
        """Render the landing page HTML file to ``<out>/index.html``."""
        return write_text_atomic(self.output_path, self.render(generated_at=generated_at))

    def render(self, *, generated_at: dt.datetime | None = None) -> str:
        context = {
            "theme": self.site_config.theme,
            "entries": self._gather_entries(),
            "generated_at": generation_time(generated_at),
            "stylesheet_href": self.layout.asset_href(STYLESHEET_NAME),
            "script_href": self.layout.asset_href(SCRIPT_NAME),
            "theme_storage_key": THEME_STORAGE_KEY,
        }
        return self.template.render(**context)

    def _gather_entries(self) -> list[dict[str, typ.Any]]:
        """Collect and return landing page entry dictionaries."""
        entries: list[dict[str, typ.Any]] = []
        for result in self.results:
            metadata = self.site_config.metadata_for(result.name)
            package_href = (
                f"{self.layout.root}{PACKAGES_DIRNAME}/{quote(result.name)}.zip"
                if self.packaged
                else None
            )
            entries.append(
                {
                    "label": result.label,
                    "href": self.layout.source_href(result.name),
                    "description_html": self._render_description(metadata.description),
                    "chapter_count": result.chapter_count,
                    "section_count": result.section_count,
                    "package_href": package_href,
                }
            )
        return entries

    def _render_description(self, text: str | None) -> str:
        normalized = (text or "").strip()
        if not normalized:
            return ""
        # Descriptions come from the site config, not from workbook authors.
        return markdown(
            normalized,
            extensions=self._markdown_extensions,
            output_format="html",
        )


__all__ = ["LandingPageBuilder"]
