"""High-level orchestration for rendering one source into an HTML page.

This module reads a source workbook, normalizes its rows, assembles the
chapter/section document with anchor ids, renders it through the shared Jinja
template, and publishes ``<out>/<source>/index.html`` together with the images
the document references. It exposes :class:`DocumentPageGenerator`, which
consumes a :class:`~docforge.sources.Source` and the
:class:`~docforge.config.SiteConfig`.

Example
-------
>>> from pathlib import Path
>>> from docforge.config import SiteConfig
>>> from docforge.sources import Source
>>> source = Source("handbook", Path("docs/sources/handbook.xlsx"))
>>> generator = DocumentPageGenerator(source, SiteConfig())  # doctest: +SKIP
>>> generator.run().page_path  # doctest: +SKIP
PosixPath('docs/out/handbook/index.html')
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import logging
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from docforge._constants import IMAGES_DIRNAME, INDEX_FILENAME, THEME_STORAGE_KEY
from docforge.fs import write_text_atomic
from docforge.paths import SOURCE_PAGE_DEPTH, OutputLayout
from docforge.workbook import read_workbook_rows

from .document_builder import build_document
from .identifiers import IdentifierRegistry
from .images import copy_images, validate_image_references
from .normalizer import normalize_rows
from .renderer import HtmlContentRenderer

if typ.TYPE_CHECKING:
    from docforge.config import SiteConfig
    from docforge.sources import Source

    from .models import ContentItem, DocumentModel

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"
STYLESHEET_NAME = "docforge.css"
SCRIPT_NAME = "docforge.js"


@dc.dataclass(frozen=True, slots=True)
class PageBuildResult:
    """Summary of one published source page.

    Attributes
    ----------
    name : str
        Source name; also the output subdirectory.
    label : str
        Display label for the landing page.
    page_path : Path
        Path of the written ``index.html``.
    images : tuple[str, ...]
        Image filenames the page references, in first-use order.
    chapter_count : int
        Number of chapters in the document.
    section_count : int
        Number of sections across all chapters.
    """

    name: str
    label: str
    page_path: Path
    images: tuple[str, ...]
    chapter_count: int
    section_count: int


def generation_time(value: dt.datetime | None = None) -> dt.datetime:
    """Return ``value`` (or now) as an aware UTC datetime; naive values count as UTC."""
    if value is None:
        return dt.datetime.now(dt.UTC)
    if value.tzinfo is None:
        return value.replace(tzinfo=dt.UTC)
    return value.astimezone(dt.UTC)


def build_environment(templates_dir: Path | None = None) -> Environment:
    """Return the Jinja environment shared by page and landing templates."""
    return Environment(
        loader=FileSystemLoader(str(templates_dir or DEFAULT_TEMPLATES_DIR)),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


class DocumentPageGenerator:
    """Render a single source workbook into its published HTML page."""

    def __init__(
        self,
        source: Source,
        site_config: SiteConfig,
        *,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the generator with the source and site context.

        Parameters
        ----------
        source : Source
            Workbook to render; its name becomes the output subdirectory.
        site_config : SiteConfig
            Directories, theme, and highlighting style for the build.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package templates.
        """
        self.source = source
        self.site = site_config
        self.layout = OutputLayout(depth=SOURCE_PAGE_DEPTH)
        self.renderer = HtmlContentRenderer(site_config.pygments_style, layout=self.layout)
        self.registry = IdentifierRegistry()
        self.env = build_environment(templates_dir)
        self.template = self.env.get_template("doc_page.jinja")

    @property
    def output_dir(self) -> Path:
        return self.site.output_dir / self.source.name

    @property
    def page_path(self) -> Path:
        return self.output_dir / INDEX_FILENAME

    def load_items(self) -> list[ContentItem]:
        """Read and normalize the source rows."""
        rows = read_workbook_rows(self.source.path, self.site.sheet_name)
        return normalize_rows(rows)

    def build_model(self, items: list[ContentItem]) -> DocumentModel:
        """Assemble the document with ids from a freshly reset registry."""
        self.registry.reset()
        return build_document(items, self.registry)

    def run(self, *, generated_at: dt.datetime | None = None) -> PageBuildResult:
        """Build the source and publish its page and images.

        Returns
        -------
        PageBuildResult
            Paths and counts describing the published page.

        Raises
        ------
        WorkbookError
            If the workbook cannot be read.
        EmptySourceError
            If the workbook has no data rows.
        EmptyContentError
            If no row survives normalization.
        InvalidImageReferenceError
            If an image reference is path-like or points to a missing file.

        Notes
        -----
        Images are validated before anything is written. The page itself is
        written last and atomically, so a failed build never replaces a
        previously published page with partial output.
        """
        model = self.build_model(self.load_items())
        images = validate_image_references(model.document.items(), self.site.image_dir)
        html = self.render(model, generated_at=generated_at)

        copy_images(images, self.site.image_dir, self.site.output_dir / IMAGES_DIRNAME)
        page_path = write_text_atomic(self.page_path, html)
        logger.info("built %s (%d image(s))", self.source.name, len(images))
        return PageBuildResult(
            name=self.source.name,
            label=self.site.label_for(self.source.name),
            page_path=page_path,
            images=tuple(images),
            chapter_count=len(model.document.chapters),
            section_count=model.document.section_count,
        )

    def render(
        self, model: DocumentModel, *, generated_at: dt.datetime | None = None
    ) -> str:
        """Render ``model`` into the complete HTML document text."""
        generated_at = generation_time(generated_at)
        label = self.site.label_for(self.source.name)
        context = {
            "theme": self.site.theme,
            "html_title": self._format_page_title(label),
            "doc_title": label,
            "toc": model.toc,
            "chapters": self._build_chapter_views(model),
            "generated_at": generated_at,
            "pygments_css": self.renderer.stylesheet,
            "stylesheet_href": self.layout.asset_href(STYLESHEET_NAME),
            "script_href": self.layout.asset_href(SCRIPT_NAME),
            "theme_storage_key": THEME_STORAGE_KEY,
        }
        return self.template.render(**context)

    def _build_chapter_views(self, model: DocumentModel) -> list[dict[str, typ.Any]]:
        """Return template-ready chapters with pre-rendered item HTML."""
        views: list[dict[str, typ.Any]] = []
        for chapter in model.document.chapters:
            sections = [
                {
                    "name": section.name,
                    "anchor": section.anchor,
                    "collapsed": section.collapsed,
                    "items_html": [
                        self.renderer.render_item(item, section)
                        for item in section.items
                    ],
                }
                for section in chapter.sections
            ]
            views.append(
                {"name": chapter.name, "anchor": chapter.anchor, "sections": sections}
            )
        return views

    def _format_page_title(self, label: str) -> str:
        """Compose the HTML title from the source label and site name."""
        return f"{label} | {self.site.theme.site_name} {self.site.theme.doc_label}"


__all__ = [
    "DEFAULT_TEMPLATES_DIR",
    "DocumentPageGenerator",
    "PageBuildResult",
    "build_environment",
    "generation_time",
]
