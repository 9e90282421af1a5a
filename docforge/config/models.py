"""Typed dataclasses describing docforge site configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from docforge._constants import DEFAULT_WIP_MARKER


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class ThemeConfig:
    """Visual theming applied to generated documentation."""

    site_name: str = "DocForge"
    doc_label: str = "Documentation"


@dc.dataclass(slots=True)
class SourceMetadata:
    """Optional presentation details for one source workbook."""

    label: str | None = None
    description: str | None = None


@dc.dataclass(slots=True)
class SiteConfig:
    """Directories, naming conventions, and theming for a docforge build."""

    source_dir: Path = Path("docs/sources")
    image_dir: Path = Path("docs/images")
    output_dir: Path = Path("docs/out")
    default_source: str | None = None
    wip_marker: str = DEFAULT_WIP_MARKER
    sheet_name: str | None = None
    pygments_style: str = "monokai"
    theme: ThemeConfig = dc.field(default_factory=ThemeConfig)
    sources: dict[str, SourceMetadata] = dc.field(default_factory=dict)

    def metadata_for(self, name: str) -> SourceMetadata:
        """Return the configured metadata for ``name`` or an empty record."""
        return self.sources.get(name, SourceMetadata())

    def label_for(self, name: str) -> str:
        """Return the display label for source ``name``."""
        return self.metadata_for(name).label or name


__all__ = ["SiteConfig", "SiteConfigError", "SourceMetadata", "ThemeConfig"]
