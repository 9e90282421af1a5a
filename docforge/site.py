"""Build one or more sources into the shared output tree.

:class:`SiteBuilder` drives the per-source pipeline sequentially and then
performs the steps that depend on every page being built: copying the bundled
assets, writing archives, and rendering the landing page. The first failing
source aborts the run; pages published before the failure stay intact.

Example
-------
>>> from docforge.config import SiteConfig
>>> from docforge.sources import discover_sources
>>> site = SiteConfig()
>>> sources = discover_sources(site.source_dir)  # doctest: +SKIP
>>> SiteBuilder(site).build(sources, landing_page=True).written  # doctest: +SKIP
[PosixPath('docs/out/handbook/index.html'), ...]
"""

from __future__ import annotations

import dataclasses as dc
import logging
import shutil
import typing as typ
from pathlib import Path

from ._constants import ASSETS_DIRNAME
from .generator.page_generator import DocumentPageGenerator, PageBuildResult
from .landing_page import LandingPageBuilder
from .packaging import package_source

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    import datetime as dt

    from .config import SiteConfig
    from .sources import Source

logger = logging.getLogger(__name__)

DEFAULT_ASSETS_DIR = Path(__file__).resolve().parent / "static" / ASSETS_DIRNAME


@dc.dataclass(slots=True)
class SiteBuildResult:
    """Everything a site build produced."""

    pages: list[PageBuildResult] = dc.field(default_factory=list)
    assets_dir: Path | None = None
    packages: list[Path] = dc.field(default_factory=list)
    landing_page: Path | None = None

    @property
    def written(self) -> list[Path]:
        """Return the pages, archives, and landing page in write order."""
        paths = [page.page_path for page in self.pages]
        paths.extend(self.packages)
        if self.landing_page is not None:
            paths.append(self.landing_page)
        return paths


def copy_shared_assets(output_root: Path, assets_source: Path = DEFAULT_ASSETS_DIR) -> Path:
    """Copy the bundled CSS/JS into ``<out>/assets`` and return that directory."""
    target = output_root / ASSETS_DIRNAME
    shutil.copytree(assets_source, target, dirs_exist_ok=True)
    logger.debug("copied shared assets to %s", target)
    return target


class SiteBuilder:
    """Build sources into the configured output directory."""

    def __init__(
        self,
        site_config: SiteConfig,
        *,
        templates_dir: Path | None = None,
        assets_dir: Path | None = None,
    ) -> None:
        self.site = site_config
        self.templates_dir = templates_dir
        self.assets_dir = assets_dir or DEFAULT_ASSETS_DIR

    def build(
        self,
        sources: cabc.Sequence[Source],
        *,
        landing_page: bool = False,
        package: bool = False,
        generated_at: dt.datetime | None = None,
    ) -> SiteBuildResult:
        """Build ``sources`` in order, then assets, archives, and landing page.

        Parameters
        ----------
        sources : Sequence[Source]
            Sources to build; each gets its own output subdirectory.
        landing_page : bool, optional
            Write ``<out>/index.html`` linking every built page.
        package : bool, optional
            Write ``<out>/packages/<name>.zip`` for every built page.
        generated_at : datetime, optional
            Timestamp embedded in every page; defaults to the current time.

        Returns
        -------
        SiteBuildResult
            Built pages and the additional artefacts that were written.

        Raises
        ------
        DocForgeError
            Propagated from the first source that fails to build.
        """
        output_root = self.site.output_dir
        output_root.mkdir(parents=True, exist_ok=True)
        result = SiteBuildResult()
        for source in sources:
            generator = DocumentPageGenerator(
                source, self.site, templates_dir=self.templates_dir
            )
            result.pages.append(generator.run(generated_at=generated_at))

        result.assets_dir = copy_shared_assets(output_root, self.assets_dir)
        if package:
            result.packages = [package_source(page, output_root) for page in result.pages]
        if landing_page:
            builder = LandingPageBuilder(
                self.site,
                result.pages,
                packaged=package,
                templates_dir=self.templates_dir,
            )
            result.landing_page = builder.run(generated_at=generated_at)
        return result


__all__ = ["DEFAULT_ASSETS_DIR", "SiteBuildResult", "SiteBuilder", "copy_shared_assets"]
