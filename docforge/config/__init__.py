"""Load and validate site configuration YAML for docforge builds.

This subpackage parses the project's ``docforge.yaml`` file, applies defaults
for source, image, and output directories, and produces typed dataclasses
(:class:`SiteConfig`, :class:`ThemeConfig`, :class:`SourceMetadata`) that the
orchestrator consumes. The primary entry point is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from docforge.config import load_site_config
>>> site = load_site_config(Path("docforge.yaml"))  # doctest: +SKIP
>>> site.label_for("handbook")  # doctest: +SKIP
'Team Handbook'
"""

from .loader import load_site_config
from .models import SiteConfig, SiteConfigError, SourceMetadata, ThemeConfig

__all__ = [
    "SiteConfig",
    "SiteConfigError",
    "SourceMetadata",
    "ThemeConfig",
    "load_site_config",
]
