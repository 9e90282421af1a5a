"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from .helpers import (
    _build_source_metadata,
    _build_theme_config,
    _mapping,
    _optional_str,
    _path,
)
from .models import SiteConfig, SiteConfigError

if typ.TYPE_CHECKING:
    from pathlib import Path


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing sources, paths, and theming.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``docforge.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration with defaults applied for every omitted key.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If a section has the wrong shape (for example, ``paths`` is a list).
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from docforge.config import load_site_config
    >>> config = load_site_config(Path("docforge.yaml"))  # doctest: +SKIP
    >>> config.output_dir  # doctest: +SKIP
    PosixPath('docs/out')
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    defaults = SiteConfig()
    paths = _mapping(raw.get("paths"), field="paths")
    theme = _build_theme_config(_mapping(raw.get("site"), field="site"))
    sources = _build_source_metadata(_mapping(raw.get("sources"), field="sources"))

    wip_marker = _optional_str(raw.get("wip_marker")) or defaults.wip_marker
    pygments_style = _optional_str(raw.get("pygments_style")) or defaults.pygments_style
    if any(sep in wip_marker for sep in ("/", "\\")):
        msg = f"'wip_marker' must not contain path separators: {wip_marker!r}"
        raise SiteConfigError(msg)

    return SiteConfig(
        source_dir=_path(paths.get("sources"), defaults.source_dir),
        image_dir=_path(paths.get("images"), defaults.image_dir),
        output_dir=_path(paths.get("output"), defaults.output_dir),
        default_source=_optional_str(raw.get("default_source")),
        wip_marker=wip_marker,
        sheet_name=_optional_str(raw.get("sheet")),
        pygments_style=pygments_style,
        theme=theme,
        sources=sources,
    )


__all__ = ["load_site_config"]
