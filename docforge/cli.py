"""Cyclopts CLI entrypoint for building docforge documentation sites.

The ``docforge`` console script turns the workbooks in the configured source
directory into static HTML pages. Without arguments it builds the configured
default source; ``--source`` picks one by name, ``--all`` builds every
publishable source and writes the landing page, ``--list`` prints the
publishable sources, and ``--package`` additionally writes a zip archive per
built source.

Examples
--------
Build the configured default source:

>>> from docforge.cli import main
>>> main([])  # doctest: +SKIP

Build everything and package it:

>>> main(["--all", "--package"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter
from ruamel.yaml.error import YAMLError

from .config import SiteConfig, SiteConfigError, load_site_config
from .errors import ConfigurationError, DocForgeError, UsageError
from .site import SiteBuilder
from .sources import discover_sources, select_sources

if typ.TYPE_CHECKING:
    import collections.abc as cabc

DEFAULT_CONFIG = Path("docforge.yaml")

app = App(name="docforge", config=cyclopts.config.Env("DOCFORGE_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load_config(config: Path, output_dir: Path | None) -> SiteConfig:
    """Load ``config``; a missing default config file means built-in defaults."""
    if config == DEFAULT_CONFIG and not config.exists():
        site_config = SiteConfig()
    else:
        try:
            site_config = load_site_config(config)
        except (OSError, TypeError, SiteConfigError, YAMLError) as exc:
            msg = f"Cannot load configuration '{config}': {exc}"
            raise ConfigurationError(msg) from exc
    if output_dir is not None:
        site_config.output_dir = output_dir
    return site_config


@app.default
def build(
    *,
    source: typ.Annotated[
        str | None, Parameter(help="Build only the named source")
    ] = None,
    build_all: typ.Annotated[
        bool, Parameter(name="--all", help="Build every publishable source")
    ] = False,
    list_sources: typ.Annotated[
        bool, Parameter(name="--list", help="List publishable sources and exit")
    ] = False,
    package: typ.Annotated[
        bool, Parameter(help="Write a zip archive for every built source")
    ] = False,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="DOCFORGE_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None, Parameter(help="Override the output folder")
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Log build progress")] = False,
) -> None:
    """Build documentation pages for the selected sources.

    Parameters
    ----------
    source : str or None, optional
        Source name (workbook file stem) to build; mutually exclusive with
        ``build_all``.
    build_all : bool, optional
        Build every publishable source and write the landing page.
    list_sources : bool, optional
        Print the publishable source names and return without building.
    package : bool, optional
        Write ``packages/<name>.zip`` for each built source.
    config : Path, optional
        Path to the ``docforge.yaml`` configuration file (overridable via
        ``DOCFORGE_CONFIG``). Built-in defaults apply when the default file is
        absent.
    output_dir : Path or None, optional
        Override the configured output directory.
    verbose : bool, optional
        Emit debug logging while building.

    Returns
    -------
    None
        Writes rendered artifacts and prints the generated paths.

    Raises
    ------
    UsageError
        If ``source`` and ``build_all`` are combined.
    ConfigurationError
        If an explicitly given or existing config file cannot be loaded.
    DocForgeError
        If discovery, selection, or any source build fails.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if source and build_all:
        msg = "Cannot combine --source with --all."
        raise UsageError(msg)

    site_config = _load_config(config, output_dir)
    sources = discover_sources(site_config.source_dir, wip_marker=site_config.wip_marker)
    if list_sources:
        for entry in sources:
            print(entry.name)
        return

    selected = select_sources(
        sources,
        name=source,
        build_all=build_all,
        default_source=site_config.default_source,
    )
    result = SiteBuilder(site_config).build(
        selected, landing_page=build_all, package=package
    )
    for path in result.written:
        print(f"wrote {_format_path(path)}")


def main(argv: cabc.Sequence[str] | None = None) -> None:
    """Invoke the Cyclopts application that powers the ``docforge`` command.

    Parameters
    ----------
    argv : Sequence[str] or None, optional
        Arguments to parse; ``sys.argv[1:]`` when ``None``.

    Returns
    -------
    None
        This function executes for its side effects. Build failures print
        ``error: <message>`` to stderr and exit with status 1.

    Examples
    --------
    >>> main(["--list"])  # doctest: +SKIP
    handbook
    """
    try:
        app(list(argv) if argv is not None else None)
    except DocForgeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
