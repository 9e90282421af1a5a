"""Build static HTML documentation sites from content workbooks.

This package exposes the CLI entry points used by the ``docforge`` console
script to turn spreadsheet rows (chapters, sections, and typed content blocks)
into themed, navigable HTML pages, an optional landing page, and zip archives.

Exports
-------
- ``app``: Cyclopts application entry.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from docforge import main
>>> main(["--all"])  # doctest: +SKIP
>>> from docforge import app
>>> app.help  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
