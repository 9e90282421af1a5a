"""Bundle a built page with its shared assets into a zip archive.

The archive mirrors the published tree around one source::

    <name>/index.html
    assets/...
    images/<only the images this source uses>

Nothing is rewritten: the page already links ``../assets/`` and ``../images/``,
which resolve the same way once the archive is extracted.
"""

from __future__ import annotations

import logging
import typing as typ
import zipfile

from ._constants import ASSETS_DIRNAME, IMAGES_DIRNAME, INDEX_FILENAME, PACKAGES_DIRNAME
from .fs import atomic_path

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .generator.page_generator import PageBuildResult

logger = logging.getLogger(__name__)


def archive_members(result: PageBuildResult, output_root: Path) -> list[tuple[Path, str]]:
    """Return ``(file, archive name)`` pairs for one source, sorted by name."""
    members: list[tuple[Path, str]] = [
        (result.page_path, f"{result.name}/{INDEX_FILENAME}")
    ]
    assets_dir = output_root / ASSETS_DIRNAME
    if assets_dir.is_dir():
        for path in assets_dir.rglob("*"):
            if path.is_file():
                relative = path.relative_to(assets_dir).as_posix()
                members.append((path, f"{ASSETS_DIRNAME}/{relative}"))
    images_dir = output_root / IMAGES_DIRNAME
    members.extend((images_dir / name, f"{IMAGES_DIRNAME}/{name}") for name in result.images)
    return sorted(members, key=lambda member: member[1])


def package_source(result: PageBuildResult, output_root: Path) -> Path:
    """Write ``<out>/packages/<name>.zip`` for ``result`` and return its path."""
    archive_path = output_root / PACKAGES_DIRNAME / f"{result.name}.zip"
    with atomic_path(archive_path) as tmp_path, zipfile.ZipFile(
        tmp_path, "w", compression=zipfile.ZIP_DEFLATED
    ) as archive:
        for path, arcname in archive_members(result, output_root):
            archive.write(path, arcname)
    logger.info("packaged %s", archive_path)
    return archive_path


__all__ = ["archive_members", "package_source"]
