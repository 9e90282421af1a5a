"""Validate and publish the images referenced by a document.

Image items name a bare file in the shared image source directory. References
are checked in two passes, all names before any file lookup, so a path-like
reference fails the build before anything is copied.
"""

from __future__ import annotations

import logging
import shutil
import typing as typ

from docforge.errors import InvalidImageReferenceError

from .models import ContentItem, ContentKind

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

logger = logging.getLogger(__name__)

PATH_SEPARATORS = ("/", "\\")


def image_filename(item: ContentItem) -> str:
    """Return the trimmed filename of an image item.

    Raises
    ------
    InvalidImageReferenceError
        If the body is empty, contains a path separator, or is a dot entry.

    Examples
    --------
    >>> from docforge.generator.models import ContentKind
    >>> item = ContentItem("Ch", "Sec", 0, ContentKind.IMAGE, "image", "text",
    ...                    " pic.png ", False, 0)
    >>> image_filename(item)
    'pic.png'
    """
    name = item.body.strip()
    where = f"chapter '{item.chapter}', section '{item.section}'"
    if not name:
        msg = f"Image item in {where} has no filename."
        raise InvalidImageReferenceError(msg)
    if any(sep in name for sep in PATH_SEPARATORS) or name in {".", ".."}:
        msg = (
            f"Image reference '{name}' in {where} must be a bare filename "
            "without path separators."
        )
        raise InvalidImageReferenceError(msg)
    return name


def referenced_images(items: cabc.Iterable[ContentItem]) -> list[str]:
    """Return the distinct image filenames used by ``items`` in first-use order."""
    names: list[str] = []
    for item in items:
        if item.kind is not ContentKind.IMAGE:
            continue
        name = image_filename(item)
        if name not in names:
            names.append(name)
    return names


def validate_image_references(
    items: cabc.Iterable[ContentItem], image_dir: Path
) -> list[str]:
    """Return the images used by ``items`` after checking they exist in ``image_dir``.

    Raises
    ------
    InvalidImageReferenceError
        If a reference is not a bare filename or the file does not exist.
    """
    names = referenced_images(items)
    missing = [name for name in names if not (image_dir / name).is_file()]
    if missing:
        listed = ", ".join(missing)
        msg = f"Referenced image(s) not found in '{image_dir}': {listed}"
        raise InvalidImageReferenceError(msg)
    return names


def copy_images(names: cabc.Iterable[str], image_dir: Path, target_dir: Path) -> list[Path]:
    """Copy each named image from ``image_dir`` into ``target_dir`` (flat)."""
    target_dir.mkdir(parents=True, exist_ok=True)
    copied: list[Path] = []
    for name in names:
        destination = target_dir / name
        shutil.copy2(image_dir / name, destination)
        logger.debug("copied image %s", name)
        copied.append(destination)
    return copied


__all__ = [
    "copy_images",
    "image_filename",
    "referenced_images",
    "validate_image_references",
]
