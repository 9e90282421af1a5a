"""Filesystem helpers that materialize build outputs only on success."""

from __future__ import annotations

import contextlib
import os
import tempfile
import typing as typ
from pathlib import Path

if typ.TYPE_CHECKING:
    import collections.abc as cabc

# mkstemp creates owner-only files; published output must be world-readable.
PUBLISHED_FILE_MODE = 0o644


@contextlib.contextmanager
def atomic_path(target: Path) -> cabc.Iterator[Path]:
    """Yield a temporary sibling of ``target`` that replaces it on clean exit.

    The temporary file lives in the same directory so the final
    :func:`os.replace` is atomic. When the body raises, the temporary file is
    removed and ``target`` is left untouched.
    """
    target.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
    )
    os.close(fd)
    tmp_path = Path(tmp_name)
    try:
        yield tmp_path
        tmp_path.chmod(PUBLISHED_FILE_MODE)
        os.replace(tmp_path, target)
    finally:
        tmp_path.unlink(missing_ok=True)


def write_text_atomic(target: Path, text: str) -> Path:
    """Write UTF-8 ``text`` to ``target`` atomically and return ``target``."""
    with atomic_path(target) as tmp_path:
        tmp_path.write_text(text, encoding="utf-8")
    return target


__all__ = ["PUBLISHED_FILE_MODE", "atomic_path", "write_text_atomic"]
