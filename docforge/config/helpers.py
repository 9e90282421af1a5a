"""Utility helpers shared by the docforge configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from .models import SiteConfigError, SourceMetadata, ThemeConfig


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _mapping(value: object, *, field: str) -> typ.Mapping[str, typ.Any]:
    """Return ``value`` as a mapping, treating ``None`` as empty."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = f"'{field}' must be a mapping."
        raise SiteConfigError(msg)
    return value


def _path(value: object | None, default: Path) -> Path:
    text = _optional_str(value)
    return Path(text) if text else default


def _build_theme_config(payload: typ.Mapping[str, typ.Any]) -> ThemeConfig:
    """Build a ThemeConfig instance from the provided mapping payload."""
    base = ThemeConfig()
    return ThemeConfig(
        site_name=_optional_str(payload.get("name")) or base.site_name,
        doc_label=_optional_str(payload.get("doc_label")) or base.doc_label,
    )


def _build_source_metadata(
    payload: typ.Mapping[str, typ.Any],
) -> dict[str, SourceMetadata]:
    """Build per-source metadata, skipping entries that are not mappings."""
    result: dict[str, SourceMetadata] = {}
    for name, entry in payload.items():
        match entry:
            case dict():
                result[str(name)] = SourceMetadata(
                    label=_optional_str(entry.get("label")),
                    description=_optional_str(entry.get("description")),
                )
            case str() as label:
                result[str(name)] = SourceMetadata(label=_optional_str(label))
            case _:
                continue
    return result


__all__ = [
    "_build_source_metadata",
    "_build_theme_config",
    "_mapping",
    "_optional_str",
    "_path",
]
