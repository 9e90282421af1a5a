"""Utilities for normalizing, assembling, rendering, and publishing source pages."""

from .document_builder import build_document
from .identifiers import IdentifierRegistry, slugify
from .models import (
    Chapter,
    ContentItem,
    ContentKind,
    Document,
    DocumentModel,
    Section,
    TocChapter,
    TocSection,
)
from .normalizer import normalize_rows
from .page_generator import DocumentPageGenerator, PageBuildResult
from .renderer import HtmlContentRenderer

__all__ = [
    "Chapter",
    "ContentItem",
    "ContentKind",
    "Document",
    "DocumentModel",
    "DocumentPageGenerator",
    "HtmlContentRenderer",
    "IdentifierRegistry",
    "PageBuildResult",
    "Section",
    "TocChapter",
    "TocSection",
    "build_document",
    "normalize_rows",
    "slugify",
]
