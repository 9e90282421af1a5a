"""Render content items into HTML fragments with syntax-highlighted code."""

from __future__ import annotations

import re
from html import escape

from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from docforge.paths import OutputLayout

from .images import image_filename
from .models import ContentItem, ContentKind, Section

CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')
LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")


class HtmlContentRenderer:
    """Render prose, notes, code, and images with consistent styling."""

    def __init__(
        self, pygments_style: str = "monokai", layout: OutputLayout | None = None
    ) -> None:
        """Initialize a renderer with a pygments style and an output layout.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults to
            ``"monokai"``.
        layout : OutputLayout, optional
            Resolves image links for the page being rendered; defaults to a
            page one level below the output root.
        """
        self.pygments_style = pygments_style
        self.layout = layout or OutputLayout()
        self._formatter = HtmlFormatter(
            style=pygments_style, cssclass="codehilite", linenos="table"
        )

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def render_item(self, item: ContentItem, section: Section) -> str:
        """Render ``item`` using the rule for its kind."""
        match item.kind:
            case ContentKind.CODE:
                return self.code_block(item.body, item.language)
            case ContentKind.NOTE:
                return self.note(item.body)
            case ContentKind.IMAGE:
                return self.image(item, alt=section.name)
            case _:
                return self.text(item.body)

    def text(self, body: str) -> str:
        """Render prose as an escaped paragraph with explicit line breaks."""
        return f'<p class="df-text">{self._escape_lines(body)}</p>'

    def note(self, body: str) -> str:
        """Render prose as an escaped callout."""
        return (
            '<aside class="df-note" role="note">'
            f"<p>{self._escape_lines(body)}</p>"
            "</aside>"
        )

    def image(self, item: ContentItem, *, alt: str) -> str:
        """Render an image item relative to the shared images directory."""
        src = self.layout.image_href(image_filename(item))
        return (
            '<figure class="df-image">'
            f'<img src="{escape(src, quote=True)}" alt="{escape(alt, quote=True)}" '
            'loading="lazy">'
            "</figure>"
        )

    def code_block(self, code: str, language: str | None = None) -> str:
        """Render ``code`` into highlighted HTML with language and line metadata.

        Parameters
        ----------
        code : str
            Source snippet to highlight; it is escaped, never interpreted.
        language : str, optional
            Pygments lexer name; defaults to ``"text"`` when not provided or
            when the lexer lookup fails.

        Returns
        -------
        str
            HTML containing the highlighted block with ``data-language`` and
            ``data-line-count`` metadata applied.
        """
        lang = language or "text"
        try:
            lexer = get_lexer_by_name(lang, stripnl=False)
        except ClassNotFound:
            lexer = get_lexer_by_name("text", stripnl=False)
        html = highlight(code, lexer, self._formatter)
        line_count = len(LINE_BREAK_PATTERN.split(code.rstrip("\r\n"))) if code else 0
        return self._attach_code_attributes(html, lang, line_count)

    @staticmethod
    def _escape_lines(body: str) -> str:
        lines = LINE_BREAK_PATTERN.split(body)
        return "<br>\n".join(escape(line, quote=True) for line in lines)

    @staticmethod
    def _attach_code_attributes(html: str, language: str, line_count: int) -> str:
        """Add language and line-count attributes to a highlighted block."""
        safe_lang = escape(language or "text", quote=True)

        def _repl(match: re.Match[str]) -> str:
            return (
                f'<div class="codehilite line-numbers" data-language="{safe_lang}" '
                f'data-line-count="{line_count}">'
            )

        return CODEHILITE_OPEN_TAG.sub(_repl, html, 1)


__all__ = ["CODEHILITE_OPEN_TAG", "HtmlContentRenderer"]
