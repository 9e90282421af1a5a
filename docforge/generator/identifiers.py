"""Slugs and collision-free anchor identifiers for chapters and sections.

Example
-------
>>> registry = IdentifierRegistry()
>>> registry.section_id("Git", "Setup"), registry.section_id("Git", "Setup")
('sec-git-setup', 'sec-git-setup-2')
>>> slugify("Hällo Wörld!")
'haello-woerld'
"""

from __future__ import annotations

import re
import unicodedata

TRANSLITERATIONS = {
    "ä": "ae",
    "ö": "oe",
    "ü": "ue",
    "ß": "ss",
    "æ": "ae",
    "ø": "oe",
    "å": "aa",
    "œ": "oe",
    "ð": "d",
    "þ": "th",
    "ł": "l",
}
NON_SLUG_PATTERN = re.compile(r"[^a-z0-9]+")
EMPTY_SLUG = "x"


def _transliterate(text: str) -> str:
    """Spell out the mapped letters, then drop accents from everything else."""
    spelled = "".join(TRANSLITERATIONS.get(char, char) for char in text)
    decomposed = unicodedata.normalize("NFKD", spelled)
    return "".join(char for char in decomposed if not unicodedata.combining(char))


def slugify(value: str) -> str:
    """Convert ``value`` into a lowercase, hyphen-separated, URL-safe slug.

    Examples
    --------
    >>> slugify("")
    'x'
    >>> slugify("###")
    'x'
    >>> slugify("  Straße & Café ")
    'strasse-cafe'
    """
    lowered = _transliterate(value.strip().lower())
    slug = NON_SLUG_PATTERN.sub("-", lowered).strip("-")
    return slug or EMPTY_SLUG


class IdentifierRegistry:
    """Hand out anchor ids, suffixing repeats of the same base id.

    The first request for a base id returns it unchanged; the n-th repeat
    returns ``<base>-<n>``. A suffixed id that another name already produced
    is skipped, so every id handed out is unique. A registry belongs to a
    single document build.
    """

    def __init__(self) -> None:
        self._occurrences: dict[str, int] = {}
        self._issued: set[str] = set()

    def allocate(self, base: str) -> str:
        count = self._occurrences.get(base, 0) + 1
        candidate = base if count == 1 else f"{base}-{count}"
        while candidate in self._issued:
            count += 1
            candidate = f"{base}-{count}"
        self._occurrences[base] = count
        self._issued.add(candidate)
        return candidate

    def chapter_id(self, chapter: str) -> str:
        return self.allocate(f"ch-{slugify(chapter)}")

    def section_id(self, chapter: str, section: str) -> str:
        # The chapter name keeps equally named sections of different chapters apart.
        return self.allocate(f"sec-{slugify(f'{chapter}-{section}')}")

    def reset(self) -> None:
        self._occurrences.clear()
        self._issued.clear()


__all__ = ["EMPTY_SLUG", "IdentifierRegistry", "slugify"]
