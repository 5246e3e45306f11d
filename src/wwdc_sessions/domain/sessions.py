"""Domain models for conference sessions."""

import unicodedata
from dataclasses import dataclass

_WIDTH_TAGS = ("<wide>", "<narrow>")


def _fold_width(char: str) -> str:
    if unicodedata.decomposition(char).startswith(_WIDTH_TAGS):
        return unicodedata.normalize("NFKC", char)
    return char


def fold_title(title: str) -> str:
    """Strip diacritics and width variants, then hyphenate whitespace runs.

    Other compatibility characters (``™``, ``…``, ligatures) are kept as is.
    """
    narrowed = "".join(_fold_width(char) for char in title)
    decomposed = unicodedata.normalize("NFD", narrowed)
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    folded = unicodedata.normalize("NFC", stripped)
    return "-".join(folded.split())


@dataclass(frozen=True)
class SessionRecord:
    """Represents a single recorded conference session.

    ``id`` combines year and code (``"wwdc2023-10187"``) and is assigned by the
    data source, never computed from the other fields.
    """

    id: str
    year: int
    code: str
    title: str
    description: str
    permalink: str | None = None
    length_in_minutes: int | None = None
    related_session_ids: tuple[str, ...] = ()

    @property
    def file_name(self) -> str:
        """Display file name, e.g. ``WWDC23-10187-Meet-SwiftData``."""
        year_prefix = f"WWDC{self.year % 100:02d}"
        return f"{year_prefix}-{self.code}-{fold_title(self.title)}"
