"""Conjugation form value object and kana romanization."""

from dataclasses import dataclass

import jaconv


def normalize_reading(reading: str) -> str:
    """Fold katakana to hiragana; kanji and other characters pass through."""
    return jaconv.kata2hira(reading)


def to_romaji(text: str) -> str:
    """Romanize kana (hiragana or katakana). Kanji are left as-is.

    Examples:
        >>> to_romaji("のみます")
        'nomimasu'
        >>> to_romaji("いった")
        'itta'
    """
    return jaconv.kana2alphabet(normalize_reading(text))


@dataclass(frozen=True, slots=True)
class ConjugationForm:
    """One row of a conjugation table."""

    form_name: str
    surface_text: str
    usage_note: str

    @property
    def romaji(self) -> str:
        return to_romaji(self.surface_text)

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {
            "form": self.form_name,
            "japanese": self.surface_text,
            "romaji": self.romaji,
            "usage": self.usage_note,
        }
