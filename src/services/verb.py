"""Japanese verb type detection and conjugation tables.

Supports:
- Type I (godan/五段) verbs: 書く, 飲む, 行く, etc.
- Type II (ichidan/一段) verbs: 食べる, 見る, etc.
- Irregular verbs: する (and noun + する compounds), くる/来る

Each generator returns a fresh 15-row table in the order of
``tables.VERB_FORMS``; the Dictionary form is always first.
"""

from collections.abc import Iterable
from enum import StrEnum, auto

from .forms import ConjugationForm
from .tables import (
    GODAN_ENDINGS,
    GODAN_IRREGULARS,
    ICHIDAN_STEM_MORAE,
    ICHIDAN_SUFFIXES,
    KURU_FORMS,
    SURU_SUFFIXES,
    VERB_FORMS,
    godan_row,
)


class VerbType(StrEnum):
    """Verb conjugation classes (活用の種類)."""

    ICHIDAN = auto()   # 一段 (る-verb)
    GODAN = auto()     # 五段 (う-verb)
    SURU = auto()      # サ変
    KURU = auto()      # カ変


# Tag keywords checked in order; godan wins over ichidan when both appear
_TAG_KEYWORDS: tuple[tuple[tuple[str, ...], VerbType], ...] = (
    (("godan", "v5"), VerbType.GODAN),
    (("ichidan", "v1"), VerbType.ICHIDAN),
    (("suru", "vs"), VerbType.SURU),
    (("kuru", "vk"), VerbType.KURU),
)


def _verb_type_from_tags(tags: Iterable[str]) -> VerbType | None:
    tag_str = " ".join(tags).lower()
    for keywords, verb_type in _TAG_KEYWORDS:
        if any(keyword in tag_str for keyword in keywords):
            return verb_type
    return None


def _verb_type_from_ending(reading: str) -> VerbType | None:
    if reading.endswith("る"):
        stem = reading[:-1]
        # Heuristic: 走る and 帰る look ichidan but are godan
        if stem[-1:] in ICHIDAN_STEM_MORAE:
            return VerbType.ICHIDAN
        return VerbType.GODAN

    if reading.endswith(GODAN_ENDINGS):
        return VerbType.GODAN

    # Shadowed by the る rule above for every kana reading
    if reading.endswith("する"):
        return VerbType.SURU
    if reading in ("くる", "来る"):
        return VerbType.KURU

    return None


def detect_verb_type(reading: str, tags: Iterable[str] = ()) -> VerbType | None:
    """Detect the conjugation class of a dictionary-form verb.

    Explicit tags take precedence; otherwise the reading's ending is used.
    This is a heuristic - use dictionary tags for accuracy.

    Args:
        reading: Dictionary form (kana or kanji)
        tags: Free-text grammatical tags such as "v5m" or "Ichidan verb"

    Returns:
        The detected VerbType, or None if undetermined

    Examples:
        >>> detect_verb_type("のむ", [])
        <VerbType.GODAN: 'godan'>
        >>> detect_verb_type("たべる", ["Ichidan verb"])
        <VerbType.ICHIDAN: 'ichidan'>
    """
    return _verb_type_from_tags(tags) or _verb_type_from_ending(reading)


def _build_table(surfaces: Iterable[str]) -> list[ConjugationForm]:
    return [
        ConjugationForm(form_name, surface, usage)
        for (form_name, usage), surface in zip(VERB_FORMS, surfaces, strict=True)
    ]


def conjugate_ichidan(reading: str) -> list[ConjugationForm]:
    """Conjugate a Type II (ichidan) verb such as たべる."""
    stem = reading[:-1] if reading.endswith("る") else reading
    return _build_table([reading, *(stem + suffix for suffix in ICHIDAN_SUFFIXES)])


def conjugate_godan(reading: str) -> list[ConjugationForm]:
    """Conjugate a Type I (godan) verb.

    The final mora selects the row of stem fragments; irregular verbs
    (行く) then replace the row's て/た fragments.

    Examples:
        >>> [f.surface_text for f in conjugate_godan("のむ")][:4]
        ['のむ', 'のみます', 'のんで', 'のんだ']
    """
    head, tail = reading[:-1], reading[-1:]
    row = godan_row(tail)

    te, ta = row.te, row.ta
    override = GODAN_IRREGULARS.get(reading)
    if override is not None:
        te, ta = override.te, override.ta

    return _build_table([
        reading,
        head + row.masu + "ます",
        head + te,
        head + ta,
        head + row.masu + "ました",
        head + row.nai + "ない",
        head + row.masu + "ません",
        head + row.nai + "なかった",
        head + row.potential + "る",
        head + row.nai + "れる",
        head + row.nai + "せる",
        head + row.imperative,
        head + row.volitional + "う",
        head + row.conditional + "ば",
        head + ta + "ら",
    ])


def suru_prefix(reading: str) -> str:
    """Return the noun part of a する verb (empty for a bare する).

    Examples:
        >>> suru_prefix("べんきょうする")
        'べんきょう'
        >>> suru_prefix("べんきょう")
        'べんきょう'
        >>> suru_prefix("為る")
        '為'
    """
    if reading.endswith("する"):
        return reading[:-2]
    if reading.endswith(("す", "る")):
        return reading[:-1]
    return reading


def conjugate_suru(reading: str) -> list[ConjugationForm]:
    """Conjugate する or a noun + する compound (勉強する)."""
    prefix = suru_prefix(reading)
    return _build_table(prefix + suffix for suffix in SURU_SUFFIXES)


def conjugate_kuru() -> list[ConjugationForm]:
    """Conjugate くる (to come). Fully irregular, so no reading is needed."""
    return _build_table(KURU_FORMS)
