"""Static lexical tables for verb and adjective conjugation.

Everything here is immutable and built once at import time:
- godan rows keyed by the final mora of the dictionary form
- suffix templates for ichidan, する and i/na-adjectives
- the fully irregular くる table
- irregular overrides consulted after the regular lookups
"""

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class GodanRow:
    """Phonetic fragments for one godan ending (五段活用の行)."""

    masu: str          # い段 (連用形)
    te: str            # て形 with 音便
    ta: str            # た形 with 音便
    nai: str           # あ段 (未然形)
    potential: str     # え段 + る
    volitional: str    # お段 + う
    imperative: str    # え段 (命令形)
    conditional: str   # え段 + ば


@dataclass(frozen=True, slots=True)
class TeTaOverride:
    """Replacement て/た fragments for verbs that break their row's 音便."""

    te: str
    ta: str


_U_ROW = GodanRow("い", "って", "った", "わ", "え", "お", "え", "え")
_KU_ROW = GodanRow("き", "いて", "いた", "か", "け", "こ", "け", "け")
_GU_ROW = GodanRow("ぎ", "いで", "いだ", "が", "げ", "ご", "げ", "げ")
_SU_ROW = GodanRow("し", "して", "した", "さ", "せ", "そ", "せ", "せ")
_TSU_ROW = GodanRow("ち", "って", "った", "た", "て", "と", "て", "て")
_NU_ROW = GodanRow("に", "んで", "んだ", "な", "ね", "の", "ね", "ね")
_BU_ROW = GodanRow("び", "んで", "んだ", "ば", "べ", "ぼ", "べ", "べ")
_MU_ROW = GodanRow("み", "んで", "んだ", "ま", "め", "も", "め", "め")
_RU_ROW = GodanRow("り", "って", "った", "ら", "れ", "ろ", "れ", "れ")


def godan_row(mora: str) -> GodanRow:
    """Return the godan row for a verb's final mora.

    Unknown endings (including the empty string) take the る row.
    """
    match mora:
        case "う":
            return _U_ROW
        case "く":
            return _KU_ROW
        case "ぐ":
            return _GU_ROW
        case "す":
            return _SU_ROW
        case "つ":
            return _TSU_ROW
        case "ぬ":
            return _NU_ROW
        case "ぶ":
            return _BU_ROW
        case "む":
            return _MU_ROW
        case "る":
            return _RU_ROW
        case _:
            return _RU_ROW


# 行く uses 促音便 (いって) instead of the く row's イ音便 (いいて)
GODAN_IRREGULARS: MappingProxyType[str, TeTaOverride] = MappingProxyType({
    "いく": TeTaOverride(te="って", ta="った"),
    "行く": TeTaOverride(te="って", ta="った"),
})

# Final kana that mark a godan verb when no tag says otherwise
GODAN_ENDINGS = ("う", "く", "す", "つ", "ぬ", "ぶ", "む", "ぐ")

# い段/え段 morae before る that suggest an ichidan verb (heuristic only)
ICHIDAN_STEM_MORAE = frozenset({
    "い", "き", "ぎ", "し", "じ", "ち", "に", "ひ", "び", "ぴ",
    "え", "け", "げ", "せ", "ぜ", "て", "で", "ね", "へ", "べ", "ぺ",
    "め", "れ", "み",
})


# ============================================================================
# Verb templates
# ============================================================================


# (form name, usage note) in table order
VERB_FORMS: tuple[tuple[str, str], ...] = (
    ("Dictionary", "Plain present/future"),
    ("Masu", "Polite present/future"),
    ("Te-form", "Connecting, requests"),
    ("Ta-form", "Plain past"),
    ("Mashita", "Polite past"),
    ("Nai-form", "Plain negative"),
    ("Masen", "Polite negative"),
    ("Nakatta", "Plain past negative"),
    ("Potential", "Can do"),
    ("Passive", "Is done"),
    ("Causative", "Make/let do"),
    ("Imperative", "Command"),
    ("Volitional", "Let's do"),
    ("Conditional", "If"),
    ("Tara-form", "If/when"),
)

# Appended to the stem for every form after Dictionary
ICHIDAN_SUFFIXES = (
    "ます", "て", "た", "ました", "ない", "ません", "なかった",
    "られる", "られる", "させる", "ろ", "よう", "れば", "たら",
)

# Appended to the noun prefix (empty for a bare する)
SURU_SUFFIXES = (
    "する", "します", "して", "した", "しました", "しない", "しません", "しなかった",
    "できる", "される", "させる", "しろ", "しよう", "すれば", "したら",
)

KURU_FORMS = (
    "くる", "きます", "きて", "きた", "きました", "こない", "きません", "こなかった",
    "こられる", "こられる", "こさせる", "こい", "こよう", "くれば", "きたら",
)


# ============================================================================
# Adjective templates
# ============================================================================


# (form name, suffix, usage note); Dictionary is always the bare reading
I_ADJECTIVE_FORMS: tuple[tuple[str, str, str], ...] = (
    ("Dictionary", "", "Plain present"),
    ("Polite", "いです", "Polite present"),
    ("Past", "かった", "Plain past"),
    ("Past Polite", "かったです", "Polite past"),
    ("Negative", "くない", "Plain negative"),
    ("Neg. Polite", "くないです", "Polite negative"),
    ("Past Neg.", "くなかった", "Plain past neg."),
    ("Te-form", "くて", "Connecting"),
    ("Adverb", "く", "Adverbial form"),
    ("Conditional", "ければ", "If"),
)

NA_ADJECTIVE_FORMS: tuple[tuple[str, str, str], ...] = (
    ("Dictionary", "", "Plain/attributive"),
    ("Polite", "です", "Polite present"),
    ("Past", "だった", "Plain past"),
    ("Past Polite", "でした", "Polite past"),
    ("Negative", "じゃない", "Plain negative"),
    ("Neg. Polite", "じゃありません", "Polite negative"),
    ("Past Neg.", "じゃなかった", "Plain past neg."),
    ("Te-form", "で", "Connecting"),
    ("Adverb", "に", "Adverbial form"),
    ("Attributive", "な", "Before nouns"),
)
