"""Grammatical category classification from dictionary part-of-speech tags.

Tags come from an external dictionary as free text ("Godan verb with 'mu'
ending", "v5m", "Adverb (fukushi)", ...). They are joined, lower-cased and
matched by substring against ``CATEGORY_RULES``; the first matching rule wins.
Verb sub-types are checked before the generic categories, and the bare "verb"
keyword only after those, so "adverb" is never mistaken for a verb.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .verb import VerbType, detect_verb_type

logger = logging.getLogger(__name__)


class Category(StrEnum):
    """Coarse grammatical categories (品詞)."""

    VERB = "verb"
    NOUN = "noun"
    ADJECTIVE_I = "adjective-i"
    ADJECTIVE_NA = "adjective-na"
    ADVERB = "adverb"
    PARTICLE = "particle"
    EXPRESSION = "expression"
    COUNTER = "counter"
    OTHER = "other"


CATEGORY_LABELS: dict[Category, str] = {
    Category.VERB: "Verb",
    Category.NOUN: "Noun",
    Category.ADJECTIVE_I: "い-Adjective",
    Category.ADJECTIVE_NA: "な-Adjective",
    Category.ADVERB: "Adverb",
    Category.PARTICLE: "Particle",
    Category.EXPRESSION: "Expression",
    Category.COUNTER: "Counter",
    Category.OTHER: "Other",
}


@dataclass(frozen=True, slots=True)
class CategoryRule:
    """Match any keyword -> (category, verb_type)."""

    keywords: tuple[str, ...]
    category: Category
    verb_type: VerbType | None = None

    def matches(self, pos: str) -> bool:
        return any(keyword in pos for keyword in self.keywords)


# Order is significant: first match wins
CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(("ichidan", "v1"), Category.VERB, VerbType.ICHIDAN),
    CategoryRule(("godan", "v5"), Category.VERB, VerbType.GODAN),
    CategoryRule(("suru", "vs-"), Category.VERB, VerbType.SURU),
    CategoryRule(("kuru", "vk"), Category.VERB, VerbType.KURU),
    CategoryRule(("counter",), Category.COUNTER),
    CategoryRule(("adverb",), Category.ADVERB),
    CategoryRule(("particle",), Category.PARTICLE),
    CategoryRule(("expression",), Category.EXPRESSION),
    CategoryRule(("i-adjective", "adj-i"), Category.ADJECTIVE_I),
    CategoryRule(("na-adjective", "adj-na"), Category.ADJECTIVE_NA),
    CategoryRule(("noun",), Category.NOUN),
    # Verbs with no sub-type tag default to godan
    CategoryRule(("verb",), Category.VERB, VerbType.GODAN),
)


def classify(tags: Iterable[str]) -> tuple[Category, VerbType | None]:
    """Classify a word from its part-of-speech tags.

    Args:
        tags: Free-text part-of-speech strings

    Returns:
        (category, verb_type); verb_type is None for non-verbs

    Examples:
        >>> classify(["Godan verb with 'mu' ending", "Transitive verb"])
        (<Category.VERB: 'verb'>, <VerbType.GODAN: 'godan'>)
        >>> classify(["Adverb (fukushi)"])
        (<Category.ADVERB: 'adverb'>, None)
    """
    pos = " ".join(tags).lower()
    for rule in CATEGORY_RULES:
        if rule.matches(pos):
            logger.debug("Classified %r as %s (%s)", pos, rule.category, rule.verb_type)
            return rule.category, rule.verb_type
    return Category.OTHER, None


@dataclass(frozen=True, slots=True)
class DictionaryEntry:
    """A dictionary record as supplied by the lookup or storage layer."""

    reading: str
    kanji: str | None = None
    parts_of_speech: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    category: Category | None = None
    verb_type: VerbType | None = None


@dataclass(frozen=True, slots=True)
class ResolvedEntry:
    """Category and verb type settled for a dictionary record."""

    entry: DictionaryEntry
    category: Category
    verb_type: VerbType | None = None
    sources: tuple[str, ...] = ()

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self.category]


def resolve_entry(entry: DictionaryEntry) -> ResolvedEntry:
    """Settle the category and verb type of a dictionary record.

    A category hint other than ``other`` is trusted as-is; otherwise the
    parts of speech are classified. A verb still lacking a sub-type falls
    back to ``detect_verb_type`` over the reading and all tags, and a
    non-verb never keeps a verb type.

    ``sources`` records which step produced each value ("hint", "tags",
    "detected") for display and debugging.
    """
    if entry.category is not None and entry.category != Category.OTHER:
        category, verb_type = entry.category, entry.verb_type
        sources = ("hint",)
    else:
        category, verb_type = classify(entry.parts_of_speech)
        sources = ("tags",)

    if category != Category.VERB:
        return ResolvedEntry(entry, category, None, sources)

    if verb_type is None:
        verb_type = detect_verb_type(entry.reading, [*entry.parts_of_speech, *entry.tags])
        sources += ("detected",)
        if verb_type is None:
            logger.debug("No verb type determined for %r", entry.reading)

    return ResolvedEntry(entry, category, verb_type, sources)
