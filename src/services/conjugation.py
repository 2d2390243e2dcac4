"""Conjugation table generation for classified words.

``generate_conjugations`` dispatches on (category, verb type) to the verb
and adjective generators. Words that do not inflect, and verbs whose type
is unknown, get an empty table rather than an error.
"""

import logging

from .adjective import conjugate_i_adjective, conjugate_na_adjective
from .category import Category
from .forms import ConjugationForm
from .verb import (
    VerbType,
    conjugate_godan,
    conjugate_ichidan,
    conjugate_kuru,
    conjugate_suru,
)

logger = logging.getLogger(__name__)


# Badge text shown next to a table, keyed by verb type or adjective category
TABLE_LABELS: dict[str, str] = {
    VerbType.ICHIDAN: "Ichidan (る-verb)",
    VerbType.GODAN: "Godan (う-verb)",
    VerbType.SURU: "する verb",
    VerbType.KURU: "くる verb",
    Category.ADJECTIVE_I: "い-adjective",
    Category.ADJECTIVE_NA: "な-adjective",
}


def generate_conjugations(
    reading: str,
    category: Category,
    verb_type: VerbType | None = None,
) -> list[ConjugationForm]:
    """Generate the conjugation table for a dictionary-form word.

    Args:
        reading: Dictionary form (e.g. のむ, たかい, しずか)
        category: Grammatical category of the word
        verb_type: Verb class; required for verbs, ignored otherwise

    Returns:
        15 forms for verbs, 10 for adjectives, empty for everything else

    Examples:
        >>> len(generate_conjugations("たべる", Category.VERB, VerbType.ICHIDAN))
        15
        >>> generate_conjugations("ねこ", Category.NOUN)
        []
    """
    match category, verb_type:
        case Category.VERB, VerbType.ICHIDAN:
            return conjugate_ichidan(reading)
        case Category.VERB, VerbType.GODAN:
            return conjugate_godan(reading)
        case Category.VERB, VerbType.SURU:
            return conjugate_suru(reading)
        case Category.VERB, VerbType.KURU:
            return conjugate_kuru()
        case Category.ADJECTIVE_I, _:
            return conjugate_i_adjective(reading)
        case Category.ADJECTIVE_NA, _:
            return conjugate_na_adjective(reading)
        case _:
            logger.debug("No conjugation table for %r (%s, %s)", reading, category, verb_type)
            return []


def table_title(category: Category) -> str | None:
    """Heading for a word's conjugation table, or None if it has none."""
    match category:
        case Category.VERB:
            return "Verb Conjugations"
        case Category.ADJECTIVE_I | Category.ADJECTIVE_NA:
            return "Adjective Forms"
        case _:
            return None


def table_label(category: Category, verb_type: VerbType | None = None) -> str:
    """Badge for a table: the verb type if known, else the category."""
    key = verb_type or category
    return TABLE_LABELS.get(key, str(key))


def conjugation_table(
    reading: str,
    category: Category,
    verb_type: VerbType | None = None,
) -> tuple[str | None, list[ConjugationForm]]:
    """Rebuild the table for a stored word as (title, forms).

    A verb stored without a verb type yields (None, []); callers show
    that as "no inflection data available".
    """
    forms = generate_conjugations(reading, category, verb_type)
    if category == Category.VERB and verb_type is None:
        return None, forms
    return table_title(category), forms
