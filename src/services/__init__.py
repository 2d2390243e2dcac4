"""Katsuyou services module."""

from .adjective import (
    conjugate_i_adjective,
    conjugate_na_adjective,
    get_adjective_stem,
)
from .category import (
    CATEGORY_LABELS,
    CATEGORY_RULES,
    Category,
    CategoryRule,
    DictionaryEntry,
    ResolvedEntry,
    classify,
    resolve_entry,
)
from .conjugation import (
    TABLE_LABELS,
    conjugation_table,
    generate_conjugations,
    table_label,
    table_title,
)
from .forms import ConjugationForm, normalize_reading, to_romaji
from .verb import (
    VerbType,
    conjugate_godan,
    conjugate_ichidan,
    conjugate_kuru,
    conjugate_suru,
    detect_verb_type,
    suru_prefix,
)

__all__ = [
    # Classification
    "Category",
    "CategoryRule",
    "CATEGORY_LABELS",
    "CATEGORY_RULES",
    "DictionaryEntry",
    "ResolvedEntry",
    "classify",
    "resolve_entry",
    # Verb conjugation
    "VerbType",
    "conjugate_godan",
    "conjugate_ichidan",
    "conjugate_kuru",
    "conjugate_suru",
    "detect_verb_type",
    "suru_prefix",
    # Adjective conjugation
    "conjugate_i_adjective",
    "conjugate_na_adjective",
    "get_adjective_stem",
    # Tables
    "ConjugationForm",
    "TABLE_LABELS",
    "conjugation_table",
    "generate_conjugations",
    "table_label",
    "table_title",
    # Romanization
    "normalize_reading",
    "to_romaji",
]
