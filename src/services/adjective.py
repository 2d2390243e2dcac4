"""Japanese adjective conjugation tables.

Supports both i-adjectives (形容詞) and na-adjectives (形容動詞).
"""

from .forms import ConjugationForm
from .tables import I_ADJECTIVE_FORMS, NA_ADJECTIVE_FORMS


def get_adjective_stem(adjective: str, is_i_adjective: bool = True) -> str:
    """Get the stem of an adjective.

    Args:
        adjective: Dictionary form of the adjective
        is_i_adjective: True for i-adjectives, False for na-adjectives

    Returns:
        The adjective stem (高 for 高い, 静か for 静か)
    """
    if not is_i_adjective:
        return adjective
    return adjective[:-1] if adjective.endswith("い") else adjective


def conjugate_i_adjective(reading: str) -> list[ConjugationForm]:
    """Build the 10-form table for an i-adjective.

    Examples:
        >>> [f.surface_text for f in conjugate_i_adjective("たかい")][:3]
        ['たかい', 'たかいです', 'たかかった']
    """
    stem = get_adjective_stem(reading, is_i_adjective=True)
    forms = [ConjugationForm(I_ADJECTIVE_FORMS[0][0], reading, I_ADJECTIVE_FORMS[0][2])]
    forms.extend(
        ConjugationForm(form_name, stem + suffix, usage)
        for form_name, suffix, usage in I_ADJECTIVE_FORMS[1:]
    )
    return forms


def conjugate_na_adjective(reading: str) -> list[ConjugationForm]:
    """Build the 10-form table for a na-adjective. The reading is never trimmed."""
    return [
        ConjugationForm(form_name, reading + suffix, usage)
        for form_name, suffix, usage in NA_ADJECTIVE_FORMS
    ]
