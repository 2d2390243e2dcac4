"""Pydantic models for Katsuyou API requests and responses."""

from pydantic import BaseModel, Field

from services import Category, VerbType
from settings import MAX_READING_LENGTH, MAX_TAGS


# ============================================================================
# Request Models
# ============================================================================


class ClassifyRequest(BaseModel):
    """Request body for classification."""
    parts_of_speech: list[str] = Field(
        ..., max_length=MAX_TAGS, description="Part-of-speech strings from a dictionary"
    )


class DetectRequest(BaseModel):
    """Request body for verb type detection."""
    reading: str = Field(..., max_length=MAX_READING_LENGTH, description="Dictionary form")
    tags: list[str] = Field(default_factory=list, max_length=MAX_TAGS, description="Grammatical tags")


class ResolveRequest(BaseModel):
    """A dictionary record to settle category and verb type for."""
    reading: str = Field(..., min_length=1, max_length=MAX_READING_LENGTH, description="Reading in kana")
    kanji: str | None = Field(None, max_length=MAX_READING_LENGTH, description="Kanji spelling")
    parts_of_speech: list[str] = Field(default_factory=list, max_length=MAX_TAGS)
    tags: list[str] = Field(default_factory=list, max_length=MAX_TAGS)
    category: Category | None = Field(None, description="Pre-computed category hint")
    verb_type: VerbType | None = Field(None, description="Pre-computed verb type hint")


class ConjugateRequest(BaseModel):
    """Request body for conjugation."""
    reading: str = Field(..., max_length=MAX_READING_LENGTH, description="Dictionary form")
    category: Category = Field(..., description="Word category")
    verb_type: VerbType | None = Field(None, description="Verb type (verbs only)")


# ============================================================================
# Response Components
# ============================================================================


class ConjugationFormModel(BaseModel):
    """Single row of a conjugation table."""
    form: str = Field(..., description="Form name, e.g. Te-form")
    japanese: str = Field(..., description="Conjugated word")
    romaji: str = Field(..., description="Romanized conjugated word")
    usage: str = Field(..., description="Short usage note")


# ============================================================================
# Response Models
# ============================================================================


class ClassifyResponse(BaseModel):
    """Response for /classify."""
    category: Category
    verb_type: VerbType | None = None
    label: str = Field(..., description="Display label for the category")


class DetectResponse(BaseModel):
    """Response for /detect."""
    reading: str
    verb_type: VerbType | None = Field(None, description="None when undetermined")


class ResolveResponse(BaseModel):
    """Response for /resolve."""
    reading: str
    kanji: str | None = None
    romaji: str = Field(..., description="Romanized reading")
    category: Category
    verb_type: VerbType | None = None
    label: str = Field(..., description="Display label for the category")
    sources: list[str] = Field(default_factory=list, description="Steps that settled the result")


class ConjugateResponse(BaseModel):
    """Response for /conjugate."""
    reading: str = Field(..., description="Dictionary form")
    category: Category
    verb_type: VerbType | None = None
    title: str | None = Field(None, description="Table heading")
    label: str = Field(..., description="Verb type or adjective class badge")
    conjugations: list[ConjugationFormModel] = Field(default_factory=list)
    count: int = Field(..., description="Number of forms; 0 when the word does not inflect")
