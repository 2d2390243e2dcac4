"""Katsuyou FastAPI application - Japanese word classification and conjugation API."""

import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

import settings
from models import (
    ClassifyRequest,
    ClassifyResponse,
    ConjugateRequest,
    ConjugateResponse,
    ConjugationFormModel,
    DetectRequest,
    DetectResponse,
    ResolveRequest,
    ResolveResponse,
)
from services import (
    CATEGORY_LABELS,
    DictionaryEntry,
    classify,
    conjugation_table,
    detect_verb_type,
    resolve_entry,
    table_label,
    to_romaji,
)

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# ============================================================================
# FastAPI Application
# ============================================================================


app = FastAPI(
    title="Katsuyou API",
    description="""Japanese word classification and conjugation API for language learning.

## Features
- **Classification**: Map dictionary part-of-speech tags to a word category
- **Verb types**: Detect ichidan, godan, する and くる verbs
- **Conjugation tables**: 15 verb forms or 10 adjective forms with romaji

## Endpoints
- `/classify` - Category and verb type from part-of-speech tags
- `/detect` - Verb type from a reading and tags
- `/resolve` - Settle category and verb type for a dictionary record
- `/conjugate` - Conjugation table for a dictionary form
""",
    version=settings.VERSION,
)


# ============================================================================
# Middleware
# ============================================================================


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Health Endpoints
# ============================================================================


@app.get("/", tags=["Health"])
async def root() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok", "service": "katsuyou", "version": settings.VERSION}


@app.get("/health", tags=["Health"])
async def health() -> dict[str, str]:
    """Detailed health check."""
    return {"status": "healthy", "version": settings.VERSION}


# ============================================================================
# Classification Endpoints
# ============================================================================


@app.post("/classify", response_model=ClassifyResponse, tags=["Classification"])
async def classify_endpoint(request: ClassifyRequest) -> ClassifyResponse:
    """
    Classify a word from its dictionary part-of-speech strings.

    Verb sub-types are checked first, then counters, adverbs, particles,
    expressions, adjectives and nouns, and finally a bare "verb".
    """
    try:
        category, verb_type = classify(request.parts_of_speech)
    except Exception as e:
        logger.exception("Classification failed")
        raise HTTPException(status_code=500, detail=f"Classification failed: {e!s}") from e
    return ClassifyResponse(category=category, verb_type=verb_type, label=CATEGORY_LABELS[category])


@app.post("/detect", response_model=DetectResponse, tags=["Classification"])
async def detect_endpoint(request: DetectRequest) -> DetectResponse:
    """
    Detect the verb type of a dictionary form.

    Tags win over the reading's ending; `verb_type` is null when undetermined.
    """
    try:
        verb_type = detect_verb_type(request.reading, request.tags)
    except Exception as e:
        logger.exception("Verb type detection failed")
        raise HTTPException(status_code=500, detail=f"Detection failed: {e!s}") from e
    return DetectResponse(reading=request.reading, verb_type=verb_type)


@app.post("/resolve", response_model=ResolveResponse, tags=["Classification"])
async def resolve_endpoint(request: ResolveRequest) -> ResolveResponse:
    """
    Settle category and verb type for a dictionary record.

    A category hint other than `other` is used as-is; verbs without a
    verb type fall back to detection from the reading.
    """
    entry = DictionaryEntry(
        reading=request.reading,
        kanji=request.kanji,
        parts_of_speech=tuple(request.parts_of_speech),
        tags=tuple(request.tags),
        category=request.category,
        verb_type=request.verb_type,
    )
    try:
        resolved = resolve_entry(entry)
        romaji = to_romaji(request.reading)
    except Exception as e:
        logger.exception("Resolution failed for %r", request.reading)
        raise HTTPException(status_code=500, detail=f"Resolution failed: {e!s}") from e
    return ResolveResponse(
        reading=request.reading,
        kanji=request.kanji,
        romaji=romaji,
        category=resolved.category,
        verb_type=resolved.verb_type,
        label=resolved.label,
        sources=list(resolved.sources),
    )


# ============================================================================
# Conjugation Endpoints
# ============================================================================


@app.post("/conjugate", response_model=ConjugateResponse, tags=["Conjugation"])
async def conjugate_endpoint(request: ConjugateRequest) -> ConjugateResponse:
    """
    Generate the conjugation table for a dictionary form.

    Verbs need a `verb_type`; without one, and for words that do not
    inflect, the table is empty.
    """
    try:
        title, forms = conjugation_table(request.reading, request.category, request.verb_type)
        conjugations = [ConjugationFormModel(**form.to_dict()) for form in forms]
    except Exception as e:
        logger.exception("Conjugation failed for %r", request.reading)
        raise HTTPException(status_code=500, detail=f"Conjugation failed: {e!s}") from e
    return ConjugateResponse(
        reading=request.reading,
        category=request.category,
        verb_type=request.verb_type,
        title=title,
        label=table_label(request.category, request.verb_type),
        conjugations=conjugations,
        count=len(conjugations),
    )


# ============================================================================
# CLI Entry Point
# ============================================================================


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
