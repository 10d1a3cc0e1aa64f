"""
Translation record endpoints.

- POST   /api/newtranslation     translate a raw text body and store it
- GET    /api/translations       list all records
- GET    /api/translations/{id}  one record
- DELETE /api/translations/{id}  delete a record
"""

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from lingo import models
from lingo.database import get_db
from lingo.errors import TranslationError
from lingo.schemas import TranslationRecord, TranslationResult
from lingo.utils.translation import Translator, get_translator

router = APIRouter()


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def store_word_definitions(db: Session, translation_id: int, result: TranslationResult) -> int:
    """
    Save meanings for words not yet in the dictionary.

    Returns:
        Number of new words stored
    """
    words = {}
    for entry in result.words:
        if entry.word:
            words[entry.word] = entry.meanings

    if not words:
        return 0

    existing = {
        row.word
        for row in db.query(models.WordDefinition.word).filter(models.WordDefinition.word.in_(list(words)))
    }

    added = 0
    for word, meanings in words.items():
        if word in existing:
            continue
        db.add(models.WordDefinition(word=word, translation_id=translation_id, meanings=meanings))
        added += 1
    return added


def parse_translation_id(raw: str) -> int | None:
    try:
        return int(raw)
    except ValueError:
        return None


def save_translation(db: Session, text: str, result: TranslationResult, language: str) -> tuple[models.Translation, int]:
    """Store the record and its new word definitions in one commit."""
    entry = models.Translation(
        original_text=text,
        translation=result.translation,
        language=language,
    )
    db.add(entry)
    db.flush()

    added = store_word_definitions(db, entry.id, result)
    db.commit()
    db.refresh(entry)
    return entry, added


@router.post("/newtranslation", response_model=TranslationRecord)
async def new_translation(
    request: Request,
    language: str | None = None,
    db: Session = Depends(get_db),
    translator: Translator = Depends(get_translator),
):
    try:
        text = (await request.body()).decode("utf-8")
    except UnicodeDecodeError:
        return error_response(400, "Text must be UTF-8")

    print(f"📥 Received text: \"{text[:80]}...\"" if len(text) > 80 else f"📥 Received text: \"{text}\"")

    if not text.strip():
        return error_response(400, "Text to translate is empty")

    try:
        result = await translator.translate(text, source_lang=language)
    except TranslationError as e:
        print(f"❌ Translation error: {e}")
        return error_response(500, str(e))

    entry, added = await run_in_threadpool(save_translation, db, text, result, translator.target_lang)

    print(f"✅ Translation #{entry.id} saved ({added} new words)")
    return entry


@router.get("/translations", response_model=list[TranslationRecord])
def list_translations(db: Session = Depends(get_db)):
    return db.query(models.Translation).order_by(models.Translation.id).all()


@router.get("/translations/{translation_id}", response_model=TranslationRecord)
def get_translation(translation_id: str, db: Session = Depends(get_db)):
    iid = parse_translation_id(translation_id)
    if iid is None:
        return error_response(400, "Invalid ID")

    entry = db.get(models.Translation, iid)
    if entry is None:
        return error_response(404, f"translation with ID {iid} not found")
    return entry


@router.delete("/translations/{translation_id}")
def delete_translation(translation_id: str, db: Session = Depends(get_db)):
    iid = parse_translation_id(translation_id)
    if iid is None:
        return error_response(400, "Invalid ID")

    entry = db.get(models.Translation, iid)
    if entry is None:
        return error_response(404, f"translation with ID {iid} not found")

    db.delete(entry)
    db.commit()
    print(f"🗑️  Translation #{iid} deleted")
    return {"message": "Translation deleted"}
