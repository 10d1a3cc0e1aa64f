from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from lingo import models
from lingo.database import get_db

router = APIRouter()


@router.get("/definitions/{word}", response_model=list[str])
def get_definitions(word: str, db: Session = Depends(get_db)):
    """Meanings for a word in stored order; unknown words give an empty list."""
    entry = db.query(models.WordDefinition).filter(models.WordDefinition.word == word).first()
    if entry is None:
        return []
    return list(entry.meanings or [])
