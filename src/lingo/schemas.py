from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class TranslationRecord(BaseModel):
    """Translation record as sent over the wire (camelCase fields)."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True, alias_generator=to_camel)

    id: int
    original_text: str
    translation: str
    language: str
    created_at: datetime | None = None


class WordEntry(BaseModel):
    word: str
    meanings: list[str]


class TranslationResult(BaseModel):
    """Payload returned by the translation model."""

    translation: str
    words: list[WordEntry] = []
