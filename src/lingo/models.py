"""
Database models for translations and word definitions
"""

from sqlalchemy import JSON, Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from lingo.database import Base


class Translation(Base):
    """A translated text"""

    __tablename__ = "translations"

    id = Column(Integer, primary_key=True, index=True)
    original_text = Column(Text, nullable=False)
    translation = Column(Text, nullable=False)
    language = Column(String(64), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class WordDefinition(Base):
    """Meanings of a source word, shared across translations"""

    __tablename__ = "word_definitions"

    id = Column(Integer, primary_key=True, index=True)
    word = Column(String(255), unique=True, index=True, nullable=False)
    translation_id = Column(Integer, nullable=False)  # Translation that introduced the word
    meanings = Column(JSON, nullable=False, default=list)
