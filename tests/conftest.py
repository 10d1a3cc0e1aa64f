# tests/conftest.py
import os

# Keep tests off the on-disk database and the real OpenAI key
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.pop("OPENAI_API_KEY", None)

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from lingo import models
from lingo.client import ApiClient
from lingo.database import get_db
from lingo.errors import TranslationError
from lingo.main import app
from lingo.schemas import TranslationResult, WordEntry
from lingo.utils.translation import get_translator


class FakeTranslator:
    """Translator returning canned results keyed by source text."""

    target_lang = "English"

    def __init__(self):
        self.results = {}
        self.calls = []
        self.source_langs = []

    def add(self, text, translation, words=None):
        self.results[text] = TranslationResult(
            translation=translation,
            words=[WordEntry(word=w, meanings=m) for w, m in (words or {}).items()],
        )

    async def translate(self, text, source_lang=None):
        self.calls.append(text)
        self.source_langs.append(source_lang)
        if text not in self.results:
            raise TranslationError("no canned translation")
        return self.results[text]


@pytest.fixture
def db_session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    models.Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def translator():
    fake = FakeTranslator()
    fake.add(
        "Ich gehe. Du bist hier.",
        "I go. You are here.",
        {
            "Ich": ["I"],
            "gehe": ["to go", "to walk"],
            "Du": ["you"],
            "bist": ["are", "be"],
            "hier": ["here"],
        },
    )
    return fake


@pytest.fixture
def api(db_session_factory, translator):
    def override_get_db():
        db = db_session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_translator] = lambda: translator
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def test_client(api):
    return TestClient(api)


@pytest.fixture
def make_api_client(api):
    """Factory for ApiClient instances talking to the app in-process."""

    def factory():
        return ApiClient(base_url="http://test", transport=httpx.ASGITransport(app=api))

    return factory
