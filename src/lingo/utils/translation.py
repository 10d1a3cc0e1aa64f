"""
Text translation with per-word meanings via OpenAI.

One request returns both the idiomatic translation of the whole text and,
for every source word, its most common meanings in the target language.
"""

import json

from openai import AsyncOpenAI
from pydantic import ValidationError

from lingo.config import (
    OPENAI_API_KEY,
    OPENAI_MAX_OUTPUT_TOKENS,
    OPENAI_MODEL,
    SOURCE_LANG,
    TARGET_LANG,
)
from lingo.errors import TranslationError
from lingo.schemas import TranslationResult

SYSTEM_PROMPT = """You translate {source} text to {target} for language learners.

Rules:
- Follow idioms instead of translating word-by-word
- "translation" is the full translated text
- "words" lists every word of the original text exactly as it appears, without punctuation
- Each word has its 3 most common {target} meanings, most common first
- No additional information"""

TRANSLATION_SCHEMA = {
    "type": "json_schema",
    "name": "translation_result",
    "strict": True,
    "schema": {
        "type": "object",
        "properties": {
            "translation": {"type": "string"},
            "words": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "word": {"type": "string"},
                        "meanings": {"type": "array", "items": {"type": "string"}},
                    },
                    "required": ["word", "meanings"],
                    "additionalProperties": False,
                },
            },
        },
        "required": ["translation", "words"],
        "additionalProperties": False,
    },
}


def parse_translation(raw: str) -> TranslationResult:
    """Parse the model's JSON output, tolerating code fences and wrapping quotes."""
    cleaned = raw.strip().replace("```json", "").replace("```", "").strip().strip('"')
    try:
        return TranslationResult.model_validate(json.loads(cleaned))
    except (json.JSONDecodeError, ValidationError) as e:
        raise TranslationError(f"error parsing translation payload: {e}") from e


class Translator:
    """OpenAI-backed translator."""

    def __init__(
        self,
        source_lang: str = SOURCE_LANG,
        target_lang: str = TARGET_LANG,
        model: str = OPENAI_MODEL,
        max_output_tokens: int = OPENAI_MAX_OUTPUT_TOKENS,
        api_key: str | None = OPENAI_API_KEY,
    ):
        self.source_lang = source_lang
        self.target_lang = target_lang
        self.model = model
        self.max_output_tokens = max_output_tokens
        self.api_key = api_key
        self._client: AsyncOpenAI | None = None

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self.api_key)
        return self._client

    async def translate(self, text: str, source_lang: str | None = None) -> TranslationResult:
        """Translate from source_lang (defaults to the configured source language)."""
        if not self.api_key:
            raise TranslationError("OPENAI_API_KEY not configured")

        try:
            response = await self.client.responses.create(
                model=self.model,
                instructions=SYSTEM_PROMPT.format(source=source_lang or self.source_lang, target=self.target_lang),
                input=text,
                max_output_tokens=self.max_output_tokens,
                temperature=0,
                store=False,
                text={"format": TRANSLATION_SCHEMA},
            )
        except Exception as e:
            raise TranslationError(f"error sending request: {type(e).__name__}: {e}") from e

        raw = (response.output_text or "").strip()
        if not raw:
            raise TranslationError("no translation provided in response")

        result = parse_translation(raw)
        print(f"🌐 Translated {len(text.split())}w → {len(result.words)} word entries")
        return result


_translator: Translator | None = None


def get_translator() -> Translator:
    """Shared translator instance (FastAPI dependency)."""
    global _translator
    if _translator is None:
        _translator = Translator()
    return _translator
