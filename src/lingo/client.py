"""
Async client for the lingo HTTP API.

Any transport error, non-success status or malformed body raises
NetworkFailure. Missing words and records are not failures.
"""

from urllib.parse import quote

import httpx
from pydantic import ValidationError

from lingo.config import API_BASE_URL
from lingo.errors import NetworkFailure
from lingo.schemas import TranslationRecord


class ApiClient:
    def __init__(self, base_url: str = API_BASE_URL, transport: httpx.AsyncBaseTransport | None = None):
        # No timeout: a stalled call leaves the caller waiting
        self._http = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=None)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.aclose()

    async def aclose(self):
        await self._http.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            response = await self._http.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise NetworkFailure(f"{method} {path} failed: {type(e).__name__}: {e}") from e
        return response

    @staticmethod
    def _check(response: httpx.Response) -> None:
        if not response.is_success:
            raise NetworkFailure(
                f"{response.request.method} {response.request.url.path} "
                f"returned {response.status_code}: {response.text[:200]}",
                status_code=response.status_code,
            )

    @staticmethod
    def _json(response: httpx.Response):
        try:
            return response.json()
        except ValueError as e:
            raise NetworkFailure(f"invalid JSON from {response.request.url.path}: {e}") from e

    def _record(self, data) -> TranslationRecord:
        try:
            return TranslationRecord.model_validate(data)
        except ValidationError as e:
            raise NetworkFailure(f"invalid translation record: {e}") from e

    async def list_translations(self) -> list[TranslationRecord]:
        response = await self._request("GET", "/api/translations")
        self._check(response)
        return [self._record(item) for item in self._json(response) or []]

    async def create_translation(self, text: str, language: str | None = None) -> TranslationRecord:
        """POST the raw text, not JSON-wrapped. language is the source language name."""
        response = await self._request(
            "POST",
            "/api/newtranslation",
            params={"language": language} if language else None,
            content=text.encode("utf-8"),
            headers={"Content-Type": "text/plain; charset=utf-8"},
        )
        self._check(response)
        return self._record(self._json(response))

    async def get_translation(self, translation_id: int) -> TranslationRecord | None:
        response = await self._request("GET", f"/api/translations/{translation_id}")
        if response.status_code == 404:
            return None
        self._check(response)
        return self._record(self._json(response))

    async def delete_translation(self, translation_id: int) -> None:
        response = await self._request("DELETE", f"/api/translations/{translation_id}")
        self._check(response)

    async def get_definitions(self, word: str) -> list[str]:
        response = await self._request("GET", f"/api/definitions/{quote(word, safe='')}")
        if response.status_code == 404:
            return []
        self._check(response)
        meanings = self._json(response)
        if not isinstance(meanings, list):
            return []
        return [str(m) for m in meanings]
