"""
Application session state.

Holds what the learner sees: the active view, the loaded history,
the translation being viewed and the translate form. Every action returns
the session to a stable state, whatever the network does.
"""

from enum import Enum

from lingo.client import ApiClient
from lingo.errors import EmptyInput, NetworkFailure
from lingo.interleave import InterleaveView
from lingo.schemas import TranslationRecord


class View(str, Enum):
    HOME = "home"
    TRANSLATE = "translate"
    HISTORY = "history"
    DETAIL = "detail"


def require_text(text: str) -> None:
    """Raise EmptyInput for blank text, before any request is made."""
    if not text or not text.strip():
        raise EmptyInput()


class AppSession:
    def __init__(self, client: ApiClient, language: str = "German"):
        self.client = client
        self.view = View.HOME
        self.translations: list[TranslationRecord] = []
        self.current_translation: TranslationRecord | None = None
        self.text = ""
        self.language = language  # Source language sent with each translate request
        self.is_loading = False
        self.alert: str | None = None  # Message the user must see

    async def show(self, view: View) -> None:
        self.view = view
        if view == View.HISTORY:
            await self.load_translations()

    async def load_translations(self) -> None:
        try:
            self.translations = await self.client.list_translations()
        except NetworkFailure as e:
            print(f"❌ Error loading translations: {e}")

    async def translate(self) -> TranslationRecord | None:
        """
        Translate the current text.

        Blank text sets the alert and sends nothing. A network failure is
        logged and leaves the text in place for another try.
        """
        self.alert = None
        try:
            require_text(self.text)
        except EmptyInput as e:
            self.alert = str(e)
            return None

        self.is_loading = True
        try:
            translation = await self.client.create_translation(self.text, language=self.language)
            self.current_translation = translation
            self.text = ""
            await self.load_translations()
            return translation
        except NetworkFailure as e:
            print(f"❌ Error during translation: {e}")
            return None
        finally:
            self.is_loading = False

    async def view_translation(self, translation_id: int) -> None:
        try:
            translation = await self.client.get_translation(translation_id)
        except NetworkFailure as e:
            print(f"❌ Error loading translation #{translation_id}: {e}")
            return

        if translation is None:
            print(f"⚠️  Translation #{translation_id} not found")
            return

        self.current_translation = translation
        self.view = View.DETAIL

    async def delete_translation(self, translation_id: int) -> bool:
        try:
            await self.client.delete_translation(translation_id)
        except NetworkFailure as e:
            print(f"❌ Error deleting translation: {e}")
            return False

        if self.current_translation and self.current_translation.id == translation_id:
            self.current_translation = None
        await self.load_translations()
        self.view = View.HISTORY
        return True

    def interleave_view(self) -> InterleaveView | None:
        """Sentence pairs and word lookup for the current translation."""
        if self.current_translation is None:
            return None
        return InterleaveView(
            self.current_translation.original_text,
            self.current_translation.translation,
            self.client.get_definitions,
        )
