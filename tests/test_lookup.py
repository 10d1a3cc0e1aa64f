"""
Tests for the hover lookup controller, popup placement and interleave view.
"""

import asyncio

from lingo.errors import NetworkFailure
from lingo.interleave import InterleaveView, LookupController, LookupState, popup_position


class ControlledFetcher:
    """Definition fetcher whose responses are released by the test."""

    def __init__(self):
        self.requests = []
        self.pending = {}

    async def __call__(self, word):
        self.requests.append(word)
        future = asyncio.get_running_loop().create_future()
        self.pending.setdefault(word, []).append(future)
        return await future

    def resolve(self, word, meanings):
        self.pending[word].pop(0).set_result(meanings)

    def fail(self, word):
        self.pending[word].pop(0).set_exception(NetworkFailure("boom", status_code=500))


async def settle():
    for _ in range(5):
        await asyncio.sleep(0)


def test_popup_position_adds_scroll_and_gap():
    pos = popup_position(100, 50, scroll_y=300, gap=20)
    assert pos.x == 100
    assert pos.y == 370


def test_hover_shows_meanings_in_order():
    async def scenario():
        fetcher = ControlledFetcher()
        lookup = LookupController(fetcher, vertical_gap=20)
        assert lookup.state == LookupState.IDLE

        task = asyncio.create_task(lookup.hover_enter("gehe", 10, 40, scroll_y=100))
        await settle()
        assert fetcher.requests == ["gehe"]
        assert lookup.state == LookupState.PENDING
        assert lookup.popup is None

        fetcher.resolve("gehe", ["to go", "to walk"])
        await task

        assert lookup.state == LookupState.SHOWN
        popup = lookup.popup
        assert popup.word == "gehe"
        assert popup.meanings == ["to go", "to walk"]
        assert (popup.x, popup.y) == (10, 160)

    asyncio.run(scenario())


def test_hover_leave_clears_result():
    async def scenario():
        async def fetch(word):
            return ["here"]

        lookup = LookupController(fetch)
        await lookup.hover_enter("hier", 0, 0)
        assert lookup.state == LookupState.SHOWN

        lookup.hover_leave()
        assert lookup.state == LookupState.IDLE
        assert lookup.hovered_word is None
        assert lookup.popup is None

    asyncio.run(scenario())


def test_failed_lookup_degrades_to_no_popup():
    async def scenario():
        fetcher = ControlledFetcher()
        lookup = LookupController(fetcher)

        task = asyncio.create_task(lookup.hover_enter("bist", 0, 0))
        await settle()
        fetcher.fail("bist")
        await task

        assert lookup.state == LookupState.IDLE
        assert lookup.meanings == []
        assert lookup.popup is None

    asyncio.run(scenario())


def test_empty_result_shows_nothing():
    async def scenario():
        async def fetch(word):
            return []

        lookup = LookupController(fetch)
        await lookup.hover_enter("unbekannt", 0, 0)
        assert lookup.state == LookupState.IDLE
        assert lookup.popup is None

    asyncio.run(scenario())


def test_stale_response_after_leave_is_discarded():
    async def scenario():
        fetcher = ControlledFetcher()
        lookup = LookupController(fetcher)

        task = asyncio.create_task(lookup.hover_enter("gehe", 0, 0))
        await settle()
        lookup.hover_leave()

        fetcher.resolve("gehe", ["to go"])
        await task

        assert lookup.state == LookupState.IDLE
        assert lookup.popup is None

    asyncio.run(scenario())


def test_stale_response_does_not_overwrite_newer_hover():
    async def scenario():
        fetcher = ControlledFetcher()
        lookup = LookupController(fetcher)

        slow = asyncio.create_task(lookup.hover_enter("Ich", 0, 0))
        await settle()
        lookup.hover_leave()
        fast = asyncio.create_task(lookup.hover_enter("gehe", 5, 5))
        await settle()

        fetcher.resolve("gehe", ["to go", "to walk"])
        await fast
        fetcher.resolve("Ich", ["I"])
        await slow

        assert lookup.state == LookupState.SHOWN
        assert lookup.popup.word == "gehe"
        assert lookup.popup.meanings == ["to go", "to walk"]

    asyncio.run(scenario())


def test_newer_hover_without_leave_discards_stale():
    async def scenario():
        fetcher = ControlledFetcher()
        lookup = LookupController(fetcher, vertical_gap=20)

        slow = asyncio.create_task(lookup.hover_enter("Ich", 0, 0))
        await settle()
        fast = asyncio.create_task(lookup.hover_enter("gehe", 5, 5))
        await settle()
        assert lookup.hovered_word == "gehe"
        assert lookup.state == LookupState.PENDING

        fetcher.resolve("gehe", ["to go", "to walk"])
        await fast
        fetcher.resolve("Ich", ["I"])
        await slow

        assert lookup.state == LookupState.SHOWN
        assert lookup.popup.word == "gehe"
        assert lookup.popup.meanings == ["to go", "to walk"]
        assert (lookup.popup.x, lookup.popup.y) == (5, 25)

    asyncio.run(scenario())


def test_stale_response_before_newer_one_is_ignored():
    async def scenario():
        fetcher = ControlledFetcher()
        lookup = LookupController(fetcher)

        slow = asyncio.create_task(lookup.hover_enter("Ich", 0, 0))
        await settle()
        fast = asyncio.create_task(lookup.hover_enter("gehe", 0, 0))
        await settle()

        fetcher.resolve("Ich", ["I"])
        await slow
        assert lookup.state == LookupState.PENDING
        assert lookup.popup is None

        fetcher.resolve("gehe", ["to go"])
        await fast
        assert lookup.popup.meanings == ["to go"]

    asyncio.run(scenario())


def test_empty_key_is_never_requested():
    async def scenario():
        fetcher = ControlledFetcher()
        lookup = LookupController(fetcher)
        await lookup.hover_enter("", 0, 0)
        assert fetcher.requests == []
        assert lookup.state == LookupState.IDLE

    asyncio.run(scenario())


def test_view_builds_rows_and_only_hovers_source_tokens():
    async def scenario():
        requested = []

        async def fetch(word):
            requested.append(word)
            return ["to go", "to walk"]

        view = InterleaveView("Ich gehe. Du bist hier. Extra.", "I go. You are here.", fetch)
        assert len(view.rows) == 2
        assert view.rows[0].pair == ("Ich gehe.", "I go.")

        target_token = view.rows[0].target_tokens[1]
        await view.hover(target_token, 0, 0)
        assert requested == []

        source_token = view.rows[0].source_tokens[1]
        assert source_token.lookup_key == "gehe"
        await view.hover(source_token, 0, 0)
        assert requested == ["gehe"]
        assert view.popup.meanings == ["to go", "to walk"]

        view.leave(source_token)
        assert view.popup is None

    asyncio.run(scenario())
