"""Tests for keystride.ui.main_window – the textual app driven through its pilot."""

from __future__ import annotations

import pytest

from keystride.core.clock import ManualClock
from keystride.core.session import CharState, Screen, TypingSession
from keystride.ui.main_window import TypingApp
from tests.fakes import FakeCorpus

NAMES = {"english": "English", "code": "Code"}
TICK = 0.05

# pilot key names for each character of the snippets below
KEYS = {" ": "space", "\t": "tab", "\n": "enter", "(": "left_parenthesis"}


def make_app(clock: ManualClock, snippets=None):
    corpus = FakeCorpus(snippets or {"english": ["hello world"], "code": ["a\tb\nc"]})
    session = TypingSession(["english", "code"], corpus, clock=clock)
    return TypingApp(session, NAMES, tick_interval=TICK), session


async def type_text(pilot, text: str) -> None:
    await pilot.press(*[KEYS.get(ch, ch) for ch in text])


# ---------------------------------------------------------------------------
# Key forwarding
# ---------------------------------------------------------------------------

class TestKeys:
    @pytest.mark.asyncio
    async def test_enter_starts_and_typing_finishes(self, clock: ManualClock):
        app, session = make_app(clock)
        async with app.run_test() as pilot:
            await pilot.press("enter")
            assert session.screen is Screen.TYPING
            await type_text(pilot, "hello world")
            assert session.screen is Screen.RESULTS
            assert session.error_count == 0

    @pytest.mark.asyncio
    async def test_tab_and_enter_are_typed(self, clock: ManualClock):
        app, session = make_app(clock)
        async with app.run_test() as pilot:
            await pilot.press("down", "enter")
            assert session.snippet == "a\tb\nc"
            await type_text(pilot, "a\tb\n")
            assert session.cursor == 4
            assert session.char_states[:4] == (CharState.CORRECT,) * 4

    @pytest.mark.asyncio
    async def test_shifted_and_punctuation_keys(self, clock: ManualClock):
        app, session = make_app(clock, {"english": ["A b("], "code": ["x"]})
        async with app.run_test() as pilot:
            await pilot.press("enter")
            await type_text(pilot, "A b(")
            assert session.screen is Screen.RESULTS
            assert session.error_count == 0

    @pytest.mark.asyncio
    async def test_escape_returns_to_menu(self, clock: ManualClock):
        app, session = make_app(clock)
        async with app.run_test() as pilot:
            await pilot.press("enter", "h", "escape")
            assert session.screen is Screen.MENU

    @pytest.mark.asyncio
    async def test_ctrl_c_exits(self, clock: ManualClock):
        app, _ = make_app(clock)
        async with app.run_test() as pilot:
            await pilot.press("ctrl+c")
            await pilot.pause()
        assert app.return_code == 0

    @pytest.mark.asyncio
    async def test_q_on_menu_exits(self, clock: ManualClock):
        app, _ = make_app(clock)
        async with app.run_test() as pilot:
            await pilot.press("q")
            await pilot.pause()
        assert app.return_code == 0


# ---------------------------------------------------------------------------
# Periodic tick
# ---------------------------------------------------------------------------

class TestTick:
    @pytest.mark.asyncio
    async def test_tick_refreshes_wpm_while_typing(self, clock: ManualClock):
        app, session = make_app(clock)
        async with app.run_test() as pilot:
            await pilot.press("enter", "h", "e")
            # both keys landed at the same instant, so no rate yet
            assert session.live_stats().wpm == 0.0
            clock.advance(12)
            await pilot.pause(TICK * 4)
            # (2 / 5) / (12 / 60)
            assert session.live_stats().wpm == pytest.approx(2.0)

    @pytest.mark.asyncio
    async def test_tick_leaves_finished_round_alone(self, clock: ManualClock):
        app, session = make_app(clock)
        async with app.run_test() as pilot:
            await pilot.press("enter", "h")
            clock.advance(12)
            await type_text(pilot, "ello world")
            assert session.screen is Screen.RESULTS
            stats = session.live_stats()
            elapsed = session.elapsed()
            clock.advance(60)
            await pilot.pause(TICK * 4)
            assert session.live_stats() == stats
            assert session.elapsed() == elapsed
