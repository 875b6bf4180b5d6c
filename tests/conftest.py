"""Shared fixtures for keystride tests."""

from __future__ import annotations

import pytest

from keystride.core.clock import ManualClock
from keystride.core.session import TypingSession
from tests.fakes import FakeCorpus


@pytest.fixture()
def clock() -> ManualClock:
    return ManualClock(start=100.0)


@pytest.fixture()
def corpus() -> FakeCorpus:
    return FakeCorpus(
        {
            "english": ["cat", "dog"],
            "rust": ["fn x() {\n}"],
            "python": ["def f():\n    pass"],
        }
    )


@pytest.fixture()
def session(corpus: FakeCorpus, clock: ManualClock) -> TypingSession:
    return TypingSession(["english", "rust", "python"], corpus, clock=clock)


@pytest.fixture()
def typing_session(session: TypingSession) -> TypingSession:
    """Session already on the typing screen with the snippet "cat"."""
    session.start_session()
    return session
