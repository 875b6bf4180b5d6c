from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from keystride.core.clock import Clock, MonotonicClock
from keystride.core.snippets import SnippetSource

logger = logging.getLogger(__name__)

# Standard "characters per word" convention for WPM.
CHARS_PER_WORD = 5.0


class Screen(str, Enum):
    MENU = "menu"
    TYPING = "typing"
    RESULTS = "results"


class CharState(str, Enum):
    UNTYPED = "untyped"
    CORRECT = "correct"
    WRONG = "wrong"


@dataclass(frozen=True)
class LiveStats:
    """WPM and accuracy (percent) of the round in progress."""

    wpm: float = 0.0
    accuracy: float = 100.0


@dataclass
class RoundResult:
    """Summary of a finished round, shown on the results screen."""

    category: str
    wpm: float
    accuracy: float
    elapsed: float
    errors: int


class TypingSession:
    """Owns the state of one typing trainer: menu selection and the active round.

    All commands are total. A command issued on the wrong screen, or one whose
    precondition does not hold (typing past the end, backspace at the start),
    is a no-op rather than an error, so the input layer can forward every key
    without checking state first.

    Statistics are recomputed from the character states on every mutation and
    on :meth:`tick`:
      * **WPM** – (positions currently Correct / 5) / elapsed minutes.
      * **Accuracy** – (cursor − positions currently Wrong) / cursor × 100.

    Both describe the *current* text, so correcting a mistake with backspace
    restores accuracy. Once the round finishes the stats are frozen.
    """

    def __init__(
        self,
        categories: Sequence[str],
        corpus: SnippetSource,
        clock: Optional[Clock] = None,
        selected: Optional[str] = None,
    ) -> None:
        """Create a session on the menu screen; ``selected`` preselects a menu entry."""
        if not categories:
            raise ValueError("TypingSession needs at least one category")
        self._categories = list(categories)
        self._corpus = corpus
        self._clock = clock or MonotonicClock()

        self._screen = Screen.MENU
        self._selected_index = 0
        if selected is not None:
            if selected in self._categories:
                self._selected_index = self._categories.index(selected)
            else:
                logger.warning("Unknown category %r, falling back to %r", selected, self._categories[0])
        self._category = self._categories[self._selected_index]

        self._snippet = ""
        self._char_states: List[CharState] = []
        self._cursor = 0
        self._error_count = 0
        self._started_at: Optional[float] = None
        self._finished_at: Optional[float] = None
        self._stats = LiveStats()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def screen(self) -> Screen:
        """Screen currently shown: menu, typing or results."""
        return self._screen

    @property
    def categories(self) -> Tuple[str, ...]:
        """Category keys in menu order."""
        return tuple(self._categories)

    @property
    def selected_index(self) -> int:
        """Index of the menu entry under the menu cursor."""
        return self._selected_index

    @property
    def selected_category(self) -> str:
        """Category of the current (or last) round."""
        return self._category

    @property
    def snippet(self) -> str:
        """Text of the active round (empty before the first round)."""
        return self._snippet

    @property
    def char_states(self) -> Tuple[CharState, ...]:
        """State of every snippet position, in order."""
        return tuple(self._char_states)

    @property
    def cursor(self) -> int:
        """Index of the next position to be typed."""
        return self._cursor

    @property
    def error_count(self) -> int:
        """Number of positions currently marked Wrong."""
        return self._error_count

    @property
    def started_at(self) -> Optional[float]:
        """Clock reading of the first keystroke of the round, if any."""
        return self._started_at

    @property
    def finished_at(self) -> Optional[float]:
        """Clock reading at which the last character was typed, if finished."""
        return self._finished_at

    def live_stats(self) -> LiveStats:
        """Return the most recently computed WPM and accuracy."""
        return self._stats

    def correct_count(self) -> int:
        """Return the number of positions currently marked Correct."""
        return sum(1 for state in self._char_states if state is CharState.CORRECT)

    def progress(self) -> float:
        """Fraction of the snippet typed, in [0, 1]."""
        if not self._snippet:
            return 0.0
        return self._cursor / len(self._snippet)

    def elapsed(self) -> float:
        """Seconds since the first keystroke, frozen once the round finishes."""
        if self._started_at is None:
            return 0.0
        if self._finished_at is not None:
            return self._finished_at - self._started_at
        return self._clock.now() - self._started_at

    def result(self) -> Optional[RoundResult]:
        """Return the finished round's summary, or None outside the results screen."""
        if self._screen is not Screen.RESULTS:
            return None
        return RoundResult(
            category=self._category,
            wpm=self._stats.wpm,
            accuracy=self._stats.accuracy,
            elapsed=self.elapsed(),
            errors=self._error_count,
        )

    # ------------------------------------------------------------------
    # Menu
    # ------------------------------------------------------------------

    def select_next_category(self) -> None:
        """Move the menu cursor down, wrapping to the first entry."""
        if self._screen is not Screen.MENU:
            return
        self._selected_index = (self._selected_index + 1) % len(self._categories)

    def select_previous_category(self) -> None:
        """Move the menu cursor up, wrapping to the last entry."""
        if self._screen is not Screen.MENU:
            return
        self._selected_index = (self._selected_index - 1) % len(self._categories)

    # ------------------------------------------------------------------
    # Round lifecycle
    # ------------------------------------------------------------------

    def start_session(self) -> None:
        """Start a round in the category under the menu cursor."""
        if self._screen is not Screen.MENU:
            logger.debug("start_session ignored on %s", self._screen.value)
            return
        category = self._categories[self._selected_index]
        self._begin_round(category, self._corpus.fetch_snippet(category))

    def cancel_to_menu(self) -> None:
        """Abandon the round or leave the results, returning to the menu."""
        if self._screen is Screen.MENU:
            return
        if self._screen is Screen.TYPING:
            logger.info("Round abandoned at %d/%d characters", self._cursor, len(self._snippet))
        self._screen = Screen.MENU

    def restart_session(self) -> None:
        """Retry the finished round's snippet from scratch."""
        if self._screen is not Screen.RESULTS:
            logger.debug("restart_session ignored on %s", self._screen.value)
            return
        self._begin_round(self._category, self._snippet)

    def new_snippet_session(self) -> None:
        """Start a new round with a fresh snippet from the same category."""
        if self._screen is not Screen.RESULTS:
            logger.debug("new_snippet_session ignored on %s", self._screen.value)
            return
        self._begin_round(self._category, self._corpus.fetch_snippet(self._category))

    def _begin_round(self, category: str, snippet: str) -> None:
        """Reset round state for ``snippet`` and switch to the typing screen."""
        if not snippet:
            # An empty snippet can never be typed, so no round is started.
            logger.warning("Empty snippet for category %r, round not started", category)
            return
        self._category = category
        self._snippet = snippet
        self._char_states = [CharState.UNTYPED] * len(snippet)
        self._cursor = 0
        self._error_count = 0
        self._started_at = None
        self._finished_at = None
        self._stats = LiveStats()
        self._screen = Screen.TYPING
        logger.info("Round started: category=%s length=%d", category, len(snippet))

    # ------------------------------------------------------------------
    # Typing
    # ------------------------------------------------------------------

    def type_character(self, char: str) -> None:
        """Match one typed character against the cursor position and advance."""
        if self._screen is not Screen.TYPING or self._cursor >= len(self._snippet):
            return
        if not isinstance(char, str) or len(char) != 1:
            logger.debug("Ignoring non-character input %r", char)
            return

        now = self._clock.now()
        if self._started_at is None:
            self._started_at = now

        if char == self._snippet[self._cursor]:
            self._char_states[self._cursor] = CharState.CORRECT
        else:
            self._char_states[self._cursor] = CharState.WRONG
            self._error_count += 1
        self._cursor += 1
        self._update_stats(now)

        if self._cursor == len(self._snippet):
            self._finished_at = now
            self._screen = Screen.RESULTS
            logger.info(
                "Round finished: %.1f wpm, %.1f%% accuracy, %d errors in %.1fs",
                self._stats.wpm,
                self._stats.accuracy,
                self._error_count,
                self.elapsed(),
            )

    def backspace(self) -> None:
        """Step the cursor back one position and clear its state."""
        if self._screen is not Screen.TYPING or self._cursor == 0:
            return
        self._cursor -= 1
        if self._char_states[self._cursor] is CharState.WRONG:
            self._error_count = max(0, self._error_count - 1)
        self._char_states[self._cursor] = CharState.UNTYPED
        self._update_stats(self._clock.now())

    def tick(self) -> None:
        """Refresh live stats from the clock; does nothing once the round is over."""
        if self._started_at is None or self._finished_at is not None:
            return
        self._update_stats(self._clock.now())

    def _update_stats(self, now: float) -> None:
        """Recompute WPM and accuracy as of ``now``; values that cannot be computed keep their prior value."""
        if self._started_at is None:
            return
        wpm = self._stats.wpm
        accuracy = self._stats.accuracy
        elapsed = now - self._started_at
        if elapsed > 0:
            wpm = (self.correct_count() / CHARS_PER_WORD) / (elapsed / 60.0)
        if self._cursor > 0:
            accuracy = ((self._cursor - self._error_count) / self._cursor) * 100.0
        self._stats = LiveStats(wpm=wpm, accuracy=accuracy)
