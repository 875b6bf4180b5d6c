"""Full-screen terminal window for the typing trainer."""

from __future__ import annotations

import logging
from typing import Mapping

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static

from keystride.core.session import TypingSession
from keystride.ui.colors import Palette
from keystride.ui.keymap import dispatch_key
from keystride.ui.render import render_screen

logger = logging.getLogger(__name__)


class TypingApp(App):
    """Renders the session after every key press and on a fixed tick."""

    CSS = f"""
    Screen {{
        background: {Palette.BG};
        align: center middle;
    }}

    #view {{
        width: 85%;
        height: auto;
        max-height: 100%;
    }}
    """

    TITLE = "keystride"
    ENABLE_COMMAND_PALETTE = False

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
    ]

    def __init__(
        self,
        session: TypingSession,
        names: Mapping[str, str],
        tick_interval: float = 0.1,
    ) -> None:
        super().__init__()
        self._typing_session = session
        self._category_names = dict(names)
        self._tick_seconds = tick_interval

    def compose(self) -> ComposeResult:
        yield Static(id="view")

    def on_mount(self) -> None:
        self._show_session()
        self.set_interval(self._tick_seconds, self._tick_session)

    def on_key(self, event: events.Key) -> None:
        event.prevent_default()
        event.stop()
        if dispatch_key(self._typing_session, event.key, event.character):
            logger.info("Quit requested")
            self.exit()
            return
        self._show_session()

    def _tick_session(self) -> None:
        self._typing_session.tick()
        self._show_session()

    def _show_session(self) -> None:
        self.query_one("#view", Static).update(render_screen(self._typing_session, self._category_names))
