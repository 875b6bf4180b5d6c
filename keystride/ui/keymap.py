"""Routes terminal key events to session commands for the active screen."""

from __future__ import annotations

from typing import Optional

from keystride.core.session import Screen, TypingSession

QUIT_KEYS = ("ctrl+c",)


def dispatch_key(session: TypingSession, key: str, character: Optional[str] = None) -> bool:
    """Apply one key event to ``session``. Returns True when the app should quit."""
    if key in QUIT_KEYS:
        return True
    if session.screen is Screen.MENU:
        return _handle_menu(session, key)
    if session.screen is Screen.TYPING:
        _handle_typing(session, key, character)
    else:
        _handle_results(session, key)
    return False


def _handle_menu(session: TypingSession, key: str) -> bool:
    if key in ("up", "k"):
        session.select_previous_category()
    elif key in ("down", "j"):
        session.select_next_category()
    elif key in ("enter", "space"):
        session.start_session()
    elif key == "q":
        return True
    return False


def _handle_typing(session: TypingSession, key: str, character: Optional[str]) -> None:
    if key == "escape":
        session.cancel_to_menu()
    elif key == "backspace":
        session.backspace()
    elif key == "enter":
        session.type_character("\n")
    elif key == "tab":
        session.type_character("\t")
    elif character is not None and len(character) == 1 and character.isprintable():
        session.type_character(character)


def _handle_results(session: TypingSession, key: str) -> None:
    if key in ("enter", "r"):
        session.restart_session()
    elif key == "n":
        session.new_snippet_session()
    elif key in ("escape", "q"):
        session.cancel_to_menu()
