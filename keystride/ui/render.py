"""Builds rich renderables from read-only session state."""

from __future__ import annotations

from typing import Mapping

from rich.align import Align
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.table import Table
from rich.text import Text

from keystride.core.session import CharState, Screen, TypingSession
from keystride.ui.colors import Palette, accuracy_color

CURSOR_STYLE = f"{Palette.BG} on {Palette.YELLOW}"
STATE_STYLES = {
    CharState.UNTYPED: Palette.DIM,
    CharState.CORRECT: Palette.GREEN,
    CharState.WRONG: f"underline {Palette.RED}",
}

MENU_HINT = "↑↓ navigate   enter select   q quit"
TYPING_HINT = "esc → menu   backspace → delete"
RESULTS_HINT = "enter/r retry   n new snippet   esc menu"


def format_clock(seconds: float) -> str:
    """Format whole seconds as MM:SS."""
    total = max(0, int(seconds))
    return f"{total // 60:02d}:{total % 60:02d}"


def _hint(text: str) -> Text:
    return Text(text, style=Palette.DIM, justify="center")


def render_menu(session: TypingSession, names: Mapping[str, str]) -> RenderableType:
    lines = Text(justify="center")
    lines.append("select a mode and press enter\n\n", style=Palette.DIM)
    for i, key in enumerate(session.categories):
        label = names.get(key, key)
        if i == session.selected_index:
            lines.append(f"▶  {label}\n", style=f"bold {Palette.YELLOW}")
        else:
            lines.append(f"   {label}\n", style=Palette.DIM)
    body = Group(Align.center(lines), Text(), _hint(MENU_HINT))
    return Panel(
        body,
        title=Text("  keystride  ", style=f"bold {Palette.TITLE}"),
        border_style=Palette.BORDER,
        padding=(1, 2),
    )


def render_snippet(session: TypingSession) -> Text:
    """Colour each snippet character by its state; newlines stay line breaks."""
    text = Text()
    states = session.char_states
    cursor = session.cursor
    for i, ch in enumerate(session.snippet):
        if ch == "\n":
            if i == cursor:
                text.append("↵", style=CURSOR_STYLE)
            elif states[i] is CharState.WRONG:
                text.append("↵", style=STATE_STYLES[CharState.WRONG])
            text.append("\n")
            continue
        style = CURSOR_STYLE if i == cursor else STATE_STYLES[states[i]]
        text.append(ch, style=style)
    if cursor == len(session.snippet):
        text.append(" ", style=f"on {Palette.YELLOW}")
    return text


def render_stats_bar(session: TypingSession, name: str) -> RenderableType:
    stats = session.live_stats()
    grid = Table.grid(expand=True)
    grid.add_column(justify="left", ratio=1)
    grid.add_column(justify="center", ratio=1)
    grid.add_column(justify="right", ratio=1)
    grid.add_row(
        Text(name, style=f"bold {Palette.TITLE}"),
        Text(f"{stats.wpm:.0f} wpm", style=f"bold {Palette.FG}"),
        Text(f"{stats.accuracy:.1f}% acc   {format_clock(session.elapsed())}", style=Palette.FG),
    )
    return Panel(grid, border_style=Palette.BORDER)


def render_progress(session: TypingSession) -> RenderableType:
    pct = int(session.progress() * 100)
    grid = Table.grid(expand=True, padding=(0, 1))
    grid.add_column(ratio=1)
    grid.add_column(width=4, justify="right")
    grid.add_row(
        ProgressBar(
            total=100,
            completed=pct,
            style=Palette.BORDER,
            complete_style=Palette.YELLOW,
            finished_style=Palette.YELLOW,
        ),
        Text(f"{pct}%", style=Palette.FG),
    )
    return Panel(grid, border_style=Palette.BORDER)


def render_typing(session: TypingSession, name: str) -> RenderableType:
    return Group(
        render_stats_bar(session, name),
        Panel(render_snippet(session), border_style=Palette.BORDER, padding=(1, 2)),
        render_progress(session),
        _hint(TYPING_HINT),
    )


def render_results(session: TypingSession, name: str) -> RenderableType:
    result = session.result()
    if result is None:
        return Text()
    grid = Table.grid(padding=(1, 4))
    grid.add_column(justify="left", style=Palette.DIM)
    grid.add_column(justify="right")
    grid.add_row("Mode", Text(name, style=f"bold {Palette.TITLE}"))
    grid.add_row("WPM", Text(f"{result.wpm:.0f}", style=f"bold {Palette.YELLOW}"))
    grid.add_row("Accuracy", Text(f"{result.accuracy:.1f}%", style=f"bold {accuracy_color(result.accuracy)}"))
    grid.add_row("Time", Text(f"{result.elapsed:.1f}s", style=f"bold {Palette.FG}"))
    errors_style = Palette.GREEN if result.errors == 0 else Palette.RED
    grid.add_row("Errors", Text(str(result.errors), style=f"bold {errors_style}"))
    body = Group(Align.center(grid), Text(), _hint(RESULTS_HINT))
    return Panel(
        body,
        title=Text("  results  ", style=f"bold {Palette.TITLE}"),
        border_style=Palette.YELLOW,
        padding=(1, 2),
    )


def render_screen(session: TypingSession, names: Mapping[str, str]) -> RenderableType:
    name = names.get(session.selected_category, session.selected_category)
    if session.screen is Screen.TYPING:
        return render_typing(session, name)
    if session.screen is Screen.RESULTS:
        return render_results(session, name)
    return render_menu(session, names)
