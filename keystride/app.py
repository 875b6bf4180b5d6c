"""Application entry point and setup for the keystride typing trainer."""

import logging
from pathlib import Path

from keystride.core.session import TypingSession
from keystride.core.settings import Settings, SettingsStore
from keystride.core.snippets import SnippetRepository
from keystride.ui.main_window import TypingApp


def configure_logging(settings: Settings) -> None:
    """Send application logs to the log file; the terminal belongs to the UI."""
    log_file = Path(settings.log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        filename=str(log_file),
    )


def run() -> None:
    """Load settings and the snippet corpus, then start the terminal UI."""
    settings = SettingsStore().load()
    configure_logging(settings)

    snippets = SnippetRepository()
    names = {category.key: category.name for category in snippets.all()}
    session = TypingSession(
        categories=snippets.keys(),
        corpus=snippets,
        selected=settings.default_category,
    )
    logging.info("Starting with %d categories", len(names))

    TypingApp(session, names, tick_interval=settings.tick_interval).run()


if __name__ == "__main__":
    run()
