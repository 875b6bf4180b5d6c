from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Protocol, Tuple

import yaml

logger = logging.getLogger(__name__)

DEFAULT_SNIPPETS_DIR = Path(__file__).resolve().parent.parent / "data" / "snippets"


class SnippetSource(Protocol):
    def fetch_snippet(self, category: str) -> str: ...


@dataclass(frozen=True)
class Category:
    key: str
    name: str
    snippets: Tuple[str, ...]


class SnippetRepository:
    """Snippet corpus loaded from ``data/snippets/*.yaml``, one file per category."""

    def __init__(self, base_dir: Optional[Path] = None, rng: Optional[random.Random] = None) -> None:
        self._base_dir = base_dir or DEFAULT_SNIPPETS_DIR
        self._rng = rng or random.Random()
        self._categories = self._load_categories()
        self._last: Dict[str, str] = {}

    def all(self) -> List[Category]:
        return list(self._categories.values())

    def keys(self) -> List[str]:
        return list(self._categories.keys())

    def get(self, key: str) -> Category:
        return self._categories[key]

    def fetch_snippet(self, category: str) -> str:
        """Pick a snippet for ``category``, avoiding an immediate repeat."""
        pool = list(self.get(category).snippets)
        previous = self._last.get(category)
        if len(pool) > 1 and previous in pool:
            pool.remove(previous)
        snippet = self._rng.choice(pool)
        self._last[category] = snippet
        return snippet

    def _load_categories(self) -> Dict[str, Category]:
        base_dir = self._base_dir
        if not base_dir.exists():
            raise FileNotFoundError(f"Snippets directory not found: {base_dir}")

        loaded: List[Tuple[int, Category]] = []
        for path in sorted(base_dir.glob("*.yaml")):
            raw = yaml.safe_load(path.read_text(encoding="utf-8"))
            if not raw or not isinstance(raw, dict):
                raise ValueError(f"{path.name}: expected YAML with 'title' and 'snippets'")
            title = raw.get("title")
            snippets = raw.get("snippets")
            if not title or not isinstance(title, str):
                raise ValueError(f"{path.name}: missing or invalid 'title'")
            if not isinstance(snippets, list):
                raise ValueError(f"{path.name}: 'snippets' must be a list")
            # only surrounding newlines are trimmed; indentation is part of the text
            texts = tuple(str(item).strip("\r\n") for item in snippets if str(item).strip())
            if not texts:
                raise ValueError(f"{path.name}: 'snippets' has no entries")
            try:
                order = int(raw.get("order", 10**9))
            except (TypeError, ValueError):
                raise ValueError(f"{path.name}: 'order' must be an integer") from None
            loaded.append((order, Category(key=path.stem, name=title.strip(), snippets=texts)))

        if not loaded:
            raise ValueError(f"No snippet files (*.yaml) found in {base_dir}")
        loaded.sort(key=lambda item: (item[0], item[1].key))
        logger.debug("Loaded %d snippet categories from %s", len(loaded), base_dir)
        return {category.key: category for _, category in loaded}
