"""Lightweight HTTP client for downloading remote word lists."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import requests

from ..core.exceptions import WordListFetchError
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

DEFAULT_WORDLIST_URL = "https://raw.githubusercontent.com/dolph/dictionary/master/enable1.txt"


class WordListClient:
    """Fetches a newline separated word list, optionally caching it on disk."""

    def __init__(
        self,
        url: str = DEFAULT_WORDLIST_URL,
        cache_path: Optional[Path | str] = None,
        timeout_seconds: float = 30.0,
    ) -> None:
        self.url = url
        self.cache_path = Path(cache_path) if cache_path else None
        self.timeout_seconds = timeout_seconds

    def fetch(self) -> List[str]:
        """Return the raw lines of the word list, from cache when present."""

        if self.cache_path is not None and self.cache_path.exists():
            LOGGER.info("Using cached word list %s", self.cache_path)
            try:
                return self.cache_path.read_text(encoding="utf-8").splitlines()
            except (OSError, UnicodeDecodeError) as exc:
                raise WordListFetchError(f"Cannot read cached word list {self.cache_path}: {exc}") from exc

        try:
            response = requests.get(self.url, timeout=self.timeout_seconds)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise WordListFetchError(f"Word list request failed: {exc}") from exc

        text = response.text
        lines = text.splitlines()
        if not lines:
            raise WordListFetchError(f"Word list at {self.url} is empty")
        LOGGER.info("Downloaded %s lines from %s", len(lines), self.url)

        if self.cache_path is not None:
            self.cache_path.parent.mkdir(parents=True, exist_ok=True)
            self.cache_path.write_text(text, encoding="utf-8")
        return lines
