import json
import logging
import random
import threading
from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

from cryptograms.core.config import Settings
from cryptograms.core.exceptions import EmptyCorpusError
from cryptograms.models.schemas import Length

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Quote:
    """A plaintext and its attribution, if known."""

    text: str
    author: str | None = None

    @property
    def length(self) -> int:
        return len(self.text.encode("utf-8"))


class QuoteCorpus:
    """
    Quotations used as plaintext when a request does not supply one.

    The source is a JSON file holding a list of
    ``{"quote": ..., "author": ...}`` objects (or the same objects in
    memory). It is parsed lazily, exactly once.
    """

    def __init__(self, source: str | Path | Iterable[dict[str, Any]]):
        self._source = source
        self._quotes: tuple[Quote, ...] | None = None
        self._lock = threading.Lock()

    def load(self) -> tuple[Quote, ...]:
        if self._quotes is None:
            with self._lock:
                if self._quotes is None:
                    self._quotes = self._read()
        return self._quotes

    @property
    def quotes(self) -> tuple[Quote, ...]:
        return self.load()

    def __len__(self) -> int:
        return len(self.quotes)

    def fetch(self, length: Length, rng: random.Random) -> Quote:
        """
        Pick a quote whose byte length falls inside the length bucket.

        Raises:
            EmptyCorpusError: if no quote has a matching length
        """
        start, end = length.bounds
        matching = [q for q in self.quotes if start <= q.length < end]

        if not matching:
            raise EmptyCorpusError(
                f"No quotes of {length.value} length ({start}-{end - 1} bytes)",
                {"length": length.value},
            )

        return rng.choice(matching)

    def _read(self) -> tuple[Quote, ...]:
        if isinstance(self._source, (str, Path)):
            path = Path(self._source)
            entries = json.loads(path.read_text(encoding="utf-8"))
            origin = str(path)
        else:
            entries = list(self._source)
            origin = "<memory>"

        quotes = tuple(
            Quote(text=entry["quote"], author=entry.get("author") or None)
            for entry in entries
            if entry.get("quote")
        )

        if not quotes:
            raise EmptyCorpusError(f"Quote corpus {origin} is empty", {"source": origin})

        logger.info("Loaded %d quotes from %s", len(quotes), origin)
        return quotes


@lru_cache
def _shared_quote_corpus(path: str) -> QuoteCorpus:
    return QuoteCorpus(path)


def shared_quote_corpus(settings: Settings) -> QuoteCorpus:
    """The quote corpus configured by settings, shared by every caller."""
    return _shared_quote_corpus(str(settings.quotes_file))
