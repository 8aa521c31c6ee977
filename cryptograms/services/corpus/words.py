import logging
import random
import threading
from collections.abc import Iterable, Iterator
from functools import lru_cache
from pathlib import Path

from cryptograms.core.config import Settings
from cryptograms.core.exceptions import EmptyCorpusError

logger = logging.getLogger(__name__)


class WordCorpus:
    """
    Immutable list of words used for cipher keys and cryptarithm candidates.

    Words are lowercased, restricted to purely alphabetic entries whose
    length falls inside [min_length, max_length], and de-duplicated in
    first-seen order. The source (a newline separated file or an iterable)
    is read lazily on first access and exactly once, even when several
    threads reach it at the same time.
    """

    def __init__(
        self,
        source: str | Path | Iterable[str],
        min_length: int = 4,
        max_length: int = 7,
    ):
        self._source = source
        self.min_length = min_length
        self.max_length = max_length
        self._words: tuple[str, ...] | None = None
        self._lock = threading.Lock()

    @classmethod
    def from_words(cls, words: Iterable[str], min_length: int = 1, max_length: int = 64) -> "WordCorpus":
        """Build a corpus from in-memory words with a permissive length window."""
        return cls(list(words), min_length=min_length, max_length=max_length)

    def load(self) -> tuple[str, ...]:
        """Load the corpus if needed and return its words."""
        if self._words is None:
            with self._lock:
                if self._words is None:
                    self._words = self._read()
        return self._words

    @property
    def words(self) -> tuple[str, ...]:
        return self.load()

    def choice(self, rng: random.Random) -> str:
        """Pick one word uniformly."""
        return rng.choice(self.words)

    def sample(self, rng: random.Random, k: int) -> list[str]:
        """Pick up to k distinct words uniformly, without replacement."""
        words = self.words
        return rng.sample(words, min(k, len(words)))

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __contains__(self, word: object) -> bool:
        return word in self.words

    def _read(self) -> tuple[str, ...]:
        if isinstance(self._source, (str, Path)):
            path = Path(self._source)
            raw: Iterable[str] = path.read_text(encoding="utf-8").splitlines()
            origin = str(path)
        else:
            raw = self._source
            origin = "<memory>"

        seen: dict[str, None] = {}
        for line in raw:
            word = line.strip().lower()
            if (
                word.isascii()
                and word.isalpha()
                and self.min_length <= len(word) <= self.max_length
            ):
                seen.setdefault(word, None)

        if not seen:
            raise EmptyCorpusError(
                f"Word corpus {origin} has no words of length "
                f"{self.min_length}-{self.max_length}",
                {"source": origin},
            )

        logger.info("Loaded %d words from %s", len(seen), origin)
        return tuple(seen)


# Process-wide corpora, one per source and length window
@lru_cache
def _shared_word_corpus(path: str, min_length: int, max_length: int) -> WordCorpus:
    return WordCorpus(path, min_length=min_length, max_length=max_length)


def shared_word_corpus(settings: Settings) -> WordCorpus:
    """The word corpus configured by settings, shared by every caller."""
    return _shared_word_corpus(
        str(settings.words_file),
        settings.word_min_length,
        settings.word_max_length,
    )
