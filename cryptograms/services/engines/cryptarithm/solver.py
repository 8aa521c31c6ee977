"""
Cryptarithm generator.

A cryptarithm, or alphametic, is a sum whose digits are written as letters,
one digit per letter. The canonical example is SEND + MORE = MONEY, solved by
O=0, M=1, Y=2, E=5, N=6, D=7, R=8, S=9.

The solver draws batches of words and, for every pair A, B in a batch, looks
for the injective assignments of digits to their letters whose sum spells
another batch word. A pair makes a puzzle only when exactly one word matches
across all assignments, which is what makes the puzzle uniquely solvable.

Assignments are not enumerated one by one. For each candidate word C the
sum is worked column by column from the units digit with a carry, the way
it is done by hand: the digits of A and B in a column force the digit of C
there, so any partial assignment that contradicts C is dropped before its
remaining letters are tried. Every complete assignment that survives is
checked against the Pattern of its sum before it counts as a match.
"""

import logging
import random
import threading
from collections.abc import Iterator
from concurrent.futures import Executor, ThreadPoolExecutor
from dataclasses import asdict, dataclass, field
from itertools import combinations

from cryptograms.core.exceptions import ExhaustedSearchError
from cryptograms.services.corpus.words import WordCorpus
from cryptograms.services.engines.cryptarithm.pattern import Pattern, Rejection

logger = logging.getLogger(__name__)

MAX_LETTERS = 10


def word_value(word: str, assignment: dict[str, int]) -> int:
    """Read a word as a base 10 number under a letter to digit assignment."""
    value = 0
    for letter in word:
        value = value * 10 + assignment[letter]
    return value


@dataclass
class SolverStats:
    """
    Counters describing how much work a search did.

    ``assignments`` counts complete assignments reached. ``leading_zero``
    and ``rejected`` count partial assignments cut off, by reason: a zero on
    a leading letter, a sum of the wrong length, a column digit held by a
    letter of the pair (pinned), or a column digit clashing with the
    candidate's own letters (group).
    """

    batches: int = 0
    pairs: int = 0
    pairs_too_many_letters: int = 0
    assignments: int = 0
    leading_zero: int = 0
    rejected: dict[str, int] = field(
        default_factory=lambda: {reason.value: 0 for reason in Rejection}
    )
    matches: int = 0

    def record(self, rejection: Rejection, count: int = 1) -> None:
        self.rejected[rejection.value] += count

    def merge(self, other: "SolverStats") -> None:
        """Add the search counters of other into these stats."""
        self.assignments += other.assignments
        self.leading_zero += other.leading_zero
        self.matches += other.matches
        for reason, count in other.rejected.items():
            self.rejected[reason] += count

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class Cryptarithm:
    """A uniquely solvable puzzle A + B = C and its numeric solution."""

    addend_a: str
    addend_b: str
    total: str
    values: tuple[int, int, int]

    def __str__(self) -> str:
        return f"{self.addend_a} + {self.addend_b} = {self.total}"

    @property
    def solution(self) -> str:
        a, b, c = self.values
        return f"{a} + {b} = {c}"


@dataclass(frozen=True)
class _Match:
    word: str
    values: tuple[int, int, int]


class _MatchCollector:
    """Matches found for one pair, shared by the searching threads."""

    def __init__(self, stats: SolverStats):
        self.stats = stats
        self.matches: list[_Match] = []
        self._lock = threading.Lock()

    def offer(self, pattern: Pattern, word: str, values: tuple[int, int, int]) -> None:
        rejection = pattern.check(word)
        with self._lock:
            if rejection is None:
                self.matches.append(_Match(word, values))
                self.stats.matches += 1
            else:
                self.stats.record(rejection)

    def merge(self, stats: SolverStats) -> None:
        with self._lock:
            self.stats.merge(stats)

    @property
    def ambiguous(self) -> bool:
        """True once a second match rules the pair out."""
        return len(self) > 1

    def __len__(self) -> int:
        with self._lock:
            return len(self.matches)


class _ColumnSearch:
    """
    Every assignment making a + b spell one candidate word.

    Columns are visited from the units digit. In each column the addend
    letters get digits (when they have none yet), which fixes the column
    digit of the sum and the carry into the next column.
    """

    def __init__(self, a: str, b: str, word: str, collector: _MatchCollector):
        self.a = a
        self.b = b
        self.word = word
        self.collector = collector
        self.stats = SolverStats()

        self.pair_letters = frozenset(a) | frozenset(b)
        self.leading = frozenset((a[0], b[0], word[0]))
        self.columns = [
            (
                a[-1 - j] if j < len(a) else None,
                b[-1 - j] if j < len(b) else None,
                word[-1 - j],
            )
            for j in range(len(word))
        ]

        self.assignment: dict[str, int] = {}
        self.owner: dict[int, str] = {}

    def run(self) -> SolverStats:
        self._column(0, 0)
        return self.stats

    def _column(self, j: int, carry: int) -> None:
        if self.collector.ambiguous:
            return

        if j == len(self.columns):
            if carry:
                self.stats.record(Rejection.LENGTH)
            else:
                self._complete()
            return

        top, bottom, letter = self.columns[j]
        if top is None and bottom is None and not carry:
            # nothing left to carry into the extra leading digit
            self.stats.record(Rejection.LENGTH)
            return

        for _ in self._bind(top):
            for _ in self._bind(bottom):
                column_sum = carry + self._digit(top) + self._digit(bottom)
                self._settle(j, letter, column_sum % 10, column_sum // 10)

    def _settle(self, j: int, letter: str, digit: int, carry: int) -> None:
        """Hold the sum letter of column j to digit, then go on to the next column."""
        current = self.assignment.get(letter)
        if current is not None:
            if current == digit:
                self._column(j + 1, carry)
            else:
                self.stats.record(self._clash(digit))
            return

        if digit in self.owner:
            self.stats.record(self._clash(digit))
            return
        if digit == 0 and letter in self.leading:
            self.stats.leading_zero += 1
            return

        self.assignment[letter] = digit
        self.owner[digit] = letter
        try:
            self._column(j + 1, carry)
        finally:
            del self.assignment[letter]
            del self.owner[digit]

    def _bind(self, letter: str | None) -> Iterator[None]:
        """Yield once for every digit letter may take, with that digit bound."""
        if letter is None or letter in self.assignment:
            yield
            return

        for digit in range(10):
            if digit in self.owner:
                continue
            if digit == 0 and letter in self.leading:
                self.stats.leading_zero += 1
                continue

            self.assignment[letter] = digit
            self.owner[digit] = letter
            try:
                yield
            finally:
                del self.assignment[letter]
                del self.owner[digit]

            if self.collector.ambiguous:
                return

    def _digit(self, letter: str | None) -> int:
        return 0 if letter is None else self.assignment[letter]

    def _clash(self, digit: int) -> Rejection:
        # a digit held by a letter of the pair would pin this position
        if self.owner.get(digit) in self.pair_letters:
            return Rejection.PINNED
        return Rejection.GROUP

    def _complete(self) -> None:
        self.stats.assignments += 1
        values = (
            word_value(self.a, self.assignment),
            word_value(self.b, self.assignment),
            word_value(self.word, self.assignment),
        )
        pair_assignment = {letter: self.assignment[letter] for letter in self.pair_letters}
        pattern = Pattern.from_sum(values[2], pair_assignment)
        self.collector.offer(pattern, self.word, values)


class CryptarithmSolver:
    """
    Searches a word corpus for uniquely solvable two word sums.

    Args:
        words: Corpus to draw batches from
        rng: Random source for batch sampling
        batch_size: Number of words per batch
        max_batches: Give up after this many batches; None searches forever
        parallel_threshold: Candidate count from which candidates are
            searched on the thread pool
        workers: Thread pool size
    """

    def __init__(
        self,
        words: WordCorpus,
        rng: random.Random | None = None,
        batch_size: int = 10,
        max_batches: int | None = None,
        parallel_threshold: int = 64,
        workers: int = 4,
    ):
        self.words = words
        self.rng = rng if rng is not None else random.Random()
        self.batch_size = batch_size
        self.max_batches = max_batches
        self.parallel_threshold = parallel_threshold
        self.workers = workers

    def solve(self) -> tuple[Cryptarithm, SolverStats]:
        """
        Draw batches until one holds a uniquely solvable pair.

        Raises:
            ExhaustedSearchError: if max_batches is set and runs out
        """
        stats = SolverStats()

        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            while self.max_batches is None or stats.batches < self.max_batches:
                batch = self.words.sample(self.rng, self.batch_size)
                stats.batches += 1
                logger.debug("Words in this batch: %s", batch)

                for a, b in combinations(batch, 2):
                    puzzle = self.search_pair(a, b, batch, stats, executor)
                    if puzzle is not None:
                        logger.info("Found cryptarithm: %s", puzzle)
                        logger.debug("Tries: %s", stats.as_dict())
                        return puzzle, stats

                logger.debug("Tries: %s", stats.as_dict())
                logger.debug("Switching batch")

        raise ExhaustedSearchError(stats.batches)

    def search_pair(
        self,
        a: str,
        b: str,
        words: list[str],
        stats: SolverStats | None = None,
        executor: Executor | None = None,
    ) -> Cryptarithm | None:
        """
        Return the puzzle a + b = c if exactly one word c fits.

        Candidates are the words other than a and b that are as long as the
        longer addend or one letter longer.
        """
        stats = stats if stats is not None else SolverStats()
        stats.pairs += 1
        logger.debug("Checking a=%s b=%s", a, b)

        if len(set(a) | set(b)) > MAX_LETTERS:
            stats.pairs_too_many_letters += 1
            return None

        width = max(len(a), len(b))
        candidates = [
            w for w in words
            if width <= len(w) <= width + 1 and w != a and w != b
        ]
        if not candidates:
            return None

        collector = _MatchCollector(stats)
        if executor is not None and len(candidates) >= self.parallel_threshold:
            futures = [
                executor.submit(self._search_word, a, b, word, collector)
                for word in candidates
            ]
            for future in futures:
                future.result()
        else:
            for word in candidates:
                self._search_word(a, b, word, collector)
                if collector.ambiguous:
                    break

        if len(collector) == 1:
            match = collector.matches[0]
            return Cryptarithm(a, b, match.word, match.values)

        return None

    def _search_word(self, a: str, b: str, word: str, collector: _MatchCollector) -> None:
        if collector.ambiguous:
            return
        collector.merge(_ColumnSearch(a, b, word, collector).run())
