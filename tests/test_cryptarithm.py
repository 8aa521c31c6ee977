"""Tests for the cryptarithm pattern matcher, solver and engine."""

import random
from itertools import permutations

import pytest

from cryptograms.core.exceptions import ExhaustedSearchError
from cryptograms.services.corpus.words import WordCorpus
from cryptograms.services.engines.cryptarithm import Cryptarithm, CryptarithmEngine, CryptarithmSolver
from cryptograms.services.engines.cryptarithm.pattern import Pattern, Rejection
from cryptograms.services.engines.cryptarithm.solver import SolverStats, word_value

# to + go = out has the single solution 21 + 81 = 102
SMALL_PUZZLE = ["to", "go", "out"]


def count_by_enumeration(a, b, word):
    """Matches of word over every injective assignment of the pair's letters."""
    letters = sorted(set(a) | set(b))
    count = 0
    for digits in permutations(range(10), len(letters)):
        assignment = dict(zip(letters, digits))
        if assignment[a[0]] == 0 or assignment[b[0]] == 0:
            continue
        total = word_value(a, assignment) + word_value(b, assignment)
        if Pattern.from_sum(total, assignment).matches(word):
            count += 1
    return count


class TestPattern:
    """Test pattern construction and matching."""

    @pytest.fixture
    def pattern(self):
        return Pattern.from_sum(1233, {"a": 1, "b": 2})

    def test_from_sum(self, pattern):
        assert pattern.length == 4
        assert pattern.pinned == ((0, "a"), (1, "b"))
        assert pattern.groups == ((2, 3),)
        assert pattern.used_letters == frozenset("ab")

    def test_matches(self, pattern):
        assert pattern.matches("abcc")
        assert pattern.matches("abzz")

    def test_length_rejection(self, pattern):
        assert pattern.check("abc") is Rejection.LENGTH
        assert pattern.check("abccc") is Rejection.LENGTH

    def test_pinned_rejection(self, pattern):
        assert pattern.check("bacc") is Rejection.PINNED

    def test_group_rejection(self, pattern):
        # split group
        assert pattern.check("abcd") is Rejection.GROUP
        # group letter already assigned
        assert pattern.check("abaa") is Rejection.GROUP

    def test_groups_need_distinct_letters(self):
        pattern = Pattern.from_sum(345, {})
        assert pattern.matches("xyz")
        assert pattern.check("xyx") is Rejection.GROUP

    def test_same_digit_same_letter(self):
        pattern = Pattern.from_sum(10652, {"m": 1, "o": 0, "n": 6, "e": 5})
        assert pattern.matches("money")
        assert pattern.check("monem") is Rejection.GROUP


class TestWordValue:
    """Test reading words as numbers."""

    def test_word_value(self):
        assignment = {"s": 9, "e": 5, "n": 6, "d": 7}
        assert word_value("send", assignment) == 9567
        assert word_value("end", assignment) == 567

    def test_cryptarithm_formatting(self):
        puzzle = Cryptarithm("send", "more", "money", (9567, 1085, 10652))
        assert str(puzzle) == "send + more = money"
        assert puzzle.solution == "9567 + 1085 = 10652"


class TestCryptarithmSolver:
    """Test suite for the cryptarithm search."""

    def test_send_more_money(self):
        solver = CryptarithmSolver(
            WordCorpus.from_words(["send", "more", "money"]),
            rng=random.Random(0),
        )

        puzzle, stats = solver.solve()

        assert puzzle in (
            Cryptarithm("send", "more", "money", (9567, 1085, 10652)),
            Cryptarithm("more", "send", "money", (1085, 9567, 10652)),
        )
        assert stats.matches == 1
        assert stats.batches == 1

    def test_second_match_rules_pair_out(self):
        words = ["send", "more", "money", "monex"]
        solver = CryptarithmSolver(WordCorpus.from_words(words))
        stats = SolverStats()

        assert solver.search_pair("send", "more", words, stats) is None
        assert stats.matches == 2

    def test_no_candidates(self):
        solver = CryptarithmSolver(WordCorpus.from_words(SMALL_PUZZLE))
        assert solver.search_pair("to", "out", SMALL_PUZZLE) is None

    def test_too_many_letters(self):
        words = ["abcdef", "ghijkl", "mnopqrs"]
        solver = CryptarithmSolver(WordCorpus.from_words(words))
        stats = SolverStats()

        assert solver.search_pair("abcdef", "ghijkl", words, stats) is None
        assert stats.pairs_too_many_letters == 1
        assert stats.assignments == 0

    def test_stats_count_rejections(self):
        solver = CryptarithmSolver(WordCorpus.from_words(SMALL_PUZZLE))
        stats = SolverStats()

        solver.search_pair("to", "go", SMALL_PUZZLE, stats)

        # only the one solving assignment is completed
        assert stats.assignments == 1
        assert stats.matches == 1
        assert stats.leading_zero > 0
        assert stats.rejected[Rejection.LENGTH.value] > 0
        assert stats.rejected[Rejection.PINNED.value] > 0

    def test_nine_letter_pair(self):
        words = ["planet", "garden", "dragons", "silver"]
        solver = CryptarithmSolver(WordCorpus.from_words(words))
        stats = SolverStats()

        puzzle = solver.search_pair("planet", "garden", words, stats)

        # no candidate fits its extra letters into the one digit left over
        assert puzzle is None
        assert stats.assignments == 0
        assert sum(stats.rejected.values()) + stats.leading_zero > 0

    def test_search_agrees_with_pattern(self):
        """Every assignment the column search completes matches the sum's pattern."""
        words = ["send", "more", "money", "monkey", "mosey"]
        solver = CryptarithmSolver(WordCorpus.from_words(words))
        stats = SolverStats()

        solver.search_pair("send", "more", words, stats)

        assert stats.assignments == stats.matches

    @pytest.mark.parametrize("word", ["out", "oat", "gut", "ogt", "tug", "toe", "got", "ox"])
    def test_agrees_with_enumeration(self, word):
        words = ["to", "go", word]
        solver = CryptarithmSolver(WordCorpus.from_words(words))
        stats = SolverStats()

        puzzle = solver.search_pair("to", "go", words, stats)

        expected = count_by_enumeration("to", "go", word)
        assert stats.matches == min(expected, 2)
        assert (puzzle is not None) == (expected == 1)

    def test_solve(self):
        solver = CryptarithmSolver(WordCorpus.from_words(SMALL_PUZZLE), rng=random.Random(4))

        puzzle, stats = solver.solve()

        assert {puzzle.addend_a, puzzle.addend_b} == {"to", "go"}
        assert puzzle.total == "out"
        assert puzzle.values[2] == 102
        assert puzzle.values[0] + puzzle.values[1] == 102
        assert stats.batches == 1

    def test_solve_in_parallel(self):
        solver = CryptarithmSolver(
            WordCorpus.from_words(SMALL_PUZZLE),
            rng=random.Random(4),
            parallel_threshold=1,
            workers=3,
        )

        puzzle, _ = solver.solve()

        assert puzzle.total == "out"
        assert sorted(puzzle.values[:2]) == [21, 81]

    def test_exhausted(self):
        words = ["abcdef", "ghijkl", "mnopqr"]
        solver = CryptarithmSolver(WordCorpus.from_words(words), max_batches=2)

        with pytest.raises(ExhaustedSearchError) as exc_info:
            solver.solve()

        assert exc_info.value.details == {"batches": 2}


class TestCryptarithmEngine:
    """Test the cryptarithm exposed as a cipher."""

    def test_encrypt(self):
        engine = CryptarithmEngine(
            words=WordCorpus.from_words(SMALL_PUZZLE),
            rng=random.Random(9),
        )

        result = engine.encrypt("ignored plaintext", "ignored key")

        assert result.ciphertext in ("to + go = out", "go + to = out")
        assert result.key in ("21 + 81 = 102", "81 + 21 = 102")

    def test_needs_word_corpus(self):
        with pytest.raises(RuntimeError):
            CryptarithmEngine().encrypt("")
