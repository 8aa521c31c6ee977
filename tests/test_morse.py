"""Tests for the Morse fractionation engines."""

import random

import pytest

from cryptograms.services.engines.morse import MorbitEngine, PolluxEngine
from cryptograms.services.engines.morse.code import MORSE_CODE, morse_encode, morse_words
from cryptograms.services.engines.morse.morbit import MORBIT_BIGRAMS, rank_key, to_morse
from cryptograms.services.engines.morse.pollux import make_digit_groups


class TestMorseCode:
    """Test the Morse helpers."""

    def test_morse_encode(self):
        assert morse_encode("s") == "..."
        assert morse_encode("O") == "---"
        assert len(MORSE_CODE) == 26

    def test_morse_encode_rejects_non_letters(self):
        with pytest.raises(ValueError):
            morse_encode("1")

    def test_morse_words_skips_non_letters(self):
        assert morse_words("so, 42 s!") == [["...", "---"], ["..."]]

    def test_to_morse_separators(self):
        assert to_morse("MORE BITS") == "--/---/.-././/-.../../-/..."


class TestMorbitEngine:
    """Test suite for Morbit."""

    @pytest.fixture
    def engine(self):
        return MorbitEngine(rng=random.Random(3))

    def test_rank_key(self):
        assert rank_key("MORSECODE") == [4, 5, 7, 8, 2, 0, 6, 1, 3]

    def test_rank_key_ties_keep_position_order(self):
        assert rank_key("aaa") == [0, 1, 2]
        assert rank_key("bab") == [1, 0, 2]

    def test_bigram_table(self):
        table = MorbitEngine.bigram_table("morsecode")
        assert set(table) == set(MORBIT_BIGRAMS)
        assert sorted(table.values()) == [str(d) for d in range(1, 10)]
        assert table[".."] == "5"
        assert table["./"] == "8"

    def test_known_answer(self, engine):
        result = engine.encrypt("MORE BITS", "MORSECODE")
        assert result.ciphertext == "32379749578158"
        assert result.key == "morsecode"

    def test_short_key_is_cycled(self, engine):
        result = engine.encrypt("hello", "ab")
        assert result.key == "ababababa"

    def test_long_key_is_truncated(self, engine):
        result = engine.encrypt("hello", "abcdefghijkl")
        assert result.key == "abcdefghi"

    def test_random_key(self, engine):
        result = engine.encrypt("hello world")
        assert len(result.key) == 9
        assert result.key.isalpha()
        assert set(result.ciphertext) <= set("123456789")

    def test_empty_plaintext(self, engine):
        assert engine.encrypt("", "morsecode").ciphertext == ""

    def test_odd_stream_is_padded(self, engine):
        # "e" is a lone dot; the pair "./" closes it
        assert engine.encrypt("e", "morsecode").ciphertext == "8"


class TestPolluxEngine:
    """Test suite for Pollux."""

    def test_digit_groups_are_disjoint(self):
        groups = make_digit_groups(random.Random(5))
        digits = groups.null + groups.dash + groups.dot
        assert len(digits) == 9
        assert len(set(digits)) == 9

    def test_ciphertext_decodes_to_morse(self):
        groups = make_digit_groups(random.Random(11))
        engine = PolluxEngine(rng=random.Random(11))

        result = engine.encrypt("ee e a")

        decode = {d: "x" for d in groups.null}
        decode.update({d: "-" for d in groups.dash})
        decode.update({d: "." for d in groups.dot})
        assert "".join(decode[d] for d in result.ciphertext) == ".x.xx.xx.-"

    def test_no_key_returned(self):
        engine = PolluxEngine(rng=random.Random(1))
        assert engine.encrypt("hello", "ignored").key is None

    def test_length_matches_morse(self):
        engine = PolluxEngine(rng=random.Random(2))
        result = engine.encrypt("MORE BITS")
        assert len(result.ciphertext) == len(to_morse("MORE BITS").replace("/", "x"))

    def test_empty_plaintext(self):
        assert PolluxEngine().encrypt("").ciphertext == ""
