"""
Patristocrat cipher engines.

A patristocrat is an aristocrat with the word breaks taken away: only the
letters are kept and the ciphertext is written in five letter groups. The
keyed variants build their alphabets from a keyword instead of a shuffle:

K1: the keyed alphabet is the plaintext row, the straight alphabet the
    ciphertext row.
K2: the straight alphabet is the plaintext row, the keyed alphabet the
    ciphertext row.

Any letter that would encrypt to itself is removed by sliding the keyed row
one place at a time, so the keyword stays readable in the alphabet.
"""

from abc import abstractmethod
from collections.abc import Sequence

from cryptograms.models.schemas import CipherFamily, CipherResult, CipherType
from cryptograms.services.engines.alphabet import (
    ALPHABET,
    apply_mapping,
    chunk,
    is_derangement,
    keyed_alphabet,
    letter_value,
    rotate,
)
from cryptograms.services.engines.base import CipherEngine
from cryptograms.services.engines.registry import EngineRegistry
from cryptograms.services.engines.substitution.aristocrat import random_derangement

BLOCK_SIZE = 5


def patristocrat_format(text: str, mapping: Sequence[str]) -> str:
    """Substitute letters, drop everything else, and group in fives."""
    return chunk(apply_mapping(text, mapping, drop_non_letters=True), BLOCK_SIZE)


def rotate_until_deranged(row: Sequence[str], step: int) -> list[str]:
    """
    Rotate row by step repeatedly until no position holds its own letter.

    A rotation always exists for the 26 letter alphabet: every position is
    fixed under exactly one of the 26 rotations, and no permutation of an
    even-sized cyclic group spreads them one per rotation.
    """
    for turn in range(len(row)):
        candidate = rotate(row, step * turn)
        if is_derangement(candidate):
            return candidate
    raise RuntimeError(f"No rotation of {''.join(row)!r} is a derangement")


def k1_mapping(key: str) -> list[str]:
    """Plaintext to ciphertext mapping for a keyed plaintext alphabet."""
    plain_row = rotate_until_deranged(keyed_alphabet(key), 1)
    mapping = [""] * 26
    for cipher_letter, plain_letter in zip(ALPHABET, plain_row):
        mapping[letter_value(plain_letter)] = cipher_letter
    return mapping


def k2_mapping(key: str) -> list[str]:
    """Plaintext to ciphertext mapping for a keyed ciphertext alphabet."""
    return rotate_until_deranged(keyed_alphabet(key), -1)


@EngineRegistry.register
class PatristocratEngine(CipherEngine):
    """Random derangement substitution with five letter grouping."""

    name = "Patristocrat"
    cipher_type = CipherType.PATRISTOCRAT
    cipher_family = CipherFamily.SUBSTITUTION
    description = (
        "An aristocrat without word breaks: only letters are kept and the "
        "ciphertext is written in groups of five."
    )

    def encrypt(self, plaintext: str, key: str | None = None) -> CipherResult:
        mapping = random_derangement(self.rng)
        return CipherResult(
            ciphertext=patristocrat_format(plaintext, mapping),
            key="".join(mapping),
        )

    def generate_random_key(self) -> str:
        return "".join(random_derangement(self.rng))


class KeyedPatristocratEngine(CipherEngine):
    """Shared key handling for the K1 and K2 patristocrats."""

    cipher_family = CipherFamily.SUBSTITUTION

    def encrypt(self, plaintext: str, key: str | None = None) -> CipherResult:
        if key is None or not any(c.isascii() and c.isalpha() for c in key):
            key = self.generate_random_key()
        key = key.lower()

        mapping = self.build_mapping(key)
        return CipherResult(ciphertext=patristocrat_format(plaintext, mapping), key=key)

    def generate_random_key(self) -> str:
        """Draw a keyword from the word corpus."""
        return self._word_corpus().choice(self.rng)

    @abstractmethod
    def build_mapping(self, key: str) -> list[str]:
        """Plaintext to ciphertext mapping for a lowercased key."""
        pass


@EngineRegistry.register
class PatristocratK1Engine(KeyedPatristocratEngine):
    """Patristocrat with a keyword-mixed plaintext alphabet."""

    name = "Patristocrat K1"
    cipher_type = CipherType.PATRISTOCRAT_K1
    description = (
        "Patristocrat whose plaintext alphabet starts with a keyword; "
        "the ciphertext alphabet is in normal order."
    )

    def build_mapping(self, key: str) -> list[str]:
        return k1_mapping(key)


@EngineRegistry.register
class PatristocratK2Engine(KeyedPatristocratEngine):
    """Patristocrat with a keyword-mixed ciphertext alphabet."""

    name = "Patristocrat K2"
    cipher_type = CipherType.PATRISTOCRAT_K2
    description = (
        "Patristocrat whose ciphertext alphabet starts with a keyword; "
        "the plaintext alphabet is in normal order."
    )

    def build_mapping(self, key: str) -> list[str]:
        return k2_mapping(key)
