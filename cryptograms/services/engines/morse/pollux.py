import random
import string
from dataclasses import dataclass

from cryptograms.models.schemas import CipherFamily, CipherResult, CipherType
from cryptograms.services.engines.base import CipherEngine
from cryptograms.services.engines.morse.code import DASH, morse_words
from cryptograms.services.engines.registry import EngineRegistry


@dataclass(frozen=True)
class DigitGroups:
    """Three disjoint groups of three digits, one per Morse mark."""

    null: tuple[str, ...]
    dash: tuple[str, ...]
    dot: tuple[str, ...]


def make_digit_groups(rng: random.Random) -> DigitGroups:
    """Shuffle the ten digits and deal three to each mark; one is left over."""
    digits = list(string.digits)
    rng.shuffle(digits)
    return DigitGroups(
        null=tuple(digits[0:3]),
        dash=tuple(digits[3:6]),
        dot=tuple(digits[6:9]),
    )


@EngineRegistry.register
class PolluxEngine(CipherEngine):
    """
    Pollux cipher engine.

    Each Morse mark is replaced by any digit of its group, chosen at random,
    so the same letter rarely encrypts the same way twice. Null digits
    separate letters (one) and words (two). The digit groups are not
    returned: the puzzle is solved from the ciphertext alone.
    """

    name = "Pollux"
    cipher_type = CipherType.POLLUX
    cipher_family = CipherFamily.FRACTIONATION
    description = (
        "A Morse fractionation cipher where dots, dashes and separators "
        "are each written with one of three interchangeable digits."
    )

    def encrypt(self, plaintext: str, key: str | None = None) -> CipherResult:
        groups = make_digit_groups(self.rng)

        out = []
        for word_index, letters in enumerate(morse_words(plaintext)):
            if word_index:
                out.append(self._pick(groups.null))
                out.append(self._pick(groups.null))
            for letter_index, code in enumerate(letters):
                if letter_index:
                    out.append(self._pick(groups.null))
                for mark in code:
                    out.append(self._pick(groups.dash if mark == DASH else groups.dot))

        return CipherResult(ciphertext="".join(out))

    def _pick(self, group: tuple[str, ...]) -> str:
        return self.rng.choice(group)
