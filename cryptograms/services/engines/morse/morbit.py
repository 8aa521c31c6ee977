import string
from itertools import cycle, islice
from typing import ClassVar

from cryptograms.models.schemas import CipherFamily, CipherResult, CipherType
from cryptograms.services.engines.base import CipherEngine
from cryptograms.services.engines.morse.code import morse_words
from cryptograms.services.engines.registry import EngineRegistry

LETTER_SEPARATOR = "/"
WORD_SEPARATOR = "//"

# Every ordered pair of the three morse marks, in key order
MORBIT_BIGRAMS: tuple[str, ...] = ("..", ".-", "./", "-.", "--", "-/", "/.", "/-", "//")


def rank_key(key: str) -> list[int]:
    """
    Rank of every key character by value.

    Equal characters are ranked by position, so the ranks are always a
    permutation of range(len(key)).
    """
    order = sorted(range(len(key)), key=lambda i: key[i])
    ranks = [0] * len(key)
    for rank, index in enumerate(order):
        ranks[index] = rank
    return ranks


def to_morse(text: str) -> str:
    """Morse stream with "/" between letters and "//" between words."""
    return WORD_SEPARATOR.join(
        LETTER_SEPARATOR.join(letters) for letters in morse_words(text)
    )


@EngineRegistry.register
class MorbitEngine(CipherEngine):
    """
    Morbit cipher engine.

    The plaintext is written in Morse with "/" separators, then read two
    marks at a time. The nine possible pairs are numbered 1-9 by the
    alphabetical order of a nine letter key.
    """

    name = "Morbit"
    cipher_type = CipherType.MORBIT
    cipher_family = CipherFamily.FRACTIONATION
    description = (
        "A Morse fractionation cipher: pairs of Morse marks are replaced "
        "by the digits 1-9 in an order set by a nine letter key."
    )

    KEY_LENGTH: ClassVar[int] = 9

    def encrypt(self, plaintext: str, key: str | None = None) -> CipherResult:
        key = self._normalize_key(key)
        table = self.bigram_table(key)

        morse = to_morse(plaintext)
        if len(morse) % 2:
            morse += LETTER_SEPARATOR

        ciphertext = "".join(table[morse[i:i + 2]] for i in range(0, len(morse), 2))
        return CipherResult(ciphertext=ciphertext, key=key)

    def generate_random_key(self) -> str:
        return "".join(self.rng.choice(string.ascii_lowercase) for _ in range(self.KEY_LENGTH))

    @staticmethod
    def bigram_table(key: str) -> dict[str, str]:
        """Map each morse pair to its digit under a nine character key."""
        return {
            bigram: str(rank + 1)
            for bigram, rank in zip(MORBIT_BIGRAMS, rank_key(key))
        }

    def _normalize_key(self, key: str | None) -> str:
        """Lowercase the key and fit it to nine characters by cycling or cutting."""
        if not key:
            key = self.generate_random_key()
        return "".join(islice(cycle(key.lower()), self.KEY_LENGTH))
