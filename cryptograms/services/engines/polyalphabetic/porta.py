from itertools import cycle
from typing import ClassVar

from cryptograms.models.schemas import CipherFamily, CipherResult, CipherType
from cryptograms.services.engines.alphabet import ALPHABET, letter_value
from cryptograms.services.engines.base import CipherEngine
from cryptograms.services.engines.registry import EngineRegistry


def _tableau_row(shift: int) -> str:
    # a-m go to the second half shifted up, n-z to the first half shifted down
    first = [ALPHABET[13 + (p + shift) % 13] for p in range(13)]
    second = [ALPHABET[(p - shift) % 13] for p in range(13)]
    return "".join(first + second)


# Row i serves the key letters 2i and 2i+1 (AB, CD, ..., YZ)
TABLEAU: tuple[str, ...] = tuple(_tableau_row(shift) for shift in range(13))


@EngineRegistry.register
class PortaEngine(CipherEngine):
    """
    Porta cipher engine.

    A periodic cipher over 13 reciprocal alphabets. Each pair of key letters
    selects one row of the tableau, and each row swaps the two halves of
    the alphabet, so encryption and decryption are the same operation.
    Only letters are enciphered; everything else is dropped.
    """

    name = "Porta Cipher"
    cipher_type = CipherType.PORTA
    cipher_family = CipherFamily.POLYALPHABETIC
    description = (
        "A polyalphabetic cipher using 13 reciprocal alphabets, "
        "one for every pair of key letters."
    )

    TABLEAU: ClassVar[tuple[str, ...]] = TABLEAU

    def encrypt(self, plaintext: str, key: str | None = None) -> CipherResult:
        key_letters = "".join(c for c in (key or "").lower() if c in ALPHABET)
        if not key_letters:
            key_letters = self.generate_random_key()

        letters = (c for c in plaintext.lower() if c in ALPHABET)
        ciphertext = "".join(
            self.TABLEAU[self.row_index(k)][letter_value(p)]
            for k, p in zip(cycle(key_letters), letters)
        )
        return CipherResult(ciphertext=ciphertext, key=key_letters)

    def generate_random_key(self) -> str:
        """Draw a keyword from the word corpus."""
        return self._word_corpus().choice(self.rng)

    @staticmethod
    def row_index(key_letter: str) -> int:
        value = letter_value(key_letter)
        return (value - value % 2) // 2
