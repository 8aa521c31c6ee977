import logging
import math
from typing import ClassVar

from cryptograms.core.exceptions import CipherKeyError
from cryptograms.models.schemas import CipherFamily, CipherResult, CipherType
from cryptograms.services.engines.alphabet import ALPHABET, letter_value
from cryptograms.services.engines.base import CipherEngine
from cryptograms.services.engines.registry import EngineRegistry

logger = logging.getLogger(__name__)


def is_perfect_square(n: int) -> bool:
    return n > 0 and math.isqrt(n) ** 2 == n


@EngineRegistry.register
class HillEngine(CipherEngine):
    """
    Hill cipher engine.

    The Hill cipher uses matrix multiplication for encryption.
    Plaintext is divided into vectors of length n, and each vector
    is multiplied by an n x n key matrix modulo 26.

    For a 2x2 matrix:
    [a b]   [p1]   [a*p1 + b*p2]
    [c d] x [p2] = [c*p1 + d*p2] (mod 26)

    The key is read row by row into the matrix, so its length must be a
    perfect square. Only letters of the plaintext are encrypted; the last
    block is padded with "z".
    """

    name = "Hill Cipher"
    cipher_type = CipherType.HILL
    cipher_family = CipherFamily.POLYGRAPHIC
    description = (
        "A polygraphic cipher using linear algebra. "
        "Blocks of letters are encrypted by multiplying with a key matrix."
    )

    KEY_LENGTH: ClassVar[int] = 4
    PAD_LETTER: ClassVar[str] = "z"

    def encrypt(self, plaintext: str, key: str | None = None) -> CipherResult:
        """
        Encrypt using the key matrix.

        Raises:
            CipherKeyError: if the key length is not a perfect square or the
                key contains anything but letters
        """
        if key is None:
            key = self.generate_random_key()
        key = key.lower()

        logger.debug("Hill: key=%r", key)

        matrix = self._parse_key(key)
        return CipherResult(
            ciphertext=self._encrypt_with_matrix(plaintext, matrix),
            key=key,
        )

    def generate_random_key(self) -> str:
        """Sample four distinct letters for a 2x2 matrix."""
        return "".join(self.rng.sample(ALPHABET, self.KEY_LENGTH))

    def _parse_key(self, key: str) -> list[list[int]]:
        """Parse key to matrix."""
        if not is_perfect_square(len(key)):
            logger.debug("Key length %d is not a perfect square", len(key))
            raise CipherKeyError(
                "Key length must be a perfect square",
                {"key_length": len(key)},
            )

        if any(char not in ALPHABET for char in key):
            raise CipherKeyError("Key must contain only letters", {"key": key})

        n = math.isqrt(len(key))
        values = [letter_value(char) for char in key]
        return [values[row * n:(row + 1) * n] for row in range(n)]

    def _encrypt_with_matrix(self, plaintext: str, matrix: list[list[int]]) -> str:
        """Encrypt using matrix multiplication."""
        plaintext = "".join(c for c in plaintext.lower() if c in ALPHABET)

        n = len(matrix)

        # Pad to multiple of block size
        while len(plaintext) % n != 0:
            plaintext += self.PAD_LETTER

        result = []
        for i in range(0, len(plaintext), n):
            block = [letter_value(c) for c in plaintext[i:i + n]]

            # Matrix multiplication
            for row in matrix:
                val = sum(row[j] * block[j] for j in range(n)) % 26
                result.append(ALPHABET[val])

        return "".join(result)
