from typing import ClassVar

from cryptograms.models.schemas import CipherFamily, CipherResult, CipherType
from cryptograms.services.engines.alphabet import is_letter, shift_letter
from cryptograms.services.engines.base import CipherEngine
from cryptograms.services.engines.registry import EngineRegistry


@EngineRegistry.register
class ROT13Engine(CipherEngine):
    """
    ROT13 cipher engine.

    ROT13 is a special case of the Caesar cipher with a fixed shift of 13.
    Since 13 is exactly half of 26, applying ROT13 twice returns the original text,
    making encryption and decryption identical operations.
    """

    name = "ROT13 Cipher"
    cipher_type = CipherType.ROT13
    cipher_family = CipherFamily.SUBSTITUTION
    description = (
        "A special case of Caesar cipher with shift 13. "
        "Applying ROT13 twice returns the original text."
    )

    SHIFT: ClassVar[int] = 13

    def encrypt(self, plaintext: str, key: str | None = None) -> CipherResult:
        """Shift every letter by 13; the key is ignored."""
        return CipherResult(ciphertext=self._transform(plaintext))

    def _transform(self, text: str) -> str:
        return "".join(
            shift_letter(char, self.SHIFT) if is_letter(char) else char
            for char in text
        )
