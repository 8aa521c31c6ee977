from cryptograms.models.schemas import CipherFamily, CipherResult, CipherType
from cryptograms.services.engines.alphabet import is_letter, shift_letter
from cryptograms.services.engines.base import CipherEngine
from cryptograms.services.engines.registry import EngineRegistry


@EngineRegistry.register
class CaesarEngine(CipherEngine):
    """
    Caesar cipher engine.

    Every letter is shifted by the same random amount. A shift of 0 would
    leave the text unchanged, so the draw is repeated until it is nonzero.
    """

    name = "Caesar Cipher"
    cipher_type = CipherType.CAESAR
    cipher_family = CipherFamily.SUBSTITUTION
    description = (
        "A substitution cipher where each letter is shifted by a fixed amount. "
        "Named after Julius Caesar who used it for military communications."
    )

    def encrypt(self, plaintext: str, key: str | None = None) -> CipherResult:
        """Encrypt with a freshly drawn shift; a supplied key is ignored."""
        shift = self._draw_shift()
        ciphertext = "".join(
            shift_letter(char, shift) if is_letter(char) else char
            for char in plaintext
        )
        return CipherResult(ciphertext=ciphertext, key=str(shift))

    def generate_random_key(self) -> str:
        """Generate a random shift (1-25)."""
        return str(self._draw_shift())

    def _draw_shift(self) -> int:
        while True:
            shift = self.rng.randrange(26)
            if shift != 0:
                return shift
