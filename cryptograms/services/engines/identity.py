from cryptograms.models.schemas import CipherFamily, CipherResult, CipherType
from cryptograms.services.engines.base import CipherEngine
from cryptograms.services.engines.registry import EngineRegistry


@EngineRegistry.register
class IdentityEngine(CipherEngine):
    """No-op cipher: the ciphertext is the plaintext."""

    name = "Identity"
    cipher_type = CipherType.IDENTITY
    cipher_family = CipherFamily.NONE
    description = "Returns the plaintext unchanged."

    def encrypt(self, plaintext: str, key: str | None = None) -> CipherResult:
        return CipherResult(ciphertext=plaintext)
