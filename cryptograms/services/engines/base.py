import random
from abc import ABC, abstractmethod

from cryptograms.core.config import Settings, get_settings
from cryptograms.models.schemas import CipherFamily, CipherResult, CipherType
from cryptograms.services.corpus.words import WordCorpus


class CipherEngine(ABC):
    """
    Abstract base class for all cipher engines.

    Engines are constructed by the registry with the shared word corpus and
    the caller's random source. Each cipher implementation must provide:
    - encrypt(): Turn plaintext into a CipherResult

    Engines that draw keys also override generate_random_key().
    """

    # Cipher metadata
    name: str
    cipher_type: CipherType
    cipher_family: CipherFamily
    description: str

    def __init__(
        self,
        words: WordCorpus | None = None,
        rng: random.Random | None = None,
        settings: Settings | None = None,
    ):
        self.words = words
        self.rng = rng if rng is not None else random.Random()
        self.settings = settings if settings is not None else get_settings()

    @abstractmethod
    def encrypt(self, plaintext: str, key: str | None = None) -> CipherResult:
        """
        Encrypt plaintext.

        Args:
            plaintext: The plaintext to encrypt
            key: Optional key; engines that need one generate it when omitted

        Returns:
            CipherResult with the ciphertext and the key actually used
        """
        pass

    def generate_random_key(self) -> str | None:
        """
        Generate a random valid key for this cipher.

        Returns:
            A randomly generated key, or None for keyless ciphers
        """
        return None

    def _word_corpus(self) -> WordCorpus:
        if self.words is None:
            raise RuntimeError(f"{self.name} needs a word corpus to draw keys from")
        return self.words
