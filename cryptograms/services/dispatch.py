"""
Cipher dispatch facade.

Routes a cipher type to its registered engine and returns the engine's
result unchanged. Engines are created lazily by a registry that carries the
word corpus and random source for this dispatcher.
"""

import random

from cryptograms.core.config import Settings, get_settings
from cryptograms.core.exceptions import EngineNotFoundError
from cryptograms.models.schemas import CipherRequest, CipherResult, CipherType
from cryptograms.services.corpus.words import WordCorpus, shared_word_corpus
from cryptograms.services.engines.registry import EngineRegistry


class CipherDispatcher:
    """Encrypts CipherRequests with the engine named by their cipher type."""

    def __init__(
        self,
        words: WordCorpus | None = None,
        rng: random.Random | None = None,
        settings: Settings | None = None,
    ):
        self.registry = EngineRegistry(words=words, rng=rng, settings=settings)

    def encrypt(self, request: CipherRequest) -> CipherResult:
        """
        Encrypt a request.

        Raises:
            EngineNotFoundError: if no engine handles the cipher type
            CipherKeyError: if the Hill cipher gets an unusable key
            ExhaustedSearchError: if a bounded cryptarithm search fails
        """
        engine = self.registry.get_engine(request.cipher_type)
        if engine is None:
            raise EngineNotFoundError(request.cipher_type.value)

        return engine.encrypt(request.plaintext, request.key)


def encrypt(
    plaintext: str,
    cipher_type: CipherType = CipherType.IDENTITY,
    key: str | None = None,
    words: WordCorpus | None = None,
    rng: random.Random | None = None,
) -> CipherResult:
    """
    One-off encryption without keeping a dispatcher around.

    Keys drawn from a word list come from the configured shared corpus
    unless words is given.
    """
    settings = get_settings()
    if words is None:
        words = shared_word_corpus(settings)

    dispatcher = CipherDispatcher(words=words, rng=rng, settings=settings)
    return dispatcher.encrypt(
        CipherRequest(plaintext=plaintext, cipher_type=cipher_type, key=key)
    )
