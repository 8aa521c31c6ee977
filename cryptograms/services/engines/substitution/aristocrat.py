import random

from cryptograms.models.schemas import CipherFamily, CipherResult, CipherType
from cryptograms.services.engines.alphabet import ALPHABET, apply_mapping, is_derangement
from cryptograms.services.engines.base import CipherEngine
from cryptograms.services.engines.registry import EngineRegistry


def random_derangement(rng: random.Random) -> list[str]:
    """
    Uniformly random permutation of the alphabet with no fixed points.

    The alphabet is reshuffled until no letter maps to itself; roughly
    one shuffle in e succeeds.
    """
    mapping = list(ALPHABET)
    rng.shuffle(mapping)
    while not is_derangement(mapping):
        rng.shuffle(mapping)
    return mapping


@EngineRegistry.register
class AristocratEngine(CipherEngine):
    """
    Aristocrat cipher engine.

    A monoalphabetic substitution under a random derangement of the
    alphabet. Word breaks, punctuation and letter case are kept, which is
    what makes the puzzle approachable by hand.
    """

    name = "Aristocrat"
    cipher_type = CipherType.ARISTOCRAT
    cipher_family = CipherFamily.SUBSTITUTION
    description = (
        "Each letter is replaced by a different letter of a random alphabet. "
        "Spacing and punctuation are preserved."
    )

    def encrypt(self, plaintext: str, key: str | None = None) -> CipherResult:
        mapping = random_derangement(self.rng)
        return CipherResult(
            ciphertext=apply_mapping(plaintext, mapping),
            key="".join(mapping),
        )

    def generate_random_key(self) -> str:
        return "".join(random_derangement(self.rng))
