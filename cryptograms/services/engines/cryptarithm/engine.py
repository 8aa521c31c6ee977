from cryptograms.models.schemas import CipherFamily, CipherResult, CipherType
from cryptograms.services.engines.base import CipherEngine
from cryptograms.services.engines.cryptarithm.solver import CryptarithmSolver
from cryptograms.services.engines.registry import EngineRegistry


@EngineRegistry.register
class CryptarithmEngine(CipherEngine):
    """
    Cryptarithm generator exposed as a cipher.

    The plaintext and key are not used: the puzzle comes from the word
    corpus. The ciphertext is the puzzle ("send + more = money") and the
    key is its numeric solution ("9567 + 1085 = 10652").
    """

    name = "Cryptarithm"
    cipher_type = CipherType.CRYPTARITHM
    cipher_family = CipherFamily.ARITHMETIC
    description = (
        "A word sum in which every letter stands for a different digit, "
        "built so that exactly one solution exists."
    )

    def encrypt(self, plaintext: str, key: str | None = None) -> CipherResult:
        """
        Generate a puzzle.

        Raises:
            ExhaustedSearchError: when a batch budget is configured and spent
        """
        solver = CryptarithmSolver(
            self._word_corpus(),
            rng=self.rng,
            batch_size=self.settings.cryptarithm_batch_size,
            max_batches=self.settings.cryptarithm_max_batches,
            parallel_threshold=self.settings.cryptarithm_parallel_threshold,
            workers=self.settings.cryptarithm_workers,
        )
        puzzle, _ = solver.solve()
        return CipherResult(ciphertext=str(puzzle), key=puzzle.solution)
