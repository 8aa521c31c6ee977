from typing import Any


class CryptogramError(Exception):
    """Base exception for all cryptogram errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class CipherError(CryptogramError):
    """Base exception for cipher engine errors."""

    kind: str = "CipherError"

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


class CipherKeyError(CipherError):
    """Raised when a supplied key cannot be used by the cipher."""

    kind = "KeyError"


class ExhaustedSearchError(CipherError):
    """Raised when the cryptarithm search runs out of its batch budget."""

    kind = "ExhaustedSearch"

    def __init__(self, batches: int):
        super().__init__(
            f"No unique cryptarithm found after {batches} batches",
            {"batches": batches},
        )


class EngineNotFoundError(CipherError):
    """Raised when requested cipher engine is not found."""

    kind = "EngineNotFound"

    def __init__(self, engine_name: str):
        super().__init__(
            f"Cipher engine '{engine_name}' not found",
            {"engine_name": engine_name},
        )


class CorpusError(CryptogramError):
    """Base exception for word and quote corpus errors."""

    pass


class EmptyCorpusError(CorpusError):
    """Raised when a corpus (or the requested slice of it) has no entries."""

    pass


class CryptogramNotFoundError(CryptogramError):
    """Raised when no cryptogram is stored under a token."""

    def __init__(self, token: str):
        super().__init__(
            f"No cryptogram with token '{token}'",
            {"token": token},
        )
