import random
from typing import Type

from cryptograms.core.config import Settings
from cryptograms.models.schemas import CipherFamily, CipherType
from cryptograms.services.corpus.words import WordCorpus
from cryptograms.services.engines.base import CipherEngine


class EngineRegistry:
    """
    Registry for cipher engines.

    Engine classes register themselves by cipher type. A registry instance
    carries the word corpus and random source handed to every engine it
    creates, and caches one engine per cipher type.
    """

    _engines: dict[CipherType, Type[CipherEngine]] = {}

    def __init__(
        self,
        words: WordCorpus | None = None,
        rng: random.Random | None = None,
        settings: Settings | None = None,
    ):
        self.words = words
        self.rng = rng if rng is not None else random.Random()
        self.settings = settings
        self._instances: dict[CipherType, CipherEngine] = {}

    @classmethod
    def register(cls, engine_class: Type[CipherEngine]) -> Type[CipherEngine]:
        """
        Register a cipher engine class.

        Can be used as a decorator:
            @EngineRegistry.register
            class CaesarEngine(CipherEngine):
                ...

        Args:
            engine_class: The engine class to register

        Returns:
            The engine class (for decorator usage)
        """
        cls._engines[engine_class.cipher_type] = engine_class
        return engine_class

    def get_engine(self, cipher_type: CipherType) -> CipherEngine | None:
        """
        Get an engine instance for the specified cipher type.

        Args:
            cipher_type: The type of cipher

        Returns:
            Engine instance or None if not found
        """
        if cipher_type not in self._engines:
            return None

        # Lazy instantiation with caching
        if cipher_type not in self._instances:
            self._instances[cipher_type] = self._engines[cipher_type](
                words=self.words,
                rng=self.rng,
                settings=self.settings,
            )

        return self._instances[cipher_type]

    def get_engines_by_family(self, family: CipherFamily) -> list[CipherEngine]:
        """
        Get all engines belonging to a cipher family.

        Args:
            family: The cipher family

        Returns:
            List of engine instances
        """
        engines = []
        for cipher_type, engine_class in self._engines.items():
            if engine_class.cipher_family == family:
                engine = self.get_engine(cipher_type)
                if engine:
                    engines.append(engine)
        return engines

    @classmethod
    def list_registered(cls) -> list[CipherType]:
        """
        List all registered cipher types.

        Returns:
            List of registered cipher types
        """
        return list(cls._engines.keys())

    @classmethod
    def is_registered(cls, cipher_type: CipherType) -> bool:
        """
        Check if a cipher type is registered.

        Args:
            cipher_type: The cipher type to check

        Returns:
            True if registered
        """
        return cipher_type in cls._engines


# Import engines to trigger registration
def _load_engines() -> None:
    """Load all engine modules to trigger registration."""
    from cryptograms.services.engines import identity  # noqa: F401
    from cryptograms.services.engines import (  # noqa: F401
        cryptarithm,
        morse,
        polyalphabetic,
        polygraphic,
        substitution,
    )


# Load engines when module is imported
_load_engines()
