"""Shared fixtures and test doubles."""

import random

import pytest

from cryptograms.services.corpus.words import WordCorpus


class ScriptedRandom(random.Random):
    """Random source whose randrange() replays a fixed script first."""

    def __init__(self, script: list[int], seed: int = 0):
        super().__init__(seed)
        self.script = list(script)

    def randrange(self, *args, **kwargs):
        if self.script:
            return self.script.pop(0)
        return super().randrange(*args, **kwargs)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def words():
    return WordCorpus.from_words(
        ["lemon", "garden", "orange", "castle", "silver", "planet", "music"]
    )


@pytest.fixture
def sample_plaintext():
    return "The quick brown fox jumps over the lazy dog. Can't-I'm<>12932!"


@pytest.fixture
def scripted_rng():
    """Factory for ScriptedRandom instances."""
    return ScriptedRandom
