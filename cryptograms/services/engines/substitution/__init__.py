"""Substitution cipher engines."""

from cryptograms.services.engines.substitution.rot13 import ROT13Engine
from cryptograms.services.engines.substitution.caesar import CaesarEngine
from cryptograms.services.engines.substitution.aristocrat import AristocratEngine
from cryptograms.services.engines.substitution.patristocrat import (
    PatristocratEngine,
    PatristocratK1Engine,
    PatristocratK2Engine,
)

__all__ = [
    "ROT13Engine",
    "CaesarEngine",
    "AristocratEngine",
    "PatristocratEngine",
    "PatristocratK1Engine",
    "PatristocratK2Engine",
]
