"""Cryptarithm (alphametic) generator."""

from cryptograms.services.engines.cryptarithm.engine import CryptarithmEngine
from cryptograms.services.engines.cryptarithm.solver import Cryptarithm, CryptarithmSolver

__all__ = [
    "Cryptarithm",
    "CryptarithmEngine",
    "CryptarithmSolver",
]
