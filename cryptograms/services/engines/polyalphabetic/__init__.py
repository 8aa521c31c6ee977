"""Polyalphabetic cipher engines."""

from cryptograms.services.engines.polyalphabetic.porta import PortaEngine

__all__ = [
    "PortaEngine",
]
