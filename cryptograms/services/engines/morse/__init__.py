"""Morse fractionation cipher engines."""

from cryptograms.services.engines.morse.morbit import MorbitEngine
from cryptograms.services.engines.morse.pollux import PolluxEngine

__all__ = [
    "MorbitEngine",
    "PolluxEngine",
]
