"""
Letter-level helpers shared by the cipher engines.

Letters are handled as ASCII: upper and lower case differ only in bit 5
(0x20), so case can be copied between letters with a single mask.
"""

import string
from collections.abc import Sequence
from typing import TypeVar

ALPHABET = string.ascii_lowercase
CASE_BIT = 0x20

T = TypeVar("T")


def is_letter(char: str) -> bool:
    return char in string.ascii_letters


def match_case(letter: str, reference: str) -> str:
    """Return letter with the case of reference."""
    is_lower = ord(reference) & CASE_BIT
    return chr((ord(letter) & ~CASE_BIT) | is_lower)


def shift_letter(letter: str, amount: int) -> str:
    """Shift a letter by amount positions mod 26, keeping its case."""
    index = (ord(letter.lower()) - ord("a") + amount) % 26
    return match_case(ALPHABET[index], letter)


def letter_value(letter: str) -> int:
    """Zero-based alphabet position of a letter, case-insensitive."""
    return ord(letter.lower()) - ord("a")


def apply_mapping(text: str, mapping: Sequence[str], drop_non_letters: bool = False) -> str:
    """
    Substitute every letter of text through a 26 entry mapping.

    mapping[i] is the ciphertext letter for the i-th plaintext letter. The
    case of each input letter is kept. Non-letters are copied unchanged
    unless drop_non_letters is set.
    """
    out = []
    for char in text:
        if is_letter(char):
            out.append(match_case(mapping[letter_value(char)], char))
        elif not drop_non_letters:
            out.append(char)
    return "".join(out)


def is_bijection(mapping: Sequence[str]) -> bool:
    return len(mapping) == 26 and set(mapping) == set(ALPHABET)


def is_derangement(mapping: Sequence[str], alphabet: Sequence[str] = ALPHABET) -> bool:
    """True when no position holds its own letter."""
    return all(m != a for m, a in zip(mapping, alphabet))


def keyed_alphabet(key: str) -> list[str]:
    """
    Alphabet led by the key's letters.

    The key's distinct letters come first in order of first appearance,
    followed by the unused letters in alphabetical order.
    """
    seen: dict[str, None] = {}
    for char in key.lower():
        if char in ALPHABET:
            seen.setdefault(char, None)
    for char in ALPHABET:
        seen.setdefault(char, None)
    return list(seen)


def rotate(items: Sequence[T], steps: int) -> list[T]:
    """Rotate left by steps (right when negative)."""
    if not items:
        return []
    steps %= len(items)
    return list(items[steps:]) + list(items[:steps])


def chunk(text: str, size: int = 5) -> str:
    """Group text into blocks of size characters joined by single spaces."""
    return " ".join(text[i:i + size] for i in range(0, len(text), size))
