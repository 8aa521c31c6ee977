from dataclasses import dataclass
from enum import Enum


class Rejection(str, Enum):
    """Why a candidate word failed a pattern."""

    LENGTH = "length"
    PINNED = "pinned"
    GROUP = "group"


@dataclass(frozen=True)
class Pattern:
    """
    Letter pattern a word must follow to spell a sum.

    Built from the decimal digits of the sum under a partial letter to digit
    assignment:
    - a digit already assigned to a letter pins that letter to its position
    - each remaining digit forms a group of positions that must all hold one
      letter, different from every assigned letter and from the letters of
      the other groups

    Example: with {"a": 1, "b": 2} the sum 1233 gives pinned {0: "a", 1: "b"}
    and one group (2, 3), which "abcc" matches and "abcd" or "abaa" do not.
    """

    length: int
    pinned: tuple[tuple[int, str], ...]
    groups: tuple[tuple[int, ...], ...]
    used_letters: frozenset[str]

    @classmethod
    def from_sum(cls, total: int, assignment: dict[str, int]) -> "Pattern":
        letter_for_digit = {digit: letter for letter, digit in assignment.items()}

        digits = str(total)
        pinned = []
        groups: dict[str, list[int]] = {}
        for position, digit in enumerate(digits):
            letter = letter_for_digit.get(int(digit))
            if letter is not None:
                pinned.append((position, letter))
            else:
                groups.setdefault(digit, []).append(position)

        return cls(
            length=len(digits),
            pinned=tuple(pinned),
            groups=tuple(tuple(positions) for positions in groups.values()),
            used_letters=frozenset(assignment),
        )

    def check(self, word: str) -> Rejection | None:
        """Return why word does not fit, or None when it does."""
        if len(word) != self.length:
            return Rejection.LENGTH

        for position, letter in self.pinned:
            if word[position] != letter:
                return Rejection.PINNED

        seen = set(self.used_letters)
        for positions in self.groups:
            letter = word[positions[0]]
            if any(word[i] != letter for i in positions[1:]):
                return Rejection.GROUP
            if letter in seen:
                return Rejection.GROUP
            seen.add(letter)

        return None

    def matches(self, word: str) -> bool:
        return self.check(word) is None
