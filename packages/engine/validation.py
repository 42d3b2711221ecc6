"""
Constraint pattern validation.

A constraint pattern is exactly WORD_LENGTH characters, each either a
literal letter (a known constraint at that position) or WILDCARD (no
constraint). The filters call `check_pattern` before building a new list, so
a rejected pattern never changes the candidate list.
"""

from typing import List, Tuple

WORD_LENGTH = 5
WILDCARD = "."


class PatternLengthError(ValueError):
    """Raised when a constraint pattern is not exactly WORD_LENGTH characters."""

    def __init__(self, pattern: str, expected: int = WORD_LENGTH):
        self.pattern = pattern
        self.expected = expected
        super().__init__(
            f"pattern {pattern!r} has length {len(pattern)}; expected {expected}")


def check_pattern(pattern: str, N: int = WORD_LENGTH) -> str:
    """
    Return `pattern` unchanged if it has exactly N characters.

    Raises:
      PatternLengthError otherwise.
    """
    if len(pattern) != N:
        raise PatternLengthError(pattern, N)
    return pattern


def constrained_positions(pattern: str) -> List[Tuple[int, str]]:
    """
    (position, letter) pairs for every non-wildcard position.

    Examples:
      constrained_positions("a.a..") -> [(0, "a"), (2, "a")]
      constrained_positions(".....") -> []
    """
    return [(j, ch) for j, ch in enumerate(pattern) if ch != WILDCARD]
