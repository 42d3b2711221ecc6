"""
Candidate filtering from Wordle feedback.

Holds:
  - the original word list exactly as loaded (never mutated)
  - the current list of words surviving every filter applied so far

Three filters narrow the current list:
  - remove_letters    : gray   (letter absent from the solution)
  - correct_letters   : green  (letter known at this position)
  - incorrect_letters : yellow (letter present, but not at this position)

Every filter builds a fresh list and swaps it in, so the current list is
always an order-preserving subsequence of the original and a rejected
pattern leaves it untouched.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from .validation import WORD_LENGTH, PatternLengthError, check_pattern, constrained_positions

log = logging.getLogger(__name__)


class CandidateFilter:
    """
    The list of possible Wordle words and the filters that shrink it.

    Example:
      f = CandidateFilter(["aaaaa", "bbbbb", "ccccc"])
      f.remove_letters("a")
      f.get_word_list()  -> ["bbbbb", "ccccc"]
      f.reset()
      f.get_word_list()  -> ["aaaaa", "bbbbb", "ccccc"]
    """

    def __init__(self, words: Iterable[str]):
        self._original: Tuple[str, ...] = tuple(words)
        self._current: List[str] = list(self._original)

    def __len__(self) -> int:
        return len(self._current)

    def __repr__(self) -> str:
        return f"CandidateFilter({len(self._current)}/{len(self._original)} words)"

    @property
    def original(self) -> Tuple[str, ...]:
        """The word list as loaded."""
        return self._original

    def reset(self) -> None:
        """Clear every filter applied so far."""
        self._current = list(self._original)

    def get_word_list(self) -> List[str]:
        """Current candidates in original order (a copy)."""
        return list(self._current)

    def _replace(self, new_list: List[str], op: str, arg: str) -> None:
        log.debug("%s(%r): %d -> %d words", op, arg, len(self._current), len(new_list))
        self._current = new_list

    def remove_letters(self, letters: str) -> None:
        """
        Drop every word that contains any of `letters`.

        Order and repetition of `letters` do not matter; there is no
        positional meaning.
        """
        excluded = set(letters)
        new_list = [w for w in self._current if excluded.isdisjoint(w)]
        self._replace(new_list, "remove_letters", letters)

    def correct_letters(self, pattern: str) -> None:
        """
        Keep words that have the pattern's letters at the same positions.

        `pattern` is WORD_LENGTH chars, '.' for positions not yet known.

        Raises:
          PatternLengthError if `pattern` is the wrong length (list unchanged).
        """
        check_pattern(pattern)
        wanted = constrained_positions(pattern)

        new_list: List[str] = []
        for w in self._current:
            # Words of the wrong length can't be indexed safely; only an
            # all-wildcard pattern lets them through.
            if wanted and len(w) != WORD_LENGTH:
                continue
            if all(w[j] == ch for j, ch in wanted):
                new_list.append(w)

        self._replace(new_list, "correct_letters", pattern)

    def incorrect_letters(self, pattern: str) -> None:
        """
        Keep words that contain the pattern's letters, but not where the
        pattern puts them.

        Each constrained position j must hold on its own: the word contains
        pattern[j] somewhere, and word[j] != pattern[j]. One occurrence
        anywhere else is enough, so "bobby" fails "..b.." but "abbey" passes
        "b....".

        Raises:
          PatternLengthError if `pattern` is the wrong length (list unchanged).
        """
        check_pattern(pattern)
        wanted = constrained_positions(pattern)
        expected = len(wanted)

        new_list: List[str] = []
        for w in self._current:
            if wanted and len(w) != WORD_LENGTH:
                continue
            found = 0
            for j, ch in wanted:
                if ch in w and w[j] != ch:
                    found += 1
            if found == expected:
                new_list.append(w)

        self._replace(new_list, "incorrect_letters", pattern)

    def apply(
            self,
            *,
            exclude: Optional[str] = None,
            correct: Optional[str] = None,
            incorrect: Iterable[str] = (),
            skip_errors: bool = False,
    ) -> List[Tuple[str, PatternLengthError]]:
        """
        Apply exclude, then correct, then each incorrect pattern in order.

        With `skip_errors`, a pattern of the wrong length is skipped and the
        remaining filters still run; the skipped ones come back as
        (field, error) pairs, field being "correct" or "incorrect <n>"
        (1-based). Without it the first PatternLengthError propagates and
        the filters applied before it stay applied.

        Example:
          f.apply(exclude="a", correct="bb", incorrect=["....b"], skip_errors=True)
            -> [("correct", PatternLengthError("bb"))]
        """
        skipped: List[Tuple[str, PatternLengthError]] = []

        def _run(field: str, op, patt: str) -> None:
            try:
                op(patt)
            except PatternLengthError as e:
                if not skip_errors:
                    raise
                skipped.append((field, e))

        if exclude:
            self.remove_letters(exclude)
        if correct is not None:
            _run("correct", self.correct_letters, correct)
        for i, patt in enumerate(incorrect, 1):
            _run(f"incorrect {i}", self.incorrect_letters, patt)
        return skipped
