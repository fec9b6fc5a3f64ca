"""Fuzzy subsequence matching for locating a phrase inside noisy text."""

from typing import List, Optional, Tuple

from rapidfuzz import fuzz

from .exceptions import InvalidConfigError
from .types import DEFAULT_FUZZY_DISTANCE, NOT_FOUND, MatchSpan


class FuzzyMatcher:
    """
    Greedy, order-preserving character matcher with a bounded gap.

    The needle's characters (spaces excluded) must appear in the haystack in
    order. Up to ``fuzzy_distance - 1`` non-matching characters are tolerated
    between two matched characters; hitting the limit abandons the attempt
    and starts again with the first needle character from the current
    position. The scan position is never rewound, so the first span found
    left to right wins.
    """

    def __init__(self, fuzzy_distance: int = DEFAULT_FUZZY_DISTANCE) -> None:
        """
        Initialize the fuzzy matcher.

        Args:
            fuzzy_distance: Default gap budget used when ``match`` gets none
        """
        self.fuzzy_distance = self._validate_distance(fuzzy_distance)

    def match(
        self,
        needle: str,
        haystack: str,
        fuzzy_distance: Optional[int] = None
    ) -> MatchSpan:
        """
        Find the first fuzzy occurrence of ``needle`` in ``haystack``.

        Both strings are expected to be normalized already.

        Args:
            needle: Phrase to look for
            haystack: Text to search in
            fuzzy_distance: Custom gap budget (uses instance value if None)

        Returns:
            MatchSpan with codepoint offsets, or a not-found span
        """
        if fuzzy_distance is None:
            fuzzy_distance = self.fuzzy_distance
        else:
            fuzzy_distance = self._validate_distance(fuzzy_distance)

        if len(haystack) < len(needle):
            return NOT_FOUND

        if needle == haystack:
            return MatchSpan(found=bool(needle), start=0, end=len(needle))

        chars = [char for char in needle if char != " "]
        if not chars:
            return NOT_FOUND

        pos = 0
        while True:
            outcome = self._attempt(chars, haystack, pos, fuzzy_distance)
            if outcome is None:
                return NOT_FOUND

            first, pos, complete = outcome
            if complete:
                return MatchSpan(found=True, start=first, end=pos)

    def _attempt(
        self,
        chars: List[str],
        haystack: str,
        pos: int,
        fuzzy_distance: int
    ) -> Optional[Tuple[Optional[int], int, bool]]:
        """
        Walk the needle once starting at ``pos``.

        Returns:
            None when the haystack ran out, otherwise a tuple of
            (match start, new position, completed). ``completed`` is False
            when the gap budget was exhausted and the caller should restart.
        """
        first = None
        for char in chars:
            skipped = 0
            while True:
                if pos >= len(haystack):
                    return None

                current = haystack[pos]
                pos += 1

                if current == char:
                    if first is None:
                        first = pos - 1
                    break

                skipped += 1
                if first is not None and skipped == fuzzy_distance:
                    return first, pos, False

        return first, pos, True

    def score(self, needle: str, matched_text: str) -> float:
        """
        Similarity between the needle and what was actually matched.

        Args:
            needle: Normalized needle
            matched_text: Normalized matched slice of the haystack

        Returns:
            Score between 0 and 1
        """
        if not matched_text:
            return 0.0

        compact = needle.replace(" ", "")
        return fuzz.ratio(compact, matched_text.replace(" ", "")) / 100.0

    @staticmethod
    def _validate_distance(fuzzy_distance: int) -> int:
        if fuzzy_distance < 1:
            raise InvalidConfigError(
                f"fuzzy_distance must be >= 1, got {fuzzy_distance}"
            )
        return fuzzy_distance
