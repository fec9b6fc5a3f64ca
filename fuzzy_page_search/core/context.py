"""Word context extraction around a match span."""

from typing import List, Tuple

from .types import MatchSpan


class ContextExtractor:
    """Collects whole words before and after a matched span."""

    def extract(
        self,
        text: str,
        span: MatchSpan,
        words_before: int = 0,
        words_after: int = 0
    ) -> Tuple[str, str]:
        """
        Get the word windows surrounding a match.

        A word glued to the match (no whitespace in between) is a fragment
        of the matched word and is left out of both windows.

        Args:
            text: Original, non-normalized text
            span: Match span inside ``text``
            words_before: Maximum number of words before the match
            words_after: Maximum number of words after the match

        Returns:
            Tuple of (before, after) strings
        """
        if not span.found:
            return "", ""

        head = text[:span.start]
        tail = text[span.end:]

        before_words = self._split(head)
        if head and not head[-1].isspace():
            before_words = before_words[:-1]

        after_words = self._split(tail)
        if tail and not tail[0].isspace():
            after_words = after_words[1:]

        before = before_words[-words_before:] if words_before > 0 else []
        after = after_words[:words_after] if words_after > 0 else []

        return " ".join(before), " ".join(after)

    @staticmethod
    def _split(text: str) -> List[str]:
        return text.split()
