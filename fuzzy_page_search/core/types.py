"""Value types shared by the matching components."""

from dataclasses import dataclass

from .exceptions import InvalidConfigError

DEFAULT_FUZZY_DISTANCE = 20


@dataclass(frozen=True)
class SearchConfig:
    """
    Per-call search settings.

    Args:
        fuzzy_distance: Non-matching characters tolerated between two matched
            needle characters before the attempt restarts
        words_before: Words of context to return before the match
        words_after: Words of context to return after the match
    """

    fuzzy_distance: int = DEFAULT_FUZZY_DISTANCE
    words_before: int = 0
    words_after: int = 0

    def __post_init__(self) -> None:
        if self.fuzzy_distance < 1:
            raise InvalidConfigError(
                f"fuzzy_distance must be >= 1, got {self.fuzzy_distance}"
            )
        if self.words_before < 0 or self.words_after < 0:
            raise InvalidConfigError("word counts must be >= 0")


@dataclass(frozen=True)
class MatchSpan:
    """Codepoint offsets of a match in the original haystack."""

    found: bool
    start: int = 0
    end: int = 0


NOT_FOUND = MatchSpan(found=False)


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a single search call."""

    query: str
    matched_text: str = ""
    before: str = ""
    after: str = ""
    confidence: float = 0.0
    start: int = 0
    end: int = 0

    @property
    def found(self) -> bool:
        # An empty match is never reported as a hit.
        return bool(self.matched_text)
