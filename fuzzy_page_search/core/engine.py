"""Main search engine implementation."""

from typing import Optional

import structlog

from .context import ContextExtractor
from .fuzzy_matcher import FuzzyMatcher
from .html import html_to_text
from .normalizer import TextNormalizer
from .types import SearchConfig, SearchResult

logger = structlog.get_logger(__name__)


class SearchEngine:
    """
    Locates a phrase in a document and returns it with its word context.

    The engine keeps no per-request state, so one instance can serve any
    number of concurrent callers.
    """

    def __init__(self, config: Optional[SearchConfig] = None) -> None:
        """
        Initialize the search engine.

        Args:
            config: Default configuration for calls that pass none
        """
        self.config = config or SearchConfig()
        self.normalizer = TextNormalizer()
        self.fuzzy_matcher = FuzzyMatcher(self.config.fuzzy_distance)
        self.context_extractor = ContextExtractor()

    def search(
        self,
        needle: str,
        haystack: str,
        config: Optional[SearchConfig] = None
    ) -> SearchResult:
        """
        Search a plain text document for a phrase.

        Args:
            needle: Phrase to look for
            haystack: Plain text to search in
            config: Custom configuration (uses the engine default if None)

        Returns:
            SearchResult, with an empty ``matched_text`` when nothing matched
        """
        config = config or self.config

        normalized_needle = self.normalizer.normalize(needle)
        normalized_haystack = self.normalizer.normalize(haystack)

        span = self.fuzzy_matcher.match(
            normalized_needle, normalized_haystack, config.fuzzy_distance
        )
        if not span.found:
            logger.debug("No match", query=needle, text_length=len(haystack))
            return SearchResult(query=needle)

        before, after = self.context_extractor.extract(
            haystack, span, config.words_before, config.words_after
        )
        confidence = self.fuzzy_matcher.score(
            normalized_needle, normalized_haystack[span.start:span.end]
        )

        logger.debug(
            "Match found",
            query=needle,
            start=span.start,
            end=span.end,
            confidence=confidence
        )

        return SearchResult(
            query=needle,
            matched_text=haystack[span.start:span.end],
            before=before,
            after=after,
            confidence=confidence,
            start=span.start,
            end=span.end
        )

    def search_html(
        self,
        needle: str,
        html: str,
        config: Optional[SearchConfig] = None
    ) -> SearchResult:
        """
        Search the visible text of an HTML page for a phrase.

        Args:
            needle: Phrase to look for
            html: Raw HTML document
            config: Custom configuration

        Returns:
            SearchResult computed over the page's plain text
        """
        text = self.normalizer.flatten_newlines(html_to_text(html))
        return self.search(needle, text, config)
