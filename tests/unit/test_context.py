"""Unit tests for word context extraction."""

import pytest
from fuzzy_page_search.core.context import ContextExtractor
from fuzzy_page_search.core.types import MatchSpan


def span_of(text: str, word: str) -> MatchSpan:
    start = text.index(word)
    return MatchSpan(found=True, start=start, end=start + len(word))


class TestContextExtractor:
    """Test cases for the ContextExtractor class."""

    @pytest.fixture
    def extractor(self):
        """Create a context extractor instance for testing."""
        return ContextExtractor()

    @pytest.fixture
    def text(self):
        """Sample sentence with a target word in the middle."""
        return "one two three Brand four five six"

    def test_words_on_both_sides(self, extractor, text):
        """Test collecting words before and after."""
        before, after = extractor.extract(text, span_of(text, "Brand"), 2, 2)

        assert before == "two three"
        assert after == "four five"

    def test_zero_counts(self, extractor, text):
        """Test that no context is returned by default."""
        assert extractor.extract(text, span_of(text, "Brand")) == ("", "")

    def test_fewer_words_than_requested(self, extractor, text):
        """Test graceful shrinking at text boundaries."""
        before, after = extractor.extract(text, span_of(text, "Brand"), 10, 10)

        assert before == "one two three"
        assert after == "four five six"

    def test_match_at_start_of_text(self, extractor):
        """Test that a match at offset 0 has no words before it."""
        text = "Brand new day"
        before, after = extractor.extract(text, span_of(text, "Brand"), 3, 1)

        assert before == ""
        assert after == "new"

    def test_match_at_end_of_text(self, extractor):
        """Test that a match at the end has no words after it."""
        text = "a brand new Brand"
        before, after = extractor.extract(
            text, MatchSpan(found=True, start=12, end=17), 1, 3
        )

        assert before == "new"
        assert after == ""

    def test_touching_fragment_before_is_excluded(self, extractor):
        """Test that a fragment glued to the match start is dropped."""
        text = "Skill:Brand new"
        before, after = extractor.extract(text, span_of(text, "Brand"), 1, 1)

        assert before == ""
        assert after == "new"

    def test_touching_fragment_after_is_excluded(self, extractor):
        """Test that a fragment glued to the match end is dropped."""
        text = "our Brand:Skill next word"
        before, after = extractor.extract(text, span_of(text, "Brand"), 1, 1)

        assert before == "our"
        assert after == "next"

    def test_fragment_excluded_but_earlier_words_kept(self, extractor):
        """Test that only the touching token is skipped."""
        text = "buy the Skill:Brand:Pack today now"
        before, after = extractor.extract(text, span_of(text, "Brand"), 2, 1)

        assert before == "buy the"
        assert after == "today"

    def test_irregular_whitespace(self, extractor):
        """Test that words are joined with single spaces."""
        text = "a  \t b   Brand \n\n c   d"
        before, after = extractor.extract(text, span_of(text, "Brand"), 2, 2)

        assert before == "a b"
        assert after == "c d"

    def test_source_casing_preserved(self, extractor):
        """Test that context keeps the original casing."""
        text = "Hello WORLD Brand Again"
        before, after = extractor.extract(text, span_of(text, "Brand"), 1, 1)

        assert before == "WORLD"
        assert after == "Again"

    def test_not_found_span(self, extractor, text):
        """Test that a missing match yields no context."""
        assert extractor.extract(text, MatchSpan(found=False), 3, 3) == ("", "")
