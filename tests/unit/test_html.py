"""Unit tests for HTML to text conversion."""

from fuzzy_page_search.core.html import html_to_text


class TestHtmlToText:
    """Test cases for html_to_text."""

    def test_extracts_visible_text(self):
        """Test that tags are stripped and words kept apart."""
        text = html_to_text("<div><b>Brand</b><i>new</i></div>")

        assert text.split() == ["Brand", "new"]

    def test_drops_script_and_style(self):
        """Test that non-rendered content is removed."""
        html = (
            "<head><style>body { color: red }</style></head>"
            "<body><script>alert('x')</script><noscript>enable js</noscript>"
            "<p>visible</p></body>"
        )

        assert html_to_text(html).split() == ["visible"]

    def test_decodes_entities(self):
        """Test that HTML entities are decoded."""
        assert html_to_text("<p>Fish &amp; Chips</p>").strip() == "Fish & Chips"

    def test_plain_text_passthrough(self):
        """Test that text without markup is returned unchanged."""
        assert html_to_text("just text") == "just text"

    def test_empty_input(self):
        """Test handling of empty input."""
        assert html_to_text("") == ""
