"""Plain text extraction from HTML pages."""

from bs4 import BeautifulSoup

# Elements whose text never shows up on a rendered page.
SKIPPED_TAGS = ["script", "style", "noscript", "template"]


def html_to_text(html: str) -> str:
    """
    Convert an HTML document to plain text.

    Text nodes are joined with a single space so words from adjacent
    elements do not run together. Line breaks are kept; callers flatten
    them when they need a single line.
    """
    if not html:
        return ""

    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(SKIPPED_TAGS):
        tag.decompose()

    return soup.get_text(separator=" ")
