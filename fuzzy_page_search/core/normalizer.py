"""Text normalization utilities for consistent character comparison."""


class TextNormalizer:
    """Handles case folding and whitespace cleanup before matching."""

    def normalize(self, text: str) -> str:
        """
        Normalize text for comparison.

        Lowercasing is applied codepoint by codepoint so the result has the
        same length as the input and offsets stay valid in the original text.

        Args:
            text: Input text to normalize

        Returns:
            Normalized text
        """
        if not text:
            return ""

        return "".join(self._fold(char) for char in text)

    def flatten_newlines(self, text: str) -> str:
        """
        Remove carriage returns and turn newlines into spaces.

        Args:
            text: Input text

        Returns:
            Single-line text
        """
        if not text:
            return ""

        return text.replace("\r", "").replace("\n", " ")

    @staticmethod
    def _fold(char: str) -> str:
        lowered = char.lower()
        # Keep only the base letter of multi-codepoint expansions (e.g. "İ").
        return lowered[0] if lowered else char
