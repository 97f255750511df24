"""
Тесты для компонента LineEndingNormalizer.
"""

from text_analyser.components.normalizer import LineEndingNormalizer


class TestLineEndingNormalizer:
    """Тесты для LineEndingNormalizer."""

    def setup_method(self):
        self.normalizer = LineEndingNormalizer()

    def test_empty_and_none(self):
        """Пустой ввод и None дают пустую строку."""
        assert self.normalizer.normalize("") == ""
        assert self.normalizer.normalize(None) == ""

    def test_crlf_and_lone_cr(self):
        """\\r\\n и одиночный \\r заменяются на \\n."""
        assert self.normalizer.normalize("a\r\nb\rc\n") == "a\nb\nc\n"

    def test_cr_followed_by_crlf(self):
        """Каждый перевод строки превращается ровно в один \\n."""
        assert self.normalizer.normalize("\r\r\n") == "\n\n"

    def test_text_without_line_breaks_unchanged(self):
        text = "Hello, world!\tTabs stay."
        assert self.normalizer.normalize(text) == text
