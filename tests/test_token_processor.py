"""
Тесты для компонента TokenProcessor.
"""

import pytest
from text_analyser.components.tokenizer import TokenProcessor


class TestTokenProcessor:
    """Тесты для TokenProcessor."""

    def setup_method(self):
        self.processor = TokenProcessor()

    def test_tokenize_empty_text(self):
        """Тест токенизации пустого текста."""
        assert self.processor.tokenize("") == []
        assert self.processor.tokenize("   \n\t") == []
        assert self.processor.tokenize(None) == []

    def test_tokenize_punctuation_only(self):
        """Пунктуация без букв и цифр не даёт токенов."""
        assert self.processor.tokenize("!!! ... ??? -- ,,") == []

    def test_tokenize_lowercases_and_strips_punctuation(self):
        """Пунктуация работает как разделитель, пустых токенов нет."""
        tokens = self.processor.tokenize("Hello, world! This is great... Right?")
        assert tokens == ["hello", "world", "this", "is", "great", "right"]

    def test_tokenize_keeps_order(self):
        tokens = self.processor.tokenize("b a b c")
        assert tokens == ["b", "a", "b", "c"]

    def test_tokenize_splits_on_apostrophes_and_hyphens(self):
        tokens = self.processor.tokenize("Don't use single-page apps")
        assert tokens == ["don", "t", "use", "single", "page", "apps"]

    def test_tokenize_non_ascii_letters_are_separators(self):
        """Буквы вне ASCII считаются разделителями (известное ограничение)."""
        tokens = self.processor.tokenize("Café naïve über")
        assert tokens == ["caf", "na", "ve", "ber"]

    def test_tokenize_with_numbers(self):
        """Числа остаются токенами."""
        tokens = self.processor.tokenize("Version 2 has 10 fixes and r2d2")
        assert tokens == ["version", "2", "has", "10", "fixes", "and", "r2d2"]

    def test_tokenize_mixed_whitespace(self):
        tokens = self.processor.tokenize("line1\nline2\tTAB  end")
        assert tokens == ["line1", "line2", "tab", "end"]

    @pytest.mark.parametrize("token,expected", [
        ("123", True),
        ("0", True),
        ("12a", False),
        ("abc", False),
        ("", False),
    ])
    def test_is_numeric_token(self, token, expected):
        assert self.processor.is_numeric_token(token) is expected

    def test_get_token_statistics(self):
        """Тест получения статистики токенов."""
        stats = self.processor.get_token_statistics(["hello", "world", "42", "hello", "hi"])

        assert stats['total_tokens'] == 5
        assert stats['unique_tokens'] == 4
        assert stats['numeric_tokens'] == 1
        assert stats['avg_length'] == 3.8  # (5+5+2+5+2)/5
        assert stats['length_distribution'] == {5: 3, 2: 2}

    def test_get_token_statistics_empty(self):
        """Тест статистики для пустого списка токенов."""
        stats = self.processor.get_token_statistics([])

        assert stats['total_tokens'] == 0
        assert stats['avg_length'] == 0.0
        assert stats['length_distribution'] == {}
