"""
Компонент для токенизации текста.

Отвечает за разбивку текста на слова: регистр приводится к нижнему,
всё, кроме ASCII-букв и цифр, считается разделителем.
Буквы вне ASCII (á, ñ, ё и т.п.) тоже разделители - это известное ограничение.
"""

import re
from typing import List
from ..interfaces.text_processor import TokenProcessorInterface


class TokenProcessor(TokenProcessorInterface):
    """Процессор для токенизации текста."""

    def __init__(self):
        """Инициализирует процессор токенизации."""
        # Всё, что не ASCII-буква, не цифра и не пробельный символ, заменяется пробелом
        self.separator_pattern = re.compile(r'[^a-z0-9\s]')
        self.numeric_pattern = re.compile(r'[0-9]+')

    def tokenize(self, text: str) -> List[str]:
        """
        Разбивает текст на токены.

        Args:
            text: Нормализованный текст

        Returns:
            Список токенов в порядке появления в тексте
        """
        if not text:
            return []

        cleaned = self.separator_pattern.sub(' ', text.lower())

        # split() без аргументов отбрасывает пустые куски
        return cleaned.split()

    def is_numeric_token(self, token: str) -> bool:
        """
        Проверяет, состоит ли токен только из цифр.

        Args:
            token: Токен для проверки

        Returns:
            True если токен числовой
        """
        return bool(token) and self.numeric_pattern.fullmatch(token) is not None

    def get_token_statistics(self, tokens: List[str]) -> dict:
        """
        Возвращает статистику по токенам.

        Args:
            tokens: Список токенов

        Returns:
            Словарь со статистикой
        """
        if not tokens:
            return {
                'total_tokens': 0,
                'unique_tokens': 0,
                'numeric_tokens': 0,
                'avg_length': 0.0,
                'length_distribution': {}
            }

        lengths = [len(t) for t in tokens]

        # Распределение по длинам
        length_dist = {}
        for length in lengths:
            length_dist[length] = length_dist.get(length, 0) + 1

        return {
            'total_tokens': len(tokens),
            'unique_tokens': len(set(tokens)),
            'numeric_tokens': sum(1 for t in tokens if self.is_numeric_token(t)),
            'avg_length': round(sum(lengths) / len(lengths), 1),
            'length_distribution': length_dist
        }
