"""
Компоненты для разбиения текста на предложения и абзацы.

Эвристики фиксированные и не претендуют на лингвистическую точность:
сокращения вроде "Mr." считаются концом предложения.
"""

import re
from typing import List
from ..interfaces.text_processor import SentenceSegmenterInterface, ParagraphSegmenterInterface
from .normalizer import WHITESPACE_CHARS, WHITESPACE_CLASS


class SentenceSegmenter(SentenceSegmenterInterface):
    """Разбивает текст на предложения по знакам .!?"""

    def __init__(self):
        """Инициализирует сегментатор предложений."""
        self.newline_pattern = re.compile(r'\n+')
        # Серия терминаторов, за которой идёт пробельный символ или конец текста.
        # Lookbehind начинает совпадение только с начала серии, чтобы
        # длинные серии вроде "....." не давали квадратичного перебора.
        self.terminator_pattern = re.compile(r'(?<![.!?])[.!?]+(?=' + WHITESPACE_CLASS + r'|\Z)')

    def split_sentences(self, text: str) -> List[str]:
        """
        Разбивает текст на предложения.

        Args:
            text: Нормализованный текст

        Returns:
            Список непустых предложений без крайних пробелов
        """
        if not text:
            return []

        # Переводы строк работают как дополнительные разделители
        prepared = self.newline_pattern.sub(' \n ', text)
        parts = self.terminator_pattern.split(prepared)

        pieces = (part.strip(WHITESPACE_CHARS) for part in parts)
        return [piece for piece in pieces if piece]

    def count_sentences(self, text: str) -> int:
        """Возвращает количество предложений в тексте."""
        return len(self.split_sentences(text))


class ParagraphSegmenter(ParagraphSegmenterInterface):
    """Разбивает текст на абзацы по пустым строкам."""

    def __init__(self):
        """Инициализирует сегментатор абзацев."""
        # Перевод строки, затем хотя бы одна полностью пустая (или пробельная) строка
        self.blank_line_pattern = re.compile(r'\n' + WHITESPACE_CLASS + r'*\n+')

    def split_paragraphs(self, text: str) -> List[str]:
        """
        Разбивает текст на абзацы.

        Args:
            text: Нормализованный текст

        Returns:
            Список непустых абзацев без крайних пробелов
        """
        stripped = (text or "").strip(WHITESPACE_CHARS)
        if not stripped:
            return []

        blocks = self.blank_line_pattern.split(stripped)
        blocks = (block.strip(WHITESPACE_CHARS) for block in blocks)
        return [block for block in blocks if block]

    def count_paragraphs(self, text: str) -> int:
        """
        Подсчитывает количество абзацев.

        Args:
            text: Нормализованный текст

        Returns:
            Количество абзацев (0 для пустого текста)
        """
        return len(self.split_paragraphs(text))
