"""
Компонент для анализа частотности слов.

Отвечает за подсчёт частоты появления слов, поиск самого частого
и самого длинного слова. Числовые токены не участвуют в выборе
самого частого слова, но учитываются в общем количестве слов.
"""

from typing import List, Dict, Tuple, Optional
from collections import Counter
from ..interfaces.text_processor import FrequencyAnalyzerInterface
from .tokenizer import TokenProcessor


class FrequencyAnalyzer(FrequencyAnalyzerInterface):
    """Анализатор частотности слов."""

    def __init__(self, token_processor: Optional[TokenProcessor] = None):
        """
        Инициализирует анализатор частотности.

        Args:
            token_processor: Процессор токенов (для определения числовых токенов)
        """
        self.token_processor = token_processor or TokenProcessor()

    def count_frequency(self, words: List[str]) -> Dict[str, int]:
        """
        Подсчитывает частоту появления слов, исключая числовые токены.

        Args:
            words: Список слов для анализа

        Returns:
            Словарь с частотой каждого слова
        """
        if not words:
            return {}

        return dict(Counter(w for w in words if not self.token_processor.is_numeric_token(w)))

    def most_frequent(self, words: List[str]) -> Optional[Tuple[str, int]]:
        """
        Возвращает самое частое слово.

        При равной частоте выбирается лексикографически меньшее слово,
        порядок обхода словаря на результат не влияет.

        Args:
            words: Список слов

        Returns:
            Кортеж (слово, частота) или None, если нечисловых слов нет
        """
        best: Optional[str] = None
        best_count = 0

        for word, count in self.count_frequency(words).items():
            if count > best_count or (count == best_count and word < best):
                best, best_count = word, count

        if best is None:
            return None
        return best, best_count

    def longest(self, words: List[str]) -> Optional[str]:
        """
        Возвращает самое длинное слово (первое из равных по длине).

        Args:
            words: Список слов

        Returns:
            Самое длинное слово или None для пустого списка
        """
        best: Optional[str] = None

        for word in words or []:
            if best is None or len(word) > len(best):
                best = word

        return best

    def get_frequency_distribution(self, words: List[str]) -> Dict[int, int]:
        """
        Возвращает распределение слов по частоте.

        Returns:
            Словарь {частота: количество слов}
        """
        distribution: Dict[int, int] = {}
        for freq in self.count_frequency(words).values():
            distribution[freq] = distribution.get(freq, 0) + 1
        return distribution
