"""
Абстрактные интерфейсы для компонентов анализа текста.

Определяет контракты, которые должны реализовывать все компоненты,
обеспечивая единообразный API и возможность замены реализаций.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Any, Tuple, Union, NamedTuple
from dataclasses import dataclass, asdict
from pathlib import Path


# Маркер отсутствующего значения (нет слов / нет нечисловых слов)
ABSENT = "—"


class SentimentResult(NamedTuple):
    """Метка и балл тональности."""
    label: str
    score: int


@dataclass(frozen=True)
class AnalysisResult:
    """Результат анализа текста."""
    word_count: int
    char_count: int
    char_no_spaces: int
    sentence_count: int
    paragraph_count: int
    most_frequent_word: str
    most_frequent_word_count: int
    longest_word: str
    sentiment_label: str
    sentiment_score: int

    def to_dict(self) -> Dict[str, Any]:
        """Возвращает поля результата в виде словаря."""
        return asdict(self)

    @property
    def has_words(self) -> bool:
        return self.word_count > 0


class NormalizerInterface(ABC):
    """Интерфейс для нормализации сырого текста."""

    @abstractmethod
    def normalize(self, raw: str) -> str:
        """Приводит текст к каноническому виду."""
        pass


class TokenProcessorInterface(ABC):
    """Интерфейс для токенизации текста."""

    @abstractmethod
    def tokenize(self, text: str) -> List[str]:
        """Разбивает текст на токены."""
        pass

    @abstractmethod
    def is_numeric_token(self, token: str) -> bool:
        """Проверяет, состоит ли токен только из цифр."""
        pass


class SentenceSegmenterInterface(ABC):
    """Интерфейс для разбиения текста на предложения."""

    @abstractmethod
    def split_sentences(self, text: str) -> List[str]:
        """Разбивает текст на предложения."""
        pass


class ParagraphSegmenterInterface(ABC):
    """Интерфейс для разбиения текста на абзацы."""

    @abstractmethod
    def count_paragraphs(self, text: str) -> int:
        """Подсчитывает количество абзацев."""
        pass


class FrequencyAnalyzerInterface(ABC):
    """Интерфейс для анализа частотности слов."""

    @abstractmethod
    def count_frequency(self, words: List[str]) -> Dict[str, int]:
        """Подсчитывает частоту появления слов."""
        pass

    @abstractmethod
    def most_frequent(self, words: List[str]) -> Optional[Tuple[str, int]]:
        """Возвращает самое частое слово и его частоту."""
        pass

    @abstractmethod
    def longest(self, words: List[str]) -> Optional[str]:
        """Возвращает самое длинное слово."""
        pass


class SentimentScorerInterface(ABC):
    """Интерфейс для оценки тональности."""

    @abstractmethod
    def score(self, words: List[str]) -> SentimentResult:
        """Оценивает тональность последовательности слов."""
        pass


class ResultExporterInterface(ABC):
    """Интерфейс для экспорта результатов."""

    @abstractmethod
    def export_to_csv(self, result: AnalysisResult, filepath: Union[str, Path]) -> Path:
        """Экспортирует результат в CSV формат."""
        pass

    @abstractmethod
    def export_to_json(self, result: AnalysisResult, filepath: Union[str, Path]) -> Path:
        """Экспортирует результат в JSON формат."""
        pass

    @abstractmethod
    def export_to_excel(self, result: AnalysisResult, filepath: Union[str, Path]) -> Path:
        """Экспортирует результат в Excel формат."""
        pass


class TextProcessor(ABC):
    """Основной интерфейс для обработки текста."""

    @abstractmethod
    def analyze_text(self, text: str) -> AnalysisResult:
        """Анализирует текст и возвращает результат."""
        pass
