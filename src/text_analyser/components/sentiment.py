"""
Компонент для оценки тональности текста.

Простая оценка по словарям: +1 за каждое позитивное слово,
-1 за каждое негативное. Это демонстрационная эвристика, словари
можно заменить (например, на AFINN) без изменения контракта.
"""

from typing import Iterable, List, Optional
from ..interfaces.text_processor import SentimentScorerInterface, SentimentResult


POSITIVE_WORDS = frozenset({
    "good", "great", "excellent", "amazing", "awesome", "positive", "fast", "efficient", "valuable",
    "powerful", "smooth", "love", "like", "happy", "easy", "useful", "stable", "reliable",
})

NEGATIVE_WORDS = frozenset({
    "bad", "poor", "terrible", "awful", "slow", "negative", "bug", "bugs", "issue", "issues",
    "problem", "problems", "hate", "hard", "difficult", "unstable", "crash", "crashes",
})

LABEL_POSITIVE = "positive"
LABEL_NEGATIVE = "negative"
LABEL_NEUTRAL = "neutral"


class SentimentScorer(SentimentScorerInterface):
    """Словарная оценка тональности."""

    def __init__(
        self,
        positive_words: Optional[Iterable[str]] = None,
        negative_words: Optional[Iterable[str]] = None,
        threshold: int = 1,
    ):
        """
        Инициализирует оценщик тональности.

        Args:
            positive_words: Позитивный словарь (по умолчанию POSITIVE_WORDS)
            negative_words: Негативный словарь (по умолчанию NEGATIVE_WORDS)
            threshold: Балл должен быть строго больше threshold (или меньше -threshold)
        """
        self.positive_words = frozenset(positive_words) if positive_words is not None else POSITIVE_WORDS
        self.negative_words = frozenset(negative_words) if negative_words is not None else NEGATIVE_WORDS
        self.threshold = threshold

    def score(self, words: List[str]) -> SentimentResult:
        """
        Оценивает тональность последовательности слов.

        Args:
            words: Список слов (в нижнем регистре)

        Returns:
            SentimentResult(label, score)
        """
        total = 0
        for word in words or []:
            if word in self.positive_words:
                total += 1
            if word in self.negative_words:
                total -= 1

        return SentimentResult(label=self.label_for(total), score=total)

    def label_for(self, score: int) -> str:
        """Переводит балл в метку тональности."""
        if score > self.threshold:
            return LABEL_POSITIVE
        if score < -self.threshold:
            return LABEL_NEGATIVE
        return LABEL_NEUTRAL
