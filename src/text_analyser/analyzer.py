"""
Анализатор текста: сводит проходы компонентов в один результат.

Нормализация выполняется один раз, затем независимо работают
токенизатор и сегментаторы предложений и абзацев; агрегаторы
(частотность, самое длинное слово, тональность) используют токены.
Анализ чистый: состояние между вызовами не сохраняется.
"""

import re
import logging
from typing import Optional

from .interfaces.text_processor import TextProcessor, AnalysisResult, ABSENT
from .components.normalizer import LineEndingNormalizer, WHITESPACE_CLASS
from .components.tokenizer import TokenProcessor
from .components.segmenter import SentenceSegmenter, ParagraphSegmenter
from .components.frequency_analyzer import FrequencyAnalyzer
from .components.sentiment import SentimentScorer

logger = logging.getLogger(__name__)

_WHITESPACE_PATTERN = re.compile(WHITESPACE_CLASS)


class TextAnalyzer(TextProcessor):
    """Анализатор статистики текста."""

    def __init__(
        self,
        normalizer: Optional[LineEndingNormalizer] = None,
        token_processor: Optional[TokenProcessor] = None,
        sentence_segmenter: Optional[SentenceSegmenter] = None,
        paragraph_segmenter: Optional[ParagraphSegmenter] = None,
        frequency_analyzer: Optional[FrequencyAnalyzer] = None,
        sentiment_scorer: Optional[SentimentScorer] = None,
    ):
        """
        Инициализирует анализатор. Любой компонент можно подменить.
        """
        self.normalizer = normalizer or LineEndingNormalizer()
        self.token_processor = token_processor or TokenProcessor()
        self.sentence_segmenter = sentence_segmenter or SentenceSegmenter()
        self.paragraph_segmenter = paragraph_segmenter or ParagraphSegmenter()
        self.frequency_analyzer = frequency_analyzer or FrequencyAnalyzer(self.token_processor)
        self.sentiment_scorer = sentiment_scorer or SentimentScorer()

    def analyze_text(self, text: str) -> AnalysisResult:
        """
        Анализирует текст и возвращает статистику.

        Args:
            text: Исходный текст (может быть пустым или None)

        Returns:
            Неизменяемый AnalysisResult
        """
        normalized = self.normalizer.normalize(text)

        words = self.token_processor.tokenize(normalized)
        sentence_count = self.sentence_segmenter.count_sentences(normalized)
        paragraph_count = self.paragraph_segmenter.count_paragraphs(normalized)

        top = self.frequency_analyzer.most_frequent(words)
        longest = self.frequency_analyzer.longest(words)
        sentiment = self.sentiment_scorer.score(words)

        result = AnalysisResult(
            word_count=len(words),
            char_count=len(normalized),
            char_no_spaces=len(_WHITESPACE_PATTERN.sub('', normalized)),
            sentence_count=sentence_count,
            paragraph_count=paragraph_count,
            most_frequent_word=top[0] if top else ABSENT,
            most_frequent_word_count=top[1] if top else 0,
            longest_word=longest if longest is not None else ABSENT,
            sentiment_label=sentiment.label,
            sentiment_score=sentiment.score,
        )

        logger.debug(
            f"Анализ завершён: слов={result.word_count}, предложений={result.sentence_count}, "
            f"абзацев={result.paragraph_count}"
        )
        return result


# Компоненты не хранят состояния, поэтому один экземпляр безопасно переиспользовать
_default_analyzer = TextAnalyzer()


def analyze(raw: str) -> AnalysisResult:
    """Анализирует текст анализатором по умолчанию."""
    return _default_analyzer.analyze_text(raw)
