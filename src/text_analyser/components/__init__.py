"""
Компоненты для анализа текста.

Каждый компонент отвечает за одну конкретную задачу:
- LineEndingNormalizer - нормализация переводов строк
- TokenProcessor - токенизация текста
- SentenceSegmenter - разбиение на предложения
- ParagraphSegmenter - разбиение на абзацы
- FrequencyAnalyzer - самое частое и самое длинное слово
- SentimentScorer - словарная оценка тональности
- ResultExporter - экспорт результатов
"""

from .normalizer import LineEndingNormalizer
from .tokenizer import TokenProcessor
from .segmenter import SentenceSegmenter, ParagraphSegmenter
from .frequency_analyzer import FrequencyAnalyzer
from .sentiment import SentimentScorer, POSITIVE_WORDS, NEGATIVE_WORDS
from .exporter import ResultExporter, CSV_HEADERS

__all__ = [
    'LineEndingNormalizer',
    'TokenProcessor',
    'SentenceSegmenter',
    'ParagraphSegmenter',
    'FrequencyAnalyzer',
    'SentimentScorer',
    'POSITIVE_WORDS',
    'NEGATIVE_WORDS',
    'ResultExporter',
    'CSV_HEADERS',
]
