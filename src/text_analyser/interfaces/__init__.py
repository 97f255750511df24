"""
Интерфейсы для компонентов анализа текста.

Определяет абстрактные базовые классы для всех компонентов,
обеспечивая единообразный API и возможность замены реализаций.
"""

from .text_processor import (
    ABSENT,
    AnalysisResult,
    SentimentResult,
    TextProcessor,
    NormalizerInterface,
    TokenProcessorInterface,
    SentenceSegmenterInterface,
    ParagraphSegmenterInterface,
    FrequencyAnalyzerInterface,
    SentimentScorerInterface,
    ResultExporterInterface
)

__all__ = [
    'ABSENT',
    'AnalysisResult',
    'SentimentResult',
    'TextProcessor',
    'NormalizerInterface',
    'TokenProcessorInterface',
    'SentenceSegmenterInterface',
    'ParagraphSegmenterInterface',
    'FrequencyAnalyzerInterface',
    'SentimentScorerInterface',
    'ResultExporterInterface'
]
