"""
Text Analyser - модуль для подсчёта статистики текста

Этот модуль предоставляет инструменты для:
- Подсчёта слов, символов, предложений и абзацев
- Поиска самого частого и самого длинного слова
- Простой словарной оценки тональности
- Экспорта результатов (CSV, JSON, Excel, текстовый отчёт)
"""

__version__ = "0.1.0"
__author__ = "Sergey"

from .analyzer import TextAnalyzer, analyze
from .interfaces.text_processor import AnalysisResult, ABSENT

__all__ = [
    "TextAnalyzer",
    "analyze",
    "AnalysisResult",
    "ABSENT",
]
