from pathlib import Path

import pytest

from text_analyser.analyzer import TextAnalyzer
from text_analyser.components.exporter import ResultExporter


@pytest.fixture(scope="session")
def sample_texts():
    """Наборы текстов для тестирования."""
    from .fixtures.sample_texts import (
        SAMPLE_SIMPLE_TEXT,
        SAMPLE_MULTI_PARAGRAPH_TEXT,
        SAMPLE_CRLF_TEXT,
        SAMPLE_PUNCTUATION_ONLY_TEXT,
        SAMPLE_NUMERIC_TEXT,
        SAMPLE_UNICODE_TEXT,
    )

    return {
        "simple": SAMPLE_SIMPLE_TEXT,
        "multi_paragraph": SAMPLE_MULTI_PARAGRAPH_TEXT,
        "crlf": SAMPLE_CRLF_TEXT,
        "punctuation_only": SAMPLE_PUNCTUATION_ONLY_TEXT,
        "numeric": SAMPLE_NUMERIC_TEXT,
        "unicode": SAMPLE_UNICODE_TEXT,
    }


@pytest.fixture
def analyzer() -> TextAnalyzer:
    return TextAnalyzer()


@pytest.fixture
def exporter(tmp_path: Path) -> ResultExporter:
    """Экспортёр, пишущий во временную директорию."""
    return ResultExporter(output_dir=tmp_path)


def pytest_configure(config):
    """Регистрируем маркеры для проекта."""
    config.addinivalue_line("markers", "integration: интеграционные тесты")
    config.addinivalue_line("markers", "performance: тесты производительности")
