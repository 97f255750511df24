#!/usr/bin/env python3
"""
Интерфейс командной строки для Text Analyser

Анализирует текст из файлов, stdin или встроенного примера, печатает
статистику и при необходимости экспортирует результат (CSV, JSON, Excel, отчёт).
"""

import os
import sys
import argparse
import logging
from pathlib import Path
from typing import List, Optional, Tuple

from .analyzer import TextAnalyzer
from .interfaces.text_processor import AnalysisResult, ABSENT
from .components.exporter import ResultExporter, EXPORT_FORMATS
from .text_source import TextSourceLoader

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Создаёт парсер аргументов CLI"""
    parser = argparse.ArgumentParser(
        prog="text_analyser",
        description="Text Analyser - статистика текста: слова, символы, предложения, абзацы, тональность",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры использования:
  python -m text_analyser.cli notes.txt               # Анализ файла
  python -m text_analyser.cli --example --csv         # Пример текста + экспорт в CSV
  cat notes.txt | python -m text_analyser.cli         # Анализ stdin
  python -m text_analyser.cli page.html --all-formats # HTML очищается от тегов
        """
    )

    parser.add_argument('files', nargs='*', help='Файлы для анализа (по умолчанию stdin)')
    parser.add_argument('--example', action='store_true', help='Проанализировать встроенный пример текста')

    parser.add_argument('--csv', action='store_true', help='Экспортировать результат в CSV')
    parser.add_argument('--json', action='store_true', help='Экспортировать результат в JSON')
    parser.add_argument('--excel', action='store_true', help='Экспортировать результат в Excel')
    parser.add_argument('--report', action='store_true', help='Сохранить текстовый отчёт')
    parser.add_argument('--all-formats', action='store_true', help='Экспортировать во все форматы')
    parser.add_argument('--output-dir', help='Папка для результатов (по умолчанию из config.yaml)')
    parser.add_argument('--print-csv', action='store_true', help='Вывести CSV в stdout вместо сводки')

    return parser


def format_summary(result: AnalysisResult, title: str) -> str:
    """Форматирует результат анализа для вывода в консоль"""
    if result.most_frequent_word == ABSENT:
        most_frequent = ABSENT
    else:
        most_frequent = f"{result.most_frequent_word} ({result.most_frequent_word_count}×)"

    lines = [
        f"📊 {title}",
        f"   Слов: {result.word_count}",
        f"   Символов: {result.char_count}",
        f"   Символов без пробелов: {result.char_no_spaces}",
        f"   Предложений: {result.sentence_count}",
        f"   Абзацев: {result.paragraph_count}",
        f"   Тональность: {result.sentiment_label} ({result.sentiment_score})",
        f"   Самое частое слово: {most_frequent}",
        f"   Самое длинное слово: {result.longest_word}",
    ]
    return "\n".join(lines)


def collect_inputs(args: argparse.Namespace, loader: TextSourceLoader) -> Tuple[List[Tuple[str, str]], bool]:
    """
    Собирает тексты для анализа.

    Returns:
        Список пар (название, текст) и флаг, были ли ошибки чтения
    """
    inputs: List[Tuple[str, str]] = []
    failed = False

    if args.example:
        inputs.append(("example", loader.load_example()))

    for name in args.files:
        try:
            inputs.append((name, loader.load_file(name)))
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Не удалось прочитать {name}: {e}")
            print(f"❌ Не удалось прочитать {name}: {e}")
            failed = True

    if not args.example and not args.files:
        inputs.append(("stdin", loader.load_stream(sys.stdin)))

    return inputs, failed


def selected_formats(args: argparse.Namespace, default_formats: List[str]) -> List[str]:
    """Определяет форматы экспорта по флагам (или по конфигу, если флагов нет)"""
    if args.all_formats:
        return list(EXPORT_FORMATS)
    chosen = [fmt for fmt in EXPORT_FORMATS if getattr(args, fmt)]
    return chosen or list(default_formats)


def export_result(exporter: ResultExporter, result: AnalysisResult, name: str,
                  formats: List[str], prefix: str) -> bool:
    """Экспортирует результат, печатает пути к файлам. Возвращает успех."""
    base = prefix if name in ("stdin", "example") else f"{prefix}_{Path(name).stem}"
    try:
        exported = exporter.export_formats(result, base, formats)
    except (OSError, ValueError) as e:
        print(f"❌ Ошибка экспорта: {e}")
        return False

    for fmt, path in exported.items():
        print(f"✅ {fmt}: {path}")
    return True


def main(argv: Optional[List[str]] = None) -> int:
    """Основная функция CLI"""
    # Инициализируем логирование из конфигурации в самом начале
    from .config import config

    # TEXT_ANALYSER_DEBUG=1 переопределяет уровень логирования
    if os.environ.get('TEXT_ANALYSER_DEBUG') == '1':
        os.environ['TEXT_ANALYSER_LOGGING__CONSOLE_LEVEL'] = 'DEBUG'
        config._apply_env_overrides()
        print("🔍 DEBUG режим активирован через TEXT_ANALYSER_DEBUG=1")

    config._configure_logging_if_needed(force=True)

    args = build_parser().parse_args(argv)

    loader = TextSourceLoader()
    analyzer = TextAnalyzer()
    exporter = ResultExporter(
        output_dir=args.output_dir or config.get_results_folder(),
        json_indent=config.get_json_indent(),
        sheet_name=config.get_main_sheet_name(),
    )
    formats = selected_formats(args, config.get_export_formats())
    prefix = config.get_results_filename_prefix()

    inputs, failed = collect_inputs(args, loader)
    success = not failed

    for name, text in inputs:
        result = analyzer.analyze_text(text)
        logger.info(f"Проанализирован источник {name}: {result.word_count} слов")

        if args.print_csv:
            sys.stdout.write(exporter.to_csv(result))
        else:
            print(format_summary(result, name))

        if formats:
            success &= export_result(exporter, result, name, formats, prefix)

    if formats:
        removed = exporter.cleanup_old_results(prefix, config.get_max_results_files())
        if removed:
            logger.info(f"Удалено старых файлов результатов: {len(removed)}")

    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
