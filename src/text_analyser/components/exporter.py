"""
Компонент для экспорта результатов анализа.

Отвечает за экспорт результатов в различные форматы:
CSV (одна строка с фиксированным заголовком), JSON, Excel и текстовый отчёт.
Экспорт только проецирует AnalysisResult и не содержит логики подсчёта.
"""

import io
import csv
import json
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Union, Any, Iterable
import pandas as pd
from ..interfaces.text_processor import ResultExporterInterface, AnalysisResult, ABSENT
import logging

logger = logging.getLogger(__name__)


# Заголовок CSV и соответствующие поля результата (порядок фиксирован)
CSV_COLUMNS = [
    ("Word Count", "word_count"),
    ("Character Count (incl spaces)", "char_count"),
    ("Character Count (no spaces)", "char_no_spaces"),
    ("Sentence Count", "sentence_count"),
    ("Paragraph Count", "paragraph_count"),
    ("Most Frequent Word", "most_frequent_word"),
    ("Most Frequent Word Count", "most_frequent_word_count"),
    ("Longest Word", "longest_word"),
    ("Sentiment", "sentiment_label"),
    ("Sentiment Score", "sentiment_score"),
]

CSV_HEADERS = [header for header, _ in CSV_COLUMNS]

EXPORT_FORMATS = ("csv", "json", "excel", "report")


class ResultExporter(ResultExporterInterface):
    """Экспортёр результатов анализа."""

    def __init__(self, output_dir: Union[str, Path] = "data/results", json_indent: int = 2,
                 sheet_name: str = "Text Analysis"):
        """
        Инициализирует экспортёр.

        Args:
            output_dir: Папка для сохранения результатов
            json_indent: Отступ в JSON
            sheet_name: Название листа Excel
        """
        self.output_dir = Path(output_dir)
        self.json_indent = json_indent
        self.sheet_name = sheet_name

    def to_row(self, result: AnalysisResult) -> List[Any]:
        """Возвращает значения результата в порядке заголовка CSV."""
        return [getattr(result, field) for _, field in CSV_COLUMNS]

    def to_csv(self, result: AnalysisResult) -> str:
        """
        Сериализует результат в CSV: заголовок и одна строка данных.

        Значения с запятой берутся в кавычки, внутренние кавычки удваиваются.

        Args:
            result: Результат анализа

        Returns:
            CSV-текст с переводами строк \\n
        """
        buffer = io.StringIO()
        writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
        writer.writerow(CSV_HEADERS)
        writer.writerow(self.to_row(result))
        return buffer.getvalue()

    def _resolve_path(self, filepath: Union[str, Path], suffix: str) -> Path:
        filepath = Path(filepath)
        if not filepath.suffix:
            filepath = filepath.with_suffix(suffix)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        return filepath

    def export_to_csv(self, result: AnalysisResult, filepath: Union[str, Path]) -> Path:
        """
        Экспортирует результат в CSV формат.

        Args:
            result: Результат анализа
            filepath: Путь для сохранения файла

        Returns:
            Путь к созданному файлу
        """
        filepath = self._resolve_path(filepath, '.csv')
        try:
            with open(filepath, 'w', newline='', encoding='utf-8') as csvfile:
                csvfile.write(self.to_csv(result))
        except OSError as e:
            logger.error(f"Ошибка экспорта в CSV: {e}")
            raise

        logger.info(f"Результат экспортирован в CSV: {filepath}")
        return filepath

    def export_to_json(self, result: AnalysisResult, filepath: Union[str, Path]) -> Path:
        """
        Экспортирует результат в JSON формат.

        Args:
            result: Результат анализа
            filepath: Путь для сохранения файла

        Returns:
            Путь к созданному файлу
        """
        filepath = self._resolve_path(filepath, '.json')

        json_data = {
            'metadata': {
                'timestamp': datetime.now().isoformat(),
                'has_words': result.has_words,
            },
            'result': result.to_dict(),
        }

        try:
            with open(filepath, 'w', encoding='utf-8') as jsonfile:
                json.dump(json_data, jsonfile, ensure_ascii=False, indent=self.json_indent)
        except OSError as e:
            logger.error(f"Ошибка экспорта в JSON: {e}")
            raise

        logger.info(f"Результат экспортирован в JSON: {filepath}")
        return filepath

    def export_to_excel(self, result: AnalysisResult, filepath: Union[str, Path]) -> Path:
        """
        Экспортирует результат в Excel формат (лист "Параметр / Значение").

        Args:
            result: Результат анализа
            filepath: Путь для сохранения файла

        Returns:
            Путь к созданному файлу
        """
        filepath = self._resolve_path(filepath, '.xlsx')

        df = pd.DataFrame({
            'Parameter': CSV_HEADERS,
            'Value': self.to_row(result),
        })

        try:
            with pd.ExcelWriter(filepath, engine='openpyxl') as writer:
                df.to_excel(writer, sheet_name=self.sheet_name, index=False)
        except OSError as e:
            logger.error(f"Ошибка экспорта в Excel: {e}")
            raise

        logger.info(f"Результат экспортирован в Excel: {filepath}")
        return filepath

    def export_summary_report(self, result: AnalysisResult, filepath: Union[str, Path]) -> Path:
        """
        Экспортирует краткий текстовый отчёт по результатам.

        Args:
            result: Результат анализа
            filepath: Путь для сохранения файла

        Returns:
            Путь к созданному файлу
        """
        filepath = self._resolve_path(filepath, '.txt')

        if result.most_frequent_word == ABSENT:
            most_frequent = ABSENT
        else:
            most_frequent = f"{result.most_frequent_word} ({result.most_frequent_word_count}×)"

        try:
            with open(filepath, 'w', encoding='utf-8') as report_file:
                report_file.write("TEXT ANALYSIS REPORT\n")
                report_file.write("=" * 50 + "\n\n")
                report_file.write(f"Words: {result.word_count}\n")
                report_file.write(f"Characters: {result.char_count}\n")
                report_file.write(f"Characters (no spaces): {result.char_no_spaces}\n")
                report_file.write(f"Sentences: {result.sentence_count}\n")
                report_file.write(f"Paragraphs: {result.paragraph_count}\n")
                report_file.write(f"Sentiment: {result.sentiment_label} ({result.sentiment_score})\n")
                report_file.write(f"Most frequent word: {most_frequent}\n")
                report_file.write(f"Longest word: {result.longest_word}\n")
                report_file.write(f"\nGenerated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
        except OSError as e:
            logger.error(f"Ошибка экспорта отчёта: {e}")
            raise

        logger.info(f"Краткий отчёт сохранён: {filepath}")
        return filepath

    def export_formats(self, result: AnalysisResult, base_filename: str,
                       formats: Iterable[str] = EXPORT_FORMATS) -> Dict[str, Path]:
        """
        Экспортирует результат в указанные форматы с временной меткой в имени.

        Args:
            result: Результат анализа
            base_filename: Базовое имя файла без расширения
            formats: Форматы из EXPORT_FORMATS

        Returns:
            Словарь {формат: путь к файлу}
        """
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        base_path = self.output_dir / f"{base_filename}_{timestamp}"

        exporters = {
            'csv': (self.export_to_csv, '.csv'),
            'json': (self.export_to_json, '.json'),
            'excel': (self.export_to_excel, '.xlsx'),
            'report': (self.export_summary_report, '_report.txt'),
        }

        exported_files = {}
        for fmt in formats:
            if fmt not in exporters:
                raise ValueError(f"Неизвестный формат экспорта: {fmt}")
            export, suffix = exporters[fmt]
            exported_files[fmt] = export(result, base_path.parent / f"{base_path.name}{suffix}")

        logger.info(f"Результат экспортирован ({', '.join(exported_files)}) в папку: {self.output_dir}")
        return exported_files

    def export_all_formats(self, result: AnalysisResult, base_filename: str) -> Dict[str, Path]:
        """Экспортирует результат во все доступные форматы."""
        return self.export_formats(result, base_filename, EXPORT_FORMATS)

    def cleanup_old_results(self, prefix: str, max_files: int) -> List[Path]:
        """
        Удаляет старые файлы результатов, оставляя только последние max_files.

        Args:
            prefix: Префикс имён файлов результатов
            max_files: Сколько файлов оставить

        Returns:
            Список удалённых файлов
        """
        if not self.output_dir.exists():
            return []

        result_files = [p for p in self.output_dir.glob(f"{prefix}_*") if p.is_file()]
        if len(result_files) <= max_files:
            return []

        # Сортируем по времени модификации (самые новые последними)
        result_files.sort(key=lambda f: f.stat().st_mtime)

        removed = []
        for old_file in result_files[:len(result_files) - max_files]:
            try:
                old_file.unlink()
                removed.append(old_file)
                logger.debug(f"Удалён старый файл результатов: {old_file}")
            except OSError as e:
                logger.debug(f"Не удалось удалить файл {old_file}: {e}")

        return removed
