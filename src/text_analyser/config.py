"""
Модуль для работы с конфигурацией проекта

Функции:
- Загрузка config.yaml (+ профили: config.prod.yaml, config.test.yaml)
- ENV-переопределения (префикс TEXT_ANALYSER_, вложенность через __)
- Валидация значений
- Настройка логирования

Движок анализа конфигурацию не читает - она нужна только CLI и экспорту.
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional
from dotenv import load_dotenv
import logging
from datetime import datetime

logger = logging.getLogger(__name__)

ENV_PREFIX = 'TEXT_ANALYSER_'
ENV_PROFILE_KEY = 'TEXT_ANALYSER_ENV'
# Служебные переменные, которые не являются ключами конфигурации
SERVICE_ENV_KEYS = (ENV_PROFILE_KEY, 'TEXT_ANALYSER_DEBUG')

KNOWN_EXPORT_FORMATS = ('csv', 'json', 'excel', 'report')


class Config:
    """Класс для работы с конфигурацией проекта"""

    def __init__(self, config_path: Optional[str] = None):
        """
        Инициализация конфигурации

        Args:
            config_path: Путь к файлу конфигурации
        """
        if config_path:
            self.config_path = Path(config_path)
        else:
            # Ищем config.yaml в корне проекта
            current_dir = Path.cwd()
            config_path = current_dir / "config.yaml"

            # Если не найден в текущей директории, ищем в родительских
            while not config_path.exists() and current_dir.parent != current_dir:
                current_dir = current_dir.parent
                config_path = current_dir / "config.yaml"

            self.config_path = config_path

        self.config_data: Dict[str, Any] = {}

        # .env загружаем первым: он может задать профиль и переопределения
        self._load_env()
        self._load_config()
        self._apply_env_overrides()
        self._validate()
        # Настраиваем логирование согласно конфигу
        self._configure_logging_if_needed()

    def _load_env(self) -> None:
        """Загружает переменные окружения из .env файла"""
        if load_dotenv():
            logger.debug("Переменные окружения загружены из .env")

    def _resolve_config_path(self) -> Path:
        """Выбирает файл конфигурации с учётом профиля окружения"""
        env = os.getenv(ENV_PROFILE_KEY, '').lower().strip()
        root = self.config_path.parent
        if env == 'production':
            candidate = root / 'config.prod.yaml'
        elif env == 'testing':
            candidate = root / 'config.test.yaml'
        else:
            return self.config_path
        if candidate.exists():
            logger.info(f"Активирован профиль: {env}")
            return candidate
        # Фолбэк на исходный путь
        return self.config_path

    def _load_config(self) -> None:
        """Загружает конфигурацию из YAML файла"""
        self.config_path = self._resolve_config_path()
        if not self.config_path.exists():
            logger.debug(f"Файл конфигурации {self.config_path} не найден, используются значения по умолчанию")
            self.config_data = self._get_default_config()
            return
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                self.config_data = yaml.safe_load(f) or {}
            logger.debug(f"Конфигурация загружена: {self.config_path}")
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Ошибка загрузки конфигурации {self.config_path}: {e}, используются значения по умолчанию")
            self.config_data = self._get_default_config()

    def _set_nested(self, data: Dict[str, Any], dotted: str, value: Any) -> None:
        cur = data
        keys = dotted.split('.')
        for k in keys[:-1]:
            if k not in cur or not isinstance(cur[k], dict):
                cur[k] = {}
            cur = cur[k]
        cur[keys[-1]] = value

    @staticmethod
    def _parse_env_value(val: str) -> Any:
        """Приводит строку из ENV к bool/int/float, если это возможно"""
        if val.lower() in ('true', 'false'):
            return val.lower() == 'true'
        try:
            if '.' in val:
                return float(val)
            return int(val)
        except ValueError:
            return val

    def _apply_env_overrides(self) -> None:
        """Переопределяет конфиг значениями из ENV (TEXT_ANALYSER_*)."""
        for key, val in os.environ.items():
            if not key.startswith(ENV_PREFIX) or key in SERVICE_ENV_KEYS:
                continue
            # Вложенность разделяется двойным подчёркиванием
            dotted = key[len(ENV_PREFIX):].replace('__', '.').lower()
            self._set_nested(self.config_data, dotted, self._parse_env_value(val))
            logger.debug(f"ENV-переопределение: {dotted}")

    def _validate(self) -> None:
        """Проверяет диапазоны и допустимые значения."""
        indent = self.get('export.json_indent', 2)
        if not isinstance(indent, int) or isinstance(indent, bool) or indent < 0:
            logger.warning(f"export.json_indent={indent!r} недопустим - установлено 2")
            self._set_nested(self.config_data, 'export.json_indent', 2)

        max_files = self.get('files.max_results_files', 20)
        if not isinstance(max_files, int) or isinstance(max_files, bool) or max_files < 1:
            logger.warning(f"files.max_results_files={max_files!r} недопустим - установлено 20")
            self._set_nested(self.config_data, 'files.max_results_files', 20)

        formats = self.get('export.formats', [])
        if isinstance(formats, str):
            formats = [f.strip() for f in formats.split(',') if f.strip()]
        if not isinstance(formats, list):
            formats = []
        unknown = [f for f in formats if f not in KNOWN_EXPORT_FORMATS]
        if unknown:
            logger.warning(f"Неизвестные форматы экспорта пропущены: {unknown}")
        self._set_nested(self.config_data, 'export.formats', [f for f in formats if f in KNOWN_EXPORT_FORMATS])

    def _configure_logging_if_needed(self, force: bool = False) -> None:
        """Инициализирует/переинициализирует базовое логирование по config.

        Повторная конфигурация выполняется, если:
          - ранее не конфигурировалось, или
          - изменился уровень/формат/файл логирования, или
          - явно указан force=True
        """
        root = logging.getLogger()

        # Раздельные уровни для консоли и файла
        console_level_name = str(self.get_console_logging_level()).upper()
        file_level_name = str(self.get_file_logging_level()).upper()
        console_level = getattr(logging, console_level_name, logging.WARNING)
        file_level = getattr(logging, file_level_name, logging.DEBUG)

        desired_fmt = self.get_logging_format()
        log_to_file = self.is_logging_to_file_enabled()

        if getattr(root, "_text_analyser_configured", False) and not force:
            # Проверим, не изменились ли параметры
            if (
                getattr(root, "_text_analyser_console_level", None) == console_level_name and
                getattr(root, "_text_analyser_file_level", None) == file_level_name and
                getattr(root, "_text_analyser_format", None) == desired_fmt and
                getattr(root, "_text_analyser_log_to_file", None) == log_to_file
            ):
                return

        handlers: List[logging.Handler] = []
        console = logging.StreamHandler()
        console.setLevel(console_level)
        console.setFormatter(logging.Formatter(desired_fmt))
        handlers.append(console)

        # Файл при необходимости с отдельным уровнем
        if log_to_file:
            self.cleanup_old_log_files()
            log_file = Path(self.get_logging_file())
            try:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                fh = logging.FileHandler(log_file, encoding='utf-8')
                fh.setLevel(file_level)
                fh.setFormatter(logging.Formatter(desired_fmt))
                handlers.append(fh)
            except OSError as e:
                logger.warning(f"Не удалось открыть файл лога {log_file}: {e}")

        root_level = min(console_level, file_level) if len(handlers) > 1 else console_level
        logging.basicConfig(level=root_level, handlers=handlers, format=desired_fmt, force=True)
        setattr(root, "_text_analyser_configured", True)
        setattr(root, "_text_analyser_console_level", console_level_name)
        setattr(root, "_text_analyser_file_level", file_level_name)
        setattr(root, "_text_analyser_format", desired_fmt)
        setattr(root, "_text_analyser_log_to_file", log_to_file)

    def _get_default_config(self) -> Dict[str, Any]:
        """Возвращает конфигурацию по умолчанию"""
        return {
            'files': {
                'results_folder': "data/results",
                'results_filename_prefix': "text-analysis",
                'max_results_files': 20
            },
            'export': {
                # Форматы по умолчанию для CLI, если флаги не указаны
                'formats': [],
                'json_indent': 2
            },
            'excel': {
                'main_sheet_name': "Text Analysis"
            },
            'logging': {
                'console_level': "WARNING",
                'file_level': "DEBUG",
                'format': "%(asctime)s - %(levelname)s - %(message)s",
                'log_to_file': False,
                'log_dir': "logs",
                'max_log_files': 10
            }
        }

    def get(self, key: str, default: Any = None) -> Any:
        """
        Получает значение конфигурации по ключу

        Args:
            key: Ключ в формате 'section.subsection.parameter'
            default: Значение по умолчанию

        Returns:
            Значение параметра или default
        """
        try:
            value = self.config_data
            for k in key.split('.'):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def get_results_folder(self) -> str:
        """Получает папку для результатов"""
        return self.get('files.results_folder', "data/results")

    def get_results_filename_prefix(self) -> str:
        """Получает префикс для файлов результатов"""
        return self.get('files.results_filename_prefix', "text-analysis")

    def get_max_results_files(self) -> int:
        """Получает максимальное количество файлов результатов"""
        return self.get('files.max_results_files', 20)

    def get_export_formats(self) -> List[str]:
        """Форматы экспорта по умолчанию"""
        return list(self.get('export.formats', []) or [])

    def get_json_indent(self) -> int:
        return self.get('export.json_indent', 2)

    def get_main_sheet_name(self) -> str:
        """Получает название основного листа Excel"""
        return self.get('excel.main_sheet_name', "Text Analysis")

    def get_console_logging_level(self) -> str:
        """Получает уровень логирования для консоли"""
        # Поддержка формата logging.level
        return self.get('logging.console_level', self.get('logging.level', "WARNING"))

    def get_file_logging_level(self) -> str:
        """Получает уровень логирования для файла"""
        return self.get('logging.file_level', "DEBUG")

    def get_logging_format(self) -> str:
        """Получает формат логов"""
        return self.get('logging.format', "%(asctime)s - %(levelname)s - %(message)s")

    def is_logging_to_file_enabled(self) -> bool:
        """Проверяет, включено ли логирование в файл"""
        return bool(self.get('logging.log_to_file', False))

    def get_log_dir(self) -> str:
        return self.get('logging.log_dir', "logs")

    def get_logging_file(self) -> str:
        """Генерирует имя файла лога для текущей сессии с временной меткой"""
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        return str(Path(self.get_log_dir()) / f"text_analyser_{timestamp}.log")

    def get_max_log_files(self) -> int:
        """Получает максимальное количество файлов логов для хранения"""
        return self.get('logging.max_log_files', 10)

    def cleanup_old_log_files(self) -> None:
        """Удаляет старые файлы логов, оставляя только последние max_log_files"""
        logs_dir = Path(self.get_log_dir())
        if not logs_dir.exists():
            return

        log_files = list(logs_dir.glob("text_analyser_*.log"))
        max_files = self.get_max_log_files()
        if len(log_files) <= max_files:
            return

        # Сортируем по времени модификации (самые новые последними)
        log_files.sort(key=lambda f: f.stat().st_mtime)
        for old_file in log_files[:-max_files]:
            try:
                old_file.unlink()
                logger.debug(f"Удалён старый лог файл: {old_file}")
            except OSError as e:
                logger.debug(f"Не удалось удалить лог файл {old_file}: {e}")


# Глобальный экземпляр конфигурации
config = Config()
