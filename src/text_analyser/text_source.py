"""
Модуль для загрузки текста для анализа

Содержит функции для:
- Чтения текстовых и HTML файлов
- Удаления HTML тегов
- Загрузки примера текста
"""

import logging
from pathlib import Path
from typing import TextIO, Union
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

HTML_SUFFIXES = {'.html', '.htm', '.xhtml'}

EXAMPLE_TEXT = """React.js is a popular JavaScript library for building user interfaces, especially single-page
applications where the main objective is to provide a fast and interactive user experience.
Developed and maintained by Facebook, React allows developers to create large web
applications that can update and render efficiently in response to data changes.
One of the key features of React is its component-based architecture. Components are
independent, reusable pieces of UI that can be nested, managed, and handled separately. This
approach promotes modularity and enhances code maintainability, making it easier to develop
and scale applications.
React's virtual DOM is another powerful feature that optimizes performance. The virtual DOM is
a lightweight copy of the actual DOM, allowing React to determine the most efficient way to
update the user interface. Instead of updating the entire page, React only updates the parts of
the DOM that have changed, resulting in faster and smoother user experiences.
As the demand for dynamic web applications continues to grow, learning and mastering
React.js is becoming increasingly valuable for front-end developers. The ecosystem around
React is also vast, with tools, libraries, and frameworks like Redux, Next.js, and Gatsby further
enhancing its capabilities."""


class TextSourceLoader:
    """Класс для получения текста из файлов, потоков и примеров"""

    def __init__(self, strip_html: bool = True) -> None:
        """
        Args:
            strip_html: Удалять ли HTML теги из HTML файлов
        """
        self.strip_html = strip_html

    def remove_html_tags(self, text: str) -> str:
        """
        Удаляет HTML теги из текста используя BeautifulSoup

        Args:
            text: HTML текст

        Returns:
            Очищенный текст без HTML тегов
        """
        if not text:
            return ""

        # Проверяем, содержит ли текст HTML теги
        if '<' in text and '>' in text:
            soup = BeautifulSoup(text, "html.parser")
            return soup.get_text()
        return text

    def load_file(self, path: Union[str, Path]) -> str:
        """
        Читает файл в UTF-8. HTML файлы очищаются от тегов.

        Args:
            path: Путь к файлу

        Returns:
            Текст файла

        Raises:
            OSError: Файл не найден или недоступен
            UnicodeDecodeError: Файл не в UTF-8
        """
        path = Path(path)
        # newline='' сохраняет \r\n как есть, нормализация - дело анализатора
        with open(path, 'r', encoding='utf-8', newline='') as f:
            text = f.read()
        logger.debug(f"Прочитан файл {path}: {len(text)} символов")

        if self.strip_html and path.suffix.lower() in HTML_SUFFIXES:
            text = self.remove_html_tags(text)
            logger.debug(f"HTML теги удалены: {path}")
        return text

    def load_stream(self, stream: TextIO) -> str:
        """Читает весь текст из потока (например, stdin)."""
        return stream.read()

    def load_example(self) -> str:
        """Возвращает встроенный пример текста."""
        return EXAMPLE_TEXT
