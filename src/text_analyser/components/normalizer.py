"""
Компонент для нормализации сырого текста.

Приводит все варианты переводов строк (\\r\\n, одиночный \\r) к \\n,
чтобы остальные проходы работали с единым форматом.
"""

import re
from ..interfaces.text_processor import NormalizerInterface

# Пробельные символы: категория Unicode Zs, \t \n \v \f \r, U+2028, U+2029
# и BOM U+FEFF. Питоновский \s с этим набором не совпадает: он включает
# \x1c-\x1f и \x85, но не U+FEFF.
WHITESPACE_CHARS = "\t\n\v\f\r " + "".join(
    chr(code) for code in (0xA0, 0x1680, *range(0x2000, 0x200B), 0x2028, 0x2029, 0x202F, 0x205F, 0x3000, 0xFEFF)
)
WHITESPACE_CLASS = '[' + re.escape(WHITESPACE_CHARS) + ']'


class LineEndingNormalizer(NormalizerInterface):
    """Нормализатор окончаний строк."""

    _line_ending_pattern = re.compile(r'\r\n?')

    def normalize(self, raw: str) -> str:
        """
        Заменяет \\r\\n и одиночные \\r на \\n.

        Args:
            raw: Исходный текст (None трактуется как пустая строка)

        Returns:
            Текст с единым форматом переводов строк
        """
        if not raw:
            return ""
        return self._line_ending_pattern.sub('\n', raw)
