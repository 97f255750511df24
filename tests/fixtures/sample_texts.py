"""Наборы текстов для тестирования.

Покрывают вырожденные случаи: только пунктуация, только числа, \\r\\n, буквы вне ASCII.
"""

SAMPLE_SIMPLE_TEXT = "Hello world! Hello?"


SAMPLE_MULTI_PARAGRAPH_TEXT = """
The first paragraph is short. It has two sentences.

The second paragraph
spans two lines!


Third one?
""".strip()


SAMPLE_CRLF_TEXT = "Line one.\r\nLine two.\r\n\r\nNew paragraph.\rOld mac line."


SAMPLE_PUNCTUATION_ONLY_TEXT = "!!! ... ???"


SAMPLE_NUMERIC_TEXT = "1 22 333 22"


SAMPLE_UNICODE_TEXT = "Café naïve — über straße"
