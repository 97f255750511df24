"""
Тесты для SentenceSegmenter и ParagraphSegmenter.

Границы предложений в смешанных случаях (переводы строк + пунктуация)
определяются эвристикой и зафиксированы здесь эталонными значениями.
"""

import pytest
from text_analyser.components.segmenter import SentenceSegmenter, ParagraphSegmenter

BOM = chr(0xFEFF)


class TestSentenceSegmenter:
    """Тесты для SentenceSegmenter."""

    def setup_method(self):
        self.segmenter = SentenceSegmenter()

    def test_empty_text(self):
        assert self.segmenter.split_sentences("") == []
        assert self.segmenter.split_sentences("   ") == []
        assert self.segmenter.count_sentences("") == 0

    def test_basic_split(self):
        assert self.segmenter.split_sentences("Hello world! Hello?") == ["Hello world", "Hello"]

    def test_text_without_terminator_is_one_sentence(self):
        assert self.segmenter.split_sentences("No terminator here") == ["No terminator here"]

    def test_pieces_are_trimmed(self):
        assert self.segmenter.split_sentences("  Hi there.  Bye. ") == ["Hi there", "Bye"]

    def test_terminator_runs(self):
        """Серия терминаторов считается одной границей."""
        assert self.segmenter.split_sentences("Wait... what?! Really") == ["Wait", "what", "Really"]

    def test_terminator_inside_word_is_not_boundary(self):
        """Точка без пробела после неё (1.5, React.js) не разделяет."""
        assert self.segmenter.count_sentences("Version 1.5 of React.js is out.") == 1

    def test_abbreviations_are_over_counted(self):
        """Сокращения считаются концом предложения (фиксированная эвристика)."""
        assert self.segmenter.split_sentences("Mr. Smith went home.") == ["Mr", "Smith went home"]

    @pytest.mark.parametrize("text,expected", [
        # Строки без пунктуации сливаются в одно предложение
        ("First line\nSecond line", 1),
        ("Ends here.\nNext starts", 2),
        ("Para one.\n\nPara two.", 2),
        ("Para one\n\nPara two", 1),
        ("Question?\n\n\nAnswer!\n", 2),
        ("Trailing dot at line end.\n", 1),
    ])
    def test_line_breaks_golden(self, text, expected):
        assert self.segmenter.count_sentences(text) == expected

    @pytest.mark.parametrize("text,expected", [
        # Управляющие \x1c и \x85 не пробельные: терминатор перед ними не граница
        ("Stop!\x1cbad. Next.", 2),
        ("Wait!\x85Go on.", 1),
        # BOM считается пробельным символом
        ("One." + BOM + "Two.", 2),
    ])
    def test_whitespace_set_golden(self, text, expected):
        assert self.segmenter.count_sentences(text) == expected

    def test_punctuation_only(self):
        assert self.segmenter.count_sentences("!!! ... ???") == 0

    def test_long_terminator_run_without_boundary(self):
        """Длинная серия точек без пробела после неё не разбивает текст."""
        text = "a" + "." * 20000 + "b"
        assert self.segmenter.count_sentences(text) == 1


class TestParagraphSegmenter:
    """Тесты для ParagraphSegmenter."""

    def setup_method(self):
        self.segmenter = ParagraphSegmenter()

    def test_empty_text(self):
        assert self.segmenter.count_paragraphs("") == 0
        assert self.segmenter.count_paragraphs(None) == 0
        assert self.segmenter.count_paragraphs("\n\n  \n") == 0

    def test_two_paragraphs(self):
        assert self.segmenter.count_paragraphs("One line.\n\nSecond para.") == 2

    def test_single_line_break_is_same_paragraph(self):
        assert self.segmenter.count_paragraphs("Single\nline break") == 1

    def test_whitespace_only_line_separates(self):
        assert self.segmenter.count_paragraphs("A\n   \nB") == 2

    def test_multiple_blank_lines(self):
        assert self.segmenter.split_paragraphs("A\n\n\nB\n\nC") == ["A", "B", "C"]

    def test_leading_and_trailing_blank_lines(self):
        """Пустые строки в начале и конце не создают абзацев."""
        assert self.segmenter.count_paragraphs("\n\nA\n\n") == 1
        assert self.segmenter.count_paragraphs("\nA\n\n\n\nB\n") == 2

    def test_whitespace_set_golden(self):
        assert self.segmenter.count_paragraphs("A\n\x1c\nB") == 1
        assert self.segmenter.count_paragraphs("A\n" + BOM + "\nB") == 2
        assert self.segmenter.count_paragraphs("\x1c") == 1
        assert self.segmenter.count_paragraphs(BOM + "\n\n" + BOM) == 0
