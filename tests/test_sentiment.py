"""
Тесты для SentimentScorer.
"""

import unittest

from text_analyser.components.sentiment import (
    SentimentScorer,
    POSITIVE_WORDS,
    NEGATIVE_WORDS,
)


class TestSentimentScorer(unittest.TestCase):
    """Тесты для класса SentimentScorer"""

    def setUp(self):
        """Настройка перед каждым тестом"""
        self.scorer = SentimentScorer()

    def test_empty_is_neutral(self):
        result = self.scorer.score([])
        self.assertEqual(result.label, "neutral")
        self.assertEqual(result.score, 0)

    def test_positive_requires_score_above_one(self):
        self.assertEqual(self.scorer.score(["good"]), ("neutral", 1))
        self.assertEqual(self.scorer.score(["good", "great"]), ("positive", 2))

    def test_negative_requires_score_below_minus_one(self):
        self.assertEqual(self.scorer.score(["bad"]), ("neutral", -1))
        self.assertEqual(self.scorer.score(["bad", "awful", "crash"]), ("negative", -3))

    def test_positive_and_negative_cancel(self):
        self.assertEqual(self.scorer.score(["good", "bad", "love", "hate"]), ("neutral", 0))

    def test_exact_membership_no_stemming(self):
        """Словоформы не приводятся к основе."""
        self.assertEqual(self.scorer.score(["goodness", "greatly", "buggy"]).score, 0)

    def test_repeated_words_count_each_time(self):
        self.assertEqual(self.scorer.score(["like", "like", "like"]), ("positive", 3))

    def test_lexicons_are_immutable(self):
        self.assertIsInstance(POSITIVE_WORDS, frozenset)
        self.assertIsInstance(NEGATIVE_WORDS, frozenset)
        self.assertFalse(POSITIVE_WORDS & NEGATIVE_WORDS)

    def test_custom_lexicon(self):
        """Словари можно заменить без изменения контракта."""
        scorer = SentimentScorer(positive_words=["yay"], negative_words=["meh"])
        self.assertEqual(scorer.score(["yay", "yay", "good"]), ("positive", 2))
        self.assertEqual(scorer.score(["meh", "meh", "bad"]), ("negative", -2))

    def test_label_for(self):
        self.assertEqual(self.scorer.label_for(2), "positive")
        self.assertEqual(self.scorer.label_for(1), "neutral")
        self.assertEqual(self.scorer.label_for(-1), "neutral")
        self.assertEqual(self.scorer.label_for(-2), "negative")


if __name__ == '__main__':
    unittest.main()
