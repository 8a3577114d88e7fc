import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.analysis.scores import (  # noqa: E402
    EXPERIENCE_MAX,
    SKILLS_MAX,
    derive_category_score,
    extract_category_score,
    extract_overall_score,
    find_category_score,
)
from app.schemas.analysis import CategoryScore  # noqa: E402


class OverallScoreTests(unittest.TestCase):
    def test_total_score(self):
        self.assertEqual(extract_overall_score("Total Score: 73/100"), 73)

    def test_pattern_priority(self):
        text = "Overall match is 40/100 in short.\nScore: 55/100\nTotal Score: 73/100"
        self.assertEqual(extract_overall_score(text), 73)
        self.assertEqual(extract_overall_score("rough guess 40/100\nscore: 55/100"), 55)
        self.assertEqual(extract_overall_score("rated 64/100 overall"), 64)

    def test_defaults_and_clamp(self):
        self.assertEqual(extract_overall_score(""), 0)
        self.assertEqual(extract_overall_score("no numbers at all"), 0)
        self.assertEqual(extract_overall_score("Total Score: 150/100"), 100)


class CategoryScoreTests(unittest.TestCase):
    def test_explicit_token_wins(self):
        self.assertEqual(extract_category_score("Skills: 28/40", SKILLS_MAX, overall_score=90), 28)

    def test_fallback_from_overall(self):
        self.assertEqual(extract_category_score("- React\n- Vue", SKILLS_MAX, overall_score=80), 32)
        self.assertEqual(extract_category_score("", SKILLS_MAX), 0)

    def test_fallback_rounds_half_up(self):
        self.assertEqual(derive_category_score(75, EXPERIENCE_MAX), 23)
        self.assertEqual(derive_category_score(65, 20), 13)
        self.assertEqual(derive_category_score(100, SKILLS_MAX), 40)

    def test_out_of_range_value_is_preserved_and_flagged(self):
        value = extract_category_score("Skills: 45/40", SKILLS_MAX, overall_score=50)
        self.assertEqual(value, 45)
        score = CategoryScore(value=value, max=SKILLS_MAX)
        self.assertTrue(score.exceeds_max)
        self.assertFalse(CategoryScore(value=40, max=SKILLS_MAX).exceeds_max)

    def test_other_maximum_is_ignored(self):
        self.assertIsNone(find_category_score("Experience: 20/30", SKILLS_MAX))


if __name__ == "__main__":
    unittest.main()
