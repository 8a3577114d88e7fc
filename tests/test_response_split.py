import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.analysis.response import split_response  # noqa: E402

SAMPLE = (PROJECT_ROOT / "tests" / "fixtures" / "sample_completion.md").read_text(encoding="utf-8")


class ResponseSplitTests(unittest.TestCase):
    def test_splits_at_improved_resume_heading(self):
        analysis, improved = split_response(SAMPLE)
        self.assertTrue(analysis.endswith("**Overall Fit:** Good fit for the role."))
        self.assertNotIn("Improved Resume", analysis)
        self.assertTrue(improved.startswith("**Professional Summary:**"))
        self.assertIn("- **Acme Corp** (2020-2022)", improved)

    def test_without_heading_everything_is_analysis(self):
        self.assertEqual(split_response("Total Score: 50/100\n"), ("Total Score: 50/100", ""))
        self.assertEqual(split_response(""), ("", ""))

    def test_mention_in_running_text_does_not_split(self):
        text = "Recommendations: you should Create an Improved Resume soon."
        self.assertEqual(split_response(text), (text, ""))

    def test_inline_label_keeps_following_text(self):
        analysis, improved = split_response("Score: 70/100\nImproved Resume: **Skills:** Python")
        self.assertEqual(analysis, "Score: 70/100")
        self.assertEqual(improved, "**Skills:** Python")


if __name__ == "__main__":
    unittest.main()
