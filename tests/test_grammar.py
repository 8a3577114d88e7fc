import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.analysis.grammar import (  # noqa: E402
    BOLD_RE,
    BULLET_RE,
    COMPANY_ROW_RE,
    MARKDOWN_HEADING_RE,
    SECTION_LABEL_RE,
    category_score_pattern,
    heading_line_start,
    is_heading_position,
    is_markup_only,
    looks_like_label,
    phrase_pattern,
    strip_bullet,
)


class BulletRuleTests(unittest.TestCase):
    def test_bullet_markers(self):
        for line in ("- item", "• item", "* item", "12. item"):
            self.assertTrue(BULLET_RE.match(line), line)
        for line in ("-item", "item", "1.item", "**Bold**"):
            self.assertIsNone(BULLET_RE.match(line), line)

    def test_strip_bullet_removes_dash_then_number(self):
        self.assertEqual(strip_bullet("- React"), "React")
        self.assertEqual(strip_bullet("3. Docker"), "Docker")
        self.assertEqual(strip_bullet("- 1. Kubernetes"), "Kubernetes")

    def test_label_like_lines(self):
        self.assertTrue(looks_like_label("Missing Skills: none"))
        self.assertFalse(looks_like_label("teams of 5"))
        self.assertFalse(looks_like_label("Worked with AWS"))

    def test_markup_only_lines(self):
        self.assertTrue(is_markup_only("**"))
        self.assertTrue(is_markup_only("---"))
        self.assertFalse(is_markup_only("- item"))
        self.assertFalse(is_markup_only(""))


class HeadingRuleTests(unittest.TestCase):
    def test_phrase_pattern_is_literal_and_case_insensitive(self):
        pattern = phrase_pattern("C++ (Senior)")
        self.assertIsNotNone(pattern.search("needs c++ (senior) skills"))
        self.assertIsNone(pattern.search("needs C (Senior)"))

    def test_phrase_pattern_alternation(self):
        match = phrase_pattern("Beta", "Alpha").search("x alpha y beta")
        self.assertEqual(match.group(0), "alpha")

    def test_heading_position(self):
        text = "Intro mentions Summary: here\n### **Summary:**\n2. Summary:"
        first = text.index("Summary:")
        second = text.index("Summary:", first + 1)
        third = text.index("Summary:", second + 1)
        self.assertFalse(is_heading_position(text, first))
        self.assertTrue(is_heading_position(text, second))
        self.assertTrue(is_heading_position(text, third))

    def test_heading_line_start(self):
        text = "body\n**Missing Skills:**"
        index = text.index("Missing")
        self.assertEqual(heading_line_start(text, index), len("body\n"))
        inline = "see Missing Skills: below"
        self.assertEqual(heading_line_start(inline, 4), 4)

    def test_markdown_heading(self):
        self.assertEqual(MARKDOWN_HEADING_RE.match("### Scoring:  ").group(1), "Scoring:")
        self.assertIsNone(MARKDOWN_HEADING_RE.match("#hashtag"))


class ScoreAndBoldRuleTests(unittest.TestCase):
    def test_category_score_pattern_respects_maximum(self):
        pattern = category_score_pattern(40)
        self.assertEqual(pattern.search("Skills: 32/40").group(1), "32")
        self.assertIsNone(pattern.search("Total: 30/400"))
        self.assertIsNone(pattern.search("Experience: 20/30"))

    def test_bold_runs(self):
        self.assertEqual(BOLD_RE.findall("**React** and **Vue**"), ["React", "Vue"])

    def test_resume_rows(self):
        self.assertEqual(SECTION_LABEL_RE.match("**Work Experience:** x").group(1), "Work Experience")
        row = COMPANY_ROW_RE.match("- **Acme Corp** (2020-2022)")
        self.assertEqual(row.group(1), "Acme Corp")
        self.assertEqual(row.group(2), "(2020-2022)")


if __name__ == "__main__":
    unittest.main()
