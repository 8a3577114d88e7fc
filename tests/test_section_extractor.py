import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.analysis.sections import extract_section, find_terminator  # noqa: E402


class SectionExtractorTests(unittest.TestCase):
    def test_empty_and_missing_heading(self):
        self.assertEqual(extract_section("", "Skills Matching"), "")
        self.assertEqual(extract_section("nothing useful here", "Skills Matching"), "")

    def test_runs_to_end_without_terminators(self):
        self.assertEqual(extract_section("Summary: all good", "Summary:"), " all good")

    def test_stops_at_earliest_terminator(self):
        text = "Alpha:\nfirst\nGamma here\nBeta here"
        self.assertEqual(extract_section(text, "Alpha:", ("Beta", "Gamma")), "\nfirst\n")

    def test_case_insensitive_heading(self):
        text = "skills matching:\n- React\nExperience Matching:\n- Lead"
        self.assertEqual(extract_section(text, "Skills Matching", ("Experience Matching",)), ":\n- React\n")

    def test_terminator_markup_is_not_left_behind(self):
        text = "**Skills Matching:**\n- React\n**Experience Matching:**\n- Lead"
        section = extract_section(text, "Skills Matching", ("Experience Matching",))
        self.assertEqual(section, ":**\n- React\n")

    def test_prefers_heading_over_earlier_mention(self):
        text = "Consider a better Summary: later.\n### Summary:\n- Good"
        self.assertEqual(extract_section(text, "Summary:"), "\n- Good")

    def test_falls_back_to_first_mention(self):
        self.assertEqual(extract_section("The Summary: is short", "Summary:"), " is short")

    def test_find_terminator_without_match(self):
        self.assertEqual(find_terminator("abc", 0, ("zzz",)), 3)
        self.assertEqual(find_terminator("abc", 0, ()), 3)


if __name__ == "__main__":
    unittest.main()
