import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.formatting.resume import (  # noqa: E402
    ResumeList,
    ResumeParagraph,
    format_resume,
    parse_resume,
    strip_resume_label,
)


class ResumeParseTests(unittest.TestCase):
    def test_work_experience_entry(self):
        sections = parse_resume("**Work Experience:**\n- **Acme Corp** (2020-2022)\n  - Built X\n  - Built Y")
        self.assertEqual(len(sections), 1)
        self.assertEqual(sections[0].title, "Work Experience")
        entries = sections[0].entries
        self.assertEqual(len(entries), 1)
        self.assertEqual(entries[0].company, "Acme Corp")
        self.assertEqual(entries[0].dates, "(2020-2022)")
        self.assertEqual(entries[0].nested_bullets, ["Built X", "Built Y"])
        self.assertEqual(entries[0].bullets, [])

    def test_titles_start_new_entries(self):
        text = (
            "**Work Experience:**\n"
            "**Senior Engineer**\n"
            "- **Acme Corp** (2020-2022)\n"
            "  - Built X\n"
            "**Engineer**\n"
            "- **Beta Inc** (2018-2020)\n"
            "  - Built Y"
        )
        entries = parse_resume(text)[0].entries
        self.assertEqual([entry.title for entry in entries], ["Senior Engineer", "Engineer"])
        self.assertEqual(entries[1].company, "Beta Inc")
        self.assertEqual(entries[1].nested_bullets, ["Built Y"])

    def test_leading_label_is_stripped(self):
        self.assertEqual(strip_resume_label("### Improved Resume:\n**Skills:**"), "**Skills:**")
        sections = parse_resume("Improved Resume:\n**Skills:**\n- Python\n- SQL")
        self.assertEqual(sections[0].title, "Skills")
        self.assertEqual(sections[0].children, [ResumeList(items=["Python", "SQL"])])

    def test_section_stays_open_across_blocks(self):
        sections = parse_resume("**Education:**\n\nBSc Computer Science, MIT\n\n**Skills:**\n- Python")
        self.assertEqual([section.title for section in sections], ["Education", "Skills"])
        self.assertEqual(sections[0].children, [ResumeParagraph(lines=["BSc Computer Science, MIT"])])

    def test_untitled_leading_block(self):
        sections = parse_resume("Jane Doe\njane@example.com\n\n**Skills:**\n- Python")
        self.assertIsNone(sections[0].title)
        self.assertEqual(sections[0].children, [ResumeParagraph(lines=["Jane Doe", "jane@example.com"])])


class ResumeRenderTests(unittest.TestCase):
    def test_entry_markup(self):
        html = format_resume("**Work Experience:**\n- **Acme Corp** (2020-2022)\n  - Built X\n  - Built Y")
        self.assertIn('<h3 class="resume-section-title">Work Experience</h3>', html)
        self.assertIn('<span class="resume-company">Acme Corp</span>', html)
        self.assertIn('<span class="resume-dates">(2020-2022)</span>', html)
        self.assertIn('<ul class="resume-bullets nested"><li>Built X</li><li>Built Y</li></ul>', html)
        self.assertTrue(html.startswith('<section class="resume-section">'))

    def test_plain_text_renders_as_paragraph(self):
        self.assertEqual(format_resume("Jane Doe\nBerlin"), "<p>Jane Doe<br>Berlin</p>")
        self.assertEqual(format_resume(""), "")

    def test_escapes_text(self):
        html = format_resume("**Skills:**\n- C++ & <Rust>")
        self.assertIn("<li>C++ &amp; &lt;Rust&gt;</li>", html)


if __name__ == "__main__":
    unittest.main()
