import sys
import unittest
from io import BytesIO
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from docx import Document  # noqa: E402

from app.parsing.parse import DocumentParseError, UnsupportedDocumentError, parse_upload  # noqa: E402


class ParseUploadTests(unittest.TestCase):
    def test_parse_txt_returns_stable_parsed_doc(self):
        content = "Line one\n- Bullet item\nLine three"
        parsed = parse_upload("resume.txt", content.encode("utf-8"))
        self.assertEqual(parsed.source_type, "txt")
        self.assertEqual(parsed.text, content)
        self.assertTrue(parsed.doc_id)
        self.assertEqual(parsed.doc_id, parse_upload("other.txt", content.encode("utf-8")).doc_id)

    def test_parse_docx_paragraphs(self):
        document = Document()
        document.add_paragraph("Jane Doe")
        document.add_paragraph("")
        document.add_paragraph("React developer")
        buffer = BytesIO()
        document.save(buffer)

        parsed = parse_upload("Resume.DOCX", buffer.getvalue())
        self.assertEqual(parsed.source_type, "docx")
        self.assertEqual(parsed.text, "Jane Doe\nReact developer")
        self.assertEqual(len(parsed.blocks), 2)

    def test_latin1_text_is_decoded_with_warning(self):
        parsed = parse_upload("resume.txt", "Jos\u00e9 M\u00fcller".encode("latin-1"))
        self.assertEqual(parsed.text, "Jos\u00e9 M\u00fcller")
        self.assertEqual(len(parsed.parsing_warnings), 1)

    def test_binary_text_file_is_rejected(self):
        with self.assertRaises(DocumentParseError):
            parse_upload("resume.txt", b"PK\x03\x04\x00\x00")

    def test_unsupported_extension(self):
        with self.assertRaises(UnsupportedDocumentError):
            parse_upload("resume.png", b"\x89PNG")
        with self.assertRaises(UnsupportedDocumentError):
            parse_upload("resume", b"text")


if __name__ == "__main__":
    unittest.main()
