from __future__ import annotations

import hashlib
from io import BytesIO

from docx import Document
from pypdf import PdfReader

from .models import ParsedBlock, ParsedDoc

SUPPORTED_EXTENSIONS = ("pdf", "docx", "txt")


class UnsupportedDocumentError(ValueError):
    pass


class DocumentParseError(ValueError):
    pass


def _compute_doc_id(text: str, filename: str) -> str:
    seed = text if text.strip() else filename
    digest = hashlib.sha256(seed.encode("utf-8", errors="ignore")).hexdigest()
    return digest[:16]


def _extension(filename: str) -> str:
    return filename.rsplit(".", 1)[-1].lower() if "." in filename else ""


def _parse_txt(content: bytes) -> tuple[str, list[ParsedBlock], list[str]]:
    if b"\x00" in content:
        raise DocumentParseError("Unable to decode text file.")
    try:
        return content.decode("utf-8-sig"), [], []
    except UnicodeDecodeError:
        return content.decode("latin-1"), [], ["Text file is not UTF-8; decoded as Latin-1."]


def _parse_pdf(content: bytes) -> tuple[str, list[ParsedBlock], list[str]]:
    warnings: list[str] = []
    blocks: list[ParsedBlock] = []

    try:
        reader = PdfReader(BytesIO(content))
        text_parts: list[str] = []
        for index, page in enumerate(reader.pages, start=1):
            page_text = (page.extract_text() or "").strip()
            if page_text:
                text_parts.append(page_text)
                blocks.append(ParsedBlock(page=index, text=page_text))
    except Exception as exc:
        raise DocumentParseError("Unable to extract text from this PDF file.") from exc

    if not text_parts:
        warnings.append("No extractable text found in PDF.")
    return "\n".join(text_parts), blocks, warnings


def _parse_docx(content: bytes) -> tuple[str, list[ParsedBlock], list[str]]:
    warnings: list[str] = []

    try:
        document = Document(BytesIO(content))
        paragraphs = [p.text.strip() for p in document.paragraphs if p.text and p.text.strip()]
    except Exception as exc:
        raise DocumentParseError("Unable to extract text from this DOCX file.") from exc

    blocks = [ParsedBlock(page=None, text=paragraph_text) for paragraph_text in paragraphs]
    if not paragraphs:
        warnings.append("No extractable text found in DOCX.")
    return "\n".join(paragraphs), blocks, warnings


def parse_upload(filename: str, content: bytes) -> ParsedDoc:
    """Extract plain text from an uploaded resume (.pdf, .docx or .txt)."""
    extension = _extension(filename)
    if extension == "txt":
        text, blocks, warnings = _parse_txt(content)
    elif extension == "pdf":
        text, blocks, warnings = _parse_pdf(content)
    elif extension == "docx":
        text, blocks, warnings = _parse_docx(content)
    else:
        raise UnsupportedDocumentError(
            f"Unsupported file type '.{extension}'. Supported types: "
            + ", ".join(f".{ext}" for ext in SUPPORTED_EXTENSIONS)
        )

    return ParsedDoc(
        doc_id=_compute_doc_id(text=text, filename=filename),
        filename=filename,
        source_type=extension,
        text=text,
        blocks=blocks,
        parsing_warnings=warnings,
    )
