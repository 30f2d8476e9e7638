from __future__ import annotations
import logging
import os
from enum import Enum
from typing import List, Optional

from docx import Document as DocxDocument
from pypdf import PdfReader
from pypdf.errors import PdfReadError

from contractlens.ingest.ocr import ocr_engine
from contractlens.utils.errors import (
    CorruptedPdfError,
    ExtractionFailedError,
    NoTextualContentError,
    NotFoundError,
    UnsupportedFormatError,
)
from contractlens.utils.types import ExtractedText

logger = logging.getLogger(__name__)


class DocumentFormat(str, Enum):
    PDF = "pdf"
    DOCX = "docx"
    IMAGE = "image"
    TEXT = "text"


EXTENSION_FORMATS = {
    ".pdf": DocumentFormat.PDF,
    ".docx": DocumentFormat.DOCX,
    ".png": DocumentFormat.IMAGE,
    ".jpg": DocumentFormat.IMAGE,
    ".jpeg": DocumentFormat.IMAGE,
    ".tiff": DocumentFormat.IMAGE,
    ".txt": DocumentFormat.TEXT,
}
SUPPORTED_LABEL = "PDF, DOCX, TXT, PNG/JPG/JPEG/TIFF"


def normalize_extension(path: str, declared_extension: Optional[str] = None) -> str:
    ext = declared_extension if declared_extension else os.path.splitext(path)[1]
    ext = (ext or "").strip().lower()
    if ext and not ext.startswith("."):
        ext = "." + ext
    return ext


def resolve_format(extension: str) -> DocumentFormat:
    fmt = EXTENSION_FORMATS.get(extension)
    if fmt is None:
        raise UnsupportedFormatError(extension or "(none)", SUPPORTED_LABEL)
    return fmt


def extract_text(path: str, declared_extension: Optional[str] = None, ocr_lang: str = "eng") -> ExtractedText:
    """Convert a stored file into plain text.

    The path must exist before the format is even looked at, so a missing
    file is always NotFoundError. Failures are never retried here.
    """
    if not os.path.exists(path):
        raise NotFoundError(path)
    extension = normalize_extension(path, declared_extension)
    fmt = resolve_format(extension)
    logger.debug("extracting %s as %s", path, fmt.value)

    if fmt is DocumentFormat.PDF:
        text = _extract_pdf(path)
    elif fmt is DocumentFormat.DOCX:
        text = _extract_docx(path)
    elif fmt is DocumentFormat.IMAGE:
        text = _extract_image(path, ocr_lang)
    else:
        text = _extract_txt(path)
    logger.info("extracted %d chars from %s", len(text), os.path.basename(path))
    return ExtractedText(source_path=path, text=text)


def _extract_pdf(path: str) -> str:
    pages_text: List[str] = []
    try:
        reader = PdfReader(path)
        for page in reader.pages:
            txt = page.extract_text() or ""
            pages_text.append(txt.replace("\x00", " "))
    except PdfReadError as e:
        # bad xref table, missing EOF marker, broken object streams, empty file
        logger.warning("pdf structure unreadable for %s: %s", path, e)
        raise CorruptedPdfError(
            "PDF appears corrupted or scanned; text layer not readable. "
            "Try uploading a text-based PDF, a DOCX, or an image for OCR."
        ) from e
    except Exception as e:
        raise ExtractionFailedError(f"PDF parse failed: {e}") from e

    combined = "\n".join(pages_text).strip()
    if not combined:
        raise NoTextualContentError("Unable to extract text from PDF (no textual content).")
    return combined


def _extract_docx(path: str) -> str:
    try:
        doc = DocxDocument(path)
    except Exception as e:
        raise ExtractionFailedError(f"DOCX parse failed: {e}") from e
    lines = [p.text for p in doc.paragraphs]
    for table in doc.tables:
        for row in table.rows:
            cells = [c.text.strip() for c in row.cells if c.text.strip()]
            if cells:
                lines.append("\t".join(cells))
    return "\n".join(lines).strip()


def _extract_image(path: str, lang: str) -> str:
    with ocr_engine(lang) as engine:
        try:
            text = engine.recognize(path)
        except Exception as e:
            raise ExtractionFailedError(f"OCR failed: {e}") from e
    return (text or "").strip()


def _extract_txt(path: str) -> str:
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise ExtractionFailedError(f"Text file could not be read: {e}") from e
    # invalid sequences become U+FFFD; a BOM is kept as-is
    return data.decode("utf-8", errors="replace")
