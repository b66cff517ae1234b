import io
import logging
from pathlib import Path

import docx
import fitz  # PyMuPDF
from PyPDF2 import PdfReader

from schemas import ResumeIn

logger = logging.getLogger(__name__)

TEXT_ENCODINGS = ['utf-8', 'latin-1', 'cp1252']


def read_pdf(data: bytes) -> str:
    """Extract text from PDF bytes using PyMuPDF primarily, fallback to PyPDF2."""
    text = ""

    # ---------- Attempt 1: PyMuPDF ----------
    try:
        with fitz.open(stream=data, filetype="pdf") as doc:
            text = "\n".join(page.get_text("text") or "" for page in doc)
        if text.strip():
            return text
    except Exception as e:
        logger.warning(f"[WARN] PyMuPDF extraction failed: {e}")

    # ---------- Attempt 2: PyPDF2 (fallback) ----------
    reader = PdfReader(io.BytesIO(data))
    return "\n".join(page.extract_text() or "" for page in reader.pages)


def read_docx(data: bytes) -> str:
    """Extract paragraph and table text from DOCX bytes"""
    doc = docx.Document(io.BytesIO(data))
    parts = [para.text for para in doc.paragraphs]
    for table in doc.tables:
        for row in table.rows:
            parts.append(" ".join(cell.text for cell in row.cells))
    return "\n".join(parts)


def read_txt(data: bytes) -> str:
    for encoding in TEXT_ENCODINGS:
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            continue
    raise ValueError("Unable to decode file with supported encodings")


# Legacy binary .doc is not readable by python-docx and is reported as unsupported
READERS = {
    '.pdf': read_pdf,
    '.docx': read_docx,
    '.txt': read_txt,
}


def read_document(file_name: str, data: bytes) -> ResumeIn:
    """
    Decode one uploaded resume

    Never raises: an unsupported format or a reader failure yields an entry
    with empty text and ``decode_error`` set, so the batch can still produce
    a record for it.

    Args:
        file_name: Original upload name
        data: Raw file bytes

    Returns:
        ResumeIn ready for batch analysis
    """
    extension = Path(file_name or "").suffix.lower()
    reader = READERS.get(extension)
    if reader is None:
        logger.warning(f"Unsupported file format for {file_name}: {extension or 'none'}")
        return ResumeIn(file_name=file_name, decode_error=f"Unsupported file format: {extension or 'none'}")

    try:
        text = reader(data)
    except Exception as e:
        logger.warning(f"Could not read {file_name}: {e}")
        return ResumeIn(file_name=file_name, decode_error=f"Could not read document: {e}")

    if not text.strip():
        logger.warning(f"No text extracted from {file_name}")
        return ResumeIn(file_name=file_name, text="", decode_error="No text could be extracted from the file")

    logger.info(f"Extracted {len(text)} characters from {file_name}")
    return ResumeIn(file_name=file_name, text=text)
