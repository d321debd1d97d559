"""
Document text extraction for uploaded resumes.
"""
import io

import pdfplumber

from ..interview.errors import UnsupportedDocumentError
from ..utils.logger import setup_logger

logger = setup_logger("pdf_parser")

PDF_MIME_TYPE = "application/pdf"
TEXT_MIME_TYPE = "text/plain"
SUPPORTED_MIME_TYPES = (PDF_MIME_TYPE, TEXT_MIME_TYPE)


def extract_text_from_pdf(file_bytes: bytes) -> str:
    """
    Extract text from PDF content, one page after another.

    Args:
        file_bytes: Raw PDF bytes

    Returns:
        Extracted text as string
    """
    text = ""
    with pdfplumber.open(io.BytesIO(file_bytes)) as pdf:
        for page in pdf.pages:
            page_text = page.extract_text()
            if page_text:
                text += page_text + "\n"
    return text.strip()


def extract_text(file_bytes: bytes, mime_type: str) -> str:
    """
    Extract plain text from an uploaded document.

    Args:
        file_bytes: Raw file content
        mime_type: Content type reported for the upload

    Returns:
        Plain text

    Raises:
        UnsupportedDocumentError: If the type is neither plain text nor PDF
    """
    mime_type = (mime_type or "").split(";")[0].strip().lower()

    if mime_type == PDF_MIME_TYPE:
        text = extract_text_from_pdf(file_bytes)
    elif mime_type == TEXT_MIME_TYPE:
        text = file_bytes.decode("utf-8", errors="replace").strip()
    else:
        raise UnsupportedDocumentError(f"Unsupported file type: {mime_type or 'unknown'}")

    logger.info(f"Extracted {len(text)} characters from {mime_type} upload")
    return text
