from __future__ import annotations

import logging
from io import BytesIO

from pypdf import PdfReader

from resume_check.core.errors import UNREADABLE_PDF, ValidationError

from .models import ExtractedText, Upload

logger = logging.getLogger(__name__)


def _read_pdf(content: bytes) -> ExtractedText:
    warnings: list[str] = []
    try:
        reader = PdfReader(BytesIO(content))
        text_parts: list[str] = []
        for page in reader.pages:
            page_text = (page.extract_text() or "").strip()
            if page_text:
                text_parts.append(page_text)
        pages = len(reader.pages)
    except Exception as exc:
        raise ValidationError(UNREADABLE_PDF) from exc

    if not text_parts:
        warnings.append("No extractable text found in PDF.")
    return ExtractedText(text="\n".join(text_parts).strip(), pages=pages, warnings=warnings)


def extract_resume_text(upload: Upload) -> ExtractedText:
    """Return the plain text of a PDF upload.

    Anything not declared as ``application/pdf`` yields empty text without
    being opened; the caller decides how to report that.
    """
    if not upload.is_pdf:
        logger.warning(
            "resume_not_pdf media_type=%s filename=%s", upload.media_type, upload.filename
        )
        return ExtractedText(text="", warnings=[f"Unsupported media type '{upload.media_type}'."])

    logger.info("resume_pdf_extract_start bytes=%s", upload.size)
    extracted = _read_pdf(upload.content)
    logger.info(
        "resume_text_extracted pages=%s chars=%s preview=%r",
        extracted.pages,
        len(extracted.text),
        extracted.text[:100],
    )
    return extracted
