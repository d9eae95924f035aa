# extraction.py - plain text from uploaded résumé documents
import logging
import os

import PyPDF2
from docx import Document

from errors import ExtractionError

logger = logging.getLogger(__name__)

DOCX_EXTENSIONS = {'.docx'}
TEXT_EXTENSIONS = {'.txt', '.md'}


def extract_text(file_path, original_filename=None):
    """Extract plain text from a résumé file.

    The format is chosen from the original upload name when given, since the
    stored copy may have been renamed. Anything that is not DOCX or plain text
    is read as a PDF.
    """
    name = original_filename or file_path
    file_ext = os.path.splitext(name)[1].lower()

    if file_ext in DOCX_EXTENSIONS:
        text = extract_from_docx(file_path)
    elif file_ext in TEXT_EXTENSIONS:
        text = extract_from_txt(file_path)
    else:
        text = extract_from_pdf(file_path)

    logger.debug("Extracted %d characters from %s", len(text), name)
    return text


def extract_from_pdf(file_path):
    """Extract text from every page of a PDF"""
    try:
        with open(file_path, 'rb') as file:
            reader = PyPDF2.PdfReader(file)
            return "\n".join(page.extract_text() or "" for page in reader.pages)
    except Exception as e:
        raise ExtractionError(f"Could not extract PDF text from {file_path}: {e}") from e


def extract_from_docx(file_path):
    """Extract text from DOCX"""
    try:
        doc = Document(file_path)
        return "\n".join(paragraph.text for paragraph in doc.paragraphs)
    except Exception as e:
        raise ExtractionError(f"Could not extract DOCX text from {file_path}: {e}") from e


def extract_from_txt(file_path):
    try:
        with open(file_path, 'rb') as file:
            return file.read().decode('utf-8', errors='ignore')
    except OSError as e:
        raise ExtractionError(f"Could not read {file_path}: {e}") from e
