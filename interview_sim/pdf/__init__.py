"""
Document parsing utilities for extracting text from uploaded resumes.
"""
from .parser import extract_text, extract_text_from_pdf, SUPPORTED_MIME_TYPES

__all__ = ['extract_text', 'extract_text_from_pdf', 'SUPPORTED_MIME_TYPES']
