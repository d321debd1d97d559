"""
Utility modules for configuration, logging and text processing.
"""
from .logger import setup_logger
from .text_utils import count_words, extract_json, extract_score, prepare_resume_text

__all__ = ['setup_logger', 'count_words', 'extract_json', 'extract_score', 'prepare_resume_text']
