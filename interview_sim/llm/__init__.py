"""
LLM service modules for Groq Cloud integration.
"""
from .base import TextCapability
from .groq_service import GroqTextCapability, initialize_llm, get_text_capability

__all__ = ['TextCapability', 'GroqTextCapability', 'initialize_llm', 'get_text_capability']
