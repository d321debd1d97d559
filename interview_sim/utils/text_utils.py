"""
Text processing utilities for resume preparation and LLM output parsing.
"""
import json
import re
from typing import Any, Optional

_JSON_BLOCK = re.compile(r"(\{.*\}|\[.*\])", re.DOTALL)


def prepare_resume_text(text: str, head_chars: int = 6000, tail_chars: int = 3000) -> str:
    """
    Prepare resume text for LLM processing by keeping head and tail.

    Args:
        text: Full resume text
        head_chars: Number of characters to keep from start
        tail_chars: Number of characters to keep from end

    Returns:
        Prepared resume text
    """
    if not text:
        return ""

    text = re.sub(r'\s+', ' ', text).strip()
    if len(text) <= head_chars + tail_chars:
        return text
    return text[:head_chars] + "\n...\n" + text[-tail_chars:]


def count_words(text: str) -> int:
    """Number of whitespace-delimited tokens in the trimmed text."""
    if not text:
        return 0
    return len(text.strip().split())


def _strip_code_fences(text: str) -> str:
    """Remove surrounding ```...``` fences (with or without 'json') if present."""
    t = text.strip()
    if t.startswith("```") and t.endswith("```"):
        t = re.sub(r"^```[A-Za-z0-9_-]*\s*", "", t, flags=re.DOTALL)
        t = re.sub(r"\s*```$", "", t, flags=re.DOTALL)
    return t.strip()


def extract_json(text: str) -> Any:
    """
    Extract and parse the first JSON object/array from an LLM response.

    Handles code fences and leading/trailing prose. Returns None when
    nothing parseable is found.
    """
    if not text:
        return None
    t = _strip_code_fences(text)

    try:
        return json.loads(t)
    except ValueError:
        pass

    m = _JSON_BLOCK.search(t)
    if not m:
        return None
    try:
        return json.loads(m.group(1))
    except ValueError:
        return None


def extract_score(evaluation_text: str) -> Optional[float]:
    """
    Extract the overall score from an evaluation text.

    Args:
        evaluation_text: Evaluation output (mock or LLM)

    Returns:
        Score as float (0-10), or None if not found
    """
    if not evaluation_text:
        return None
    match = re.search(r'Overall(?: Score)?[:\s]+(\d+(?:\.\d+)?)\s*/\s*10', evaluation_text, re.IGNORECASE)
    if match:
        return float(match.group(1))
    return None
