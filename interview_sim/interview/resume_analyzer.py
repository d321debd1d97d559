"""
Resume Analyzer for the Interview Simulator.

Extracts the candidate context used to personalise questions:
- Technologies (fixed vocabulary, vocabulary order)
- Project mentions (up to 3 "project(s): ..." snippets)
- Experience level (senior > mid > entry, default entry)
- Domains (fixed vocabulary, vocabulary order)

Analysis is a pure function of the resume text.
"""
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .question_bank import DOMAIN_KEYWORDS, EXPERIENCE_INDICATORS, TECH_KEYWORDS
from ..utils.logger import setup_logger

logger = setup_logger("resume_analyzer")

MAX_PROJECTS = 3
DEFAULT_EXPERIENCE_LEVEL = "entry"

_PROJECT_PATTERN = re.compile(r'projects?[:\-\s]+(.*?)(?=\n|$)', re.IGNORECASE)


@dataclass(frozen=True)
class ResumeAnalysis:
    """Feature set derived from a resume. All fields are always present."""
    technologies: Tuple[str, ...] = ()
    projects: Tuple[str, ...] = ()
    experience_level: str = DEFAULT_EXPERIENCE_LEVEL
    domains: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "technologies": list(self.technologies),
            "projects": list(self.projects),
            "experience_level": self.experience_level,
            "domains": list(self.domains),
        }

    def summary(self) -> str:
        """One line per feature, used when prompting the LLM."""
        return (
            f"- Technologies found: {', '.join(self.technologies) or 'none'}\n"
            f"- Projects mentioned: {'; '.join(self.projects) or 'none'}\n"
            f"- Experience level: {self.experience_level}\n"
            f"- Project domains: {', '.join(self.domains) or 'none'}"
        )


def _match_vocabulary(text: str, vocabulary: Tuple[str, ...]) -> Tuple[str, ...]:
    return tuple(keyword for keyword in vocabulary if keyword in text)


def _extract_projects(resume_text: str) -> Tuple[str, ...]:
    projects = []
    for match in _PROJECT_PATTERN.finditer(resume_text):
        snippet = match.group(1).strip()
        if snippet:
            projects.append(snippet)
        if len(projects) == MAX_PROJECTS:
            break
    return tuple(projects)


def _experience_level(text: str) -> str:
    for level, indicators in EXPERIENCE_INDICATORS:
        if any(indicator in text for indicator in indicators):
            return level
    return DEFAULT_EXPERIENCE_LEVEL


def analyze(resume_text: Optional[str]) -> ResumeAnalysis:
    """
    Analyze resume text.

    Args:
        resume_text: Raw resume text (may be empty or None)

    Returns:
        ResumeAnalysis; empty input gives the default analysis
    """
    if not resume_text or not resume_text.strip():
        return ResumeAnalysis()

    text = resume_text.lower()
    analysis = ResumeAnalysis(
        technologies=_match_vocabulary(text, TECH_KEYWORDS),
        projects=_extract_projects(resume_text),
        experience_level=_experience_level(text),
        domains=_match_vocabulary(text, DOMAIN_KEYWORDS),
    )

    logger.debug(
        f"Analyzed resume: {len(analysis.technologies)} technologies, "
        f"{len(analysis.projects)} projects, level={analysis.experience_level}"
    )
    return analysis
