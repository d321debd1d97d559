"""
Question Generator for the Interview Simulator.

Produces an ordered list of interview questions tailored to a resume analysis:
- Rule-based: difficulty-weighted sampling from the question bank, always
  available and used as the fallback
- External: one LLM call returning a JSON array, falling back to the
  rule-based path on any error or malformed output

Every result carries a source tag: ai, rule-based, rule-based-fallback or
fallback.
"""
import math
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from langchain_core.prompts import PromptTemplate

from .errors import GenerationDegraded, InputError
from .question_bank import (
    CATEGORIES,
    DIFFICULTIES,
    DIFFICULTY_RANK,
    QUESTION_BANK,
    QUESTION_TYPES,
    GeneratedQuestion,
)
from .resume_analyzer import ResumeAnalysis
from ..llm.base import TextCapability
from ..utils.config import RESUME_HEAD_CHARS, RESUME_TAIL_CHARS
from ..utils.logger import setup_logger
from ..utils.text_utils import extract_json, prepare_resume_text

logger = setup_logger("question_generator")

SOURCE_AI = "ai"
SOURCE_RULE_BASED = "rule-based"
SOURCE_RULE_BASED_FALLBACK = "rule-based-fallback"
SOURCE_FALLBACK = "fallback"

# Share of each difficulty tier drawn per category
CATEGORY_WEIGHTS = {
    "technical": 0.6,
    "behavioral": 0.3,
    "situational": 0.1,
}

QUESTION_TYPE_VALUES = ("resume-based", "general", "scenario-based")


@dataclass(frozen=True)
class DifficultyDistribution:
    easy: int
    medium: int
    hard: int

    def items(self) -> List[Tuple[str, int]]:
        return [("easy", self.easy), ("medium", self.medium), ("hard", self.hard)]


# Fixed per experience level, not scaled by the requested count
DIFFICULTY_DISTRIBUTIONS = {
    "senior": DifficultyDistribution(easy=2, medium=4, hard=4),
    "mid": DifficultyDistribution(easy=3, medium=5, hard=2),
}
DEFAULT_DISTRIBUTION = DifficultyDistribution(easy=5, medium=4, hard=1)


@dataclass
class GenerationResult:
    questions: List[GeneratedQuestion]
    source: str


GENERATION_PROMPT = PromptTemplate(
    input_variables=["resume_text", "analysis_summary", "question_count"],
    template=(
        "You are an expert technical interviewer. Analyze this resume and generate "
        "{question_count} interview questions.\n\n"
        "Resume Content: \"{resume_text}\"\n\n"
        "Based on the resume analysis:\n"
        "{analysis_summary}\n\n"
        "Generate questions that:\n"
        "1. Are specifically tailored to the candidate's background\n"
        "2. Progress from easy to hard based on their experience level\n"
        "3. Include technical, behavioral, and situational questions\n"
        "4. Reference specific technologies, projects, or experiences from their resume\n"
        "5. Are appropriate for their experience level\n\n"
        "Format each question as a JSON object with:\n"
        "- question: the actual question text\n"
        "- category: \"technical\", \"behavioral\", or \"situational\"\n"
        "- difficulty: \"easy\", \"medium\", or \"hard\"\n"
        "- type: \"resume-based\", \"general\", or \"scenario-based\"\n\n"
        "Example: [{{\"question\": \"...\", \"category\": \"technical\", "
        "\"difficulty\": \"easy\", \"type\": \"resume-based\"}}]\n\n"
        "Return only a JSON array of question objects."
    )
)


def difficulty_distribution(experience_level: str) -> DifficultyDistribution:
    """Fixed lookup table; unknown levels get the entry-level distribution."""
    return DIFFICULTY_DISTRIBUTIONS.get(experience_level, DEFAULT_DISTRIBUTION)


def category_quota(tier_count: int, category: str) -> int:
    """Number of questions drawn for one category within one difficulty tier."""
    return math.ceil(tier_count * CATEGORY_WEIGHTS[category])


def sort_by_difficulty(questions: List[GeneratedQuestion]) -> List[GeneratedQuestion]:
    """Stable sort, easy first."""
    return sorted(questions, key=lambda q: DIFFICULTY_RANK[q.difficulty])


def personalize(template: str, analysis: ResumeAnalysis, rng: random.Random) -> str:
    """
    Resolve {technology} and {project} with a random pick from the analysis.

    Placeholders stay verbatim when the corresponding list is empty.
    """
    question = template
    if analysis.technologies and "{technology}" in question:
        question = question.replace("{technology}", rng.choice(analysis.technologies), 1)
    if analysis.projects and "{project}" in question:
        question = question.replace("{project}", rng.choice(analysis.projects), 1)
    return question


def _parse_external_questions(text: str) -> List[GeneratedQuestion]:
    """Parse an LLM reply into questions; raises ValueError when it does not fit the schema."""
    data = extract_json(text)
    if not isinstance(data, list) or not data:
        raise ValueError("Expected a non-empty JSON array of questions")

    questions = []
    for item in data:
        if not isinstance(item, dict):
            raise ValueError(f"Question entry is not an object: {item!r}")
        question = item.get("question")
        category = str(item.get("category", "")).lower()
        difficulty = str(item.get("difficulty", "")).lower()
        if not isinstance(question, str) or not question.strip():
            raise ValueError("Question entry has no question text")
        if category not in CATEGORIES:
            raise ValueError(f"Unknown category: {category!r}")
        if difficulty not in DIFFICULTIES:
            raise ValueError(f"Unknown difficulty: {difficulty!r}")
        question_type = str(item.get("type", "")).lower()
        if question_type not in QUESTION_TYPE_VALUES:
            question_type = QUESTION_TYPES[category]
        questions.append(GeneratedQuestion(
            question=question.strip(),
            category=category,
            difficulty=difficulty,
            type=question_type,
        ))
    return questions


class QuestionGenerator:
    """
    Generates interview questions from a resume analysis.

    Args:
        text_capability: Optional external LLM. If None, only the rule-based
            path is used.
        rng: Random source for sampling and placeholder picks.
    """

    def __init__(
        self,
        text_capability: Optional[TextCapability] = None,
        rng: Optional[random.Random] = None
    ):
        self.text_capability = text_capability
        self.rng = rng or random.Random()

        logger.info(
            f"QuestionGenerator initialized (external={'yes' if text_capability else 'no'})"
        )

    def generate(
        self,
        analysis: ResumeAnalysis,
        count: int,
        prefer_external: bool = False,
        resume_text: str = ""
    ) -> GenerationResult:
        """
        Generate up to `count` questions.

        Args:
            analysis: Resume analysis
            count: Maximum number of questions to return
            prefer_external: Try the external LLM first when one is configured
            resume_text: Raw resume text, embedded in the external prompt

        Returns:
            GenerationResult with the questions and their source tag
        """
        if count < 1:
            raise InputError("Question count must be at least 1")

        if not prefer_external or self.text_capability is None:
            questions = self.generate_rule_based(analysis, count)
            return GenerationResult(questions=questions, source=SOURCE_RULE_BASED)

        try:
            questions = self._generate_external(analysis, count, resume_text)
            logger.info(f"Generated {len(questions)} questions with the external LLM")
            return GenerationResult(questions=questions, source=SOURCE_AI)
        except GenerationDegraded as e:
            logger.warning(f"External generation degraded ({e.source}): {e}")
            questions = self.generate_rule_based(analysis, count)
            return GenerationResult(questions=questions, source=e.source)

    def generate_rule_based(self, analysis: ResumeAnalysis, count: int) -> List[GeneratedQuestion]:
        """Difficulty-weighted sampling with replacement from the question bank."""
        distribution = difficulty_distribution(analysis.experience_level)

        questions: List[GeneratedQuestion] = []
        for category in CATEGORIES:
            for difficulty, tier_count in distribution.items():
                templates = QUESTION_BANK[category][difficulty]
                for _ in range(category_quota(tier_count, category)):
                    template = self.rng.choice(templates)
                    if category == "technical":
                        text = personalize(template, analysis, self.rng)
                    else:
                        text = template
                    questions.append(GeneratedQuestion(
                        question=text,
                        category=category,
                        difficulty=difficulty,
                        type=QUESTION_TYPES[category],
                    ))

        questions = sort_by_difficulty(questions)[:count]
        logger.info(
            f"Generated {len(questions)} rule-based questions "
            f"(level={analysis.experience_level}, requested={count})"
        )
        return questions

    def build_prompt(self, analysis: ResumeAnalysis, count: int, resume_text: str) -> str:
        return GENERATION_PROMPT.format(
            resume_text=prepare_resume_text(resume_text, RESUME_HEAD_CHARS, RESUME_TAIL_CHARS),
            analysis_summary=analysis.summary(),
            question_count=count,
        )

    def _generate_external(
        self,
        analysis: ResumeAnalysis,
        count: int,
        resume_text: str
    ) -> List[GeneratedQuestion]:
        prompt = self.build_prompt(analysis, count, resume_text)
        try:
            text = self.text_capability.generate(prompt)
        except Exception as e:
            raise GenerationDegraded(f"External generation failed: {e}", SOURCE_FALLBACK) from e

        try:
            questions = _parse_external_questions(text)
        except ValueError as e:
            raise GenerationDegraded(
                f"Unparseable generation output: {e}", SOURCE_RULE_BASED_FALLBACK
            ) from e

        return sort_by_difficulty(questions)[:count]
