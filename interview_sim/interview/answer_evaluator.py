"""
Answer Evaluator for the Interview Simulator.

Evaluates candidate answers and provides:
- External: free-text LLM evaluation (scored criteria + feedback), unparsed
- Mock: four scores in [6, 9], overall = rounded mean, threshold feedback

Evaluation never raises; any external failure degrades to the mock scorer.
"""
import math
import random
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from langchain_core.prompts import PromptTemplate

from .errors import EvaluationDegraded
from ..llm.base import TextCapability
from ..utils.logger import setup_logger
from ..utils.text_utils import extract_score

logger = setup_logger("answer_evaluator")

SOURCE_AI = "ai"
SOURCE_MOCK = "mock"
SOURCE_FALLBACK = "fallback"

MOCK_SCORE_MIN = 6
MOCK_SCORE_MAX = 9
POSITIVE_THRESHOLD = 8

EVALUATION_PROMPT = PromptTemplate(
    input_variables=["question", "category", "difficulty", "answer"],
    template=(
        "You are an expert interviewer evaluating a candidate's response.\n\n"
        "Question: \"{question}\"\n"
        "Question Category: {category}\n"
        "Question Difficulty: {difficulty}\n"
        "Candidate's Answer: \"{answer}\"\n\n"
        "Evaluate the response on:\n"
        "1. Technical Accuracy (if applicable)\n"
        "2. Communication Clarity\n"
        "3. Depth of Understanding\n"
        "4. Problem-solving Approach\n"
        "5. Confidence and Delivery\n\n"
        "Provide a detailed evaluation with scores out of 10 for each relevant criterion, "
        "an \"Overall Score: N/10\" line and constructive feedback. "
        "Keep it professional and helpful."
    )
)


@dataclass
class Evaluation:
    """Result of evaluating one answer. scores/overall/feedback are set by the mock scorer only."""
    evaluation_text: str
    source: str
    scores: Optional[Dict[str, int]] = None
    overall: Optional[int] = None
    feedback: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def overall_score(scores: Dict[str, int]) -> int:
    """Rounded mean of the component scores."""
    return round_half_up(sum(scores.values()) / len(scores))


def extract_overall_score(evaluation_text: str) -> Optional[float]:
    """Overall score from an evaluation text, if it states one."""
    return extract_score(evaluation_text)


class AnswerEvaluator:
    """
    Evaluates interview answers.

    Args:
        text_capability: Optional external LLM. If None, the mock scorer is used.
        rng: Random source for mock scores.
    """

    def __init__(
        self,
        text_capability: Optional[TextCapability] = None,
        rng: Optional[random.Random] = None
    ):
        self.text_capability = text_capability
        self.rng = rng or random.Random()

        logger.info(
            f"AnswerEvaluator initialized (external={'yes' if text_capability else 'no'})"
        )

    def evaluate(
        self,
        question: str,
        answer: str,
        question_meta: Optional[Dict[str, Any]] = None
    ) -> Evaluation:
        """
        Evaluate a candidate's answer.

        Args:
            question: Question text that was asked
            answer: Candidate's answer text
            question_meta: Dictionary with "category" and "difficulty"

        Returns:
            Evaluation; never raises
        """
        question_meta = question_meta or {}

        if self.text_capability is None:
            return self.mock_evaluation(SOURCE_MOCK)

        try:
            evaluation = self._evaluate_external(question, answer, question_meta)
            logger.info(
                f"Evaluated {question_meta.get('category', 'technical')} answer with the external LLM"
            )
            return evaluation
        except EvaluationDegraded as e:
            logger.warning(f"External evaluation degraded, using mock scorer: {e}")
            return self.mock_evaluation(SOURCE_FALLBACK)

    def _evaluate_external(
        self,
        question: str,
        answer: str,
        question_meta: Dict[str, Any]
    ) -> Evaluation:
        prompt = EVALUATION_PROMPT.format(
            question=question,
            category=question_meta.get("category") or "technical",
            difficulty=question_meta.get("difficulty") or "medium",
            answer=answer,
        )
        try:
            text = self.text_capability.evaluate(prompt)
        except Exception as e:
            raise EvaluationDegraded(f"External evaluation failed: {e}") from e

        if not text or not text.strip():
            raise EvaluationDegraded("External evaluation returned no text")
        return Evaluation(evaluation_text=text.strip(), source=SOURCE_AI)

    def mock_evaluation(self, source: str = SOURCE_MOCK) -> Evaluation:
        """Synthesize scores and threshold-based feedback."""
        scores = {
            "technical": self.rng.randint(MOCK_SCORE_MIN, MOCK_SCORE_MAX),
            "communication": self.rng.randint(MOCK_SCORE_MIN, MOCK_SCORE_MAX),
            "depth": self.rng.randint(MOCK_SCORE_MIN, MOCK_SCORE_MAX),
            "confidence": self.rng.randint(MOCK_SCORE_MIN, MOCK_SCORE_MAX),
        }
        overall = overall_score(scores)
        feedback = " ".join([
            "Strong technical understanding demonstrated."
            if scores["technical"] >= POSITIVE_THRESHOLD
            else "Consider providing more technical details.",
            "Clear and well-structured response."
            if scores["communication"] >= POSITIVE_THRESHOLD
            else "Try to organize your thoughts more clearly.",
            "Good depth of knowledge shown."
            if scores["depth"] >= POSITIVE_THRESHOLD
            else "Could benefit from deeper analysis.",
        ])

        text = (
            f"Technical Accuracy: {scores['technical']}/10\n"
            f"Communication Clarity: {scores['communication']}/10\n"
            f"Depth of Understanding: {scores['depth']}/10\n"
            f"Confidence: {scores['confidence']}/10\n\n"
            f"Overall Score: {overall}/10\n\n"
            f"Feedback: {feedback}"
        )
        return Evaluation(
            evaluation_text=text,
            source=source,
            scores=scores,
            overall=overall,
            feedback=feedback,
        )
