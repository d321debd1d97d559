"""
Service layer wiring the interview engine components together.
"""
import random
from typing import Any, Dict, List, Optional

from ..auth import AuthService, UserRepository
from ..interview import (
    AnswerEvaluator,
    FollowUpDecisionEngine,
    InterviewSessionManager,
    InterviewStateMachine,
    QuestionGenerator,
    TurnResult,
    analyze,
)
from ..interview.question_bank import question_stats, sample_by_criteria
from ..llm import TextCapability, get_text_capability
from ..utils.config import ANSWER_TIME_LIMIT_SECONDS
from ..utils.logger import setup_logger

logger = setup_logger("api_service")


class InterviewService:
    """
    Facade over the interview engine used by the HTTP layer.

    All components share one random source so a seeded instance makes a whole
    run reproducible.
    """

    def __init__(
        self,
        text_capability: Optional[TextCapability] = None,
        rng: Optional[random.Random] = None,
        user_repository: Optional[UserRepository] = None,
        time_limit_seconds: int = ANSWER_TIME_LIMIT_SECONDS
    ):
        self.rng = rng or random.Random()
        self.text_capability = text_capability

        self.question_generator = QuestionGenerator(text_capability, rng=self.rng)
        self.answer_evaluator = AnswerEvaluator(text_capability, rng=self.rng)
        self.followup_engine = FollowUpDecisionEngine(rng=self.rng)
        self.state_machine = InterviewStateMachine(
            self.question_generator,
            self.answer_evaluator,
            self.followup_engine,
            time_limit_seconds=time_limit_seconds,
        )
        self.sessions = InterviewSessionManager(self.state_machine)
        self.auth = AuthService(user_repository)

        logger.info(
            f"InterviewService initialized (llm={'ready' if text_capability else 'not configured'})"
        )

    def is_llm_ready(self) -> bool:
        return self.text_capability is not None

    def generate_questions(
        self,
        resume_text: str,
        question_count: int,
        use_external: bool
    ) -> Dict[str, Any]:
        """Analyze a resume and generate questions without opening a session."""
        analysis = analyze(resume_text)
        result = self.question_generator.generate(
            analysis,
            question_count,
            prefer_external=use_external,
            resume_text=resume_text,
        )
        return {
            "questions": [q.to_dict() for q in result.questions],
            "resume_analysis": analysis.to_dict(),
            "source": result.source,
        }

    def start_interview(
        self,
        resume_text: str,
        question_count: int,
        use_external: bool
    ) -> Dict[str, Any]:
        return self.sessions.start_interview(resume_text, question_count, use_external)

    def submit_turn(
        self,
        session_id: str,
        answer_text: Optional[str] = None,
        skip: bool = False
    ) -> TurnResult:
        return self.sessions.submit_turn(session_id, answer_text, skip)

    def evaluate_answer(
        self,
        question: str,
        answer: str,
        category: str = "technical",
        difficulty: str = "medium"
    ) -> Dict[str, Any]:
        """Evaluate one answer and decide on a follow-up, outside any session."""
        evaluation = self.answer_evaluator.evaluate(
            question, answer, {"category": category, "difficulty": difficulty}
        )
        follow_up = self.followup_engine.decide(answer, category)
        return {
            "evaluation": evaluation.evaluation_text,
            "follow_up_question": follow_up,
            "has_follow_up": follow_up is not None,
            "source": evaluation.source,
        }

    def questions_by_criteria(self, category: str, difficulty: str, count: int = 5) -> List[Dict[str, str]]:
        questions = sample_by_criteria(category, difficulty, count, rng=self.rng)
        return [q.to_dict() for q in questions]

    def question_stats(self) -> Dict[str, Any]:
        return question_stats()

    def active_session_count(self) -> int:
        return self.sessions.session_count()


# Global service instance
_service_instance: Optional[InterviewService] = None


def get_service() -> InterviewService:
    """Get or create the global service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = InterviewService(text_capability=get_text_capability())
    return _service_instance
