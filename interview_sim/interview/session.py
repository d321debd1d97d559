"""
Interview session state machine.

Drives one interview: setup -> active(index, is_follow_up) -> complete.
Every transition is caused by exactly one trigger (start, answer, skip or
timer expiry) and resets the per-question timer and transcript buffer.

A session is not safe for concurrent mutation; callers must serialize
triggers per session (see InterviewSessionManager).
"""
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from .answer_evaluator import AnswerEvaluator, Evaluation
from .errors import InputError, StateError
from .followup import FollowUpDecisionEngine
from .question_bank import GeneratedQuestion
from .question_generator import QuestionGenerator
from .resume_analyzer import ResumeAnalysis, analyze
from ..utils.config import ANSWER_TIME_LIMIT_SECONDS
from ..utils.logger import setup_logger

logger = setup_logger("session")

SKIPPED_EVALUATION = "Skipped — no answer provided"


class SessionState(str, Enum):
    SETUP = "setup"
    ACTIVE = "active"
    COMPLETE = "complete"


@dataclass
class InterviewSession:
    """Aggregate holding everything about one interview attempt."""
    session_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    questions: List[GeneratedQuestion] = field(default_factory=list)
    current_index: int = 0
    is_follow_up: bool = False
    follow_up_question: Optional[str] = None
    transcript: str = ""
    answers: List[str] = field(default_factory=list)
    evaluations: List[str] = field(default_factory=list)
    turn_question_indices: List[int] = field(default_factory=list)  # question index per evaluation
    timer_seconds: int = ANSWER_TIME_LIMIT_SECONDS
    analysis: Optional[ResumeAnalysis] = None
    source: Optional[str] = None
    started: bool = False
    created_at: str = field(default_factory=lambda: datetime.now().isoformat())
    updated_at: str = field(default_factory=lambda: datetime.now().isoformat())

    @property
    def state(self) -> SessionState:
        if not self.started:
            return SessionState.SETUP
        if self.current_index >= len(self.questions):
            return SessionState.COMPLETE
        return SessionState.ACTIVE

    @property
    def current_question(self) -> Optional[GeneratedQuestion]:
        if self.state != SessionState.ACTIVE:
            return None
        return self.questions[self.current_index]

    @property
    def current_prompt(self) -> Optional[str]:
        """Text the candidate is currently asked: the follow-up or the main question."""
        question = self.current_question
        if question is None:
            return None
        if self.is_follow_up and self.follow_up_question:
            return self.follow_up_question
        return question.question

    def to_dict(self) -> Dict[str, Any]:
        """Read projection for clients."""
        question = self.current_question
        return {
            "session_id": self.session_id,
            "state": self.state.value,
            "current_index": self.current_index,
            "total_questions": len(self.questions),
            "current_question": question.to_dict() if question else None,
            "current_prompt": self.current_prompt,
            "is_follow_up": self.is_follow_up,
            "follow_up_question": self.follow_up_question,
            "timer_seconds": self.timer_seconds,
            "transcript": self.transcript,
            "answers": list(self.answers),
            "evaluations": list(self.evaluations),
            "source": self.source,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


@dataclass
class TurnResult:
    """Outcome of one answered, skipped or timed-out turn."""
    evaluation: str
    follow_up_question: Optional[str]
    completed: bool
    current_index: int
    evaluation_detail: Optional[Evaluation] = None


class InterviewStateMachine:
    """
    Orchestrates question generation, evaluation and follow-ups for sessions.

    Args:
        question_generator: Produces the question list
        answer_evaluator: Scores each answer
        followup_engine: Decides on follow-up questions
        time_limit_seconds: Per-question timer budget
    """

    def __init__(
        self,
        question_generator: QuestionGenerator,
        answer_evaluator: AnswerEvaluator,
        followup_engine: FollowUpDecisionEngine,
        time_limit_seconds: int = ANSWER_TIME_LIMIT_SECONDS
    ):
        self.question_generator = question_generator
        self.answer_evaluator = answer_evaluator
        self.followup_engine = followup_engine
        self.time_limit_seconds = time_limit_seconds

    def start_interview(
        self,
        session: InterviewSession,
        resume_text: str,
        question_count: int,
        use_external: bool = False
    ) -> InterviewSession:
        """
        Setup -> Active(0, False).

        Raises:
            InputError: Empty resume, invalid count, or no questions produced
            StateError: Session already started
        """
        if session.started:
            raise StateError("Interview already started for this session")
        if not resume_text or not resume_text.strip():
            raise InputError("Resume text is required to start an interview")

        analysis = analyze(resume_text)
        result = self.question_generator.generate(
            analysis,
            question_count,
            prefer_external=use_external,
            resume_text=resume_text,
        )
        if not result.questions:
            raise InputError("Question generation failed: no questions produced")

        session.analysis = analysis
        session.questions = list(result.questions)
        session.source = result.source
        session.current_index = 0
        session.started = True
        self._reset_turn(session, is_follow_up=False, follow_up_question=None)

        logger.info(
            f"Started interview {session.session_id}: "
            f"{len(session.questions)} questions (source={result.source})"
        )
        return session

    def submit_answer(self, session: InterviewSession, text: Optional[str]) -> TurnResult:
        """Evaluate the answer to the current prompt and move to a follow-up or the next question."""
        question = self._require_active(session)
        text = (text or "").strip()
        prompt = session.current_prompt

        if text:
            session.answers.append(text)

        evaluation = self.answer_evaluator.evaluate(
            prompt,
            text,
            {"category": question.category, "difficulty": question.difficulty},
        )
        session.evaluations.append(evaluation.evaluation_text)
        session.turn_question_indices.append(session.current_index)

        follow_up = None
        if not session.is_follow_up:
            follow_up = self.followup_engine.decide(text, question.category)

        if follow_up:
            self._reset_turn(session, is_follow_up=True, follow_up_question=follow_up)
        else:
            self._advance(session)

        return TurnResult(
            evaluation=evaluation.evaluation_text,
            follow_up_question=follow_up,
            completed=session.state == SessionState.COMPLETE,
            current_index=session.current_index,
            evaluation_detail=evaluation,
        )

    def skip(self, session: InterviewSession) -> TurnResult:
        """Record the skip sentinel and move to the next main question."""
        self._require_active(session)
        session.evaluations.append(SKIPPED_EVALUATION)
        session.turn_question_indices.append(session.current_index)
        self._advance(session)

        return TurnResult(
            evaluation=SKIPPED_EVALUATION,
            follow_up_question=None,
            completed=session.state == SessionState.COMPLETE,
            current_index=session.current_index,
        )

    def capture_transcript(self, session: InterviewSession, text: str) -> str:
        """Append recognised speech to the current answer buffer."""
        self._require_active(session)
        text = (text or "").strip()
        if text:
            session.transcript = f"{session.transcript} {text}".strip()
            session.updated_at = datetime.now().isoformat()
        return session.transcript

    def tick(self, session: InterviewSession, seconds: int = 1) -> Optional[TurnResult]:
        """
        Count the timer down; on expiry auto-submit whatever was captured.

        Returns:
            TurnResult when the timer expired, otherwise None
        """
        self._require_active(session)
        if seconds < 1:
            raise InputError("seconds must be at least 1")

        session.timer_seconds = max(0, session.timer_seconds - seconds)
        if session.timer_seconds > 0:
            return None

        logger.info(f"Timer expired for session {session.session_id}, auto-submitting")
        return self.submit_answer(session, session.transcript)

    def _require_active(self, session: InterviewSession) -> GeneratedQuestion:
        state = session.state
        if state == SessionState.SETUP:
            raise StateError("Interview has not been started")
        if state == SessionState.COMPLETE:
            raise StateError("Interview is already complete")
        return session.current_question

    def _advance(self, session: InterviewSession) -> None:
        session.current_index += 1
        self._reset_turn(session, is_follow_up=False, follow_up_question=None)
        if session.state == SessionState.COMPLETE:
            logger.info(f"Completed interview {session.session_id}")

    def _reset_turn(
        self,
        session: InterviewSession,
        is_follow_up: bool,
        follow_up_question: Optional[str]
    ) -> None:
        session.is_follow_up = is_follow_up
        session.follow_up_question = follow_up_question
        session.timer_seconds = self.time_limit_seconds
        session.transcript = ""
        session.updated_at = datetime.now().isoformat()
