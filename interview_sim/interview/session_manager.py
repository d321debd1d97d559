"""
Interview Session Manager.

Manages interview sessions:
- Create and track sessions in memory (no persistence)
- Route triggers (answer, skip, transcript, timer) to the state machine
- Serialize triggers per session
- Calculate overall scores for reports
"""
import threading
from typing import Any, Dict, List, Optional

from .answer_evaluator import extract_overall_score
from .errors import SessionNotFoundError
from .question_bank import CATEGORIES
from .session import InterviewSession, InterviewStateMachine, SessionState, TurnResult
from ..utils.logger import setup_logger

logger = setup_logger("session_manager")


def _average(values: List[float]) -> Optional[float]:
    if not values:
        return None
    return round(sum(values) / len(values), 2)


class InterviewSessionManager:
    """
    Keeps live sessions keyed by id, each guarded by its own lock.
    """

    def __init__(self, state_machine: InterviewStateMachine):
        self.state_machine = state_machine
        self._sessions: Dict[str, InterviewSession] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()

        logger.info("InterviewSessionManager initialized (in-memory)")

    def start_interview(
        self,
        resume_text: str,
        question_count: int,
        use_external: bool = False
    ) -> Dict[str, Any]:
        """
        Create a session and start it. The session is only registered when
        question generation succeeds.

        Returns:
            Dictionary with session_id, questions, analysis and source
        """
        session = InterviewSession(timer_seconds=self.state_machine.time_limit_seconds)
        self.state_machine.start_interview(session, resume_text, question_count, use_external)

        with self._registry_lock:
            self._sessions[session.session_id] = session
            self._locks[session.session_id] = threading.Lock()

        logger.info(f"Registered interview session: {session.session_id}")
        return {
            "session_id": session.session_id,
            "questions": [q.to_dict() for q in session.questions],
            "analysis": session.analysis.to_dict(),
            "source": session.source,
            "timer_seconds": session.timer_seconds,
        }

    def get_session(self, session_id: str) -> InterviewSession:
        """Get session by ID."""
        with self._registry_lock:
            session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(f"Interview session not found: {session_id}")
        return session

    def session_count(self) -> int:
        with self._registry_lock:
            return len(self._sessions)

    def _session_lock(self, session_id: str) -> threading.Lock:
        with self._registry_lock:
            lock = self._locks.get(session_id)
        if lock is None:
            raise SessionNotFoundError(f"Interview session not found: {session_id}")
        return lock

    def submit_turn(
        self,
        session_id: str,
        answer_text: Optional[str] = None,
        skip: bool = False
    ) -> TurnResult:
        """Answer or skip the current question of a session."""
        session = self.get_session(session_id)
        with self._session_lock(session_id):
            if skip:
                return self.state_machine.skip(session)
            return self.state_machine.submit_answer(session, answer_text)

    def capture_transcript(self, session_id: str, text: str) -> str:
        session = self.get_session(session_id)
        with self._session_lock(session_id):
            return self.state_machine.capture_transcript(session, text)

    def tick(self, session_id: str, seconds: int = 1) -> Optional[TurnResult]:
        session = self.get_session(session_id)
        with self._session_lock(session_id):
            return self.state_machine.tick(session, seconds)

    def discard_session(self, session_id: str) -> None:
        """Forget a session (client restarted or abandoned it)."""
        with self._registry_lock:
            if self._sessions.pop(session_id, None) is None:
                raise SessionNotFoundError(f"Interview session not found: {session_id}")
            self._locks.pop(session_id, None)
        logger.info(f"Discarded interview session: {session_id}")

    def calculate_overall_scores(self, session_id: str) -> Dict[str, Optional[float]]:
        """
        Calculate overall interview scores.

        Evaluations are walked in turn order; follow-up evaluations count
        towards the category of their main question. Skips and evaluations
        without an "Overall Score" line are left out.

        Returns:
            Dictionary with overall_score and one <category>_score per category
        """
        session = self.get_session(session_id)
        category_scores: Dict[str, List[float]] = {category: [] for category in CATEGORIES}
        all_scores: List[float] = []

        for evaluation, category in zip(session.evaluations, self._turn_categories(session)):
            score = extract_overall_score(evaluation)
            if score is None:
                continue
            all_scores.append(score)
            category_scores[category].append(score)

        scores = {"overall_score": _average(all_scores)}
        for category, values in category_scores.items():
            scores[f"{category}_score"] = _average(values)
        return scores

    def _turn_categories(self, session: InterviewSession) -> List[str]:
        return [session.questions[index].category for index in session.turn_question_indices]

    def get_session_summary(self, session_id: str) -> Dict[str, Any]:
        """Get summary of session (for reports)."""
        session = self.get_session(session_id)
        scores = self.calculate_overall_scores(session_id)

        return {
            "session_id": session_id,
            "status": session.state.value,
            "source": session.source,
            "analysis": session.analysis.to_dict() if session.analysis else None,
            "total_questions": len(session.questions),
            "questions_completed": min(session.current_index, len(session.questions)),
            "total_answers": len(session.answers),
            "total_evaluations": len(session.evaluations),
            "completed": session.state == SessionState.COMPLETE,
            "scores": scores,
            "questions": [q.to_dict() for q in session.questions],
            "answers": list(session.answers),
            "evaluations": list(session.evaluations),
            "created_at": session.created_at,
            "updated_at": session.updated_at,
        }
