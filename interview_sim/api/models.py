"""
FastAPI request and response models.
"""
from pydantic import BaseModel, Field
from typing import List, Optional, Dict, Any

from ..utils.config import DEFAULT_QUESTION_COUNT, MAX_QUESTION_COUNT


class HealthResponse(BaseModel):
    """Response model for health check."""
    status: str = Field(..., description="Service status")
    llm_ready: bool = Field(..., description="Whether the external LLM is configured")
    active_sessions: int = Field(..., description="Number of live interview sessions")


class QuestionModel(BaseModel):
    """A generated interview question."""
    question: str = Field(..., description="Question text with placeholders resolved")
    category: str = Field(..., description="technical, behavioral or situational")
    difficulty: str = Field(..., description="easy, medium or hard")
    type: str = Field(..., description="resume-based, general, scenario-based or bank-based")


class ResumeAnalysisModel(BaseModel):
    """Features extracted from a resume."""
    technologies: List[str] = Field(default_factory=list)
    projects: List[str] = Field(default_factory=list)
    experience_level: str = Field("entry", description="entry, mid or senior")
    domains: List[str] = Field(default_factory=list)


# ========== QUESTION MODELS ==========

class GenerateQuestionsRequest(BaseModel):
    """Request model for generating questions without starting a session."""
    resume_text: str = Field(..., description="Resume text")
    question_count: int = Field(DEFAULT_QUESTION_COUNT, ge=1, le=MAX_QUESTION_COUNT, description="Maximum number of questions")
    use_ai: bool = Field(True, description="Prefer external LLM generation")

    class Config:
        json_schema_extra = {
            "example": {
                "resume_text": "Senior engineer, 6+ years with Python, React and AWS.\nProject: chat app",
                "question_count": 10,
                "use_ai": True
            }
        }


class GenerateQuestionsResponse(BaseModel):
    """Response model for question generation."""
    questions: List[QuestionModel] = Field(..., description="Ordered questions, easy first")
    resume_analysis: ResumeAnalysisModel = Field(..., description="Resume analysis")
    source: str = Field(..., description="ai, rule-based, rule-based-fallback or fallback")


class QuestionsByCriteriaRequest(BaseModel):
    """Request model for sampling raw bank questions."""
    category: str = Field(..., description="technical, behavioral or situational")
    difficulty: str = Field(..., description="easy, medium or hard")
    count: int = Field(5, description="Number of questions (capped at bank size)")


class QuestionsByCriteriaResponse(BaseModel):
    questions: List[QuestionModel]


class QuestionStatsResponse(BaseModel):
    """Response model for question bank statistics."""
    total_questions: int
    categories: List[str]
    difficulties: List[str]
    question_bank: Dict[str, Dict[str, List[str]]]


# ========== INTERVIEW MODELS ==========

class InterviewStartRequest(BaseModel):
    """Request model for starting an interview."""
    resume_text: str = Field(..., description="Candidate resume text")
    question_count: int = Field(DEFAULT_QUESTION_COUNT, ge=1, le=MAX_QUESTION_COUNT, description="Maximum number of questions")
    use_ai: bool = Field(True, description="Prefer external LLM generation")

    class Config:
        json_schema_extra = {
            "example": {
                "resume_text": "Junior developer. Python, Django.\nProjects: inventory tracker",
                "question_count": 5,
                "use_ai": False
            }
        }


class InterviewStartResponse(BaseModel):
    """Response model for starting an interview."""
    session_id: str = Field(..., description="Interview session ID")
    questions: List[QuestionModel] = Field(..., description="Ordered questions")
    analysis: ResumeAnalysisModel = Field(..., description="Resume analysis")
    source: str = Field(..., description="Question source tag")
    timer_seconds: int = Field(..., description="Per-question time budget")


class SubmitTurnRequest(BaseModel):
    """Request model for answering or skipping the current question."""
    answer: Optional[str] = Field(None, description="Candidate's answer (transcript)")
    skip: bool = Field(False, description="Skip the current question")

    class Config:
        json_schema_extra = {
            "example": {
                "answer": "I built the chat app with React on the frontend and Node.js with websockets...",
                "skip": False
            }
        }


class TurnResponse(BaseModel):
    """Response model for one turn."""
    evaluation: str = Field(..., description="Evaluation text for this turn")
    follow_up_question: Optional[str] = Field(None, description="Follow-up question, if offered")
    has_follow_up: bool = Field(..., description="Whether a follow-up was offered")
    completed: bool = Field(..., description="Whether the interview is complete")
    current_index: int = Field(..., description="Index of the current main question")


class TranscriptRequest(BaseModel):
    """Request model for appending recognised speech."""
    text: str = Field(..., description="Recognised speech fragment")


class TranscriptResponse(BaseModel):
    transcript: str


class TickRequest(BaseModel):
    """Request model for advancing the per-question timer."""
    seconds: int = Field(1, ge=1, description="Elapsed seconds")


class TickResponse(BaseModel):
    timer_seconds: int = Field(..., description="Seconds left on the current question")
    expired: bool = Field(..., description="Whether the timer ran out and the answer was auto-submitted")
    turn: Optional[TurnResponse] = Field(None, description="Turn result when the timer expired")


class InterviewStatusResponse(BaseModel):
    """Read projection of a session."""
    session_id: str
    state: str = Field(..., description="setup, active or complete")
    current_index: int
    total_questions: int
    current_question: Optional[QuestionModel] = None
    current_prompt: Optional[str] = Field(None, description="Text currently asked (follow-up or main question)")
    is_follow_up: bool
    follow_up_question: Optional[str] = None
    timer_seconds: int
    transcript: str
    answers: List[str]
    evaluations: List[str]
    source: Optional[str] = None
    created_at: str
    updated_at: str


class InterviewReportResponse(BaseModel):
    """Response model for interview report."""
    session_id: str = Field(..., description="Session ID")
    status: str = Field(..., description="Session status")
    source: Optional[str] = Field(None, description="Question source tag")
    analysis: Optional[ResumeAnalysisModel] = Field(None, description="Resume analysis")
    total_questions: int
    questions_completed: int
    total_answers: int
    total_evaluations: int
    completed: bool
    scores: Dict[str, Optional[float]] = Field(..., description="Average overall scores")
    questions: List[QuestionModel]
    answers: List[str]
    evaluations: List[str]
    created_at: str
    updated_at: str


# ========== EVALUATION MODELS ==========

class EvaluateRequest(BaseModel):
    """Request model for evaluating a single answer outside a session."""
    question: str = Field(..., description="Question that was asked")
    answer: str = Field(..., description="Candidate's answer")
    category: str = Field("technical", description="Question category")
    difficulty: str = Field("medium", description="Question difficulty")


class EvaluateResponse(BaseModel):
    evaluation: str
    follow_up_question: Optional[str] = None
    has_follow_up: bool
    source: str = Field(..., description="ai, mock or fallback")


# ========== UPLOAD / AUTH MODELS ==========

class UploadResumeResponse(BaseModel):
    resume_text: str = Field(..., description="Extracted resume text")


class CredentialsRequest(BaseModel):
    email: str = Field(..., description="User email")
    password: str = Field(..., description="User password")


class RegisterResponse(BaseModel):
    message: str


class LoginResponse(BaseModel):
    token: str
    expires_at: str


def to_turn_response(turn: Any) -> TurnResponse:
    return TurnResponse(
        evaluation=turn.evaluation,
        follow_up_question=turn.follow_up_question,
        has_follow_up=turn.follow_up_question is not None,
        completed=turn.completed,
        current_index=turn.current_index,
    )
