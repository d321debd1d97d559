"""
Interview engine for the Interview Simulator.

This module provides:
- Resume analysis (technologies, projects, experience level, domains)
- Question generation (rule-based, or LLM with rule-based fallback)
- Follow-up decisions
- Answer evaluation (LLM, or mock scorer)
- Interview session state machine and session management
"""

from .answer_evaluator import AnswerEvaluator, Evaluation
from .errors import (
    AuthenticationError,
    InputError,
    InterviewError,
    SessionNotFoundError,
    StateError,
    UnsupportedDocumentError,
)
from .followup import FollowUpDecisionEngine
from .question_bank import GeneratedQuestion
from .question_generator import GenerationResult, QuestionGenerator
from .resume_analyzer import ResumeAnalysis, analyze
from .session import InterviewSession, InterviewStateMachine, SessionState, TurnResult
from .session_manager import InterviewSessionManager

__all__ = [
    'AnswerEvaluator',
    'Evaluation',
    'AuthenticationError',
    'InputError',
    'InterviewError',
    'SessionNotFoundError',
    'StateError',
    'UnsupportedDocumentError',
    'FollowUpDecisionEngine',
    'GeneratedQuestion',
    'GenerationResult',
    'QuestionGenerator',
    'ResumeAnalysis',
    'analyze',
    'InterviewSession',
    'InterviewStateMachine',
    'SessionState',
    'TurnResult',
    'InterviewSessionManager'
]
