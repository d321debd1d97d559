"""
FastAPI API modules.
"""
from .models import (
    HealthResponse,
    QuestionModel,
    ResumeAnalysisModel,
    GenerateQuestionsRequest,
    GenerateQuestionsResponse,
    QuestionsByCriteriaRequest,
    QuestionsByCriteriaResponse,
    QuestionStatsResponse,
    # Interview models
    InterviewStartRequest,
    InterviewStartResponse,
    SubmitTurnRequest,
    TurnResponse,
    TranscriptRequest,
    TranscriptResponse,
    TickRequest,
    TickResponse,
    InterviewStatusResponse,
    InterviewReportResponse,
    EvaluateRequest,
    EvaluateResponse,
    UploadResumeResponse,
    CredentialsRequest,
    RegisterResponse,
    LoginResponse,
    to_turn_response
)
from .service import InterviewService, get_service

__all__ = [
    'HealthResponse',
    'QuestionModel',
    'ResumeAnalysisModel',
    'GenerateQuestionsRequest',
    'GenerateQuestionsResponse',
    'QuestionsByCriteriaRequest',
    'QuestionsByCriteriaResponse',
    'QuestionStatsResponse',
    # Interview models
    'InterviewStartRequest',
    'InterviewStartResponse',
    'SubmitTurnRequest',
    'TurnResponse',
    'TranscriptRequest',
    'TranscriptResponse',
    'TickRequest',
    'TickResponse',
    'InterviewStatusResponse',
    'InterviewReportResponse',
    'EvaluateRequest',
    'EvaluateResponse',
    'UploadResumeResponse',
    'CredentialsRequest',
    'RegisterResponse',
    'LoginResponse',
    'to_turn_response',
    'InterviewService',
    'get_service'
]
