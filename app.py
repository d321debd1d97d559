"""
FastAPI application for the AI Interview Simulator.

Endpoints:
- POST /generate-questions - Generate questions from a resume
- POST /interview/start - Start an interview session
- POST /interview/{session_id}/turn - Answer or skip the current question
- POST /interview/{session_id}/transcript - Append recognised speech
- POST /interview/{session_id}/tick - Advance the question timer
- GET /interview/{session_id} - Session status
- GET /interview/{session_id}/report - Interview report with scores
- DELETE /interview/{session_id} - Discard a session
- POST /evaluate - Evaluate a single answer
- GET /question-stats - Question bank statistics
- POST /get-questions-by-criteria - Sample raw bank questions
- POST /upload-resume - Extract text from a PDF or plain-text resume
- POST /register, POST /login - User accounts
- GET /health - Health check
"""
from fastapi import FastAPI, HTTPException, UploadFile, File, status
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from interview_sim.api import (
    HealthResponse,
    GenerateQuestionsRequest,
    GenerateQuestionsResponse,
    QuestionsByCriteriaRequest,
    QuestionsByCriteriaResponse,
    QuestionStatsResponse,
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
    to_turn_response,
    get_service
)
from interview_sim.interview import (
    AuthenticationError,
    InputError,
    SessionNotFoundError,
    StateError
)
from interview_sim.pdf import extract_text
from interview_sim.utils.logger import setup_logger

logger = setup_logger("fastapi_app")

# Create FastAPI app
app = FastAPI(
    title="AI Interview Simulator API",
    description="Resume-driven interview practice with rule-based or LLM questions and answer evaluation",
    version="1.0.0"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _http_error(error: Exception, action: str) -> HTTPException:
    """Translate an engine error into an HTTPException."""
    if isinstance(error, HTTPException):
        return error
    if isinstance(error, InputError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    if isinstance(error, AuthenticationError):
        return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(error))
    if isinstance(error, SessionNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, StateError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))

    logger.error(f"Error {action}: {error}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Error {action}: {str(error)}"
    )


@app.on_event("startup")
async def startup_event():
    """Initialize service on startup."""
    logger.info("Starting AI Interview Simulator API...")
    service = get_service()
    if not service.is_llm_ready():
        logger.warning("GROQ_API_KEY not set - questions will be rule-based and evaluations mocked")


@app.get("/", tags=["General"])
async def root():
    """Root endpoint with API information."""
    return {
        "message": "AI Interview Simulator API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health"
    }


@app.get("/health", response_model=HealthResponse, tags=["General"])
def health_check():
    """
    Health check endpoint.

    Returns the status of the service and whether the LLM is configured.
    """
    service = get_service()

    return HealthResponse(
        status="healthy",
        llm_ready=service.is_llm_ready(),
        active_sessions=service.active_session_count()
    )


# ========== QUESTION ENDPOINTS ==========

@app.post("/generate-questions", response_model=GenerateQuestionsResponse, tags=["Questions"])
def generate_questions(request: GenerateQuestionsRequest):
    """
    Generate interview questions from a resume without starting a session.

    Questions come from the LLM when requested and configured, otherwise from
    the question bank. The `source` field tells which path produced them.
    """
    service = get_service()

    try:
        result = service.generate_questions(
            request.resume_text,
            request.question_count,
            request.use_ai
        )
        return GenerateQuestionsResponse(**result)

    except Exception as e:
        raise _http_error(e, "generating questions")


@app.get("/question-stats", response_model=QuestionStatsResponse, tags=["Questions"])
def get_question_stats():
    """Question bank statistics."""
    return QuestionStatsResponse(**get_service().question_stats())


@app.post("/get-questions-by-criteria", response_model=QuestionsByCriteriaResponse, tags=["Questions"])
def get_questions_by_criteria(request: QuestionsByCriteriaRequest):
    """Sample raw question bank templates for one category and difficulty."""
    service = get_service()

    try:
        questions = service.questions_by_criteria(request.category, request.difficulty, request.count)
        return QuestionsByCriteriaResponse(questions=questions)

    except Exception as e:
        raise _http_error(e, "sampling questions")


# ========== INTERVIEW ENDPOINTS ==========

@app.post("/interview/start", response_model=InterviewStartResponse, tags=["Interview"])
def start_interview(request: InterviewStartRequest):
    """
    Start a new interview session.

    This endpoint:
    1. Analyzes the resume
    2. Generates the ordered question list (easy first)
    3. Opens a session on the first question with a fresh timer

    Args:
        request: InterviewStartRequest with resume_text, question_count and use_ai

    Returns:
        InterviewStartResponse with session_id and questions
    """
    service = get_service()

    try:
        result = service.start_interview(
            request.resume_text,
            request.question_count,
            request.use_ai
        )
        logger.info(f"Interview started: {result['session_id']}")
        return InterviewStartResponse(**result)

    except Exception as e:
        raise _http_error(e, "starting interview")


@app.post("/interview/{session_id}/turn", response_model=TurnResponse, tags=["Interview"])
def submit_turn(session_id: str, request: SubmitTurnRequest):
    """
    Answer or skip the current question.

    An answer is evaluated and may be followed by one follow-up question.
    A skip records a placeholder evaluation and moves to the next question.
    """
    service = get_service()

    try:
        turn = service.submit_turn(session_id, request.answer, request.skip)
        return to_turn_response(turn)

    except Exception as e:
        raise _http_error(e, "submitting answer")


@app.post("/interview/{session_id}/transcript", response_model=TranscriptResponse, tags=["Interview"])
def capture_transcript(session_id: str, request: TranscriptRequest):
    """Append recognised speech to the current answer."""
    service = get_service()

    try:
        transcript = service.sessions.capture_transcript(session_id, request.text)
        return TranscriptResponse(transcript=transcript)

    except Exception as e:
        raise _http_error(e, "capturing transcript")


@app.post("/interview/{session_id}/tick", response_model=TickResponse, tags=["Interview"])
def tick(session_id: str, request: TickRequest):
    """
    Advance the per-question timer.

    When the timer reaches zero the captured transcript is submitted as the
    answer and the turn result is returned.
    """
    service = get_service()

    try:
        turn = service.sessions.tick(session_id, request.seconds)
        session = service.sessions.get_session(session_id)
        return TickResponse(
            timer_seconds=session.timer_seconds,
            expired=turn is not None,
            turn=to_turn_response(turn) if turn is not None else None
        )

    except Exception as e:
        raise _http_error(e, "advancing timer")


@app.get("/interview/{session_id}", response_model=InterviewStatusResponse, tags=["Interview"])
def get_interview_status(session_id: str):
    """Get the current state of an interview session."""
    service = get_service()

    try:
        session = service.sessions.get_session(session_id)
        return InterviewStatusResponse(**session.to_dict())

    except Exception as e:
        raise _http_error(e, "getting interview status")


@app.get("/interview/{session_id}/report", response_model=InterviewReportResponse, tags=["Interview"])
def get_interview_report(session_id: str):
    """
    Get the interview report.

    Scores average the "Overall Score" of every evaluated answer, overall and
    per question category. Skipped questions are not scored.
    """
    service = get_service()

    try:
        summary = service.sessions.get_session_summary(session_id)
        return InterviewReportResponse(**summary)

    except Exception as e:
        raise _http_error(e, "getting interview report")


@app.delete("/interview/{session_id}", tags=["Interview"])
def discard_interview(session_id: str):
    """Discard an interview session."""
    service = get_service()

    try:
        service.sessions.discard_session(session_id)
        return {"message": f"Session {session_id} discarded"}

    except Exception as e:
        raise _http_error(e, "discarding interview")


# ========== EVALUATION ENDPOINTS ==========

@app.post("/evaluate", response_model=EvaluateResponse, tags=["Evaluation"])
def evaluate_answer(request: EvaluateRequest):
    """Evaluate one answer outside a session and decide on a follow-up."""
    service = get_service()

    try:
        result = service.evaluate_answer(
            request.question,
            request.answer,
            request.category,
            request.difficulty
        )
        return EvaluateResponse(**result)

    except Exception as e:
        raise _http_error(e, "evaluating answer")


# ========== UPLOAD / AUTH ENDPOINTS ==========

@app.post("/upload-resume", response_model=UploadResumeResponse, tags=["Upload"])
async def upload_resume(file: UploadFile = File(...)):
    """
    Extract text from an uploaded resume.

    Supports PDF and plain-text files.
    """
    try:
        content = await file.read()
        text = extract_text(content, file.content_type or "")
        logger.info(f"Extracted {len(text)} characters from {file.filename}")
        return UploadResumeResponse(resume_text=text)

    except Exception as e:
        raise _http_error(e, "processing resume")


@app.post("/register", response_model=RegisterResponse, tags=["Auth"])
def register(request: CredentialsRequest):
    """Register a new user."""
    service = get_service()

    try:
        user = service.auth.register(request.email, request.password)
        return RegisterResponse(message=f"User {user.email} registered")

    except Exception as e:
        raise _http_error(e, "registering user")


@app.post("/login", response_model=LoginResponse, tags=["Auth"])
def login(request: CredentialsRequest):
    """Log in and receive a session token."""
    service = get_service()

    try:
        return LoginResponse(**service.auth.login(request.email, request.password))

    except Exception as e:
        raise _http_error(e, "logging in")


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
