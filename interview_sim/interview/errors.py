"""
Error taxonomy for the interview engine.

InputError, StateError, SessionNotFoundError and AuthenticationError are
surfaced to callers. GenerationDegraded and EvaluationDegraded are raised and
caught inside their components; callers only see them as a `source` tag.
"""


class InterviewError(Exception):
    """Base class for all interview engine errors."""


class InputError(InterviewError):
    """Missing or invalid input (empty resume, unknown category/difficulty)."""


class UnsupportedDocumentError(InputError):
    """Uploaded document type cannot be converted to text."""


class StateError(InterviewError):
    """Trigger received in a state that does not accept it."""


class SessionNotFoundError(InterviewError):
    """No session registered under the given id."""


class AuthenticationError(InterviewError):
    """Invalid credentials."""


class GenerationDegraded(InterviewError):
    """External question generation failed or returned unusable content."""

    def __init__(self, message: str, source: str):
        super().__init__(message)
        self.source = source


class EvaluationDegraded(InterviewError):
    """External answer evaluation failed."""
