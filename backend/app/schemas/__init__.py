"""Convenience imports for all schema classes used by the API."""

from .quiz import (
    AnswerOption,
    MAX_ID,
    QuizCreate,
    QuizRead,
    QuestionCreate,
    QuestionRead,
    QuizWithQuestions,
)
from .attempt import (
    QuizAttemptStart,
    QuizAttemptRead,
    AnswerSubmit,
    AnswerSubmissionRead,
    QuizAttemptResult,
)
from .health import HealthStatus

__all__ = [
    "AnswerOption",
    "MAX_ID",
    "QuizCreate",
    "QuizRead",
    "QuestionCreate",
    "QuestionRead",
    "QuizWithQuestions",
    "QuizAttemptStart",
    "QuizAttemptRead",
    "AnswerSubmit",
    "AnswerSubmissionRead",
    "QuizAttemptResult",
    "HealthStatus",
]
